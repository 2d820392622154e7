"""
Deck difference calculation.

Splits two decklists into the copies unique to each side and the copies
they share, and compares how many cards of each primary type they run.
"""

from collections.abc import Mapping

from deckdiffer.analysis.classifier import type_priority
from deckdiffer.models.card import CardMetadata, MetadataLookup
from deckdiffer.models.comparison import CardCount, DiffResult, TypeDelta


def _require_cards(cards: Mapping[str, int] | None, arg_name: str) -> Mapping[str, int]:
    if cards is None:
        raise TypeError(f"{arg_name} must be a card-count mapping, not None")
    return cards


def _present(cards: Mapping[str, int], card_name: str) -> int:
    """Copies of a card, with non-positive counts and blank names read as absent."""
    if not card_name:
        return 0
    return max(cards.get(card_name, 0), 0)


def only_in(a: Mapping[str, int], b: Mapping[str, int]) -> CardCount:
    """
    Copies of each card that deck `a` has beyond deck `b`.

    Not symmetric: cards found only in `b` never appear. Call with the
    arguments reversed for the other side.
    """
    a = _require_cards(a, "a")
    b = _require_cards(b, "b")

    result: CardCount = {}
    for card_name in a:
        diff = _present(a, card_name) - _present(b, card_name)
        if diff > 0:
            result[card_name] = diff
    return result


def in_common(a: Mapping[str, int], b: Mapping[str, int]) -> CardCount:
    """Copies shared by both decks: min(count_a, count_b) per card."""
    a = _require_cards(a, "a")
    b = _require_cards(b, "b")

    result: CardCount = {}
    # Deck A order first, then cards B adds
    for card_name in dict.fromkeys([*a, *b]):
        common = min(_present(a, card_name), _present(b, card_name))
        if common > 0:
            result[card_name] = common
    return result


def count_types(cards: Mapping[str, int], metadata_of: MetadataLookup) -> dict[str, int]:
    """
    Total copies per primary type.

    Cards without a usable record count under the neutral record's type.
    """
    cards = _require_cards(cards, "cards")

    type_counts: dict[str, int] = {}
    for card_name in cards:
        count = _present(cards, card_name)
        if count <= 0:
            continue
        metadata = metadata_of(card_name) or CardMetadata.neutral()
        type_counts[metadata.primary_type] = type_counts.get(metadata.primary_type, 0) + count
    return type_counts


def type_count_delta(
    a: Mapping[str, int],
    b: Mapping[str, int],
    metadata_of: MetadataLookup,
) -> dict[str, TypeDelta]:
    """
    Compare per-type card counts of two decks.

    Returns:
        Primary type -> TypeDelta for every type found in either deck,
        ordered like the grouped views (type priority, then name). A type
        missing from one deck counts 0 there.
    """
    a_types = count_types(a, metadata_of)
    b_types = count_types(b, metadata_of)

    return {
        card_type: TypeDelta(a_types.get(card_type, 0), b_types.get(card_type, 0))
        for card_type in sorted(
            a_types.keys() | b_types.keys(), key=lambda t: (type_priority(t), t)
        )
    }


def diff_decks(
    a: Mapping[str, int],
    b: Mapping[str, int],
    metadata_of: MetadataLookup,
) -> DiffResult:
    """Run every comparison between two decks."""
    return DiffResult(
        only_in_a=only_in(a, b),
        only_in_b=only_in(b, a),
        in_common=in_common(a, b),
        type_delta=type_count_delta(a, b, metadata_of),
    )
