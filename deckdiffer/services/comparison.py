"""
Deck comparison workflow.

Parses two decklists, resolves card metadata once per distinct name and
runs the diff, grouping and statistics over the results.
"""

import logging
from collections.abc import Mapping
from typing import Protocol

from deckdiffer.analysis.differ import diff_decks
from deckdiffer.analysis.grouper import group_by_type_then_color
from deckdiffer.analysis.stats import compute_stats
from deckdiffer.models.card import CardMetadata, MetadataLookup
from deckdiffer.models.comparison import DeckComparison
from deckdiffer.models.failure import EmptyDecklistError
from deckdiffer.parsers.decklist import normalize_names, parse_decklist, sum_counts

logger = logging.getLogger(__name__)


class MetadataProvider(Protocol):
    """Anything that can resolve a batch of card names."""

    async def resolve_many(self, card_names: list[str]) -> dict[str, CardMetadata]: ...


def compare_decks(
    deck1: Mapping[str, int],
    deck2: Mapping[str, int],
    metadata_of: MetadataLookup,
) -> DeckComparison:
    """
    Compare two parsed decks.

    Args:
        deck1: Card name -> count for the first deck
        deck2: Card name -> count for the second deck
        metadata_of: Resolves a card name to its metadata

    Returns:
        DeckComparison with the diff, grouped views and per-side stats,
        plus the resolved metadata of every card in either deck
    """
    diff = diff_decks(deck1, deck2, metadata_of)

    return DeckComparison(
        deck1=dict(deck1),
        deck2=dict(deck2),
        diff=diff,
        deck1_only_groups=group_by_type_then_color(diff.only_in_a, metadata_of),
        deck2_only_groups=group_by_type_then_color(diff.only_in_b, metadata_of),
        common_groups=group_by_type_then_color(diff.in_common, metadata_of),
        deck1_stats=compute_stats(diff.only_in_a, diff.in_common, metadata_of),
        deck2_stats=compute_stats(diff.only_in_b, diff.in_common, metadata_of),
        card_metadata={
            card_name: metadata
            for card_name in dict.fromkeys([*deck1, *deck2])
            if (metadata := metadata_of(card_name)) is not None
        },
    )


async def run_comparison(
    deck1_text: str | None,
    deck2_text: str | None,
    provider: MetadataProvider,
) -> DeckComparison:
    """
    Compare two raw decklists end to end.

    Raises:
        EmptyDecklistError: If either decklist is missing or blank
    """
    if deck1_text is None or not deck1_text.strip():
        raise EmptyDecklistError("Deck 1")
    if deck2_text is None or not deck2_text.strip():
        raise EmptyDecklistError("Deck 2")

    deck1 = normalize_names(parse_decklist(deck1_text))
    deck2 = normalize_names(parse_decklist(deck2_text))

    card_names = list(dict.fromkeys([*deck1, *deck2]))
    metadata = await provider.resolve_many(card_names)

    comparison = compare_decks(deck1, deck2, metadata.get)

    logger.info(
        "Compared decks: %d vs %d cards, %d only in deck 1, %d only in deck 2, %d shared",
        sum_counts(deck1),
        sum_counts(deck2),
        sum_counts(comparison.diff.only_in_a),
        sum_counts(comparison.diff.only_in_b),
        sum_counts(comparison.diff.in_common),
    )
    return comparison
