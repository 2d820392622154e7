"""
Deck statistics.

Rebuilds one side of a comparison from its unique cards plus the shared
cards, then computes cost, mana curve and pip totals in a single pass.
"""

import logging
from collections.abc import Mapping

from deckdiffer.models.card import PIP_COLORS, MetadataLookup, empty_pips
from deckdiffer.models.comparison import CardCount, DeckStat, ManaStats

logger = logging.getLogger(__name__)


def build_full_deck(diff_set: Mapping[str, int], common_set: Mapping[str, int]) -> CardCount:
    """Merge two card counts, summing copies of cards found in both."""
    full_deck: CardCount = dict(diff_set)
    for card_name, count in common_set.items():
        full_deck[card_name] = full_deck.get(card_name, 0) + count
    return full_deck


def compute_stats(
    diff_set: Mapping[str, int],
    common_set: Mapping[str, int],
    metadata_of: MetadataLookup,
) -> DeckStat:
    """
    Compute deck-wide statistics for one side of a comparison.

    Cost covers every resolved card. `only_diff_cost` covers cards listed in
    `diff_set`, priced at their merged-deck count. Lands are excluded from
    CMC and pip totals. Cards without metadata contribute nothing.

    Args:
        diff_set: Copies unique to this side
        common_set: Copies shared with the other side
        metadata_of: Resolves a card name to its metadata

    Returns:
        DeckStat with the merged deck, costs and mana statistics
    """
    if diff_set is None or common_set is None:
        raise TypeError("diff_set and common_set must be card-count mappings, not None")

    full_deck = build_full_deck(diff_set, common_set)

    total_cost = 0.0
    only_diff_cost = 0.0
    total_cmc = 0.0
    total_cards = 0
    total_pips = empty_pips()
    skipped = 0

    for card_name, count in full_deck.items():
        if not card_name or count <= 0:
            continue

        metadata = metadata_of(card_name)
        if metadata is None:
            skipped += 1
            continue

        total_cost += metadata.price * count
        if card_name in diff_set:
            only_diff_cost += metadata.price * count

        if metadata.is_land:
            continue

        total_cmc += metadata.cmc * count
        total_cards += count

        for color, pips in metadata.pip_counts.items():
            if color in PIP_COLORS:
                total_pips[color] += pips * count

    if skipped:
        logger.debug("Skipped %d cards without metadata in deck statistics", skipped)

    return DeckStat(
        full_deck=full_deck,
        total_cost=total_cost,
        only_diff_cost=only_diff_cost,
        mana=ManaStats(
            total_cmc=total_cmc,
            total_cards=total_cards,
            total_pips=total_pips,
        ),
    )
