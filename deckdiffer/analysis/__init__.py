from deckdiffer.analysis.classifier import (
    color_category,
    color_sort_key,
    primary_type,
    type_priority,
)
from deckdiffer.analysis.differ import (
    count_types,
    diff_decks,
    in_common,
    only_in,
    type_count_delta,
)
from deckdiffer.analysis.grouper import group_by_type_then_color, type_totals
from deckdiffer.analysis.stats import build_full_deck, compute_stats

__all__ = [
    "build_full_deck",
    "color_category",
    "color_sort_key",
    "compute_stats",
    "count_types",
    "diff_decks",
    "group_by_type_then_color",
    "in_common",
    "only_in",
    "primary_type",
    "type_count_delta",
    "type_priority",
    "type_totals",
]
