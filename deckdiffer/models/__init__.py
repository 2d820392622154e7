from deckdiffer.models.card import PIP_COLORS, CardMetadata, MetadataLookup, empty_pips
from deckdiffer.models.comparison import (
    CardCount,
    ColorGroup,
    DeckComparison,
    DeckStat,
    DiffResult,
    GroupedView,
    ManaStats,
    TypeDelta,
    TypeGroup,
    build_display_label,
    parse_display_label,
)
from deckdiffer.models.failure import (
    ComparisonNotFoundError,
    EmptyDecklistError,
    FailureDetail,
    FailureKind,
    KnownError,
)

__all__ = [
    "CardCount",
    "CardMetadata",
    "ColorGroup",
    "ComparisonNotFoundError",
    "DeckComparison",
    "DeckStat",
    "DiffResult",
    "EmptyDecklistError",
    "FailureDetail",
    "FailureKind",
    "GroupedView",
    "KnownError",
    "ManaStats",
    "MetadataLookup",
    "PIP_COLORS",
    "TypeDelta",
    "TypeGroup",
    "build_display_label",
    "empty_pips",
    "parse_display_label",
]
