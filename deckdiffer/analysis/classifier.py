"""
Card classification.

Maps a card's raw types and color identity to the single primary type and
color category it is grouped under, plus the sort keys that fix the
display order of those groups.
"""

from collections.abc import Iterable, Sequence
from itertools import combinations

# First match wins: "Artifact Creature" is a Creature
TYPE_PRIORITY: tuple[str, ...] = (
    "Creature",
    "Land",
    "Artifact",
    "Enchantment",
    "Planeswalker",
    "Instant",
    "Sorcery",
    "Battle",
    "Tribal",
)

CARD_TYPES = frozenset(TYPE_PRIORITY)

OTHER_TYPE = "Other"
COLORLESS = "Colorless"

UNRANKED = 9999

WUBRG = "WUBRG"

COLOR_NAMES: dict[str, str] = {
    "W": "White",
    "U": "Blue",
    "B": "Black",
    "R": "Red",
    "G": "Green",
}

_MONO_SORT_KEYS: dict[str, int] = {name: i for i, name in enumerate(COLOR_NAMES.values())}


def _multicolor_ranks() -> dict[str, int]:
    """Rank every multicolor code within its size group, WUBRG order."""
    ranks: dict[str, int] = {}
    for size in range(2, len(WUBRG) + 1):
        for rank, combo in enumerate(combinations(WUBRG, size)):
            ranks["".join(combo)] = rank
    return ranks


_MULTICOLOR_RANKS = _multicolor_ranks()


def primary_type(types: Sequence[str] | None) -> str:
    """
    Pick the grouping type for a card.

    Args:
        types: Card types from the type line, in any order

    Returns:
        The highest-priority entry of TYPE_PRIORITY present in `types`,
        or "Other" when none is.
    """
    if not types:
        return OTHER_TYPE
    present = set(types)
    for card_type in TYPE_PRIORITY:
        if card_type in present:
            return card_type
    return OTHER_TYPE


def type_priority(card_type: str) -> int:
    """Sort key for a primary type; unknown types sort last."""
    try:
        return TYPE_PRIORITY.index(card_type)
    except ValueError:
        return UNRANKED


def _wubrg_position(color: str) -> int:
    return WUBRG.index(color) if color in WUBRG else len(WUBRG)


def color_category(color_identity: Iterable[str] | None) -> str:
    """
    Summarize a color identity as a display category.

    Mono-colored cards get the color's full name ("White"), multicolored
    cards get their letters in WUBRG order ("WU", "WUBRG"), and an empty
    identity is "Colorless".
    """
    if not color_identity:
        return COLORLESS

    colors = sorted(set(color_identity), key=lambda c: (_wubrg_position(c), c))
    if not colors:
        return COLORLESS

    if len(colors) == 1:
        return COLOR_NAMES.get(colors[0], colors[0])

    return "".join(colors)


def color_sort_key(category: str) -> int:
    """
    Sort key for a color category.

    White..Green sort 0-4 and Colorless sorts last. Multicolor codes sort by
    number of colors, then by their position in WUBRG combination order,
    so two-color groups always precede three-color groups.
    """
    if category in _MONO_SORT_KEYS:
        return _MONO_SORT_KEYS[category]

    if category == COLORLESS:
        return UNRANKED

    # Unrecognised codes go after the known combinations of the same size
    rank = _MULTICOLOR_RANKS.get(category, 999)
    return len(category) * 1000 + rank
