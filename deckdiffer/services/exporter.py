"""
Plain-text exports of a comparison.

Plain files list "N Card Name" lines alphabetically. Detailed files follow
the grouped view:

    # CREATURE (12)
    # WHITE
    2 Sun Titan
    1 Wall of Omens

    # BLUE
    3 Aether Adept

"""

from collections.abc import Mapping

from deckdiffer.models.comparison import DeckComparison, GroupedView, build_display_label

DECK1_ONLY_FILE = "deck1_only.txt"
DECK2_ONLY_FILE = "deck2_only.txt"
COMMON_FILE = "common_cards.txt"
DECK1_ONLY_DETAILED_FILE = "deck1_only_detailed.txt"
DECK2_ONLY_DETAILED_FILE = "deck2_only_detailed.txt"
COMMON_DETAILED_FILE = "common_cards_detailed.txt"


def build_plain_text(cards: Mapping[str, int]) -> str:
    """One "N Card Name" line per card, sorted by name ignoring case."""
    lines = [
        build_display_label(name, cards[name]) + "\n"
        for name in sorted(cards, key=lambda n: (n.lower(), n))
        if not name.startswith("#")
    ]
    return "".join(lines)


def build_detailed_text(grouped: GroupedView) -> str:
    """Type and color headers followed by the labels of each bucket."""
    parts: list[str] = []
    for type_group in grouped:
        parts.append(f"# {type_group.primary_type.upper()} ({type_group.total})\n")
        for color_group in type_group.color_groups:
            parts.append(f"# {color_group.color_category.upper()}\n")
            parts.extend(f"{label}\n" for label in color_group.labels)
            parts.append("\n")
        parts.append("\n")
    return "".join(parts)


def build_export_files(comparison: DeckComparison) -> dict[str, str]:
    """Every downloadable file for a comparison, keyed by file name."""
    return {
        DECK1_ONLY_FILE: build_plain_text(comparison.diff.only_in_a),
        DECK2_ONLY_FILE: build_plain_text(comparison.diff.only_in_b),
        COMMON_FILE: build_plain_text(comparison.diff.in_common),
        DECK1_ONLY_DETAILED_FILE: build_detailed_text(comparison.deck1_only_groups),
        DECK2_ONLY_DETAILED_FILE: build_detailed_text(comparison.deck2_only_groups),
        COMMON_DETAILED_FILE: build_detailed_text(comparison.common_groups),
    }
