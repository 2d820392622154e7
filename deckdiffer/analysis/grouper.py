"""
Card grouping for display and export.

Buckets a decklist by primary type, then by color category, in the fixed
order every renderer relies on:

    Creature (5)
        White  -> ["1 Sun Titan", "4 Wall of Omens"]
        Blue   -> ["1 Aether Adept"]
    Land (20)
        Colorless -> ["20 Island"]

Type buckets follow the classifier's type priority, color buckets follow
its color sort key, and labels are ordered by card name ignoring case.
"""

from collections.abc import Mapping

from deckdiffer.analysis.classifier import color_sort_key, type_priority
from deckdiffer.models.card import MetadataLookup
from deckdiffer.models.comparison import (
    ColorGroup,
    GroupedView,
    TypeGroup,
    build_display_label,
    parse_display_label,
)


def _label_sort_key(label: str) -> tuple[str, str]:
    card_name = parse_display_label(label)[1]
    return card_name.lower(), card_name


def group_by_type_then_color(
    cards: Mapping[str, int],
    metadata_of: MetadataLookup,
) -> GroupedView:
    """
    Group cards by primary type, then by color category.

    Cards with no usable metadata are skipped, as are non-positive counts.

    Args:
        cards: Card name -> count
        metadata_of: Resolves a card name to its metadata

    Returns:
        Type buckets in display order, each holding color buckets in
        display order, each holding "N Card Name" labels.
    """
    if cards is None:
        raise TypeError("cards must be a card-count mapping, not None")

    buckets: dict[str, dict[str, list[str]]] = {}
    for card_name, count in cards.items():
        if not card_name or count <= 0:
            continue

        metadata = metadata_of(card_name)
        if metadata is None:
            continue

        colors = buckets.setdefault(metadata.primary_type, {})
        colors.setdefault(metadata.color_category, []).append(
            build_display_label(card_name, count)
        )

    return tuple(
        TypeGroup(
            primary_type=card_type,
            color_groups=tuple(
                ColorGroup(
                    color_category=category,
                    labels=tuple(sorted(colors[category], key=_label_sort_key)),
                )
                for category in sorted(colors, key=lambda c: (color_sort_key(c), c))
            ),
        )
        for card_type, colors in sorted(
            buckets.items(), key=lambda item: (type_priority(item[0]), item[0])
        )
    )


def type_totals(grouped: GroupedView) -> dict[str, int]:
    """Card count per type bucket, in display order."""
    return {group.primary_type: group.total for group in grouped}
