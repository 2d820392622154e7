"""
Parser for plain-text decklists.

Supports:
- "4 Lightning Bolt" / "4x Lightning Bolt"
- "Lightning Bolt" (a single copy)
- "# Creatures" comment and section lines (ignored)
"""

import re

from deckdiffer.models.comparison import CardCount

# Groups: (quantity, card_name)
COUNTED_LINE = re.compile(r"^(\d+)x?\s+(.+)$", re.IGNORECASE)

# Separator between the faces of split and double-faced cards
FACE_SEPARATOR = "//"


def parse_decklist(text: str | None) -> CardCount:
    """
    Parse decklist text into card name -> count.

    Blank lines and lines starting with "#" are skipped. A line without a
    leading count is one copy of the whole line. Repeated names accumulate.
    """
    cards: CardCount = {}
    if text is None:
        return cards

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        match = COUNTED_LINE.match(line)
        if match:
            count = int(match.group(1))
            name = match.group(2).strip()
        elif line.isdigit():
            # A bare number names no card
            continue
        else:
            count = 1
            name = line

        if name:
            cards[name] = cards.get(name, 0) + count

    return cards


def normalize_names(cards: CardCount) -> CardCount:
    """
    Reduce multi-faced card names to their front face.

    "Fire // Ice" becomes "Fire". Names that collide afterwards are merged.
    """
    normalized: CardCount = {}
    for name, count in cards.items():
        if FACE_SEPARATOR in name:
            name = name.split(FACE_SEPARATOR, 1)[0].strip()
        if name:
            normalized[name] = normalized.get(name, 0) + count
    return normalized


def sum_counts(cards: CardCount) -> int:
    """Total copies in a decklist."""
    return sum(cards.values())
