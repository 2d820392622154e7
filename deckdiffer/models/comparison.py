from dataclasses import dataclass, field

from deckdiffer.models.card import CardMetadata

# Card name -> positive copy count
CardCount = dict[str, int]


@dataclass(frozen=True, slots=True)
class TypeDelta:
    """Copies of one primary type in each deck."""

    count_a: int
    count_b: int

    @property
    def change(self) -> int:
        """Signed change going from deck A to deck B."""
        return self.count_b - self.count_a


@dataclass(frozen=True)
class DiffResult:
    """
    Card-level partition of two decks.

    Attributes:
        only_in_a: Copies deck A has beyond deck B
        only_in_b: Copies deck B has beyond deck A
        in_common: min(count_a, count_b) for cards in both decks
        type_delta: Primary type -> copies in A and in B
    """

    only_in_a: CardCount = field(default_factory=dict)
    only_in_b: CardCount = field(default_factory=dict)
    in_common: CardCount = field(default_factory=dict)
    type_delta: dict[str, TypeDelta] = field(default_factory=dict)


def build_display_label(card_name: str, count: int) -> str:
    """Render a card for display, e.g. "3 Lightning Bolt"."""
    return f"{count} {card_name}"


def parse_display_label(label: str) -> tuple[int, str]:
    """
    Split a display label back into (count, card_name).

    Labels without a leading count are treated as a single copy.
    """
    count_text, sep, name = label.partition(" ")
    if sep and count_text.isdigit():
        return int(count_text), name.strip()
    return 1, label


@dataclass(frozen=True, slots=True)
class ColorGroup:
    """Display labels for one color category inside a type bucket."""

    color_category: str
    labels: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeGroup:
    """One primary type bucket, subdivided by color category."""

    primary_type: str
    color_groups: tuple[ColorGroup, ...] = ()

    @property
    def total(self) -> int:
        """Copies in this bucket, read back from the labels themselves."""
        return sum(
            parse_display_label(label)[0] for group in self.color_groups for label in group.labels
        )


# Type buckets in display order
GroupedView = tuple[TypeGroup, ...]


@dataclass(frozen=True)
class ManaStats:
    """Mana curve and pip totals over non-land cards."""

    total_cmc: float = 0.0
    total_cards: int = 0
    total_pips: dict[str, int] = field(default_factory=dict)

    @property
    def average_cmc(self) -> float:
        """Mean CMC of non-land cards (0.0 for a deck without any)."""
        if self.total_cards == 0:
            return 0.0
        return self.total_cmc / self.total_cards


@dataclass(frozen=True)
class DeckStat:
    """Aggregate statistics for one side of a comparison."""

    full_deck: CardCount = field(default_factory=dict)
    total_cost: float = 0.0
    only_diff_cost: float = 0.0
    mana: ManaStats = field(default_factory=ManaStats)


@dataclass(frozen=True)
class DeckComparison:
    """Everything computed for one comparison of two decklists."""

    deck1: CardCount
    deck2: CardCount
    diff: DiffResult
    deck1_only_groups: GroupedView
    deck2_only_groups: GroupedView
    common_groups: GroupedView
    deck1_stats: DeckStat
    deck2_stats: DeckStat
    card_metadata: dict[str, CardMetadata] = field(default_factory=dict)
