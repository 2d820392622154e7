from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Mana symbol buckets tracked for pip statistics, in display order
PIP_COLORS: tuple[str, ...] = ("W", "U", "B", "R", "G", "C")


def empty_pips() -> dict[str, int]:
    """A zeroed pip count for every tracked bucket."""
    return {color: 0 for color in PIP_COLORS}


@dataclass(frozen=True, slots=True)
class CardMetadata:
    """
    Catalog facts about a single card, resolved once per card name.

    Attributes:
        types: Card types from the type line, e.g. ("Artifact", "Creature")
        primary_type: Single grouping type derived from `types`
        colors: Color identity letters (subset of W, U, B, R, G)
        color_category: Display category derived from `colors`
        price: USD price (0.0 when unknown)
        cmc: Converted mana cost
        pip_counts: Mana symbols in the cost, keyed by W, U, B, R, G, C
        image_url: Card image for renderers, if the catalog has one
        scryfall_url: Catalog page for the card, if known
    """

    types: tuple[str, ...] = ()
    primary_type: str = "Other"
    colors: tuple[str, ...] = ()
    color_category: str = "Colorless"
    price: float = 0.0
    cmc: float = 0.0
    pip_counts: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType(empty_pips()),
        hash=False,
    )
    image_url: str | None = None
    scryfall_url: str | None = None

    @property
    def is_land(self) -> bool:
        """Lands count toward cost but never toward mana statistics."""
        return "Land" in self.types

    @classmethod
    def neutral(cls) -> "CardMetadata":
        """Fallback record for cards the catalog could not resolve."""
        return cls()


# Lookup contract consumed by the analysis functions.
# Returning None means "no usable record" and the card is skipped.
MetadataLookup = Callable[[str], CardMetadata | None]
