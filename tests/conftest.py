from types import MappingProxyType

import pytest

from deckdiffer.analysis.classifier import color_category, primary_type
from deckdiffer.models.card import CardMetadata, empty_pips


def make_metadata(
    types: tuple[str, ...] = (),
    colors: tuple[str, ...] = (),
    price: float = 0.0,
    cmc: float = 0.0,
    **pips: int,
) -> CardMetadata:
    """Build a CardMetadata record the way the provider would."""
    pip_counts = empty_pips()
    pip_counts.update(pips)
    return CardMetadata(
        types=types,
        primary_type=primary_type(types),
        colors=colors,
        color_category=color_category(colors),
        price=price,
        cmc=cmc,
        pip_counts=MappingProxyType(pip_counts),
    )


@pytest.fixture
def card_catalog() -> dict[str, CardMetadata]:
    """A small resolved catalog covering every grouping path."""
    return {
        "Island": make_metadata(("Land",), (), price=0.25),
        "Mountain": make_metadata(("Land",), (), price=0.25),
        "Sol Ring": make_metadata(("Artifact",), (), price=1.50, cmc=1.0, C=1),
        "Lightning Bolt": make_metadata(("Instant",), ("R",), price=1.00, cmc=1.0, R=1),
        "Counterspell": make_metadata(("Instant",), ("U",), price=1.25, cmc=2.0, U=2),
        "Aether Adept": make_metadata(("Creature",), ("U",), price=0.10, cmc=3.0, C=1, U=2),
        "Sun Titan": make_metadata(("Creature",), ("W",), price=2.00, cmc=6.0, C=4, W=2),
        "Wall of Omens": make_metadata(("Creature",), ("W",), price=0.30, cmc=2.0, C=1, W=1),
        "Solemn Simulacrum": make_metadata(
            ("Artifact", "Creature"), (), price=0.50, cmc=4.0, C=4
        ),
        "Sphinx of the Steel Wind": make_metadata(
            ("Artifact", "Creature"), ("W", "U", "B"), price=0.40, cmc=8.0, C=5, W=1, U=1, B=1
        ),
        "Dovin's Veto": make_metadata(("Instant",), ("W", "U"), price=0.60, cmc=2.0, W=1, U=1),
    }


@pytest.fixture
def sample_deck1_text() -> str:
    """First decklist for end-to-end comparisons."""
    return """# Lands
4 Island
1 Sol Ring
2 Counterspell
1 Sun Titan"""


@pytest.fixture
def sample_deck2_text() -> str:
    """Second decklist for end-to-end comparisons."""
    return """3 Island
2 Mountain
1 Sol Ring
4x Lightning Bolt
1 Sun Titan
Mystery Card"""


class FakeMetadataProvider:
    """Resolves names from a fixed catalog and records each request."""

    def __init__(self, catalog: dict[str, CardMetadata]) -> None:
        self.catalog = catalog
        self.requests: list[list[str]] = []

    async def resolve_many(self, card_names: list[str]) -> dict[str, CardMetadata]:
        self.requests.append(list(card_names))
        return {name: self.catalog.get(name, CardMetadata.neutral()) for name in card_names}


@pytest.fixture
def fake_provider(card_catalog: dict[str, CardMetadata]) -> FakeMetadataProvider:
    """Offline metadata provider backed by `card_catalog`."""
    return FakeMetadataProvider(card_catalog)
