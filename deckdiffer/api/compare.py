"""
Comparison API endpoint.

Compares two raw decklists and stores the export files for download.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from deckdiffer.api.dependencies import get_download_store, get_metadata_provider
from deckdiffer.models.comparison import DeckStat, GroupedView
from deckdiffer.parsers.decklist import sum_counts
from deckdiffer.services.card_provider import ScryfallMetadataProvider
from deckdiffer.services.comparison import run_comparison
from deckdiffer.services.download_store import DownloadStore
from deckdiffer.services.exporter import build_export_files

router = APIRouter(prefix="/compare", tags=["compare"])


class CompareRequest(BaseModel):
    """Request model for comparing two decklists."""

    deck1: str = Field(
        ...,
        description="First decklist, one card per line",
        examples=["4 Lightning Bolt\n20 Mountain"],
    )
    deck2: str = Field(
        ...,
        description="Second decklist, one card per line",
        examples=["4 Lightning Bolt\n4 Chain Lightning\n16 Mountain"],
    )


class TypeChange(BaseModel):
    """Copies of one primary type in each deck."""

    primary_type: str
    deck1: int
    deck2: int
    change: int


class ColorGroupResponse(BaseModel):
    """Cards of one color category within a type bucket."""

    color_category: str
    cards: list[str] = Field(default_factory=list)


class CardLinks(BaseModel):
    """Catalog image and page for one card."""

    image_url: str | None = None
    scryfall_url: str | None = None


class TypeGroupResponse(BaseModel):
    """Cards of one primary type, grouped by color."""

    primary_type: str
    total: int
    colors: list[ColorGroupResponse] = Field(default_factory=list)


class DeckStatsResponse(BaseModel):
    """Statistics for one side of the comparison."""

    total_cards: int = 0
    total_cost: float = 0.0
    only_diff_cost: float = 0.0
    total_cmc: float = 0.0
    nonland_cards: int = Field(
        default=0,
        description="Non-land copies counted toward average CMC",
    )
    average_cmc: float = 0.0
    pips: dict[str, int] = Field(default_factory=dict)


class CompareResponse(BaseModel):
    """Response model for a deck comparison."""

    comparison_id: str
    deck1_only: dict[str, int] = Field(default_factory=dict)
    deck2_only: dict[str, int] = Field(default_factory=dict)
    in_common: dict[str, int] = Field(default_factory=dict)
    type_changes: list[TypeChange] = Field(default_factory=list)
    deck1_only_groups: list[TypeGroupResponse] = Field(default_factory=list)
    deck2_only_groups: list[TypeGroupResponse] = Field(default_factory=list)
    common_groups: list[TypeGroupResponse] = Field(default_factory=list)
    deck1_stats: DeckStatsResponse
    deck2_stats: DeckStatsResponse
    downloads: list[str] = Field(
        default_factory=list,
        description="File names available under /downloads/{comparison_id}/",
    )
    cards: dict[str, CardLinks] = Field(
        default_factory=dict,
        description="Image and Scryfall links for every card in either deck",
    )


def _groups_response(grouped: GroupedView) -> list[TypeGroupResponse]:
    return [
        TypeGroupResponse(
            primary_type=type_group.primary_type,
            total=type_group.total,
            colors=[
                ColorGroupResponse(
                    color_category=color_group.color_category,
                    cards=list(color_group.labels),
                )
                for color_group in type_group.color_groups
            ],
        )
        for type_group in grouped
    ]


def _stats_response(stats: DeckStat) -> DeckStatsResponse:
    return DeckStatsResponse(
        total_cards=sum_counts(stats.full_deck),
        total_cost=round(stats.total_cost, 2),
        only_diff_cost=round(stats.only_diff_cost, 2),
        total_cmc=round(stats.mana.total_cmc, 2),
        nonland_cards=stats.mana.total_cards,
        average_cmc=round(stats.mana.average_cmc, 2),
        pips=dict(stats.mana.total_pips),
    )


@router.post("", response_model=CompareResponse)
async def compare(
    request: CompareRequest,
    provider: Annotated[ScryfallMetadataProvider, Depends(get_metadata_provider)],
    store: Annotated[DownloadStore, Depends(get_download_store)],
) -> CompareResponse:
    """
    Compare two decklists.

    Returns the cards unique to each deck, the shared cards, type count
    changes, grouped views and per-deck statistics. Cards Scryfall cannot
    identify still appear in the card lists but add nothing to costs or
    mana statistics.
    """
    comparison = await run_comparison(request.deck1, request.deck2, provider)

    files = build_export_files(comparison)
    comparison_id = store.save(files)

    return CompareResponse(
        comparison_id=comparison_id,
        deck1_only=comparison.diff.only_in_a,
        deck2_only=comparison.diff.only_in_b,
        in_common=comparison.diff.in_common,
        type_changes=[
            TypeChange(
                primary_type=card_type,
                deck1=delta.count_a,
                deck2=delta.count_b,
                change=delta.change,
            )
            for card_type, delta in comparison.diff.type_delta.items()
        ],
        deck1_only_groups=_groups_response(comparison.deck1_only_groups),
        deck2_only_groups=_groups_response(comparison.deck2_only_groups),
        common_groups=_groups_response(comparison.common_groups),
        deck1_stats=_stats_response(comparison.deck1_stats),
        deck2_stats=_stats_response(comparison.deck2_stats),
        downloads=list(files),
        cards={
            card_name: CardLinks(image_url=metadata.image_url, scryfall_url=metadata.scryfall_url)
            for card_name, metadata in comparison.card_metadata.items()
        },
    )
