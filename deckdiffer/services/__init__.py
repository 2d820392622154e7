"""
DeckDiffer services.

Metadata resolution, comparison workflow and export rendering.
"""

from deckdiffer.services.card_provider import (
    MetadataCache,
    MetadataFetchError,
    ScryfallMetadataProvider,
    card_metadata_from_json,
    parse_pips,
)
from deckdiffer.services.comparison import MetadataProvider, compare_decks, run_comparison
from deckdiffer.services.download_store import DownloadStore
from deckdiffer.services.exporter import (
    build_detailed_text,
    build_export_files,
    build_plain_text,
)

__all__ = [
    # Metadata provider
    "MetadataCache",
    "MetadataFetchError",
    "MetadataProvider",
    "ScryfallMetadataProvider",
    "card_metadata_from_json",
    "parse_pips",
    # Comparison workflow
    "compare_decks",
    "run_comparison",
    # Exports
    "DownloadStore",
    "build_detailed_text",
    "build_export_files",
    "build_plain_text",
]
