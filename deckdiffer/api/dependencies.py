"""
Shared FastAPI dependencies.

One metadata provider (and therefore one metadata cache) and one download
store per process. Tests replace them through `app.dependency_overrides`.
"""

from functools import lru_cache

from deckdiffer.services.card_provider import MetadataCache, ScryfallMetadataProvider
from deckdiffer.services.download_store import DownloadStore


@lru_cache(maxsize=1)
def get_metadata_provider() -> ScryfallMetadataProvider:
    """Process-wide Scryfall provider."""
    return ScryfallMetadataProvider(cache=MetadataCache())


@lru_cache(maxsize=1)
def get_download_store() -> DownloadStore:
    """Process-wide store of generated export files."""
    return DownloadStore()
