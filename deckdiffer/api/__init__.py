from deckdiffer.api.compare import router as compare_router
from deckdiffer.api.downloads import router as downloads_router
from deckdiffer.api.health import router as health_router

__all__ = [
    "compare_router",
    "downloads_router",
    "health_router",
]
