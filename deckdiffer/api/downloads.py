"""
Download endpoint for comparison export files.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from deckdiffer.api.dependencies import get_download_store
from deckdiffer.models.failure import ComparisonNotFoundError
from deckdiffer.services.download_store import DownloadStore

router = APIRouter(prefix="/downloads", tags=["downloads"])


@router.get("/{comparison_id}/{file_name}", response_class=PlainTextResponse)
async def download(
    comparison_id: str,
    file_name: str,
    store: Annotated[DownloadStore, Depends(get_download_store)],
) -> PlainTextResponse:
    """
    Download one export file of a comparison.

    The ".txt" suffix is optional: /downloads/{id}/deck1_only works too.
    """
    if not file_name.endswith(".txt"):
        file_name = f"{file_name}.txt"

    content = store.get(comparison_id, file_name)
    if content is None:
        raise ComparisonNotFoundError(comparison_id, file_name)

    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )
