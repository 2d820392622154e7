from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from deckdiffer.api import compare_router, downloads_router, health_router
from deckdiffer.config import settings
from deckdiffer.models.failure import KnownError

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("deckdiffer"),
    debug=settings.debug,
)

app.include_router(compare_router)
app.include_router(downloads_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Render known failures as a classified failure body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.to_detail().model_dump(mode="json")},
    )
