from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKDIFFER_")

    app_name: str = "DeckDiffer"
    debug: bool = False

    scryfall_api_url: str = "https://api.scryfall.com"
    scryfall_user_agent: str = "DeckDiffer/1.0"

    # Seconds. Connect is kept short, batch responses can be slow.
    scryfall_connect_timeout: float = 5.0
    scryfall_read_timeout: float = 15.0

    # Pause between collection batches to stay under Scryfall's rate limit
    scryfall_batch_delay: float = 0.05

    metadata_cache_size: int = 20_000

    max_stored_comparisons: int = 100


settings = Settings()


# =============================================================================
# SCRYFALL LIMITS
# =============================================================================

# Hard cap on identifiers accepted by POST /cards/collection
SCRYFALL_MAX_BATCH_SIZE = 75
