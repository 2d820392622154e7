"""
Card metadata provider backed by the Scryfall API.

Resolves card names to CardMetadata for a comparison:

    names -> cache -> POST /cards/collection (batches of 75)
          -> GET /cards/named?fuzzy= for names the batch missed
          -> neutral record for anything still unresolved

Lookup failures never escape this module. Unknown names, HTTP errors and
malformed payloads are logged and stored as neutral records so a single
bad card cannot abort a comparison.

API docs: https://scryfall.com/docs/api/cards/collection
"""

import asyncio
import logging
import re
import threading
from collections import OrderedDict
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import asynccontextmanager
from types import MappingProxyType
from typing import Any

import httpx

from deckdiffer.analysis.classifier import CARD_TYPES, color_category, primary_type
from deckdiffer.config import SCRYFALL_MAX_BATCH_SIZE, settings
from deckdiffer.models.card import CardMetadata, empty_pips

logger = logging.getLogger(__name__)

# Everything left of the em dash is supertypes and card types
TYPE_LINE_DASH = "—"

MANA_SYMBOL = re.compile(r"\{([^}]*)\}")


class MetadataFetchError(Exception):
    """Raised when the catalog cannot be queried or returns garbage."""

    pass


# =============================================================================
# JSON -> CardMetadata
# =============================================================================


def _front_face(card: dict[str, Any]) -> dict[str, Any] | None:
    faces = card.get("card_faces")
    if isinstance(faces, list) and faces and isinstance(faces[0], dict):
        return faces[0]
    return None


def extract_types(card: dict[str, Any]) -> tuple[str, ...]:
    """
    Card types from the type line (front face for multi-faced cards).

    "Legendary Artifact Creature — Golem" -> ("Artifact", "Creature")
    """
    face = _front_face(card)
    type_line = (face or card).get("type_line") or card.get("type_line") or ""
    left_side = type_line.split(TYPE_LINE_DASH, 1)[0]
    return tuple(word for word in left_side.split() if word in CARD_TYPES)


def extract_colors(card: dict[str, Any]) -> tuple[str, ...]:
    """Color identity letters as listed by the catalog."""
    identity = card.get("color_identity") or []
    return tuple(str(color) for color in identity)


def extract_price(card: dict[str, Any]) -> float:
    """USD price, 0.0 when missing or unparsable."""
    prices = card.get("prices") or {}
    try:
        price = float(prices.get("usd") or 0.0)
    except (TypeError, ValueError):
        return 0.0
    return max(price, 0.0)


def extract_cmc(card: dict[str, Any]) -> float:
    """Converted mana cost, 0.0 when missing."""
    try:
        return max(float(card.get("cmc") or 0.0), 0.0)
    except (TypeError, ValueError):
        return 0.0


def extract_image_url(card: dict[str, Any]) -> str | None:
    """Normal-size image, falling back to the front face."""
    images = card.get("image_uris")
    if not images:
        face = _front_face(card)
        images = face.get("image_uris") if face else None
    if isinstance(images, dict):
        return images.get("normal")
    return None


def parse_pips(mana_cost: str | None) -> dict[str, int]:
    """
    Count mana symbols by color.

    Generic costs add their value to "C" ({3} -> C:3), {C} adds one to "C",
    and every recognised half of a hybrid or Phyrexian symbol counts once:
    {W/U} -> W:1 U:1, {2/G} -> G:1, {R/P} -> R:1. {X} and other symbols
    are ignored.
    """
    pips = empty_pips()
    if not mana_cost:
        return pips

    for raw_symbol in MANA_SYMBOL.findall(mana_cost):
        symbol = raw_symbol.strip()

        if symbol.isdigit():
            pips["C"] += int(symbol)
            continue

        if symbol in pips:
            pips[symbol] += 1

        if "/" in symbol:
            for part in symbol.split("/"):
                if part in pips:
                    pips[part] += 1

    return pips


def card_metadata_from_json(card: dict[str, Any]) -> CardMetadata:
    """Build a CardMetadata record from a Scryfall card object."""
    types = extract_types(card)
    colors = extract_colors(card)

    mana_cost = card.get("mana_cost")
    if not mana_cost:
        face = _front_face(card)
        mana_cost = face.get("mana_cost") if face else None

    return CardMetadata(
        types=types,
        primary_type=primary_type(types),
        colors=colors,
        color_category=color_category(colors),
        price=extract_price(card),
        cmc=extract_cmc(card),
        pip_counts=MappingProxyType(parse_pips(mana_cost)),
        image_url=extract_image_url(card),
        scryfall_url=card.get("scryfall_uri"),
    )


# =============================================================================
# CACHE
# =============================================================================


class MetadataCache:
    """
    Thread-safe LRU cache of resolved card metadata.

    Keys are case-insensitive card names. The first record stored for a
    name wins, so every reader sees the same record for that name.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        """
        Initialize cache.

        Args:
            max_entries: Entries kept before the least recently used are
                evicted. Defaults to settings.metadata_cache_size.
        """
        self.max_entries = max_entries or settings.metadata_cache_size
        self._entries: OrderedDict[str, CardMetadata] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def _key(card_name: str) -> str:
        return card_name.strip().lower()

    def get(self, card_name: str) -> CardMetadata | None:
        """Cached record for a card, or None."""
        key = self._key(card_name)
        with self._lock:
            metadata = self._entries.get(key)
            if metadata is not None:
                self._entries.move_to_end(key)
            return metadata

    def set_default(self, card_name: str, metadata: CardMetadata) -> CardMetadata:
        """Store a record unless one exists; return whichever is cached."""
        key = self._key(card_name)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                self._entries.move_to_end(key)
                return existing
            self._entries[key] = metadata
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
            return metadata

    def get_or_compute(
        self, card_name: str, compute: Callable[[], CardMetadata]
    ) -> CardMetadata:
        """
        Cached record for a card, computing and storing it on a miss.

        `compute` runs outside the lock; if another thread stores a record
        first, that record is returned and the computed one is discarded.
        """
        cached = self.get(card_name)
        if cached is not None:
            return cached
        return self.set_default(card_name, compute())

    def __contains__(self, card_name: object) -> bool:
        if not isinstance(card_name, str):
            return False
        with self._lock:
            return self._key(card_name) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop every cached record."""
        with self._lock:
            self._entries.clear()


# =============================================================================
# PROVIDER
# =============================================================================


class ScryfallMetadataProvider:
    """Resolves card names to metadata through Scryfall, with caching."""

    def __init__(
        self,
        cache: MetadataCache | None = None,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        batch_size: int = SCRYFALL_MAX_BATCH_SIZE,
        batch_delay: float | None = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            cache: Shared metadata cache. A private one is created if omitted.
            client: HTTP client to reuse. A client is opened per call if omitted.
            base_url: Scryfall API root. Defaults to settings.scryfall_api_url.
            batch_size: Names per collection request (at most 75).
            batch_delay: Seconds to wait between collection requests.
        """
        self.cache = cache if cache is not None else MetadataCache()
        self._client = client
        self.base_url = (base_url or settings.scryfall_api_url).rstrip("/")
        self.batch_size = max(1, min(batch_size, SCRYFALL_MAX_BATCH_SIZE))
        self.batch_delay = settings.scryfall_batch_delay if batch_delay is None else batch_delay

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        timeout = httpx.Timeout(
            settings.scryfall_read_timeout,
            connect=settings.scryfall_connect_timeout,
        )
        async with httpx.AsyncClient(
            timeout=timeout,
            headers={
                "User-Agent": settings.scryfall_user_agent,
                "Accept": "application/json",
            },
        ) as client:
            yield client

    async def resolve(self, card_name: str) -> CardMetadata:
        """Metadata for a single card (neutral if it cannot be resolved)."""
        resolved = await self.resolve_many([card_name])
        return resolved[card_name]

    async def resolve_many(self, card_names: Iterable[str]) -> dict[str, CardMetadata]:
        """
        Resolve each distinct card name once.

        Args:
            card_names: Names to resolve, duplicates allowed

        Returns:
            Dict mapping every requested name to its metadata
        """
        resolved: dict[str, CardMetadata] = {}
        unique_names: list[str] = []
        for name in dict.fromkeys(card_names):
            if name.strip():
                unique_names.append(name)
            else:
                # Blank names never reach the catalog
                resolved[name] = CardMetadata.neutral()

        missing: list[str] = []
        for name in unique_names:
            cached = self.cache.get(name)
            if cached is not None:
                resolved[name] = cached
            else:
                missing.append(name)

        if not missing:
            logger.debug("All %d cards found in metadata cache", len(unique_names))
            return resolved

        logger.info(
            "Resolving %d cards from Scryfall (%d cached)",
            len(missing),
            len(unique_names) - len(missing),
        )

        async with self._http() as client:
            fetched = await self._fetch_collection(client, missing)

            for name in missing:
                card = fetched.get(name.lower())
                if card is None:
                    card = await self._fetch_named_or_none(client, name)

                metadata = self._to_metadata(name, card)
                resolved[name] = self.cache.set_default(name, metadata)

        return resolved

    def _to_metadata(self, card_name: str, card: dict[str, Any] | None) -> CardMetadata:
        if card is None:
            logger.warning("No catalog entry for '%s', using neutral metadata", card_name)
            return CardMetadata.neutral()
        try:
            return card_metadata_from_json(card)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Malformed catalog entry for '%s': %s", card_name, e)
            return CardMetadata.neutral()

    async def _fetch_collection(
        self, client: httpx.AsyncClient, card_names: list[str]
    ) -> dict[str, dict[str, Any]]:
        """
        Fetch cards in batches from the collection endpoint.

        Returns:
            Card objects keyed by lowercased full name and front-face name.
            Failed batches are logged and left to the per-card fallback.
        """
        found: dict[str, dict[str, Any]] = {}
        batches = [
            card_names[i : i + self.batch_size] for i in range(0, len(card_names), self.batch_size)
        ]

        for batch_num, batch in enumerate(batches, start=1):
            if batch_num > 1 and self.batch_delay > 0:
                await asyncio.sleep(self.batch_delay)

            logger.debug("Fetching batch %d/%d (%d cards)", batch_num, len(batches), len(batch))
            try:
                cards = await self._post_collection(client, batch)
            except MetadataFetchError as e:
                logger.warning("Scryfall batch %d failed: %s", batch_num, e)
                continue

            for card in cards:
                name = card.get("name")
                if not isinstance(name, str) or not name:
                    continue
                found.setdefault(name.lower(), card)
                if " // " in name:
                    found.setdefault(name.split(" // ", 1)[0].lower(), card)

        return found

    async def _post_collection(
        self, client: httpx.AsyncClient, batch: list[str]
    ) -> list[dict[str, Any]]:
        payload = {"identifiers": [{"name": name} for name in batch]}
        try:
            response = await client.post(f"{self.base_url}/cards/collection", json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise MetadataFetchError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise MetadataFetchError(str(e)) from e
        except ValueError as e:
            raise MetadataFetchError(f"Invalid JSON: {e}") from e

        cards = data.get("data") if isinstance(data, dict) else None
        if not isinstance(cards, list):
            raise MetadataFetchError("Response has no 'data' list")

        not_found = data.get("not_found") or []
        if not_found:
            logger.debug("Scryfall did not find %d cards in batch", len(not_found))

        return [card for card in cards if isinstance(card, dict)]

    async def _fetch_named_or_none(
        self, client: httpx.AsyncClient, card_name: str
    ) -> dict[str, Any] | None:
        try:
            return await self._fetch_named(client, card_name)
        except MetadataFetchError as e:
            logger.warning("Failed to fetch card data for '%s': %s", card_name, e)
            return None

    async def _fetch_named(self, client: httpx.AsyncClient, card_name: str) -> dict[str, Any]:
        """Fuzzy single-card lookup."""
        try:
            response = await client.get(
                f"{self.base_url}/cards/named",
                params={"fuzzy": card_name.strip()},
            )
            response.raise_for_status()
            card = response.json()
        except httpx.HTTPStatusError as e:
            raise MetadataFetchError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise MetadataFetchError(str(e)) from e
        except ValueError as e:
            raise MetadataFetchError(f"Invalid JSON: {e}") from e

        if not isinstance(card, dict) or card.get("object") == "error":
            raise MetadataFetchError("Response is not a card object")
        return card
