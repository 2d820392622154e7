"""
In-memory store for generated export files.

Each comparison gets its own id so concurrent users never overwrite each
other's downloads. Only the most recent comparisons are kept.
"""

import logging
import threading
import uuid
from collections import OrderedDict

from deckdiffer.config import settings

logger = logging.getLogger(__name__)


class DownloadStore:
    """Thread-safe, bounded map of comparison id -> {file name: contents}."""

    def __init__(self, max_comparisons: int | None = None) -> None:
        self.max_comparisons = max_comparisons or settings.max_stored_comparisons
        self._files: OrderedDict[str, dict[str, str]] = OrderedDict()
        self._lock = threading.Lock()

    def save(self, files: dict[str, str], comparison_id: str | None = None) -> str:
        """
        Store a comparison's files.

        Returns:
            The comparison id the files are stored under
        """
        comparison_id = comparison_id or uuid.uuid4().hex
        with self._lock:
            self._files[comparison_id] = dict(files)
            self._files.move_to_end(comparison_id)
            while len(self._files) > self.max_comparisons:
                evicted, _ = self._files.popitem(last=False)
                logger.debug("Evicted downloads for comparison %s", evicted)
        return comparison_id

    def get(self, comparison_id: str, file_name: str) -> str | None:
        """Contents of one file, or None if unknown."""
        with self._lock:
            files = self._files.get(comparison_id)
            if files is None:
                return None
            return files.get(file_name)

    def list_files(self, comparison_id: str) -> list[str]:
        """File names stored for a comparison (empty if unknown)."""
        with self._lock:
            return list(self._files.get(comparison_id, {}))

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)
