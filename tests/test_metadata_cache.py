from concurrent.futures import ThreadPoolExecutor

from deckdiffer.models.card import CardMetadata
from deckdiffer.services.card_provider import MetadataCache


def _creature(cmc: float) -> CardMetadata:
    return CardMetadata(types=("Creature",), primary_type="Creature", cmc=cmc)


class TestMetadataCache:
    """Tests for the shared card metadata cache."""

    def test_miss_returns_none(self) -> None:
        assert MetadataCache(max_entries=10).get("Sun Titan") is None

    def test_keys_ignore_case_and_whitespace(self) -> None:
        cache = MetadataCache(max_entries=10)
        record = _creature(6.0)

        cache.set_default("Sun Titan", record)

        assert cache.get("sun titan") is record
        assert cache.get("  SUN TITAN ") is record
        assert "Sun Titan" in cache
        assert 42 not in cache

    def test_first_writer_wins(self) -> None:
        cache = MetadataCache(max_entries=10)
        first = _creature(1.0)
        second = _creature(2.0)

        assert cache.set_default("Shock", first) is first
        assert cache.set_default("Shock", second) is first
        assert cache.get("Shock") is first

    def test_evicts_least_recently_used(self) -> None:
        cache = MetadataCache(max_entries=2)
        cache.set_default("A", _creature(1.0))
        cache.set_default("B", _creature(2.0))

        cache.get("A")
        cache.set_default("C", _creature(3.0))

        assert "A" in cache
        assert "B" not in cache
        assert "C" in cache
        assert len(cache) == 2

    def test_get_or_compute_computes_once(self) -> None:
        cache = MetadataCache(max_entries=10)
        calls: list[str] = []

        def compute() -> CardMetadata:
            calls.append("called")
            return _creature(4.0)

        first = cache.get_or_compute("Solemn Simulacrum", compute)
        second = cache.get_or_compute("Solemn Simulacrum", compute)

        assert first is second
        assert calls == ["called"]

    def test_clear(self) -> None:
        cache = MetadataCache(max_entries=10)
        cache.set_default("Shock", _creature(1.0))

        cache.clear()

        assert len(cache) == 0

    def test_concurrent_writers_agree(self) -> None:
        """Every thread sees the same record for a name."""
        cache = MetadataCache(max_entries=100)

        def store(i: int) -> CardMetadata:
            return cache.get_or_compute("Sol Ring", lambda: _creature(float(i)))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(store, range(64)))

        assert all(result is results[0] for result in results)
        assert len(cache) == 1
