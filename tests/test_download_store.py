from deckdiffer.services.download_store import DownloadStore


class TestDownloadStore:
    """Tests for the in-memory export file store."""

    def test_save_and_get(self) -> None:
        store = DownloadStore(max_comparisons=5)

        comparison_id = store.save({"deck1_only.txt": "1 Island\n"})

        assert store.get(comparison_id, "deck1_only.txt") == "1 Island\n"
        assert store.list_files(comparison_id) == ["deck1_only.txt"]

    def test_ids_are_unique(self) -> None:
        store = DownloadStore(max_comparisons=5)

        first = store.save({"a.txt": "1"})
        second = store.save({"a.txt": "2"})

        assert first != second
        assert store.get(first, "a.txt") == "1"
        assert store.get(second, "a.txt") == "2"

    def test_explicit_id(self) -> None:
        store = DownloadStore(max_comparisons=5)

        assert store.save({"a.txt": "x"}, comparison_id="abc") == "abc"
        assert store.get("abc", "a.txt") == "x"

    def test_unknown_lookups(self) -> None:
        store = DownloadStore(max_comparisons=5)
        comparison_id = store.save({"a.txt": "x"})

        assert store.get("missing", "a.txt") is None
        assert store.get(comparison_id, "b.txt") is None
        assert store.list_files("missing") == []

    def test_oldest_comparison_evicted(self) -> None:
        store = DownloadStore(max_comparisons=2)

        oldest = store.save({"a.txt": "1"})
        store.save({"a.txt": "2"})
        store.save({"a.txt": "3"})

        assert len(store) == 2
        assert store.get(oldest, "a.txt") is None

    def test_saved_files_are_copied(self) -> None:
        store = DownloadStore(max_comparisons=5)
        files = {"a.txt": "x"}

        comparison_id = store.save(files)
        files["a.txt"] = "changed"

        assert store.get(comparison_id, "a.txt") == "x"
