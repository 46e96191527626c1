"""Tests for FileStore registration, lookup and thread safety."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from shlang.errors import FileStoreError
from shlang.filestore import FileStore


class TestFileStore:
    """Test basic FileStore behavior."""

    def test_ids_are_sequential(self) -> None:
        store = FileStore()
        assert store.add("a") == 0
        assert store.add("b") == 1
        assert len(store) == 2

    def test_get(self) -> None:
        store = FileStore()
        file_id = store.add("<a/>")
        assert store.get(file_id) == "<a/>"

    def test_name(self) -> None:
        store = FileStore()
        named = store.add("x", name="page.shl")
        unnamed = store.add("y")
        assert store.name(named) == "page.shl"
        assert store.name(unnamed) == "1"

    @pytest.mark.parametrize("file_id", [-1, 0, 5])
    def test_invalid_id(self, file_id: int) -> None:
        with pytest.raises(FileStoreError) as exc_info:
            FileStore().get(file_id)
        assert exc_info.value.file_id == file_id

    def test_invalid_name_lookup(self) -> None:
        with pytest.raises(FileStoreError):
            FileStore().name(0)

    def test_contains_and_iter(self) -> None:
        store = FileStore()
        store.add("a")
        store.add("b")
        assert 1 in store
        assert 2 not in store
        assert "0" not in store
        assert list(store) == [0, 1]


class TestFileStoreThreadSafety:
    """Concurrent registration hands out unique ids."""

    def test_concurrent_add(self) -> None:
        store = FileStore()
        sources = [f"<f{i}/>" for i in range(200)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            ids = list(executor.map(store.add, sources))

        assert sorted(ids) == list(range(200))
        for file_id, source in zip(ids, sources, strict=True):
            assert store.get(file_id) == source
