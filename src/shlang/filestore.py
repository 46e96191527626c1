"""File-id to source text table for diagnostics.

The lexer and parser only see an integer file id; this store maps ids back
to source text (and an optional display name) when a report is formatted.

Thread Safety:
FileStore is append-only. Registration takes a lock; entries are never
replaced, so lookups of registered ids are safe from any thread.

Example:
    >>> store = FileStore()
    >>> file_id = store.add("<a/>", name="page.shl")
    >>> store.get(file_id)
    '<a/>'
    >>> store.name(file_id)
    'page.shl'
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

from shlang.errors import FileStoreError
from shlang.location import FileID


class FileStore:
    """Append-only registry of source files."""

    __slots__ = ("_lock", "_names", "_sources")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sources: list[str] = []
        self._names: list[str | None] = []

    def add(self, source: str, name: str | None = None) -> FileID:
        """Register source text and return its new file id."""
        with self._lock:
            self._names.append(name)
            self._sources.append(source)
            return len(self._sources) - 1

    def get(self, file_id: FileID) -> str:
        """Source text for file_id.

        Raises:
            FileStoreError: If file_id was never registered
        """
        if not 0 <= file_id < len(self._sources):
            raise FileStoreError(file_id)
        return self._sources[file_id]

    def name(self, file_id: FileID) -> str:
        """Display name for file_id; the id itself when none was given."""
        self.get(file_id)
        return self._names[file_id] or str(file_id)

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, file_id: object) -> bool:
        return isinstance(file_id, int) and 0 <= file_id < len(self._sources)

    def __iter__(self) -> Iterator[FileID]:
        return iter(range(len(self._sources)))
