"""Source spans for tokens, AST nodes and diagnostics.

Provides the Span value (a half-open UTF-8 byte range inside one file) and
the Spanned wrapper that pairs any value with the span it came from. Tokens,
AST nodes and error payloads are all carried in these.

Thread Safety:
Span and Spanned are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from shlang.utils.text import as_bytes

FileID = int

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[start, end)`` within one source file.

    ``start <= end`` is a caller invariant and is not checked. Spans are
    stamped once and never mutated; growing a span builds a new one.
    ``len(span)`` is the byte count, so an empty span is falsy: compare
    optional spans against None.

    Attributes:
        file_id: Handle of the source file in a FileStore
        start: Start byte offset (inclusive)
        end: End byte offset (exclusive)

    Examples:
            >>> a = Span(0, 0, 2)
            >>> b = Span(0, 5, 9)
            >>> a + b
            Span(0, 0..9)
            >>> a + 3
            Span(0, 0..5)

    """

    file_id: FileID
    start: int
    end: int

    def __repr__(self) -> str:
        return f"Span({self.file_id}, {self.start}..{self.end})"

    def __add__(self, other: Span | int) -> Span:
        if isinstance(other, Span):
            return self.combine(other)
        if isinstance(other, int):
            return self.widen_by(other)
        return NotImplemented

    def __contains__(self, offset: object) -> bool:
        return isinstance(offset, int) and self.start <= offset < self.end

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def length(self) -> int:
        """Number of bytes covered, same as len(span)."""
        return len(self)

    @property
    def is_empty(self) -> bool:
        """True for degenerate spans such as the EOF token's."""
        return self.start == self.end

    def combine(self, other: Span) -> Span:
        """Span from this span's start to other's end, in this span's file.

        Both spans must belong to the same file.
        """
        return Span(self.file_id, self.start, other.end)

    def widen_by(self, count: int) -> Span:
        """Same start, end moved forward by count bytes."""
        return Span(self.file_id, self.start, self.end + count)

    def line_bounds(self, source: str | bytes) -> Span:
        """Expand to the full line(s) containing this span.

        Scans backward from start and forward from end to the nearest newline
        or buffer edge. Offsets must lie within the source.

        Args:
            source: The text this span indexes into

        Returns:
            Span covering whole lines, newlines excluded
        """
        data = as_bytes(source)
        line_start = data.rfind(b"\n", 0, self.start) + 1
        line_end = data.find(b"\n", self.end)
        if line_end == -1:
            line_end = len(data)
        return Span(self.file_id, line_start, line_end)

    @classmethod
    def last_line(cls, source: str | bytes, file_id: FileID) -> Span:
        """Span of the final line of a source buffer."""
        data = as_bytes(source)
        end = len(data)
        return cls(file_id, data.rfind(b"\n") + 1, end)


@dataclass(frozen=True, slots=True)
class Spanned(Generic[T]):
    """A value paired with the span it was parsed from.

    The wrapper owns its item; the span is a plain copied value.

    Attributes:
        item: The wrapped value (token kind, AST node, prop value, ...)
        span: Where the value came from

    """

    item: T
    span: Span

    def with_item(self, item: U) -> Spanned[U]:
        """Wrap a different value in the same span."""
        return Spanned(item, self.span)
