"""Byte-offset text helpers for Shlang.

Spans are UTF-8 byte offsets while the lexer walks Python characters, so
these helpers bridge the two views of the same source.

Example:
    >>> from shlang.utils.text import utf8_len, slice_bytes
    >>> utf8_len("é")
    2
    >>> slice_bytes("héllo".encode(), 0, 3)
    'hé'
"""

from __future__ import annotations


def utf8_len(char: str) -> int:
    """Return the UTF-8 encoded length of a single character.

    Args:
        char: A one-character string

    Returns:
        Number of bytes (1-4)
    """
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def as_bytes(source: str | bytes) -> bytes:
    """Return source as UTF-8 bytes, encoding str input."""
    if isinstance(source, bytes):
        return source
    return source.encode("utf-8")


def slice_bytes(data: bytes, start: int, end: int) -> str:
    """Decode the UTF-8 byte range ``[start, end)`` of data.

    Args:
        data: UTF-8 encoded source
        start: Start byte offset (inclusive)
        end: End byte offset (exclusive)

    Returns:
        Decoded text. Ranges that split a character are decoded with
        replacement characters rather than raising.
    """
    return data[start:end].decode("utf-8", errors="replace")
