"""Token scanners for the Shlang lexer.

Each scanner is a mixin that handles one family of multi-character tokens.
"""

from __future__ import annotations

from shlang.lexer.scanners.literals import LiteralScannerMixin
from shlang.lexer.scanners.tags import TagScannerMixin

__all__ = [
    "LiteralScannerMixin",
    "TagScannerMixin",
]
