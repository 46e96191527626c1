"""Parser mixins for Shlang.

Provides:
- TokenNavigationMixin: token stream access, expect/consume
- TextParsingMixin: text runs, raw-tag content, comments
- ElementParsingMixin: elements, close tags, properties, values
"""

from shlang.parsing.elements import ElementParsingMixin
from shlang.parsing.text import TEXT_DELIMITERS, TextParsingMixin
from shlang.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TEXT_DELIMITERS",
    "ElementParsingMixin",
    "TextParsingMixin",
    "TokenNavigationMixin",
]
