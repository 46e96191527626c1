"""Utility modules for Shlang.

Provides:
- logger: get_logger for logging
- text: utf8_len, slice_bytes for byte-offset text handling
"""

from shlang.utils.logger import get_logger
from shlang.utils.text import slice_bytes, utf8_len

__all__ = [
    "get_logger",
    "slice_bytes",
    "utf8_len",
]
