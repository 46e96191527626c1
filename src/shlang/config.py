"""ContextVar-based parse configuration for Shlang.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Parsers read the active config when they are not given explicit settings.

Usage:
    # Direct parser usage
    from shlang.config import ParseConfig, parse_config_context
    from shlang.parser import Parser

    with parse_config_context(ParseConfig(raw_tags=frozenset({"code"}))):
        nodes = Parser(source).parse()

    # Or set / reset explicitly
    set_parse_config(ParseConfig(max_depth=64))
    try:
        nodes = Parser(source).parse()
    finally:
        reset_parse_config()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

# Tags whose content is kept as verbatim text instead of being parsed
DEFAULT_RAW_TAGS: frozenset[str] = frozenset({"pre", "raw", "script", "style"})

# Element nesting limit; keeps recursive descent well inside Python's stack
DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: file_id is intentionally excluded; it is per-call state, not
    configuration. It remains on the Parser instance.

    Attributes:
        raw_tags: Element names whose content is not parsed as markup
        max_depth: Maximum element nesting depth before parsing fails

    """

    raw_tags: frozenset[str] = DEFAULT_RAW_TAGS
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Unknown keys are ignored. ``raw_tags`` may be any iterable of names.

        Example:
            >>> config = ParseConfig.from_dict({"raw_tags": ["code"], "other": 1})
            >>> config.raw_tags
            frozenset({'code'})

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "raw_tags" in filtered:
            filtered["raw_tags"] = frozenset(filtered["raw_tags"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "shlang_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_depth=8)):
        ...     get_parse_config().max_depth
        8

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_RAW_TAGS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
