"""Typed AST nodes for Shlang.

All AST nodes are frozen dataclasses with slots. The parser wraps every node
in a Spanned so that its source range travels with it.

Node Hierarchy:
Node
├── Text
├── Comment
└── Element

Value (property values)
├── Int
├── Float
├── String
├── Bool
├── Null
└── ElementValue (reserved, never produced by the parser)

Thread Safety:
Nodes are frozen and are not modified after the parser returns them.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shlang.location import Span, Spanned

# =============================================================================
# Values
# =============================================================================


@dataclass(frozen=True, slots=True)
class Int:
    """Signed 64-bit integer property value."""

    value: int


@dataclass(frozen=True, slots=True)
class Float:
    """Floating point property value."""

    value: float


@dataclass(frozen=True, slots=True)
class String:
    """String property value with escapes already decoded."""

    value: str


@dataclass(frozen=True, slots=True)
class Bool:
    """Boolean property value. Bare property names parse to Bool(True)."""

    value: bool


@dataclass(frozen=True, slots=True)
class Null:
    """The ``null`` literal."""


@dataclass(frozen=True, slots=True)
class ElementValue:
    """Marker for property slots whose value is itself an element."""


Value: TypeAlias = Int | Float | String | Bool | Null | ElementValue

# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text between tags.

    Normal text is whitespace-trimmed; raw-tag text is kept verbatim.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Comment:
    """Block comment. Content excludes the outermost ``<*`` / ``*>``."""

    content: str


@dataclass(frozen=True, slots=True)
class Element:
    """A tag with properties and children.

    Markup: ``<name key=value flag>children</name>`` or ``<name/>``

    Attributes:
        name: Tag name
        props: Read-only property values in insertion order; a repeated key
            keeps the last value
        children: Child nodes in source order
        start_tag_span: Span of the opening tag, ``<`` through ``>`` or ``/>``
        end_tag_span: Span of the closing tag, or None for self-closing
            elements and elements left open at end of input

    """

    name: str
    props: Mapping[str, Spanned[Value]] = field(hash=False)
    children: tuple[Spanned[Node], ...]
    start_tag_span: Span
    end_tag_span: Span | None = None

    def __post_init__(self) -> None:
        # Frozen node: copy props into a read-only view
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    @property
    def is_self_closing(self) -> bool:
        return self.end_tag_span is None and not self.children


Node: TypeAlias = Text | Comment | Element


__all__ = [
    "Bool",
    "Comment",
    "Element",
    "ElementValue",
    "Float",
    "Int",
    "Node",
    "Null",
    "String",
    "Text",
    "Value",
]
