"""AST serialization: JSON round-trip for Shlang nodes and tokens.

Converts spanned AST nodes (and tokens) to JSON-compatible dicts. Useful for:
- Dumping the AST or token stream from tooling
- Caching parsed ASTs
- Debugging and inspection

Output is deterministic (sorted keys). Element properties are written as a
list of ``[name, value]`` pairs so their insertion order survives.

Example:
    from shlang import parse
    from shlang.serialization import to_json, from_json

    nodes = parse('<a href="x">hi</a>')
    restored = from_json(to_json(nodes))
    assert restored == nodes

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from shlang.location import Span, Spanned
from shlang.nodes import (
    Bool,
    Comment,
    Element,
    ElementValue,
    Float,
    Int,
    Node,
    Null,
    String,
    Text,
)
from shlang.tokens import Token, TokenType

# Registry of node and value type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Text": Text,
    "Comment": Comment,
    "Element": Element,
    "Int": Int,
    "Float": Float,
    "String": String,
    "Bool": Bool,
    "Null": Null,
    "ElementValue": ElementValue,
}


def to_dict(value: Any) -> Any:
    """Convert a Spanned, node, value, Token or Span to JSON-compatible data.

    Dataclass objects get a ``_type`` discriminator field. Lists and tuples
    are serialized item by item.

    """
    if isinstance(value, Spanned):
        return {"_type": "Spanned", "item": to_dict(value.item), "span": to_dict(value.span)}
    if isinstance(value, Span):
        return {"_type": "Span", "file_id": value.file_id, "start": value.start, "end": value.end}
    if isinstance(value, Token):
        return {
            "_type": "Token",
            "kind": value.kind.name,
            "span": to_dict(value.span),
            "value": value.value,
        }
    if isinstance(value, Element):
        return {
            "_type": "Element",
            "name": value.name,
            "props": [[name, to_dict(prop)] for name, prop in value.props.items()],
            "children": [to_dict(child) for child in value.children],
            "start_tag_span": to_dict(value.start_tag_span),
            "end_tag_span": to_dict(value.end_tag_span),
        }
    if is_dataclass(value) and not isinstance(value, type):
        result: dict[str, Any] = {"_type": type(value).__name__}
        for f in fields(value):
            result[f.name] = to_dict(getattr(value, f.name))
        return result
    if isinstance(value, (list, tuple)):
        return [to_dict(item) for item in value]
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: Any) -> Any:
    """Reconstruct objects from data produced by to_dict.

    Raises:
        ValueError: If a ``_type`` discriminator is unknown.

    """
    if isinstance(data, list):
        return [from_dict(item) for item in data]
    if not isinstance(data, dict):
        return data

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized value"
        raise ValueError(msg)
    if type_name == "Spanned":
        return Spanned(from_dict(data["item"]), from_dict(data["span"]))
    if type_name == "Span":
        return Span(data["file_id"], data["start"], data["end"])
    if type_name == "Token":
        return Token(TokenType[data["kind"]], from_dict(data["span"]), data.get("value"))
    if type_name == "Element":
        return Element(
            name=data["name"],
            props={name: from_dict(prop) for name, prop in data.get("props", [])},
            children=tuple(from_dict(child) for child in data.get("children", [])),
            start_tag_span=from_dict(data["start_tag_span"]),
            end_tag_span=from_dict(data.get("end_tag_span")),
        )

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)
    kwargs = {f.name: from_dict(data[f.name]) for f in fields(node_cls) if f.name in data}
    return node_cls(**kwargs)


def to_json(nodes: list[Spanned[Node]] | list[Token], *, indent: int | None = None) -> str:
    """Serialize parsed nodes or a token list to a JSON string.

    Args:
        nodes: Parser or tokenizer output.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(nodes), sort_keys=True, indent=indent)


def from_json(data: str) -> list[Any]:
    """Deserialize nodes or tokens from a JSON string.

    Raises:
        ValueError: If the JSON is not a list.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
