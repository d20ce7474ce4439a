"""
Flattening of YAML node trees into dotted property keys.

Nested mappings become "parent.child" keys, sequence items become
"parent[0]" keys. Scalars keep their exact source text and the position they
were read from.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import ParseError
from ..origin import Origin


@dataclass
class FlatDocument:
    """Ordered flat properties of one document, with the origin of each value."""

    properties: dict[str, str] = field(default_factory=dict)
    origins: dict[str, Origin] = field(default_factory=dict)

    def put(self, key: str, value: str, origin: Origin | None = None) -> None:
        """Set a property; an existing key keeps its position."""
        self.properties[key] = value
        if origin is not None:
            self.origins[key] = origin
        else:
            self.origins.pop(key, None)

    def pop(self, key: str) -> str | None:
        """Remove a property, returning its value (None if absent)."""
        self.origins.pop(key, None)
        return self.properties.pop(key, None)

    def __len__(self) -> int:
        return len(self.properties)


def join_path(path: str, key: str) -> str:
    """
    Append a key to a property path.

    Keys that start with "[" are appended without a dot, so a key written as
    "[a.b]" stays addressable as "parent[a.b]".
    """
    if not path:
        return key
    if key.startswith("["):
        return f"{path}{key}"
    return f"{path}.{key}"


def _key_text(key_node: yaml.Node, description: str | None) -> str:
    if not isinstance(key_node, yaml.ScalarNode):
        raise ParseError(
            "mapping keys must be scalars",
            origin=Origin.from_mark(key_node.start_mark, description),
        )
    return key_node.value


def _flatten_node(
    node: yaml.Node,
    path: str,
    doc: FlatDocument,
    description: str | None,
    active: set[int],
) -> None:
    if isinstance(node, yaml.ScalarNode):
        doc.put(path, node.value, Origin.from_mark(node.start_mark, description))
        return

    # Aliases can point back at an enclosing node
    if id(node) in active:
        raise ParseError(
            f"recursive alias at '{path}'",
            origin=Origin.from_mark(node.start_mark, description),
        )
    active.add(id(node))
    try:
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                key = _key_text(key_node, description)
                child = join_path(path, key)
                _flatten_node(value_node, child, doc, description, active)
        elif isinstance(node, yaml.SequenceNode):
            for idx, item in enumerate(node.value):
                _flatten_node(item, f"{path}[{idx}]", doc, description, active)
    finally:
        active.discard(id(node))


def flatten(node: yaml.Node, description: str | None = None) -> FlatDocument:
    """
    Flatten a composed document into ordered dotted properties.

    Traversal is pre-order depth-first, so key order follows the order the
    document declares them. Empty mappings and sequences produce no keys.

    Args:
        node: Document root (normally a MappingNode)
        description: Resource description recorded in each Origin

    Returns:
        FlatDocument with properties and origins

    Raises:
        ParseError: On non-scalar mapping keys, recursive aliases, or nesting
        deeper than the interpreter recursion limit

    Example:
        foo:
          bar: spam       ->  {"foo.bar": "spam", "foo.list[0]": "a"}
          list: [a]
    """
    doc = FlatDocument()
    try:
        _flatten_node(node, "", doc, description, set())
    except RecursionError as e:
        raise ParseError(
            "YAML nesting too deep", origin=Origin(resource=description)
        ) from e
    return doc


def _flatten_value(value: Any, path: str, result: dict[str, str]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten_value(item, join_path(path, str(key)), result)
    elif isinstance(value, (list, tuple)):
        for idx, item in enumerate(value):
            _flatten_value(item, f"{path}[{idx}]", result)
    elif value is None:
        result[path] = ""
    elif isinstance(value, bool):
        result[path] = str(value).lower()
    else:
        result[path] = str(value)


def flatten_data(data: Mapping[str, Any]) -> dict[str, str]:
    """
    Flatten already-loaded Python data with the same key rules as flatten().

    Non-string scalars are converted with str() (booleans as "true"/"false")
    and None becomes "".

    Args:
        data: Nested mapping

    Returns:
        dict: Ordered flat properties
    """
    result: dict[str, str] = {}
    _flatten_value(data, "", result)
    return result
