"""
Custom YAML Loader that keeps every scalar as its source text.

This module provides the Loader class that extends yaml.SafeLoader to:
1. Resolve all plain scalars to strings (no dates, numbers or booleans)
2. Keep merge keys (<<: *anchor) working
3. Compose documents into node trees that still carry line/column marks
"""

from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import ParseError
from ..origin import Origin

MERGE_TAG = "tag:yaml.org,2002:merge"
NULL_TAG = "tag:yaml.org,2002:null"
MAP_TAG = "tag:yaml.org,2002:map"

# Plain scalars the YAML core schema reads as null
NULL_VALUES = frozenset({"", "~", "null", "Null", "NULL"})


def _merge_only_resolvers() -> dict[str, list]:
    """Copy SafeLoader's implicit resolvers, keeping only the merge key."""
    resolvers: dict[str, list] = {}
    for first, entries in yaml.SafeLoader.yaml_implicit_resolvers.items():
        kept = [(tag, regexp) for tag, regexp in entries if tag == MERGE_TAG]
        if kept:
            resolvers[first] = kept
    return resolvers


def is_null(node: yaml.Node) -> bool:
    """Check if a node is a YAML null (explicit tag or plain null literal)."""
    if not isinstance(node, yaml.ScalarNode):
        return False
    if node.tag == NULL_TAG:
        return True
    return node.style is None and node.value in NULL_VALUES


class Loader(yaml.SafeLoader):
    """
    YAML loader producing node trees with string scalars.

    Implicit type resolution is disabled so "2015-01-28", "8080" and "true"
    all stay strings. Only the merge key resolver is kept, which lets
    `<<: *defaults` expand as usual.

    Example:
        loader = Loader("foo: 2015-01-28", description="inline")
        try:
            documents = loader.compose_documents()
        finally:
            loader.dispose()
    """

    yaml_implicit_resolvers = _merge_only_resolvers()

    def __init__(self, stream: Any, description: str | None = None) -> None:
        """
        Initialize the loader.

        Args:
            stream: YAML text (str or text stream)
            description: Description of the resource, used in origins
        """
        super().__init__(stream)
        self.description = description

    def expand_merge_keys(self, node: yaml.Node, _seen: set[int] | None = None) -> None:
        """
        Expand merge keys in place across a whole node tree.

        Args:
            node: Root node to process
        """
        seen = _seen if _seen is not None else set()
        if id(node) in seen:
            return
        seen.add(id(node))

        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            for _key_node, value_node in node.value:
                self.expand_merge_keys(value_node, seen)
        elif isinstance(node, yaml.SequenceNode):
            for item in node.value:
                self.expand_merge_keys(item, seen)

    def _document_root(self, node: yaml.Node) -> yaml.MappingNode:
        """
        Validate a document root, mapping null documents to an empty mapping.

        Raises:
            ParseError: If the root is a non-null scalar or a sequence
        """
        if isinstance(node, yaml.MappingNode):
            return node
        if is_null(node):
            return yaml.MappingNode(MAP_TAG, [], node.start_mark, node.end_mark)

        kind = "sequence" if isinstance(node, yaml.SequenceNode) else "scalar"
        raise ParseError(
            f"document root must be a mapping, got {kind}",
            origin=Origin.from_mark(node.start_mark, self.description),
        )

    def compose_documents(self) -> list[yaml.MappingNode]:
        """
        Compose every document of the stream.

        Returns:
            list: One mapping node per document, in stream order
        """
        documents = []
        while self.check_node():
            node = self.get_node()
            self.expand_merge_keys(node)
            documents.append(self._document_root(node))
        return documents
