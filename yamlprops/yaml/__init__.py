"""
YAML parsing for property sources.

Public API:
    parse_all: Compose every document of a YAML source into node trees
    flatten: Turn a document node tree into dotted properties
    flatten_data: Same key rules applied to already-loaded Python data
    Loader: YAML loader keeping scalars as their source text
    FlatDocument: Flat properties of one document with value origins
"""

from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import ParseError
from ..origin import Origin
from .flatten import FlatDocument, flatten, flatten_data, join_path
from .loader import Loader, is_null

# Public API exports
__all__ = [
    "parse_all",
    "flatten",
    "flatten_data",
    "join_path",
    "is_null",
    "Loader",
    "FlatDocument",
]


def _decode(data: bytes, description: str | None) -> str:
    """Decode UTF-8 bytes, reporting the failing offset as a ParseError."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            "YAML source is not valid UTF-8",
            origin=Origin(resource=description),
            position=e.start,
        ) from e


def _parse_error(e: yaml.YAMLError, description: str | None) -> ParseError:
    """Convert a PyYAML error into a ParseError with location information."""
    if isinstance(e, yaml.MarkedYAMLError):
        mark = e.problem_mark or e.context_mark
        problem = e.problem or e.context or "invalid YAML"
        if e.context and e.problem:
            problem = f"{e.context}: {e.problem}"
        return ParseError(problem, origin=Origin.from_mark(mark, description))
    return ParseError(str(e), origin=Origin(resource=description))


def parse_all(stream: Any, description: str | None = None) -> list[yaml.MappingNode]:
    """
    Parse every document of a YAML source.

    Args:
        stream: YAML bytes, text, or a text/binary stream
        description: Description of the resource, used in origins and errors

    Returns:
        list: One mapping node per document, in order. Empty or null documents
        are returned as empty mapping nodes.

    Raises:
        ParseError: If the source is not valid UTF-8, is not valid YAML, or a
        document root is not a mapping. Also raised when nesting is too
        deep to compose
    """
    content = stream.read() if hasattr(stream, "read") else stream
    if isinstance(content, (bytes, bytearray)):
        content = _decode(bytes(content), description)

    loader = Loader(content, description=description)
    try:
        return loader.compose_documents()
    except yaml.YAMLError as e:
        raise _parse_error(e, description) from e
    except RecursionError as e:
        raise ParseError(
            "YAML nesting too deep", origin=Origin(resource=description)
        ) from e
    finally:
        loader.dispose()
