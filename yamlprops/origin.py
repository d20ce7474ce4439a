"""
Origin of a property value within a YAML resource.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Origin:
    """
    Location a value (or an error) was read from.

    Lines and columns are stored 0-indexed, as reported by the YAML parser,
    and displayed 1-indexed.
    """

    resource: str | None = None
    line: int | None = None
    column: int | None = None

    @classmethod
    def from_mark(cls, mark: Any, resource: str | None = None) -> "Origin | None":
        """Build an Origin from a PyYAML Mark (returns None if mark is None)."""
        if mark is None:
            return None
        return cls(resource=resource, line=mark.line, column=mark.column)

    def format_location(self) -> str:
        """Format file and position for messages."""
        parts = []
        if self.resource:
            parts.append(f"in '{self.resource}'")
        if self.line is not None:
            parts.append(f"line {self.line + 1}")
        if self.column is not None:
            parts.append(f"column {self.column + 1}")
        return ", ".join(parts) if parts else "unknown location"

    def __str__(self) -> str:
        return self.format_location()
