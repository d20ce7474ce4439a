"""
Property source interfaces and map-backed implementations.

A property source is a named, read-only lookup of flat property keys
(e.g. "server.port" or "hosts[0]") to values. Enumerable sources additionally
know every key they hold, in a stable order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Any

from .origin import Origin


class PropertySource(ABC):
    """
    Abstract base class for named property lookups.

    Subclasses implement get_property(); contains() and the dictionary-style
    helpers are derived from it.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the property source.

        Args:
            name: Name of the source, used for diagnostics
        """
        if not name:
            raise ValueError("Property source name must not be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def get_property(self, key: str) -> Any:
        """
        Get the value of a property.

        Args:
            key: Flat property key (e.g. "foo.bar")

        Returns:
            Value or None if the key is not present
        """
        pass  # pragma: no cover

    def contains(self, key: str) -> bool:
        """
        Check if the source holds a property.

        Args:
            key: Flat property key

        Returns:
            bool: True if the key is present
        """
        return self.get_property(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a property value, returning default if it is missing."""
        value = self.get_property(key)
        return default if value is None else value

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __getitem__(self, key: str) -> Any:
        value = self.get_property(key)
        if value is None:
            raise KeyError(key)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__} {{name='{self._name}'}}"


class EnumerablePropertySource(PropertySource):
    """
    Property source that can list every key it holds.

    Key order is part of the contract: property_names returns keys in the
    order the source was populated.
    """

    @property
    @abstractmethod
    def property_names(self) -> tuple[str, ...]:
        """
        Get all property keys in order.

        Returns:
            tuple: Ordered property keys
        """
        pass  # pragma: no cover

    def contains(self, key: str) -> bool:
        return key in self.property_names

    def keys(self) -> tuple[str, ...]:
        return self.property_names

    def values(self) -> list[Any]:
        return [self.get_property(key) for key in self.property_names]

    def items(self) -> list[tuple[str, Any]]:
        return [(key, self.get_property(key)) for key in self.property_names]

    def __iter__(self) -> Iterator[str]:
        return iter(self.property_names)

    def __len__(self) -> int:
        return len(self.property_names)


class MapPropertySource(EnumerablePropertySource):
    """
    Enumerable property source over an ordered mapping.

    The mapping is copied on construction, so later changes to the caller's
    dictionary do not leak into the source.
    """

    def __init__(self, name: str, source: Mapping[str, Any]) -> None:
        super().__init__(name)
        self._source: dict[str, Any] = dict(source)
        self._names = tuple(self._source)

    @classmethod
    def from_nested(cls, name: str, data: Mapping[str, Any]) -> "MapPropertySource":
        """
        Build a source from nested Python data, flattened like YAML documents.

        Example:
            MapPropertySource.from_nested("defaults", {"server": {"port": 8080}})
            # keys: ("server.port",), value "8080"
        """
        from .yaml import flatten_data

        return cls(name, flatten_data(data))

    @property
    def source(self) -> dict[str, Any]:
        """Copy of the underlying mapping."""
        return dict(self._source)

    @property
    def property_names(self) -> tuple[str, ...]:
        return self._names

    def get_property(self, key: str) -> Any:
        return self._source.get(key)

    def contains(self, key: str) -> bool:
        return key in self._source

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapPropertySource):
            return NotImplemented
        return (
            self.name == other.name
            and self._names == other._names
            and self._source == other._source
        )

    # Sources compare by content, so they are not hashable
    __hash__ = None  # type: ignore[assignment]


class OriginTrackedMapPropertySource(MapPropertySource):
    """
    Map property source that remembers where each value was read from.

    Example:
        source = load("application", FileSystemResource("application.yml"))
        source.get_property("server.port")   # "8080"
        str(source.get_origin("server.port"))
        # "in 'file [application.yml]', line 2, column 9"
    """

    def __init__(
        self,
        name: str,
        source: Mapping[str, Any],
        origins: Mapping[str, Origin] | None = None,
    ) -> None:
        super().__init__(name, source)
        self._origins: dict[str, Origin] = {
            key: origin
            for key, origin in (origins or {}).items()
            if key in self._source
        }

    def get_origin(self, key: str) -> Origin | None:
        """
        Get the origin of a property value.

        Args:
            key: Flat property key

        Returns:
            Origin or None if the key is unknown or was not tracked
        """
        return self._origins.get(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapPropertySource):
            return NotImplemented
        if not isinstance(other, OriginTrackedMapPropertySource):
            return False
        return super().__eq__(other) and self._origins == other._origins

