"""
Property source loaders.

YamlPropertySourceLoader turns a YAML resource into an ordered, origin-tracked
property source:

    from yamlprops import FileSystemResource, load

    source = load("application", FileSystemResource("application.yml"), "prod")
    if source is not None:
        port = source.get_property("server.port")
"""

import logging
from abc import ABC, abstractmethod
from pathlib import PurePath

from .constants import MAX_SOURCE_SIZE_BYTES, YAML_FILE_EXTENSIONS
from .profiles import ProfileAcceptor, merge_documents
from .resource import Resource
from .source import OriginTrackedMapPropertySource, PropertySource
from .yaml import parse_all


class PropertySourceLoader(ABC):
    """
    Strategy interface for loading a resource into a property source.
    """

    @property
    @abstractmethod
    def file_extensions(self) -> tuple[str, ...]:
        """
        File extensions supported by this loader, without the leading dot.
        """
        pass  # pragma: no cover

    @abstractmethod
    def load(
        self,
        name: str,
        resource: Resource,
        active_profile: str | None = None,
        acceptor: ProfileAcceptor | None = None,
    ) -> PropertySource | None:
        """
        Load a resource into a property source.

        Args:
            name: Name of the resulting property source
            resource: Resource to load
            active_profile: Profile being loaded, or None
            acceptor: Predicate deciding whether a profile-restricted document applies

        Returns:
            PropertySource, or None if the resource holds no applicable content
        """
        pass  # pragma: no cover

    def can_load(self, filename: str) -> bool:
        """
        Check if a file name has one of the supported extensions.

        Args:
            filename: File name or path

        Returns:
            bool: True if the extension matches (case-insensitive)
        """
        suffix = PurePath(filename).suffix.lower().lstrip(".")
        return suffix in self.file_extensions


class YamlPropertySourceLoader(PropertySourceLoader):
    """
    Loads YAML resources into OriginTrackedMapPropertySource instances.

    Multiple documents in one resource are merged in order. Documents
    declaring `spring.profiles` are included only when the acceptor approves
    their profile list; documents without it always apply. Loader instances
    hold no per-load state and can be shared.
    """

    def __init__(
        self,
        lg: logging.Logger | None = None,
        max_size: int = MAX_SOURCE_SIZE_BYTES,
    ) -> None:
        """
        Initialize the loader.

        Args:
            lg: Logger (defaults to this module's logger)
            max_size: Maximum resource size in bytes
        """
        self._lg = lg or logging.getLogger(__name__)
        self._max_size = max_size

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return YAML_FILE_EXTENSIONS

    def load(
        self,
        name: str,
        resource: Resource,
        active_profile: str | None = None,
        acceptor: ProfileAcceptor | None = None,
    ) -> OriginTrackedMapPropertySource | None:
        """
        Load a YAML resource.

        Raises:
            ParseError: If the resource is not valid YAML
            ResourceError: If the resource cannot be read
        """
        description = resource.description
        data = resource.read_bytes(self._max_size)
        documents = parse_all(data, description=description)
        self._lg.debug(
            "parsed yaml resource",
            extra={"resource": description, "documents": len(documents)},
        )

        merged = merge_documents(
            documents,
            active_profile=active_profile,
            acceptor=acceptor,
            description=description,
            lg=self._lg,
        )
        if merged is None:
            self._lg.debug(
                "no applicable documents",
                extra={"resource": description, "active": active_profile},
            )
            return None

        self._lg.debug(
            "loaded property source",
            extra={"source": name, "resource": description, "properties": len(merged)},
        )
        return OriginTrackedMapPropertySource(name, merged.properties, merged.origins)


_loader = YamlPropertySourceLoader()


def load(
    name: str,
    resource: Resource,
    active_profile: str | None = None,
    acceptor: ProfileAcceptor | None = None,
) -> OriginTrackedMapPropertySource | None:
    """
    Load a YAML resource with the shared loader.

    See YamlPropertySourceLoader.load().
    """
    return _loader.load(name, resource, active_profile, acceptor)
