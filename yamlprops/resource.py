"""
Byte-stream resources that property sources are loaded from.

A Resource only has to produce a readable binary stream. Three implementations
cover in-memory data, files on disk and data files shipped inside a Python
package.
"""

import io
from abc import ABC, abstractmethod
from importlib import resources as importlib_resources
from pathlib import Path
from typing import BinaryIO

from .constants import MAX_SOURCE_SIZE_BYTES
from .exceptions import ResourceError


class Resource(ABC):
    """
    Abstract source of bytes.

    Subclasses implement open() and the description used in messages and
    origins. read_bytes() applies the size limit shared by all resources.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """
        Human-readable description of the resource.

        Returns:
            str: Description used in origins and error messages
        """
        pass  # pragma: no cover

    @abstractmethod
    def exists(self) -> bool:
        """
        Check whether the resource can be opened.

        Returns:
            bool: True if open() is expected to succeed
        """
        pass  # pragma: no cover

    @abstractmethod
    def open(self) -> BinaryIO:
        """
        Open a new binary stream over the resource content.

        The caller is responsible for closing the stream.

        Raises:
            ResourceError: If the resource cannot be opened
        """
        pass  # pragma: no cover

    def read_bytes(self, max_size: int = MAX_SOURCE_SIZE_BYTES) -> bytes:
        """
        Read the whole resource, closing the stream before returning.

        Args:
            max_size: Maximum number of bytes accepted

        Returns:
            bytes: Resource content

        Raises:
            ResourceError: If the resource cannot be read or exceeds max_size
        """
        with self.open() as stream:
            try:
                data = stream.read(max_size + 1)
            except OSError as e:
                raise ResourceError(
                    "failed to read resource", resource=self.description
                ) from e
        if len(data) > max_size:
            raise ResourceError(
                f"resource exceeds maximum size of {max_size} bytes "
                f"({max_size // (1024 * 1024)} MB)",
                resource=self.description,
            )
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class ByteArrayResource(Resource):
    """Resource over an in-memory byte string."""

    def __init__(self, data: bytes, description: str = "byte array resource"):
        if isinstance(data, str):
            raise TypeError("ByteArrayResource requires bytes, not str")
        self._data = bytes(data)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @property
    def data(self) -> bytes:
        return self._data

    def exists(self) -> bool:
        return True

    def open(self) -> BinaryIO:
        return io.BytesIO(self._data)


class FileSystemResource(Resource):
    """Resource backed by a file on disk."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def description(self) -> str:
        return f"file [{self._path}]"

    def exists(self) -> bool:
        try:
            return self._path.is_file()
        except OSError:
            return False

    def open(self) -> BinaryIO:
        try:
            return open(self._path, "rb")
        except FileNotFoundError as e:
            raise ResourceError("resource not found", resource=self.description) from e
        except OSError as e:
            raise ResourceError(
                "failed to open resource", resource=self.description
            ) from e


class PackageResource(Resource):
    """
    Resource shipped as a data file inside an importable package.

    Example:
        resource = PackageResource("application.yml", "myapp.config")
    """

    def __init__(self, name: str, package: str):
        self._name = name
        self._package = package

    @property
    def description(self) -> str:
        return f"package resource [{self._package}/{self._name}]"

    def _traversable(self):
        try:
            return importlib_resources.files(self._package).joinpath(self._name)
        except ModuleNotFoundError as e:
            raise ResourceError(
                "package not found", resource=self.description
            ) from e

    def exists(self) -> bool:
        try:
            return self._traversable().is_file()
        except ResourceError:
            return False

    def open(self) -> BinaryIO:
        target = self._traversable()
        if not target.is_file():
            raise ResourceError("resource not found", resource=self.description)
        try:
            return target.open("rb")
        except OSError as e:
            raise ResourceError(
                "failed to open resource", resource=self.description
            ) from e
