"""
Tests for yamlprops.resource.
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from yamlprops import load
from yamlprops.exceptions import ResourceError
from yamlprops.resource import (
    ByteArrayResource,
    FileSystemResource,
    PackageResource,
    Resource,
)


@pytest.fixture
def config_package(tmp_path: Path, monkeypatch) -> Generator[str, None, None]:
    """Create an importable package holding an application.yml data file."""
    package_dir = tmp_path / "propsfixturepkg"
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("")
    (package_dir / "application.yml").write_text("server:\n  port: 8080\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield "propsfixturepkg"
    sys.modules.pop("propsfixturepkg", None)


@pytest.mark.unit
class TestByteArrayResource:
    """Test in-memory resources."""

    def test_read_bytes(self):
        """Test content and description."""
        resource = ByteArrayResource(b"a: 1")

        assert resource.read_bytes() == b"a: 1"
        assert resource.data == b"a: 1"
        assert resource.exists()
        assert resource.description == "byte array resource"

    def test_each_open_is_independent(self):
        """Test open() returns a fresh stream every time."""
        resource = ByteArrayResource(b"abc")

        with resource.open() as first:
            first.read()
        with resource.open() as second:
            assert second.read() == b"abc"

    def test_rejects_text(self):
        """Test str input is refused."""
        with pytest.raises(TypeError):
            ByteArrayResource("a: 1")  # type: ignore[arg-type]

    def test_size_limit(self):
        """Test read_bytes() refuses content above the limit."""
        with pytest.raises(ResourceError, match="maximum size"):
            ByteArrayResource(b"0123456789").read_bytes(max_size=9)

    def test_size_limit_inclusive(self):
        """Test content exactly at the limit is accepted."""
        assert ByteArrayResource(b"0123456789").read_bytes(max_size=10) == b"0123456789"

    def test_repr(self):
        """Test repr shows the description."""
        assert repr(ByteArrayResource(b"", "inline")) == "ByteArrayResource('inline')"


@pytest.mark.unit
class TestFileSystemResource:
    """Test file resources."""

    def test_read_file(self, tmp_path):
        """Test reading a file from disk."""
        path = tmp_path / "application.yml"
        path.write_bytes(b"a: 1\n")
        resource = FileSystemResource(path)

        assert resource.exists()
        assert resource.path == path
        assert resource.read_bytes() == b"a: 1\n"
        assert resource.description == f"file [{path}]"

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported as ResourceError."""
        resource = FileSystemResource(tmp_path / "missing.yml")

        assert not resource.exists()
        with pytest.raises(ResourceError) as exc_info:
            resource.open()
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_not_a_file(self, tmp_path):
        """Test a directory does not count as an existing resource."""
        assert not FileSystemResource(tmp_path).exists()


@pytest.mark.integration
class TestPackageResource:
    """Test resources shipped inside a package."""

    def test_read_package_data(self, config_package):
        """Test reading a data file from an importable package."""
        resource = PackageResource("application.yml", config_package)

        assert resource.exists()
        assert resource.read_bytes() == b"server:\n  port: 8080\n"
        assert "propsfixturepkg/application.yml" in resource.description

    def test_load_from_package(self, config_package):
        """Test loading a property source from package data."""
        source = load("application", PackageResource("application.yml", config_package))

        assert source.get_property("server.port") == "8080"
        assert "propsfixturepkg" in source.get_origin("server.port").resource

    def test_missing_data_file(self, config_package):
        """Test a missing data file raises ResourceError."""
        resource = PackageResource("missing.yml", config_package)

        assert not resource.exists()
        with pytest.raises(ResourceError, match="not found"):
            resource.open()

    def test_missing_package(self):
        """Test an unknown package raises ResourceError."""
        resource = PackageResource("application.yml", "no_such_package_for_props")

        assert not resource.exists()
        with pytest.raises(ResourceError, match="package not found"):
            resource.open()


@pytest.mark.unit
class TestResourceInterface:
    """Test the Resource abstract base class."""

    def test_cannot_instantiate_abstract(self):
        """Test Resource is abstract."""
        with pytest.raises(TypeError):
            Resource()  # type: ignore[abstract]
