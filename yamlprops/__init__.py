from importlib.metadata import PackageNotFoundError, version

from .constants import MAX_SOURCE_SIZE_BYTES, PROFILES_KEY, YAML_FILE_EXTENSIONS
from .exceptions import ParseError, PropsError, ResourceError
from .loader import PropertySourceLoader, YamlPropertySourceLoader, load
from .origin import Origin
from .profiles import (
    ProfileAcceptor,
    accepts_profiles,
    extract_profiles,
    merge_documents,
    parse_profiles,
)
from .resource import ByteArrayResource, FileSystemResource, PackageResource, Resource
from .source import (
    EnumerablePropertySource,
    MapPropertySource,
    OriginTrackedMapPropertySource,
    PropertySource,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("yamlprops")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Loading
    "load",
    "PropertySourceLoader",
    "YamlPropertySourceLoader",
    # Property sources
    "PropertySource",
    "EnumerablePropertySource",
    "MapPropertySource",
    "OriginTrackedMapPropertySource",
    "Origin",
    # Resources
    "Resource",
    "ByteArrayResource",
    "FileSystemResource",
    "PackageResource",
    # Profiles
    "ProfileAcceptor",
    "accepts_profiles",
    "extract_profiles",
    "merge_documents",
    "parse_profiles",
    # Constants
    "PROFILES_KEY",
    "YAML_FILE_EXTENSIONS",
    "MAX_SOURCE_SIZE_BYTES",
    # Exceptions
    "PropsError",
    "ParseError",
    "ResourceError",
]
