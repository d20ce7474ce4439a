"""
Reserved property names and resource limits.
"""

import os
import warnings

# Reserved key holding the profiles a document applies to
PROFILES_KEY = "spring.profiles"

# Prefix marking a negated profile token (e.g. "!prod")
NEGATION_PREFIX = "!"

YAML_FILE_EXTENSIONS = ("yml", "yaml")

MAX_SOURCE_SIZE_ENV = "YAMLPROPS_MAX_SOURCE_SIZE"

DEFAULT_MAX_SOURCE_SIZE_BYTES = 10 * 1024 * 1024


def _read_max_source_size(default: int = DEFAULT_MAX_SOURCE_SIZE_BYTES) -> int:
    """
    Read the size limit override from the environment.

    The value must be a positive whole number of bytes. Anything else is
    ignored with a warning and the default applies.

    Returns:
        int: Limit in bytes
    """
    raw = os.environ.get(MAX_SOURCE_SIZE_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        value = 0
    if value <= 0:
        warnings.warn(
            f"ignoring {MAX_SOURCE_SIZE_ENV}={raw!r}: expected a positive "
            f"number of bytes, using {default}",
            stacklevel=2,
        )
        return default
    return value


# Maximum resource size (10MB by default) to prevent DoS attacks
MAX_SOURCE_SIZE_BYTES = _read_max_source_size()
