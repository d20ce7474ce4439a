"""
Profile-based document selection and merging.

A document may restrict itself to certain profiles with the reserved
`spring.profiles` key:

    spring:
      profiles: prod,!eu     # or a YAML list
    server:
      port: 80

Documents without the key are baseline documents and always apply. Documents
with the key apply when the caller's acceptor approves their profile list.
Selected documents are merged in file order, later values winning.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .constants import NEGATION_PREFIX, PROFILES_KEY
from .yaml import FlatDocument, flatten

ProfileAcceptor = Callable[[Sequence[str]], bool]

_lg = logging.getLogger(__name__)


def parse_profiles(value: str) -> list[str]:
    """
    Split a comma-separated profile declaration into trimmed tokens.

    Args:
        value: Declaration such as "yay, !foo"

    Returns:
        list: Non-empty tokens in declaration order
    """
    return [token.strip() for token in value.split(",") if token.strip()]


def _is_profiles_entry(key: str, profiles_key: str) -> bool:
    """Check for the reserved key itself or one of its list items (key[i])."""
    if key == profiles_key:
        return True
    prefix = f"{profiles_key}["
    if not (key.startswith(prefix) and key.endswith("]")):
        return False
    return key[len(prefix) : -1].isdigit()


def extract_profiles(
    doc: FlatDocument, profiles_key: str = PROFILES_KEY
) -> list[str] | None:
    """
    Remove the profiles declaration from a document and return its tokens.

    Args:
        doc: Flattened document (modified in place)
        profiles_key: Reserved key name

    Returns:
        list of tokens, or None if the document declares no profiles
    """
    entries = [key for key in doc.properties if _is_profiles_entry(key, profiles_key)]
    if not entries:
        return None

    tokens: list[str] = []
    for key in entries:
        value = doc.pop(key)
        if value:
            tokens.extend(parse_profiles(value))
    return tokens or None


def accepts_profiles(active_profile: str | None) -> ProfileAcceptor:
    """
    Build the default acceptor for an active profile.

    The returned predicate accepts a profile list when the active profile is
    listed without negation, or when the list holds only negated tokens and
    none of them negates the active profile. Without an active profile no
    profile-restricted document is accepted.

    Args:
        active_profile: Profile being loaded, or None

    Returns:
        Callable taking the token list and returning True to include
    """

    def acceptor(profiles: Sequence[str]) -> bool:
        if active_profile is None:
            return False
        positive = [p for p in profiles if not p.startswith(NEGATION_PREFIX)]
        negated = [
            p[len(NEGATION_PREFIX) :] for p in profiles if p.startswith(NEGATION_PREFIX)
        ]
        if active_profile in negated:
            return False
        if active_profile in positive:
            return True
        return not positive and bool(negated)

    return acceptor


def merge_documents(
    documents: Iterable[Any],
    active_profile: str | None = None,
    acceptor: ProfileAcceptor | None = None,
    description: str | None = None,
    lg: logging.Logger | None = None,
) -> FlatDocument | None:
    """
    Flatten, select and merge documents.

    Args:
        documents: Document nodes as returned by yamlprops.yaml.parse_all
        active_profile: Profile being loaded, or None
        acceptor: Predicate over a document's profile tokens. Defaults to
            accepts_profiles(active_profile)
        description: Resource description recorded in origins
        lg: Logger (defaults to this module's logger)

    Returns:
        Merged FlatDocument, or None if no document was selected
    """
    lg = lg or _lg
    if acceptor is None:
        acceptor = accepts_profiles(active_profile)

    merged = FlatDocument()
    included = 0
    for index, node in enumerate(documents):
        if not node.value:
            lg.debug("skipping empty document", extra={"document": index})
            continue

        doc = flatten(node, description)
        profiles = extract_profiles(doc)
        if profiles is not None and not acceptor(profiles):
            lg.debug(
                "skipping document for profiles",
                extra={
                    "document": index,
                    "profiles": profiles,
                    "active": active_profile,
                },
            )
            continue

        included += 1
        for key, value in doc.properties.items():
            merged.put(key, value, doc.origins.get(key))

    if included == 0:
        return None
    return merged
