"""
Versioning Module

Pure functions for parsing, bumping and ordering semantic versions
carried by release tags.
"""

import re
from typing import Iterable, Optional, Union

from .exceptions import VersionParseError
from .models import IncrementKind, SemanticVersion

VERSION_PATTERN = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)\Z")
UNSCOPED_TAG_PATTERN = re.compile(r"^v([0-9]+)\.([0-9]+)\.([0-9]+)\Z")


def parse_version(version: str) -> SemanticVersion:
    """Parse the numeric part of a version or tag string.

    A leading "v" and everything after the first "-" are ignored, so
    "v0.0.7-dev-rc" parses as 0.0.7.

    Raises:
        VersionParseError: If what remains is not three dot-separated integers
    """
    base = version[1:] if version.startswith("v") else version
    match = VERSION_PATTERN.match(base.split("-", 1)[0])
    if not match:
        raise VersionParseError(version)
    return SemanticVersion(*(int(part) for part in match.groups()))


def bump_version(version: str, kind: Union[IncrementKind, str] = IncrementKind.PATCH) -> SemanticVersion:
    """Compute the next version after `version`.

    No upper bound is applied; an overflowing result is rejected later
    by tag validation.
    """
    kind = IncrementKind(kind)
    current = parse_version(version)

    if kind == IncrementKind.MAJOR:
        return SemanticVersion(current.major + 1, 0, 0)
    if kind == IncrementKind.MINOR:
        return SemanticVersion(current.major, current.minor + 1, 0)
    return SemanticVersion(current.major, current.minor, current.patch + 1)


def increment_version(version: str, kind: Union[IncrementKind, str] = IncrementKind.PATCH) -> str:
    """String form of bump_version, e.g. ("v0.0.7-dev-rc", "minor") -> "0.1.0"."""
    return str(bump_version(version, kind))


def scoped_tag_pattern(environment: Optional[str]) -> re.Pattern:
    """Pattern for tags belonging to an environment, or to production when None."""
    if environment is None:
        return UNSCOPED_TAG_PATTERN
    return re.compile(
        rf"^v([0-9]+)\.([0-9]+)\.([0-9]+)-{re.escape(environment)}\Z"
    )


def select_latest_tag(tags: Iterable[str], environment: Optional[str] = None) -> Optional[str]:
    """Pick the highest-versioned release tag within a scope.

    Pre-release tags are never candidates, so a pre-release can still be
    followed by the final release of the same version. Candidates are
    ordered by major, then minor, then patch, descending; equal versions
    keep their input order.

    Args:
        tags: Tag names, typically the output of `git tag -l`
        environment: Environment name to scope to, None for production tags

    Returns:
        The latest matching tag or None
    """
    pattern = scoped_tag_pattern(environment)
    candidates = []
    for tag in tags:
        match = pattern.match(tag.strip())
        if match:
            candidates.append((tuple(int(part) for part in match.groups()), tag.strip()))

    if not candidates:
        return None
    candidates.sort(key=lambda candidate: candidate[0], reverse=True)
    return candidates[0][1]
