# SPDX-License-Identifier: MIT
"""Helpers for comparing and sorting chronological versions.

All helpers accept version strings as well as Version objects.
Ordering: date, then changeset (absent < 1 < 2 ...), then kind
(regular < break < features by name).
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .errors import ChronVerError
from .version import Version

VersionLike = Union[str, Version]


def parse_version(version: VersionLike) -> Version:
    """Parse a version string, passing Version objects through unchanged.

    Raises:
        ParseError: If the string is not a valid chronological version
    """
    if isinstance(version, Version):
        return version
    return Version.parse(version)


def is_valid_chronver(version_string: str) -> bool:
    """Check if a string is a valid chronological version.

    Examples:
        >>> is_valid_chronver("2024.04.03.1-break")
        True
        >>> is_valid_chronver("2024.4.3")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        Version.parse(version_string)
    except ChronVerError:
        return False
    return True


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two chronological versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("2024.04.03", "2024.04.03.1")
        -1
        >>> compare_versions("2024.04.03.1-break", "2024.04.03.1")
        1
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 == v2:
        return 0
    return -1 if v1 < v2 else 1


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting mixed input.

    Examples:
        >>> sorted(["2024.04.05", "2024.04.03.1", "2024.04.03"], key=version_key)
        ['2024.04.03', '2024.04.03.1', '2024.04.05']
    """
    return parse_version(version).sort_key()


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions, ascending unless ``reverse`` is set."""
    return sorted((parse_version(v) for v in versions), reverse=reverse)


def latest_version(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the highest version, or None if there are none."""
    parsed = [parse_version(v) for v in versions]
    if not parsed:
        return None
    return max(parsed)
