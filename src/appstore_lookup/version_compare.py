"""
App Store Version Comparison

Parses dotted version strings ("1.2.10") into integer tuples and classifies
the difference between the installed version and the catalog version.

Usage:
    from appstore_lookup.version_compare import classify, parse_version

    update_type = classify("1.5.0", "2.0.0")   # UpdateType.REQUIRED
"""

import logging
from typing import Sequence, Tuple, Union

from .models import UpdateType

logger = logging.getLogger(__name__)

VersionLike = Union[str, Sequence[int], None]


def _parse_component(segment: str) -> int:
    """Convert one version segment to int, anything but ASCII digits is 0"""
    segment = segment.strip()
    if not (segment.isascii() and segment.isdigit()):
        return 0
    return int(segment)


def parse_version(version_str: Union[str, None]) -> Tuple[int, ...]:
    """Parse a dotted version string into a tuple of integers.

    Never fails: empty or non-numeric segments become 0.

    Examples:
        "1.2.3"  -> (1, 2, 3)
        "1..3"   -> (1, 0, 3)
        "2.beta" -> (2, 0)
        ""       -> (0,)
    """
    if not version_str:
        return (0,)

    return tuple(_parse_component(segment) for segment in version_str.split('.'))


def _as_version(value: VersionLike) -> Tuple[int, ...]:
    if value is None or isinstance(value, str):
        return parse_version(value)
    parsed = tuple(int(v) for v in value)
    return parsed or (0,)


def pad_versions(current: VersionLike, remote: VersionLike) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Pad the shorter version with trailing zeros so both have equal length"""
    old = _as_version(current)
    new = _as_version(remote)

    length = max(len(old), len(new))
    old = old + (0,) * (length - len(old))
    new = new + (0,) * (length - len(new))
    return old, new


def classify(current: VersionLike, remote: VersionLike, patch_optional: bool = False) -> UpdateType:
    """
    Classify the update from ``current`` to ``remote``.

    Components are compared most significant first. The first differing
    component decides: a higher remote component means an update exists,
    a lower one means the catalog is behind.

    Args:
        current: Installed version (string or parsed sequence)
        remote: Catalog version (string or parsed sequence)
        patch_optional: Report an increase in the last component only as
            OPTIONAL. Off by default, in which case every increase is REQUIRED.

    Returns:
        UpdateType
    """
    old, new = pad_versions(current, remote)
    length = len(new)

    for index in range(length):
        if new[index] > old[index]:
            if patch_optional and index == length - 1:
                return UpdateType.OPTIONAL
            return UpdateType.REQUIRED
        if new[index] < old[index]:
            logger.debug(f"Catalog version {new} is behind installed {old}")
            return UpdateType.UNAVAILABLE

    return UpdateType.UNAVAILABLE


def is_newer_version(current: VersionLike, remote: VersionLike) -> bool:
    """Check if remote version is strictly newer than current"""
    old, new = pad_versions(current, remote)
    return new > old
