"""
Cross-compilation platform values.

This module defines the OS/arch pair used to describe a Go cross-compilation
target, plus the copy-on-write helpers used to build one release's platform
set from the previous one.

Usage:
    from goxtargets.core.platform import Platform, derive_platforms

    base = (Platform("linux", "amd64", True),)
    newer = derive_platforms(base, added=[Platform("linux", "arm64", True)])
    print([str(p) for p in newer])
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from goxtargets.core.exceptions import DuplicatePlatformError


@dataclass(frozen=True)
class Platform:
    """
    A combination of OS/arch that can be built against.

    Equality and hashing only consider ``os`` and ``arch``; two entries that
    differ only in ``default`` are the same platform.

    Attributes:
        os: Target operating system as Go names it ('linux', 'darwin', 'windows')
        arch: Target architecture as Go names it ('amd64', 'arm64', '386')
        default: Include this target when no OS/arch filter is given. Only
            popular or generally useful targets set this, so that default
            build matrices stay small (Android is not a default, for example).
    """

    os: str
    arch: str
    default: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        """
        Get the Go-style target string.

        Example:
            >>> str(Platform("linux", "amd64", True))
            'linux/amd64'
        """
        return f"{self.os}/{self.arch}"


PlatformSet = Tuple[Platform, ...]


def remove_platforms(
    source: Iterable[Platform], to_remove: Iterable[Platform]
) -> PlatformSet:
    """
    Return a copy of ``source`` without the given platforms.

    Matching is by OS/arch only. Each entry in ``to_remove`` drops at most
    one element (the first match); entries that match nothing are ignored.
    ``source`` itself is left untouched.

    Args:
        source: Platforms to filter
        to_remove: Platforms to drop

    Returns:
        New platform set with relative order preserved
    """
    result = list(source)

    for target in to_remove:
        for index, candidate in enumerate(result):
            if candidate.os == target.os and candidate.arch == target.arch:
                del result[index]
                break

    return tuple(result)


def derive_platforms(
    base: PlatformSet,
    added: Iterable[Platform] = (),
    removed: Iterable[Platform] = (),
) -> PlatformSet:
    """
    Build a release's platform set from the previous release's set.

    Removals are applied first, then additions are appended in order. To
    change only the ``default`` flag of a platform, list it in both.

    Args:
        base: Platform set of the preceding release (empty for the first one)
        added: Platforms newly supported in this release
        removed: Platforms dropped in this release

    Returns:
        New platform set

    Raises:
        DuplicatePlatformError: If an added platform is already present
    """
    result = list(remove_platforms(base, removed))
    seen = {(p.os, p.arch) for p in result}

    for platform in added:
        key = (platform.os, platform.arch)
        if key in seen:
            raise DuplicatePlatformError(platform.os, platform.arch)
        seen.add(key)
        result.append(platform)

    return tuple(result)


def default_platforms(platforms: Iterable[Platform]) -> PlatformSet:
    """Return only the platforms flagged as default build targets, in order."""
    return tuple(p for p in platforms if p.default)


__all__ = [
    "Platform",
    "PlatformSet",
    "remove_platforms",
    "derive_platforms",
    "default_platforms",
]
