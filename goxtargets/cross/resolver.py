"""
Go version to platform set resolution.

This module maps a Go toolchain version string, as printed by ``go version``
(e.g. 'go1.14.3', 'go1.16beta1'), to the platform set of the release it
belongs to. Lookups never fail: unrecognized or malformed input and versions
newer than every known release resolve to the latest platform set.

Usage:
    from goxtargets.cross.resolver import supported_platforms

    for platform in supported_platforms("go1.15.8"):
        print(platform)
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from packaging.version import Version

from goxtargets.core.exceptions import InvalidVersionError
from goxtargets.core.platform import PlatformSet
from goxtargets.cross.rules import VersionedRule
from goxtargets.cross.targets import PLATFORMS_LATEST, VERSION_RULES

logger = logging.getLogger(__name__)

GO_VERSION_PREFIX = "go"

# major[.minor[.patch...]] with an optional pre-release and build suffix.
# A pre-release either follows a hyphen or starts directly with a letter
# ('1.16beta1').
_VERSION_PATTERN = re.compile(
    r"(?P<release>[0-9]+(?:\.[0-9]+)*)"
    r"(?:-(?P<numeric_pre>[0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)"
    r"|-?(?P<named_pre>[A-Za-z][0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))?"
)


@dataclass(frozen=True)
class GoVersion:
    """
    A parsed Go version.

    Attributes:
        release: Numeric release part ('1.14.0' for '1.14.0-rc.1+abc')
        prerelease: Pre-release label without the leading hyphen, or empty
        build: Build metadata without the leading '+', or empty
    """

    release: Version
    prerelease: str = ""
    build: str = ""


def parse_go_version(text: str) -> GoVersion:
    """
    Parse the numeric part of a Go version string.

    Accepts dotted numeric versions with an optional pre-release and build
    suffix, e.g. '1.14', '1.14.3', '1.16beta1', '1.14.0-rc1.1', '1.17+local'.
    The whole text must match; surrounding whitespace is rejected.

    Args:
        text: Version text without the 'go' prefix

    Returns:
        Parsed version

    Raises:
        InvalidVersionError: If the text is not a valid version
    """
    match = _VERSION_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidVersionError(f"Invalid Go version: {text!r}")

    return GoVersion(
        release=Version(match.group("release")),
        prerelease=match.group("numeric_pre") or match.group("named_pre") or "",
        build=match.group("build") or "",
    )


class PlatformResolver:
    """
    Resolve toolchain version strings to supported platform sets.

    Rules are evaluated in order and the first match wins, so they must be
    ordered from the oldest release to the newest.

    Example:
        >>> resolver = PlatformResolver()
        >>> platforms = resolver.resolve("go1.14.3")
        >>> print(platforms[0])
        darwin/386
    """

    def __init__(
        self,
        rules: Sequence[VersionedRule] = VERSION_RULES,
        latest: PlatformSet = PLATFORMS_LATEST,
        prefix: str = GO_VERSION_PREFIX,
    ):
        """
        Initialize resolver.

        Args:
            rules: Version rules, oldest release first
            latest: Platform set used when no rule applies
            prefix: Toolchain name prefix expected on version strings
        """
        self.rules = tuple(rules)
        self.latest = latest
        self.prefix = prefix

    def resolve(self, version: str) -> PlatformSet:
        """
        Get the platform set for a toolchain version string.

        Args:
            version: Version string such as 'go1.14.3'. Any string is accepted.

        Returns:
            Platform set of the matching release, or the latest set if the
            string has no prefix, cannot be parsed, or matches no rule
        """
        if not version.startswith(self.prefix):
            logger.debug(f"Unrecognized version string {version!r}, using latest")
            return self.latest

        text = version[len(self.prefix) :]
        try:
            parsed = parse_go_version(text)
        except InvalidVersionError as e:
            logger.warning(
                f"Unable to parse {self.prefix} version {text!r}, using latest: {e}"
            )
            return self.latest

        rule = self.find_rule(parsed.release)
        if rule is None:
            logger.debug(f"No rule matches {version!r}, using latest")
            return self.latest

        logger.debug(f"Resolved {version!r} via rule {rule.constraint!r}")
        return rule.platforms

    def find_rule(self, version: Version) -> Optional[VersionedRule]:
        """
        Find the first rule matching a release version.

        Only the release part is compared, so a pre-release or build of a
        release ('1.16beta1', '1.14.0-rc.1') matches the same rule as the
        release itself. Pre-releases deliberately resolve to their release
        instead of falling through every range to the latest set.

        Args:
            version: Release version, e.g. GoVersion.release

        Returns:
            Matching rule, or None if the version is outside every range
        """
        release = Version(version.base_version)
        for rule in self.rules:
            if rule.matches(release):
                return rule
        return None


_default_resolver = PlatformResolver()


def supported_platforms(version: str) -> PlatformSet:
    """
    Get the full list of supported platforms for a Go version.

    Convenience wrapper around a shared PlatformResolver using the built-in
    release table.

    Args:
        version: Go version string, e.g. 'go1.17.2'

    Returns:
        Platform set for that version (latest set for unknown input)

    Example:
        >>> from goxtargets.cross.resolver import supported_platforms
        >>> len(supported_platforms("go1.0"))
        11
    """
    return _default_resolver.resolve(version)


__all__ = [
    "GO_VERSION_PREFIX",
    "GoVersion",
    "PlatformResolver",
    "parse_go_version",
    "supported_platforms",
]
