"""
Go cross-compilation targets per toolchain release.

Each ``PLATFORMS_1_x`` constant is the set of OS/arch pairs the given Go
release can build for. A release's set is derived from the previous
release's set; a release with no changes reuses the previous constant.
``PLATFORMS_LATEST`` is the newest set and the fallback for unknown versions.

All sets are tuples built once at import time and never modified.
"""

from types import MappingProxyType
from typing import Mapping

from goxtargets.core.platform import Platform, PlatformSet, derive_platforms
from goxtargets.cross.rules import VersionedRule, validate_rules


PLATFORMS_1_0: PlatformSet = derive_platforms(
    (),
    added=[
        Platform("darwin", "386", True),
        Platform("darwin", "amd64", True),
        Platform("linux", "386", True),
        Platform("linux", "amd64", True),
        Platform("linux", "arm", True),
        Platform("freebsd", "386", True),
        Platform("freebsd", "amd64", True),
        Platform("openbsd", "386", True),
        Platform("openbsd", "amd64", True),
        Platform("windows", "386", True),
        Platform("windows", "amd64", True),
    ],
)

PLATFORMS_1_1: PlatformSet = derive_platforms(
    PLATFORMS_1_0,
    added=[
        Platform("freebsd", "arm", True),
        Platform("netbsd", "386", True),
        Platform("netbsd", "amd64", True),
        Platform("netbsd", "arm", True),
        Platform("plan9", "386", False),
    ],
)

PLATFORMS_1_3: PlatformSet = derive_platforms(
    PLATFORMS_1_1,
    added=[
        Platform("dragonfly", "386", False),
        Platform("dragonfly", "amd64", False),
        Platform("nacl", "amd64", False),
        Platform("nacl", "amd64p32", False),
        Platform("nacl", "arm", False),
        Platform("solaris", "amd64", False),
    ],
)

PLATFORMS_1_4: PlatformSet = derive_platforms(
    PLATFORMS_1_3,
    added=[
        Platform("android", "arm", False),
        Platform("plan9", "amd64", False),
    ],
)

PLATFORMS_1_5: PlatformSet = derive_platforms(
    PLATFORMS_1_4,
    added=[
        Platform("darwin", "arm", False),
        Platform("darwin", "arm64", True),
        Platform("linux", "arm64", True),
        Platform("linux", "ppc64", False),
        Platform("linux", "ppc64le", False),
    ],
)

PLATFORMS_1_6: PlatformSet = derive_platforms(
    PLATFORMS_1_5,
    added=[
        Platform("android", "386", False),
        Platform("linux", "mips64", False),
        Platform("linux", "mips64le", False),
    ],
)

# mips64 and mips64le became fully supported, so they move to the end of
# the set as defaults alongside the 1.7 additions.
PLATFORMS_1_7: PlatformSet = derive_platforms(
    PLATFORMS_1_6,
    removed=[
        Platform("android", "386"),
        Platform("linux", "mips64"),
        Platform("linux", "mips64le"),
    ],
    added=[
        # Not fully supported, but generally useful
        Platform("linux", "s390x", True),
        Platform("plan9", "arm", False),
        Platform("android", "386", False),
        Platform("linux", "mips64", True),
        Platform("linux", "mips64le", True),
    ],
)

PLATFORMS_1_8: PlatformSet = derive_platforms(
    PLATFORMS_1_7,
    added=[
        Platform("linux", "mips", True),
        Platform("linux", "mipsle", True),
    ],
)

# no new platforms in 1.9
PLATFORMS_1_9: PlatformSet = PLATFORMS_1_8

# no new platforms in 1.10
PLATFORMS_1_10: PlatformSet = PLATFORMS_1_9

PLATFORMS_1_11: PlatformSet = derive_platforms(
    PLATFORMS_1_10,
    added=[
        Platform("js", "wasm", True),
    ],
)

# no new platforms in 1.12
PLATFORMS_1_12: PlatformSet = PLATFORMS_1_11

# no new platforms in 1.13
PLATFORMS_1_13: PlatformSet = PLATFORMS_1_12

# Native Client was removed in 1.14 (https://golang.org/doc/go1.14#nacl)
PLATFORMS_1_14: PlatformSet = derive_platforms(
    PLATFORMS_1_13,
    removed=[
        Platform("nacl", "amd64"),
        Platform("nacl", "amd64p32"),
        Platform("nacl", "arm"),
    ],
)

# darwin/386 and darwin/arm are unsupported from 1.15 (https://golang.org/doc/go1.15#darwin)
PLATFORMS_1_15: PlatformSet = derive_platforms(
    PLATFORMS_1_14,
    removed=[
        Platform("darwin", "386"),
        Platform("darwin", "arm"),
    ],
    added=[
        Platform("linux", "riscv64", True),
    ],
)

PLATFORMS_1_16: PlatformSet = derive_platforms(
    PLATFORMS_1_15,
    added=[
        Platform("ios", "amd64", False),  # iOS simulator on x86 macOS hosts
        Platform("ios", "arm64", False),  # regular iOS devices
    ],
)

PLATFORMS_1_17: PlatformSet = derive_platforms(
    PLATFORMS_1_16,
    added=[
        Platform("windows", "arm64", True),
    ],
)

PLATFORMS_LATEST: PlatformSet = PLATFORMS_1_17


# Release name -> platform set, oldest first. 1.2 has no entry of its own.
RELEASES: Mapping[str, PlatformSet] = MappingProxyType(
    {
        "1.0": PLATFORMS_1_0,
        "1.1": PLATFORMS_1_1,
        "1.3": PLATFORMS_1_3,
        "1.4": PLATFORMS_1_4,
        "1.5": PLATFORMS_1_5,
        "1.6": PLATFORMS_1_6,
        "1.7": PLATFORMS_1_7,
        "1.8": PLATFORMS_1_8,
        "1.9": PLATFORMS_1_9,
        "1.10": PLATFORMS_1_10,
        "1.11": PLATFORMS_1_11,
        "1.12": PLATFORMS_1_12,
        "1.13": PLATFORMS_1_13,
        "1.14": PLATFORMS_1_14,
        "1.15": PLATFORMS_1_15,
        "1.16": PLATFORMS_1_16,
        "1.17": PLATFORMS_1_17,
    }
)

# Evaluated in order; the first matching rule wins.
VERSION_RULES = (
    VersionedRule("<1.1", PLATFORMS_1_0),
    VersionedRule(">=1.1,<1.3", PLATFORMS_1_1),
    VersionedRule(">=1.3,<1.4", PLATFORMS_1_3),
    VersionedRule(">=1.4,<1.5", PLATFORMS_1_4),
    VersionedRule(">=1.5,<1.6", PLATFORMS_1_5),
    VersionedRule(">=1.6,<1.7", PLATFORMS_1_6),
    VersionedRule(">=1.7,<1.8", PLATFORMS_1_7),
    VersionedRule(">=1.8,<1.9", PLATFORMS_1_8),
    VersionedRule(">=1.9,<1.10", PLATFORMS_1_9),
    VersionedRule(">=1.10,<1.11", PLATFORMS_1_10),
    VersionedRule(">=1.11,<1.12", PLATFORMS_1_11),
    VersionedRule(">=1.12,<1.13", PLATFORMS_1_12),
    VersionedRule(">=1.13,<1.14", PLATFORMS_1_13),
    VersionedRule(">=1.14,<1.15", PLATFORMS_1_14),
    VersionedRule(">=1.15,<1.16", PLATFORMS_1_15),
    VersionedRule(">=1.16,<1.17", PLATFORMS_1_16),
    VersionedRule(">=1.17,<1.18", PLATFORMS_1_17),
)

validate_rules(VERSION_RULES)


__all__ = [
    "PLATFORMS_1_0",
    "PLATFORMS_1_1",
    "PLATFORMS_1_3",
    "PLATFORMS_1_4",
    "PLATFORMS_1_5",
    "PLATFORMS_1_6",
    "PLATFORMS_1_7",
    "PLATFORMS_1_8",
    "PLATFORMS_1_9",
    "PLATFORMS_1_10",
    "PLATFORMS_1_11",
    "PLATFORMS_1_12",
    "PLATFORMS_1_13",
    "PLATFORMS_1_14",
    "PLATFORMS_1_15",
    "PLATFORMS_1_16",
    "PLATFORMS_1_17",
    "PLATFORMS_LATEST",
    "RELEASES",
    "VERSION_RULES",
]
