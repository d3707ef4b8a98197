"""
goxtargets: supported Go cross-compilation targets per toolchain release.

Usage:
    from goxtargets import supported_platforms, default_platforms

    targets = default_platforms(supported_platforms("go1.16.5"))
"""

from goxtargets.core import (
    GoxTargetsError,
    RegistryError,
    InvalidConstraintError,
    RegistryGapError,
    DuplicatePlatformError,
    InvalidVersionError,
    Platform,
    PlatformSet,
    remove_platforms,
    derive_platforms,
    default_platforms,
)
from goxtargets.cross import (
    VersionedRule,
    validate_rules,
    PLATFORMS_1_0,
    PLATFORMS_1_1,
    PLATFORMS_1_3,
    PLATFORMS_1_4,
    PLATFORMS_1_5,
    PLATFORMS_1_6,
    PLATFORMS_1_7,
    PLATFORMS_1_8,
    PLATFORMS_1_9,
    PLATFORMS_1_10,
    PLATFORMS_1_11,
    PLATFORMS_1_12,
    PLATFORMS_1_13,
    PLATFORMS_1_14,
    PLATFORMS_1_15,
    PLATFORMS_1_16,
    PLATFORMS_1_17,
    PLATFORMS_LATEST,
    RELEASES,
    VERSION_RULES,
    GO_VERSION_PREFIX,
    GoVersion,
    PlatformResolver,
    parse_go_version,
    supported_platforms,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "GoxTargetsError",
    "RegistryError",
    "InvalidConstraintError",
    "RegistryGapError",
    "DuplicatePlatformError",
    "InvalidVersionError",
    # Platform
    "Platform",
    "PlatformSet",
    "remove_platforms",
    "derive_platforms",
    "default_platforms",
    # Registry
    "VersionedRule",
    "validate_rules",
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
    # Resolver
    "GO_VERSION_PREFIX",
    "GoVersion",
    "PlatformResolver",
    "parse_go_version",
    "supported_platforms",
]
