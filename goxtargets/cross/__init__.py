"""
Cross-compilation target tables for goxtargets.

This package provides the per-release Go platform sets and the resolver that
maps a Go version string to the right set.
"""

from goxtargets.cross.rules import VersionedRule, validate_rules
from goxtargets.cross.targets import (
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
)
from goxtargets.cross.resolver import (
    GO_VERSION_PREFIX,
    GoVersion,
    PlatformResolver,
    parse_go_version,
    supported_platforms,
)

__all__ = [
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
    "GO_VERSION_PREFIX",
    "GoVersion",
    "PlatformResolver",
    "parse_go_version",
    "supported_platforms",
]
