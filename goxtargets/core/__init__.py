"""
Core types for goxtargets.

This package contains the platform value type and exception hierarchy that
the registry and resolver depend on.
"""

from .exceptions import (
    GoxTargetsError,
    RegistryError,
    InvalidConstraintError,
    RegistryGapError,
    DuplicatePlatformError,
    InvalidVersionError,
)

from .platform import (
    Platform,
    PlatformSet,
    remove_platforms,
    derive_platforms,
    default_platforms,
)

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
]
