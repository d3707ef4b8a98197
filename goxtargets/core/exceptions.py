"""
Centralized exception hierarchy for goxtargets.

Errors in the static platform registry are fatal and surface when the
registry module is imported. Errors in caller-supplied version strings are
recoverable and are absorbed by the resolver.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GoxTargetsError(Exception):
    """Base exception for all goxtargets errors."""

    pass


# ============================================================================
# Registry Exceptions
# ============================================================================


class RegistryError(GoxTargetsError):
    """Base exception for errors in the built-in platform registry."""

    pass


class InvalidConstraintError(RegistryError):
    """Raised when a version rule carries a malformed constraint expression."""

    def __init__(self, constraint: str, reason: str = ""):
        self.constraint = constraint
        msg = f"Invalid version constraint: {constraint!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class RegistryGapError(RegistryError):
    """Raised when version rules leave a gap or overlap between releases."""

    pass


class DuplicatePlatformError(RegistryError):
    """Raised when a platform set would contain the same OS/arch twice."""

    def __init__(self, os: str, arch: str):
        self.os = os
        self.arch = arch
        super().__init__(f"Duplicate platform in set: {os}/{arch}")


# ============================================================================
# Version Exceptions
# ============================================================================


class InvalidVersionError(GoxTargetsError):
    """Invalid toolchain version string."""

    pass


__all__ = [
    "GoxTargetsError",
    "RegistryError",
    "InvalidConstraintError",
    "RegistryGapError",
    "DuplicatePlatformError",
    "InvalidVersionError",
]
