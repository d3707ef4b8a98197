"""
Pytest configuration and shared fixtures for goxtargets tests.
"""

import pytest

from goxtargets.core.platform import Platform
from goxtargets.cross.resolver import PlatformResolver
from goxtargets.cross.rules import VersionedRule


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def sample_platforms():
    """Small platform set with a mix of default and non-default targets."""
    return (
        Platform("linux", "amd64", True),
        Platform("darwin", "arm64", True),
        Platform("android", "arm", False),
        Platform("plan9", "386", False),
    )


@pytest.fixture
def toy_resolver():
    """Resolver over a two-release table with a custom prefix."""
    old = (Platform("linux", "amd64", True),)
    new = old + (Platform("linux", "riscv64", True),)
    rules = [
        VersionedRule("<2.0", old),
        VersionedRule(">=2.0,<3.0", new),
    ]
    return PlatformResolver(rules=rules, latest=new, prefix="tinygo")
