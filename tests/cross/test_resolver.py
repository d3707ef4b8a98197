"""
Unit tests for Go version resolution.
"""

import logging

import pytest
from packaging.version import Version

import goxtargets
from goxtargets.core.exceptions import InvalidVersionError
from goxtargets.core.platform import Platform
from goxtargets.cross.resolver import (
    GoVersion,
    PlatformResolver,
    parse_go_version,
    supported_platforms,
)
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
)


class TestParseGoVersion:
    """Tests for parse_go_version()."""

    @pytest.mark.parametrize(
        "text,release,prerelease,build",
        [
            ("1.14", "1.14", "", ""),
            ("1.14.3", "1.14.3", "", ""),
            ("1.16beta1", "1.16", "beta1", ""),
            ("1.14.0-rc.1", "1.14.0", "rc.1", ""),
            ("1.14.0-rc1.1", "1.14.0", "rc1.1", ""),
            ("1.14.0-alpha.beta", "1.14.0", "alpha.beta", ""),
            ("1.14.0-x.7", "1.14.0", "x.7", ""),
            ("1.14.0-foo", "1.14.0", "foo", ""),
            ("1.14.0-1", "1.14.0", "1", ""),
            ("1.17+local", "1.17", "", "local"),
            ("1.17.2-rc.1+build.5", "1.17.2", "rc.1", "build.5"),
        ],
    )
    def test_valid(self, text, release, prerelease, build):
        """Test accepted version forms and their parts."""
        parsed = parse_go_version(text)

        assert parsed.release == Version(release)
        assert parsed.prerelease == prerelease
        assert parsed.build == build

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "BADVERSION",
            "1..2",
            "1.x",
            "-1",
            "1.14.post1",
            "1.14.dev0",
            " 1.14",
            "1.14\n",
            "1.14 ",
            "1.14+",
            "1.14-",
            "1.14.0-rc..1",
        ],
    )
    def test_invalid(self, text):
        """Test malformed versions raise InvalidVersionError."""
        with pytest.raises(InvalidVersionError):
            parse_go_version(text)

    def test_returns_go_version(self):
        """Test the parse result type."""
        assert isinstance(parse_go_version("1.14"), GoVersion)


class TestSupportedPlatforms:
    """Tests for supported_platforms()."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("go1.0", PLATFORMS_1_0),
            ("go1.1", PLATFORMS_1_1),
            ("go1.3", PLATFORMS_1_3),
            ("go1.4", PLATFORMS_1_4),
            ("go1.5", PLATFORMS_1_5),
            ("go1.6", PLATFORMS_1_6),
            ("go1.7", PLATFORMS_1_7),
            ("go1.8", PLATFORMS_1_8),
            ("go1.9", PLATFORMS_1_9),
            ("go1.10", PLATFORMS_1_10),
            ("go1.11", PLATFORMS_1_11),
            ("go1.12", PLATFORMS_1_12),
            ("go1.13", PLATFORMS_1_13),
            ("go1.14.0", PLATFORMS_1_14),
            ("go1.15.0", PLATFORMS_1_15),
            ("go1.16.0", PLATFORMS_1_16),
            ("go1.17.0", PLATFORMS_1_17),
        ],
    )
    def test_release_versions(self, version, expected):
        """Test each release resolves to its own set."""
        assert supported_platforms(version) is expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("go0.9", PLATFORMS_1_0),
            ("go1.0.5", PLATFORMS_1_0),
            ("go1.2", PLATFORMS_1_1),
            ("go1.2.2", PLATFORMS_1_1),
            ("go1.10.8", PLATFORMS_1_10),
            ("go1.14.15", PLATFORMS_1_14),
            ("go1.17.13", PLATFORMS_1_17),
        ],
    )
    def test_patch_and_intermediate_versions(self, version, expected):
        """Test versions between releases resolve to the enclosing range."""
        assert supported_platforms(version) is expected

    def test_alias_release(self):
        """Test 1.9 resolves to the same set as 1.8."""
        assert supported_platforms("go1.9.2") is supported_platforms("go1.8.5")
        assert supported_platforms("go1.9.2") == PLATFORMS_1_8

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("go1.16beta1", PLATFORMS_1_16),
            ("go1.14rc1", PLATFORMS_1_14),
            ("go1.15.0-rc.2", PLATFORMS_1_15),
            ("go1.11+custom", PLATFORMS_1_11),
            ("go1.14.0-rc1.1", PLATFORMS_1_14),
            ("go1.14.0-alpha.beta", PLATFORMS_1_14),
            ("go1.14.0-x.7", PLATFORMS_1_14),
            ("go1.14.0-foo", PLATFORMS_1_14),
        ],
    )
    def test_prerelease_and_build_suffixes(self, version, expected):
        """Test suffixes resolve to their release."""
        assert supported_platforms(version) is expected

    @pytest.mark.parametrize("version", ["1.14", "banana", "", "Go1.14", "devel go1.18"])
    def test_missing_prefix_returns_latest(self, version):
        """Test strings without the 'go' prefix fall back to latest."""
        assert supported_platforms(version) is PLATFORMS_LATEST

    @pytest.mark.parametrize(
        "version",
        [
            "goBADVERSION",
            "go",
            "go1..2",
            "go1.x",
            "go1.14.post1",
            "go1.14.dev0",
            "go 1.14",
            "go1.14\n",
        ],
    )
    def test_malformed_returns_latest(self, version):
        """Test unparseable versions fall back to latest without raising."""
        assert supported_platforms(version) is PLATFORMS_LATEST

    def test_malformed_logs_warning(self, caplog):
        """Test parse failures are logged."""
        with caplog.at_level(logging.WARNING, logger="goxtargets.cross.resolver"):
            supported_platforms("goBADVERSION")

        assert "Unable to parse go version 'BADVERSION'" in caplog.text

    def test_missing_prefix_does_not_warn(self, caplog):
        """Test unrecognized strings are not treated as errors."""
        with caplog.at_level(logging.WARNING, logger="goxtargets.cross.resolver"):
            supported_platforms("banana")

        assert caplog.records == []

    @pytest.mark.parametrize("version", ["go1.18", "go1.21.3", "go99.0.0", "go2"])
    def test_newer_than_table_returns_latest(self, version):
        """Test versions past the newest rule fall back to latest."""
        assert supported_platforms(version) is PLATFORMS_LATEST

    def test_exported_from_package(self):
        """Test the package root exposes the resolver entry point."""
        assert goxtargets.supported_platforms("go1.14") is PLATFORMS_1_14


class TestPlatformResolver:
    """Tests for PlatformResolver with injected tables."""

    def test_defaults(self):
        """Test the default resolver uses the built-in table."""
        resolver = PlatformResolver()

        assert resolver.prefix == "go"
        assert resolver.latest is PLATFORMS_LATEST
        assert resolver.resolve("go1.5.4") is PLATFORMS_1_5

    def test_custom_prefix(self, toy_resolver):
        """Test a resolver configured for another toolchain name."""
        assert toy_resolver.resolve("tinygo1.9") == (Platform("linux", "amd64"),)
        assert len(toy_resolver.resolve("tinygo2.1")) == 2

    def test_custom_prefix_rejects_go(self, toy_resolver):
        """Test the default prefix is not accepted by a custom resolver."""
        assert toy_resolver.resolve("go1.0") is toy_resolver.latest

    def test_past_table_returns_latest(self, toy_resolver):
        """Test fallback with an injected latest set."""
        assert toy_resolver.resolve("tinygo3.0") is toy_resolver.latest

    def test_find_rule(self):
        """Test rule lookup on parsed versions."""
        resolver = PlatformResolver()

        assert resolver.find_rule(Version("1.12.17")).constraint == ">=1.12,<1.13"
        assert resolver.find_rule(Version("1.18")) is None

    def test_first_match_wins(self):
        """Test rules are evaluated in order."""
        from goxtargets.cross.rules import VersionedRule

        first = (Platform("linux", "amd64"),)
        second = (Platform("linux", "arm"),)
        resolver = PlatformResolver(
            rules=[VersionedRule("<2.0", first), VersionedRule("<3.0", second)],
            latest=(),
        )

        assert resolver.resolve("go1.5") is first
        assert resolver.resolve("go2.5") is second
        assert resolver.resolve("go3.0") == ()

    def test_empty_rules(self):
        """Test a resolver without rules always returns latest."""
        resolver = PlatformResolver(rules=[], latest=PLATFORMS_1_0)

        assert resolver.resolve("go1.14") is PLATFORMS_1_0
