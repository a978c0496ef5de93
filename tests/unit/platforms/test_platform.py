"""Tests for the Platform value type."""

from __future__ import annotations

import pytest

from platpick.platforms import (
    JAVA,
    MSWIN,
    MSWIN64,
    PORTABLE,
    UNIVERSAL_MINGW,
    Platform,
    platforms_match,
)


class TestParse:
    """Tests for Platform.parse."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("x86_64-linux", Platform("x86_64", "linux", None)),
            ("aarch64-linux-gnu", Platform("aarch64", "linux", "gnu")),
            ("x86_64-linux-musl", Platform("x86_64", "linux", "musl")),
            ("arm-linux-gnueabihf", Platform("arm", "linux", "gnueabihf")),
            ("arm64-darwin-21", Platform("arm64", "darwin", "21")),
            ("x86_64-darwin19", Platform("x86_64", "darwin", "19")),
            ("i686-linux", Platform("x86", "linux", None)),
            ("x64-mingw-ucrt", Platform("x64", "mingw", "ucrt")),
            ("x64-mingw32", Platform("x64", "mingw32", None)),
            ("universal-mingw", Platform("universal", "mingw", None)),
            ("java", Platform(None, "java", None)),
            ("jruby", Platform(None, "java", None)),
            ("mswin32", Platform("x86", "mswin32", None)),
            ("mswin64", Platform(None, "mswin64", None)),
            ("x86-mswin32_60", Platform("x86", "mswin32", "60")),
            ("sparc-solaris2.8", Platform("sparc", "solaris", "2.8")),
            ("x86_64-openbsd", Platform("x86_64", "openbsd", None)),
            ("wasm32-wasi", Platform("wasm32", "wasi", None)),
            ("x86_64-plan9", Platform("x86_64", "unknown", None)),
        ],
    )
    def test_parse_strings(self, text: str, expected: Platform) -> None:
        assert Platform.parse(text) == expected

    def test_any_is_portable(self) -> None:
        assert Platform.parse("any") is PORTABLE

    def test_empty_and_none_are_portable(self) -> None:
        assert Platform.parse("") is PORTABLE
        assert Platform.parse(None) is PORTABLE

    def test_platform_passes_through(self) -> None:
        platform = Platform("x86_64", "linux", None)
        assert Platform.parse(platform) is platform

    def test_parse_sequence(self) -> None:
        assert Platform.parse(["arm64", "darwin", "23"]) == Platform("arm64", "darwin", "23")
        assert Platform.parse(("x86_64", "linux")) == Platform("x86_64", "linux", None)

    def test_single_element_sequence_is_os(self) -> None:
        assert Platform.parse(["java"]) == JAVA
        assert Platform.parse(("mswin64",)) == MSWIN64

    def test_sequence_without_os_raises(self) -> None:
        with pytest.raises(ValueError, match="no OS"):
            Platform.parse(["x86_64", None, None])

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot interpret"):
            Platform.parse(42)  # type: ignore[arg-type]


class TestPlatformValue:
    """Tests for equality, hashing and rendering."""

    def test_structural_equality(self) -> None:
        assert Platform("x86_64", "linux", None) == Platform.parse("x86_64-linux")
        assert Platform("x86_64", "linux", None) != Platform("x86_64", "linux", "musl")

    def test_hashable(self) -> None:
        table = {Platform.parse("x86_64-linux"): "native"}
        assert table[Platform("x86_64", "linux", None)] == "native"

    def test_immutable(self) -> None:
        platform = Platform.parse("x86_64-linux")
        with pytest.raises(AttributeError):
            platform.os = "darwin"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Platform.parse("arm64-darwin-21")) == "arm64-darwin-21"
        assert str(JAVA) == "java"
        assert str(PORTABLE) == "any"


class TestMatches:
    """Tests for Platform.matches."""

    def test_same_platform_matches(self) -> None:
        platform = Platform.parse("x86_64-linux")
        assert platform.matches(platform)

    def test_different_cpu_does_not_match(self) -> None:
        assert not Platform.parse("x86_64-linux").matches(Platform.parse("aarch64-linux"))

    def test_different_os_does_not_match(self) -> None:
        assert not Platform.parse("x86_64-linux").matches(Platform.parse("x86_64-darwin"))

    def test_arm_matches_arm_sub_architectures(self) -> None:
        arm = Platform.parse("arm-linux")
        assert arm.matches(Platform.parse("armv7-linux"))
        assert arm.matches(Platform.parse("arm64-linux"))

    def test_nil_cpu_matches_any_cpu(self) -> None:
        assert Platform.parse("linux").matches(Platform.parse("x86_64-linux"))

    def test_universal_mingw_matches_ucrt(self) -> None:
        assert Platform.parse("x64-mingw-ucrt").matches(UNIVERSAL_MINGW)
        assert Platform.parse("x86-mingw32").matches(UNIVERSAL_MINGW)

    def test_unversioned_darwin_matches_versioned(self) -> None:
        assert Platform.parse("arm64-darwin").matches(Platform.parse("arm64-darwin-23"))
        assert not Platform.parse("arm64-darwin-22").matches(Platform.parse("arm64-darwin-23"))

    def test_linux_gnu_is_default_libc(self) -> None:
        assert Platform.parse("x86_64-linux").matches(Platform.parse("x86_64-linux-gnu"))

    def test_glibc_build_runs_on_musl(self) -> None:
        assert Platform.parse("x86_64-linux").matches(Platform.parse("x86_64-linux-musl"))

    def test_musl_build_does_not_run_on_glibc(self) -> None:
        assert not Platform.parse("x86_64-linux-musl").matches(Platform.parse("x86_64-linux"))

    def test_eabihf_suffix_is_ignored(self) -> None:
        assert Platform.parse("arm-linux-gnueabihf").matches(Platform.parse("arm-linux"))

    def test_mswin_markers(self) -> None:
        assert Platform.parse("i386-mswin32").matches(MSWIN)
        assert Platform.parse("x64-mswin64").matches(MSWIN64)

    def test_non_platform_never_matches(self) -> None:
        assert not Platform.parse("x86_64-linux").matches("x86_64-linux")  # type: ignore[arg-type]


class TestPlatformsMatch:
    """Tests for the selector's default compatibility predicate."""

    def test_portable_matches_everything(self) -> None:
        assert platforms_match(PORTABLE, Platform.parse("x86_64-linux"))
        assert platforms_match(PORTABLE, PORTABLE)

    def test_none_matches_everything(self) -> None:
        assert platforms_match(None, Platform.parse("x64-mingw-ucrt"))

    def test_native_does_not_match_portable_target(self) -> None:
        assert not platforms_match(Platform.parse("x86_64-linux"), PORTABLE)

    def test_delegates_to_matches(self) -> None:
        assert platforms_match(Platform.parse("arm-linux"), Platform.parse("arm64-linux"))
        assert not platforms_match(JAVA, Platform.parse("x86-mingw32"))
