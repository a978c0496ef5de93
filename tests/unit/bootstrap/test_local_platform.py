"""Tests for local platform detection."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from platpick.bootstrap.platform import (
    PLATPICK_PLATFORM_ENV,
    detect_cpu,
    detect_os,
    detect_platform,
    get_local_platform,
    normalize_cpu,
)
from platpick.platforms import Platform


class TestDetectOS:
    """Tests for OS detection."""

    def test_detect_os_darwin(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert detect_os() == "darwin"

    def test_detect_os_linux(self) -> None:
        with patch("platform.system", return_value="Linux"):
            assert detect_os() == "linux"

    def test_detect_os_windows(self) -> None:
        with patch("platform.system", return_value="Windows"):
            assert detect_os() == "windows"

    def test_detect_os_unknown_raises(self) -> None:
        with patch("platform.system", return_value="UnknownOS"):
            with pytest.raises(ValueError, match="Unsupported operating system"):
                detect_os()


class TestDetectCpu:
    """Tests for CPU detection."""

    def test_detect_cpu_x86_64(self) -> None:
        with patch("platform.machine", return_value="x86_64"):
            assert detect_cpu() == "x86_64"

    def test_detect_cpu_amd64(self) -> None:
        with patch("platform.machine", return_value="AMD64"):
            assert detect_cpu("windows") == "x86_64"

    def test_detect_cpu_arm64_on_darwin(self) -> None:
        with patch("platform.machine", return_value="arm64"):
            assert detect_cpu("darwin") == "arm64"

    def test_detect_cpu_aarch64_on_linux(self) -> None:
        with patch("platform.machine", return_value="aarch64"):
            assert detect_cpu("linux") == "aarch64"

    def test_detect_cpu_unknown_raises(self) -> None:
        with patch("platform.machine", return_value="mips"):
            with pytest.raises(ValueError, match="Unsupported architecture"):
                detect_cpu()


class TestNormalizeCpu:
    """Tests for CPU normalization."""

    def test_normalize_i686(self) -> None:
        assert normalize_cpu("i686") == "x86"

    def test_normalize_armv7l(self) -> None:
        assert normalize_cpu("armv7l") == "arm"

    def test_normalize_unknown(self) -> None:
        assert normalize_cpu("unknown") is None


class TestDetectPlatform:
    """Tests for detect_platform."""

    def test_linux_glibc(self) -> None:
        with patch("platform.system", return_value="Linux"), \
                patch("platform.machine", return_value="x86_64"), \
                patch("platform.libc_ver", return_value=("glibc", "2.35")):
            assert detect_platform() == Platform("x86_64", "linux", None)

    def test_linux_musl(self) -> None:
        with patch("platform.system", return_value="Linux"), \
                patch("platform.machine", return_value="aarch64"), \
                patch("platform.libc_ver", return_value=("", "")):
            assert detect_platform() == Platform("aarch64", "linux", "musl")

    def test_darwin(self) -> None:
        with patch("platform.system", return_value="Darwin"), \
                patch("platform.machine", return_value="arm64"), \
                patch("platform.release", return_value="23.1.0"):
            assert detect_platform() == Platform.parse("arm64-darwin-23")

    def test_windows_64bit(self) -> None:
        with patch("platform.system", return_value="Windows"), \
                patch("platform.machine", return_value="AMD64"):
            assert detect_platform() == Platform.parse("x64-mingw-ucrt")

    def test_windows_arm64(self) -> None:
        with patch("platform.system", return_value="Windows"), \
                patch("platform.machine", return_value="ARM64"):
            assert detect_platform() == Platform.parse("aarch64-mingw-ucrt")

    def test_windows_32bit(self) -> None:
        with patch("platform.system", return_value="Windows"), \
                patch("platform.machine", return_value="x86"):
            assert detect_platform() == Platform.parse("x86-mingw32")


class TestGetLocalPlatform:
    """Tests for get_local_platform."""

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv(PLATPICK_PLATFORM_ENV, "java")
        assert get_local_platform() == Platform.parse("java")

    def test_detects_without_override(self, monkeypatch) -> None:
        monkeypatch.delenv(PLATPICK_PLATFORM_ENV, raising=False)
        with patch(
            "platpick.bootstrap.platform.detect_platform",
            return_value=Platform.parse("x86_64-linux"),
        ):
            assert get_local_platform() == Platform.parse("x86_64-linux")
