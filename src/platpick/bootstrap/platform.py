"""Local platform detection for platpick.

Detects the OS, CPU and libc of the running interpreter and expresses them
as a Platform so locally installable variants can be selected.
"""

from __future__ import annotations

import os
import platform
from typing import Optional

from platpick.core.logging import get_logger
from platpick.platforms import Platform

LOGGER = get_logger(__name__)

# Environment variable to override the detected platform
PLATPICK_PLATFORM_ENV = "PLATPICK_PLATFORM"

# Supported operating systems (lowercase, as reported by platform.system())
SUPPORTED_OS = frozenset({"darwin", "linux", "windows"})

# CPU normalization map
_CPU_MAP = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
}


def normalize_cpu(machine: str, os_name: str = "linux") -> Optional[str]:
    """Normalize a CPU string to the name used in variant platforms.

    Args:
        machine: Raw architecture string from platform.machine().
        os_name: Detected OS; darwin calls 64-bit ARM ``arm64``.

    Returns:
        Normalized CPU name or None if unknown.
    """
    cpu = _CPU_MAP.get(machine.lower())
    if cpu == "aarch64" and os_name == "darwin":
        return "arm64"
    return cpu


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        Lowercase OS name (darwin, linux, windows).

    Raises:
        ValueError: If the OS is not supported.
    """
    system = platform.system().lower()
    if system not in SUPPORTED_OS:
        raise ValueError(
            f"Unsupported operating system: {platform.system()}. "
            f"Supported: {', '.join(sorted(SUPPORTED_OS))}"
        )
    return system


def detect_cpu(os_name: str = "linux") -> str:
    """Detect the current CPU architecture.

    Raises:
        ValueError: If the architecture is not supported.
    """
    machine = platform.machine()
    normalized = normalize_cpu(machine, os_name)
    if normalized is None:
        raise ValueError(f"Unsupported architecture: {machine}")
    return normalized


def _linux_version() -> Optional[str]:
    libc, _ = platform.libc_ver()
    if libc == "glibc":
        return None
    # libc_ver() reports nothing for musl
    return "musl"


def detect_platform() -> Platform:
    """Build a Platform from the running interpreter.

    Raises:
        ValueError: If the OS or CPU is not supported.
    """
    os_name = detect_os()
    cpu = detect_cpu(os_name)

    if os_name == "linux":
        return Platform(cpu=cpu, os="linux", version=_linux_version())
    if os_name == "darwin":
        major = platform.release().split(".")[0]
        return Platform(cpu=cpu, os="darwin", version=major or None)
    # 64-bit Windows builds target the UCRT runtime
    if cpu == "x86_64":
        return Platform(cpu="x64", os="mingw", version="ucrt")
    if cpu == "aarch64":
        return Platform(cpu="aarch64", os="mingw", version="ucrt")
    return Platform(cpu=cpu, os="mingw32", version=None)


def get_local_platform() -> Platform:
    """Return the local platform, honoring the PLATPICK_PLATFORM override.

    Raises:
        ValueError: If detection fails and no override is set.
    """
    override = os.environ.get(PLATPICK_PLATFORM_ENV)
    if override:
        LOGGER.debug(f"Using platform override from {PLATPICK_PLATFORM_ENV}: {override}")
        return Platform.parse(override)
    return detect_platform()
