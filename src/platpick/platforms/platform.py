"""Platform descriptors for pre-built package variants.

A platform is a ``cpu-os[-version]`` triple such as ``x86_64-linux``,
``arm64-darwin-23`` or ``x64-mingw-ucrt``. The distinguished ``PORTABLE``
platform (rendered ``any``) marks builds that carry no native code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

PORTABLE_NAME = "any"

# Version-like trailing segment, e.g. the "21" in "arm64-darwin-21"
_VERSION_SEGMENT = re.compile(r"\d+(\.\d+)?$")
_COMMAND_LINE_VERSION = re.compile(r"^\d+(\.\d+)?$")
_LEGACY_X86_CPU = re.compile(r"i\d86")

# Ordered OS patterns; the first match wins. Each entry maps the raw OS
# segment to (os, version group). An os of None takes the name from group 1.
_OS_PATTERNS: Tuple[Tuple[re.Pattern[str], Optional[str], Optional[int]], ...] = (
    (re.compile(r"aix(\d+)?"), "aix", 1),
    (re.compile(r"cygwin"), "cygwin", None),
    (re.compile(r"darwin(\d+)?"), "darwin", 1),
    (re.compile(r"^macruby$"), "macruby", None),
    (re.compile(r"freebsd(\d+)?"), "freebsd", 1),
    (re.compile(r"^(java|jruby)$"), "java", None),
    (re.compile(r"^java([\d.]*)"), "java", 1),
    (re.compile(r"^dalvik(\d+)?$"), "dalvik", 1),
    (re.compile(r"^dotnet$"), "dotnet", None),
    (re.compile(r"^dotnet([\d.]*)"), "dotnet", 1),
    (re.compile(r"linux-?(\w+)?"), "linux", 1),
    (re.compile(r"mingw32"), "mingw32", None),
    (re.compile(r"mingw-?(\w+)?"), "mingw", 1),
    (re.compile(r"(mswin\d+)(_(\d+))?"), None, 3),
    (re.compile(r"netbsdelf"), "netbsdelf", None),
    (re.compile(r"openbsd(\d+\.\d+)?"), "openbsd", 1),
    (re.compile(r"solaris(\d+\.\d+)?"), "solaris", 1),
    (re.compile(r"wasi"), "wasi", None),
)
_TEST_PLATFORM_PATTERN = re.compile(r"^(\w+_platform)(\d+)?")

PlatformLike = Union["Platform", str, Sequence[Optional[str]], None]


@dataclass(frozen=True)
class Platform:
    """An immutable platform descriptor.

    Attributes:
        cpu: CPU architecture, ``universal`` or None for any CPU.
        os: Operating system family.
        version: OS or ABI version, or None when unspecified.
    """

    cpu: Optional[str]
    os: str
    version: Optional[str] = None

    def __str__(self) -> str:
        return "-".join(part for part in (self.cpu, self.os, self.version) if part)

    @classmethod
    def parse(cls, value: PlatformLike) -> "Platform":
        """Build a Platform from a string, a sequence or another Platform.

        Args:
            value: ``"x86_64-linux"``, ``["x86_64", "linux", None]``, a
                Platform, or None/""/"any" for the portable platform.

        Returns:
            The parsed Platform.

        Raises:
            ValueError: If the value cannot be interpreted as a platform.
        """
        if isinstance(value, Platform):
            return value
        if value is None:
            return PORTABLE
        if isinstance(value, str):
            return _parse_string(value)
        if isinstance(value, (list, tuple)) and 1 <= len(value) <= 3:
            if len(value) == 1:
                # A lone token names the OS, as in "java" or "mswin64"
                cpu, os_name, version = None, value[0], None
            else:
                cpu, os_name, version = (list(value) + [None])[:3]
            if not os_name:
                raise ValueError(f"Platform sequence has no OS: {value!r}")
            return cls(cpu=cpu, os=os_name, version=version)
        raise ValueError(f"Cannot interpret {value!r} as a platform")

    def matches(self, other: "Platform") -> bool:
        """Return True if a build for this platform can run on ``other``."""
        if not isinstance(other, Platform):
            return False

        # universal-mingw matches x64-mingw-ucrt and friends
        if (
            (self.cpu == "universal" or other.cpu == "universal")
            and self.os.startswith("mingw")
            and other.os.startswith("mingw")
        ):
            return True

        return (
            self._cpu_matches(other)
            and self.os == other.os
            and self._version_matches(other)
        )

    def _cpu_matches(self, other: "Platform") -> bool:
        wildcards = (None, "universal")
        return (
            self.cpu in wildcards
            or other.cpu in wildcards
            or self.cpu == other.cpu
            or (self.cpu == "arm" and (other.cpu or "").startswith("arm"))
        )

    def _version_matches(self, other: "Platform") -> bool:
        if self.os != "linux":
            return self.version is None or other.version is None or self.version == other.version

        if self.normalized_linux_version == other.normalized_linux_version:
            return True
        suffix = self.version or ""
        return other.version in (f"musl{suffix}", f"musleabi{suffix}", f"musleabihf{suffix}")

    @property
    def normalized_linux_version(self) -> Optional[str]:
        """Linux libc/ABI version without ``gnu`` prefix or ``eabi``/``eabihf`` suffix."""
        if self.version is None:
            return None
        stripped = re.sub(r"eabi(hf)?$", "", re.sub(r"^gnu", "", self.version))
        return stripped or None


def _parse_string(text: str) -> Platform:
    text = text.strip()
    if text in ("", PORTABLE_NAME):
        return PORTABLE

    parts = text.split("-")
    # Reassemble cpu-os-libc strings such as x86_64-linux-gnu
    if len(parts) > 2 and not _VERSION_SEGMENT.search(parts[-1]):
        extra = parts.pop()
        parts[-1] = f"{parts[-1]}-{extra}"

    cpu: Optional[str] = parts.pop(0)
    if cpu is not None and _LEGACY_X86_CPU.search(cpu):
        cpu = "x86"

    if len(parts) == 2 and _COMMAND_LINE_VERSION.match(parts[1]):
        return Platform(cpu=cpu, os=parts[0], version=parts[1])

    if parts:
        raw_os = parts[0]
    else:
        # Single token such as "java" or "mswin64"
        raw_os = text
        cpu = None

    for pattern, os_name, group in _OS_PATTERNS:
        found = pattern.search(raw_os)
        if not found:
            continue
        version = found.group(group) if group is not None else None
        if os_name is None:
            # mswin32 builds are always 32-bit x86
            os_name = found.group(1)
            if cpu is None and os_name.endswith("32"):
                cpu = "x86"
        return Platform(cpu=cpu, os=os_name, version=version or None)

    test_platform = _TEST_PLATFORM_PATTERN.search(raw_os)
    if test_platform:
        return Platform(cpu=cpu, os=test_platform.group(1), version=test_platform.group(2))

    return Platform(cpu=cpu, os="unknown", version=None)


PORTABLE = Platform(cpu=None, os=PORTABLE_NAME, version=None)

JAVA = Platform(cpu=None, os="java", version=None)
MSWIN = Platform(cpu="x86", os="mswin32", version=None)
MSWIN64 = Platform(cpu=None, os="mswin64", version=None)
UNIVERSAL_MINGW = Platform(cpu="universal", os="mingw", version=None)
WINDOWS: Tuple[Platform, ...] = (MSWIN, MSWIN64, UNIVERSAL_MINGW)


def platforms_match(declared: Optional[Platform], target: Platform) -> bool:
    """Decide whether a variant declared for ``declared`` is usable on ``target``.

    Portable (or undeclared) variants are usable everywhere.
    """
    if declared is None or declared == PORTABLE or declared == target:
        return True
    return declared.matches(target)
