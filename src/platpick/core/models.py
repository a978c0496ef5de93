from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from packaging.specifiers import SpecifierSet
from packaging.utils import canonicalize_name

from platpick.platforms import PORTABLE, Platform


@dataclass(frozen=True, order=True)
class Dependency:
    """Runtime dependency of a variant.

    Ordering is by name, then by the normalized requirement string, so
    dependency lists can be sorted before comparing two variants.
    """

    name: str
    requirement: str = ""

    @classmethod
    def parse(cls, name: str, requirement: Optional[str] = None) -> "Dependency":
        """Create a dependency with a canonical name and requirement.

        Raises:
            packaging.specifiers.InvalidSpecifier: If the requirement is malformed.
        """
        return cls(
            name=canonicalize_name(name),
            requirement=str(SpecifierSet(requirement or "")),
        )

    def __str__(self) -> str:
        if self.requirement:
            return f"{self.name} ({self.requirement})"
        return self.name


@dataclass(frozen=True)
class Variant:
    """One pre-built variant of a package, tagged with the platform it targets.

    Variants are immutable. Forcing a variant onto the portable platform
    produces a new variant instead of mutating the one held by the caller.
    """

    name: str
    version: str
    platform: Platform = PORTABLE
    dependencies: Tuple[Dependency, ...] = ()
    required_runtime_version: SpecifierSet = field(default_factory=SpecifierSet)
    required_package_manager_version: SpecifierSet = field(default_factory=SpecifierSet)
    is_locked: bool = False
    installable: bool = True
    forced_generic: bool = False

    @property
    def full_name(self) -> str:
        """Human readable ``name-version[-platform]`` identifier."""
        if self.platform == PORTABLE:
            return f"{self.name}-{self.version}"
        return f"{self.name}-{self.version}-{self.platform}"

    @property
    def install_platform(self) -> Platform:
        """Platform the variant should be installed as."""
        if self.forced_generic:
            return PORTABLE
        return self.platform

    def force_generic(self) -> Optional["Variant"]:
        """Return a copy of this variant marked for installation as a portable build.

        Returns None if the variant cannot be installed as a portable build.
        """
        if self.forced_generic:
            return self
        return replace(self, forced_generic=True)

    def materialize_for_installation(self) -> Optional["Variant"]:
        """Return the installable form of this variant, or None if there is none."""
        if not self.installable:
            return None
        return self
