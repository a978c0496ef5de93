"""Loading of variant manifests.

A manifest is a YAML document listing the variants available for
selection::

    variants:
      - name: nokogiri
        version: 1.16.0
        platform: x86_64-linux
        dependencies:
          - name: racc
            requirement: ">=1.4,<2"
        required_runtime_version: ">=3.0"
        locked: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from packaging.specifiers import InvalidSpecifier, SpecifierSet

from platpick.core.logging import get_logger
from platpick.core.models import Dependency, Variant
from platpick.platforms import Platform

LOGGER = get_logger(__name__)


class ManifestError(Exception):
    """Variant manifest loading or parsing error."""

    pass


def load_manifest(path: Path) -> List[Variant]:
    """Load variants from a YAML manifest file.

    Raises:
        ManifestError: If the file is missing, is not valid YAML, or
            contains malformed variant entries.
    """
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {path}: {e}") from e

    variants = parse_manifest(data, source=str(path))
    LOGGER.debug(f"Loaded {len(variants)} variants from {path}")
    return variants


def parse_manifest(data: Any, source: str = "<manifest>") -> List[Variant]:
    """Convert a parsed manifest document into variants."""
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a YAML mapping, got {type(data).__name__} in {source}")

    entries = data.get("variants", [])
    if not isinstance(entries, list):
        raise ManifestError(f"'variants' must be a list in {source}")

    variants = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ManifestError(f"Variant #{index} in {source} must be a mapping")
        try:
            variants.append(_parse_variant(entry))
        except (KeyError, ValueError, InvalidSpecifier) as e:
            raise ManifestError(f"Invalid variant #{index} in {source}: {e}") from e
    return variants


def _parse_variant(entry: Dict[str, Any]) -> Variant:
    for key in ("name", "version"):
        if key not in entry:
            raise KeyError(f"missing '{key}'")

    return Variant(
        name=str(entry["name"]),
        version=str(entry["version"]),
        platform=Platform.parse(entry.get("platform")),
        dependencies=_parse_dependencies(entry.get("dependencies") or []),
        required_runtime_version=SpecifierSet(entry.get("required_runtime_version") or ""),
        required_package_manager_version=SpecifierSet(
            entry.get("required_package_manager_version") or ""
        ),
        is_locked=bool(entry.get("locked", False)),
        installable=bool(entry.get("installable", True)),
    )


def _parse_dependencies(data: Any) -> Tuple[Dependency, ...]:
    if not isinstance(data, list):
        raise ValueError("'dependencies' must be a list")

    dependencies = []
    for item in data:
        if isinstance(item, dict):
            if "name" not in item:
                raise KeyError("dependency without 'name'")
            dependencies.append(Dependency.parse(str(item["name"]), item.get("requirement")))
        elif isinstance(item, str):
            # "racc >=1.4,<2" shorthand
            name, _, requirement = item.strip().partition(" ")
            dependencies.append(Dependency.parse(name, requirement.strip() or None))
        else:
            raise ValueError(f"unsupported dependency entry {item!r}")
    return tuple(dependencies)
