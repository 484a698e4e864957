"""Readers for the Android project files that shape the build."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from .errors import ManifestParseError

MANIFEST_FILE: Final[str] = "AndroidManifest.xml"
PROJECT_PROPERTIES_FILE: Final[str] = "project.properties"
CUSTOM_RULES_FILE: Final[str] = "custom_rules.xml"

_ACTIVITY_NAME_RE: Final[re.Pattern[str]] = re.compile(
    r'<activity[\s\S]*?android:name\s*=\s*"(.*?)"', re.IGNORECASE
)
_LIBRARY_REFERENCE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*android\.library\.reference\.\d+=(.*?)\s*$", re.MULTILINE
)


def has_custom_rules(project_root: Path) -> bool:
    """custom_rules.xml is required for incremental Ant builds."""
    return (project_root / CUSTOM_RULES_FILE).exists()


def extract_project_name_from_manifest(project_path: Path) -> str:
    """Return the name of the first activity declared in the manifest.

    Raises:
        ManifestParseError: If the manifest is unreadable or declares no
            activity name.
    """
    manifest_path = project_path / MANIFEST_FILE
    try:
        manifest_data = manifest_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestParseError(f"Failed to read manifest: {e}", str(manifest_path)) from e

    match = _ACTIVITY_NAME_RE.search(manifest_data)
    if not match:
        raise ManifestParseError("Could not find activity name", str(manifest_path))
    return match.group(1)


def extract_sub_project_paths(project_root: Path) -> list[str]:
    """Return library project paths referenced from project.properties.

    Paths are returned relative to ``project_root`` in first-seen order,
    without duplicates. A project without the file has no sub-projects.
    """
    properties_path = project_root / PROJECT_PROPERTIES_FILE
    if not properties_path.exists():
        return []

    data = properties_path.read_text(encoding="utf-8")
    # dict preserves order while deduplicating
    seen: dict[str, None] = {}
    for match in _LIBRARY_REFERENCE_RE.finditer(data):
        if match.group(1):
            seen.setdefault(match.group(1), None)
    return list(seen.keys())
