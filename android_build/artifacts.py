"""Locating build outputs and picking the APK that fits a device."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from .options import BuildType
from .shared.errors import ArtifactNotFoundError
from .shared.naming import (
    APK_SUFFIX,
    DEBUG_MARKER,
    has_marker,
    is_architecture_specific,
    is_debug_apk,
    is_release_apk,
    matches_architecture,
)

if TYPE_CHECKING:
    from .orchestrator import BuildResult


@dataclass(frozen=True, slots=True)
class ArtifactCandidate:
    """An APK found during a scan."""

    path: Path
    modified_time: float

    @classmethod
    def from_path(cls, path: Path) -> ArtifactCandidate:
        return cls(path=path, modified_time=path.stat().st_mtime)

    def sort_key(self) -> tuple[float, int]:
        # Most recent first, then shorter (simpler) names
        return (-self.modified_time, len(str(self.path)))


def find_apks(directory: Path) -> Iterator[Path]:
    """Yield the APK files directly inside ``directory``."""
    if not directory.is_dir():
        return
    for path in directory.iterdir():
        if path.suffix == APK_SUFFIX and path.is_file():
            yield path


def sort_files_by_date(files: Iterable[Path]) -> list[Path]:
    """Sort newest first; equal timestamps put the shorter path first."""
    candidates = [ArtifactCandidate.from_path(p) for p in files]
    candidates.sort(key=ArtifactCandidate.sort_key)
    return [c.path for c in candidates]


def matches_build_type(path: Path, build_type: BuildType | None) -> bool:
    """Choose between release and debug APKs. ``None`` accepts any."""
    if build_type is BuildType.DEBUG:
        return is_debug_apk(path)
    if build_type is BuildType.RELEASE:
        return is_release_apk(path)
    return True


def keep_consistent_architecture(paths: list[Path]) -> list[Path]:
    """Never mix per-architecture split APKs with a universal APK.

    The most recent file decides which kind is kept.
    """
    if not paths:
        return paths
    arch_specific = is_architecture_specific(paths[0])
    return [p for p in paths if is_architecture_specific(p) == arch_specific]


def find_output_apks(directory: Path, build_type: BuildType | None = None) -> list[Path]:
    """Return the APKs in ``directory`` matching ``build_type``, newest first.

    An empty list means nothing was built there; it is not an error.
    """
    matching = [p for p in find_apks(directory) if matches_build_type(p, build_type)]
    return keep_consistent_architecture(sort_files_by_date(matching))


def select_for_architecture(build_result: BuildResult, architecture: str) -> Path:
    """Pick the best APK of a build for a device architecture.

    Split APKs must name the requested architecture; the first universal APK
    is accepted for any architecture.

    Raises:
        ArtifactNotFoundError: If no APK fits.
    """
    want_debug = build_result.build_type is BuildType.DEBUG
    paths = [
        p for p in build_result.apk_paths if has_marker(p, DEBUG_MARKER) == want_debug
    ]

    for path in paths:
        if not is_architecture_specific(path):
            return path
        if matches_architecture(path, architecture):
            return path

    raise ArtifactNotFoundError(architecture, str(build_result.build_type))
