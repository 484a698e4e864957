"""APK file name classification.

Gradle and Ant name their outputs ``<project>-<variant>...-<buildtype>.apk``,
for example ``android-armv7-debug.apk`` or ``CordovaApp-release-unsigned.apk``.
Markers are matched against whole ``-``-separated segments of the file stem,
never as substrings, so a project called ``alarm`` is not mistaken for an
ARM build.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

APK_SUFFIX: Final[str] = ".apk"

DEBUG_MARKER: Final[str] = "debug"
RELEASE_MARKER: Final[str] = "release"
UNALIGNED_MARKER: Final[str] = "unaligned"
UNSIGNED_MARKER: Final[str] = "unsigned"

# Architecture families; a segment starting with one of these names the
# target processor (x86, x86_64, arm, armv7, arm64, armeabi...).
ARCHITECTURE_MARKERS: Final[tuple[str, ...]] = ("x86", "arm")


@lru_cache(maxsize=512)
def name_segments(file_name: str) -> tuple[str, ...]:
    """Return the marker-bearing segments of an APK file name.

    The first segment is the project name and never carries a marker.

    >>> name_segments("app-x86-debug-unaligned.apk")
    ('x86', 'debug', 'unaligned')
    """
    stem = file_name
    if stem.lower().endswith(APK_SUFFIX):
        stem = stem[: -len(APK_SUFFIX)]
    return tuple(part.lower() for part in stem.split("-")[1:])


def _segments(path: Path | str) -> tuple[str, ...]:
    return name_segments(Path(path).name)


def has_marker(path: Path | str, marker: str) -> bool:
    """Check whether the file name carries ``marker`` as a whole segment."""
    return marker.lower() in _segments(path)


def architecture_of(path: Path | str) -> str | None:
    """Return the architecture segment of an APK name, if it has one."""
    for segment in _segments(path):
        if segment.startswith(ARCHITECTURE_MARKERS):
            return segment
    return None


def is_architecture_specific(path: Path | str) -> bool:
    """True for split outputs, False for universal APKs."""
    return architecture_of(path) is not None


def matches_architecture(path: Path | str, architecture: str) -> bool:
    """Check whether an APK was built for the given architecture family."""
    arch = architecture_of(path)
    return arch is not None and arch.startswith(architecture.lower())


def is_debug_apk(path: Path | str) -> bool:
    """A signed, aligned debug APK."""
    return has_marker(path, DEBUG_MARKER) and not (
        has_marker(path, UNALIGNED_MARKER) or has_marker(path, UNSIGNED_MARKER)
    )


def is_release_apk(path: Path | str) -> bool:
    """An aligned release APK (signed or not)."""
    return has_marker(path, RELEASE_MARKER) and not has_marker(path, UNALIGNED_MARKER)
