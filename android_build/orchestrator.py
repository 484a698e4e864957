"""Build and clean orchestration.

Each request runs strictly in sequence: resolve options, prepare the
backend's environment, then build (or clean), then look for outputs. Any
failure aborts the request; nothing is retried.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Sequence

from .backends import BuildBackend, get_backend
from .options import BuildMethod, BuildRequest, BuildType, resolve_options
from .shared.config import BuildConfig

STAGING_DIR: Final[str] = "out"


class BuildState(Enum):
    UNPREPARED = "unprepared"
    ENVIRONMENT_READY = "environment_ready"
    BUILDING = "building"
    CLEANING = "cleaning"
    DONE = "done"


_TRANSITIONS: Final[dict[BuildState, frozenset[BuildState]]] = {
    BuildState.UNPREPARED: frozenset({BuildState.ENVIRONMENT_READY}),
    BuildState.ENVIRONMENT_READY: frozenset({BuildState.BUILDING, BuildState.CLEANING}),
    BuildState.BUILDING: frozenset({BuildState.DONE}),
    BuildState.CLEANING: frozenset({BuildState.DONE}),
    BuildState.DONE: frozenset(),
}


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a successful build."""

    apk_paths: tuple[Path, ...]
    build_type: BuildType
    build_method: BuildMethod


@dataclass
class BuildSession:
    """Tracks one request through its states."""

    request: BuildRequest
    backend: BuildBackend
    state: BuildState = BuildState.UNPREPARED
    history: list[BuildState] = field(default_factory=list)

    def advance(self, new_state: BuildState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(
                f"Invalid build state transition: {self.state.value} -> {new_state.value}"
            )
        self.history.append(self.state)
        self.state = new_state

    def prepare(self) -> None:
        self.backend.prepare_environment()
        self.advance(BuildState.ENVIRONMENT_READY)


def start_session(
    options: str | Sequence[str] | None,
    config: BuildConfig,
) -> BuildSession:
    """Resolve options and pick the backend. No side effects."""
    # BuildConfig.load already folded ANDROID_BUILD into the config.
    request = resolve_options(
        options, environ={}, fallback_method=config.default_build_method
    )
    return BuildSession(request, get_backend(request.build_method, config))


def report_apks(apk_paths: Sequence[Path]) -> None:
    print("Built the following apk(s):")
    print("    " + "\n    ".join(str(p) for p in apk_paths))


def run_build(
    options: str | Sequence[str] | None = None,
    config: BuildConfig | None = None,
) -> BuildResult:
    """Build the project with the specified options.

    Args:
        options: Build flags, e.g. ``["--release", "--gradle"]``.
        config: Project configuration. Loaded from the current directory
            and environment when omitted.

    Returns:
        The APKs found after the build, newest first.
    """
    config = config or BuildConfig.load()
    session = start_session(options, config)
    request = session.request

    session.prepare()
    session.advance(BuildState.BUILDING)
    session.backend.build(request.build_type)

    apk_paths = session.backend.find_output_apks(request.build_type)
    session.advance(BuildState.DONE)

    report_apks(apk_paths)
    return BuildResult(
        apk_paths=tuple(apk_paths),
        build_type=request.build_type,
        build_method=request.build_method,
    )


def run_clean(
    options: str | Sequence[str] | None = None,
    config: BuildConfig | None = None,
) -> None:
    """Clean the project with the specified options."""
    config = config or BuildConfig.load()
    session = start_session(options, config)

    session.prepare()
    session.advance(BuildState.CLEANING)
    session.backend.clean()

    shutil.rmtree(config.project_root / STAGING_DIR, ignore_errors=True)
    session.advance(BuildState.DONE)


def help_text(config: BuildConfig | None = None) -> str:
    root = config.project_root if config else Path.cwd()
    try:
        script = (root / "cordova" / "build").relative_to(Path.cwd())
    except ValueError:
        script = root / "cordova" / "build"
    return "\n".join(
        [
            f"Usage: {script} [build_type]",
            "Build Types : ",
            "    '--debug': Default build, will build project in debug mode",
            "    '--release': will build project for release",
            "    '--ant': Default build, will build project with ant",
            "    '--gradle': will build project with gradle",
            "    '--nobuild': will skip build process (can be used with run command)",
        ]
    )


def print_help(config: BuildConfig | None = None) -> None:
    print(help_text(config))
