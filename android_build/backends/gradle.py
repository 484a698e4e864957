"""Gradle backend for build.gradle projects."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..artifacts import find_output_apks
from ..check_reqs import check_gradle
from ..options import BuildMethod, BuildType
from ..process import spawn
from ..template_sync import sync_gradle_wrapper, sync_plugin_build_gradle
from .base import BuildBackend

# Lint tasks are skipped; excluding them takes a debug build from ~6s to ~1.6s.
LINT_TASKS: Final[tuple[str, ...]] = (
    "lint",
    "lintVitalRelease",
    "compileLint",
    "copyReleaseLint",
    "copyDebugLint",
)
MULTIPLE_APKS_LINT_TASKS: Final[tuple[str, ...]] = (
    "lint",
    "lintVitalX86Release",
    "lintVitalArmv7Release",
    "compileLint",
    "copyReleaseLint",
    "copyDebugLint",
)

_TASKS: Final[dict[str, str]] = {
    "debug": "assembleDebug",
    "release": "assembleRelease",
}


class GradleBackend(BuildBackend):
    method = BuildMethod.GRADLE

    @property
    def wrapper(self) -> Path:
        """Path to the platform's gradlew script."""
        name = "gradlew.bat" if self.config.platform == "win32" else "gradlew"
        return self.root / name

    def lint_tasks(self) -> tuple[str, ...]:
        """Lint tasks excluded from every Gradle run."""
        if self.config.build_multiple_apks:
            return MULTIPLE_APKS_LINT_TASKS
        return LINT_TASKS

    def get_args(self, command: str) -> list[str]:
        """Gradle arguments for ``debug``, ``release`` or a raw task name."""
        args = [_TASKS.get(command, command), "-b", str(self.root / "build.gradle")]
        # Daemon: 10 seconds -> 6 seconds
        args.append("-Dorg.gradle.daemon=true")
        for task in self.lint_tasks():
            args += ["-x", task]
        return args

    def prepare_environment(self) -> None:
        """Copy the wrapper and plugin build files into the project."""
        sdk_dir = check_gradle(self.config)

        sync_gradle_wrapper(self.root, sdk_dir, self.config.platform)
        sync_plugin_build_gradle(self.root, self.sub_projects())

    def build(self, build_type: BuildType) -> None:
        """Run the assemble task for ``build_type``."""
        spawn(self.wrapper, self.get_args(BuildType(build_type).value), cwd=self.root)

    def clean(self) -> None:
        """Run ``gradlew clean``."""
        spawn(self.wrapper, self.get_args("clean"), cwd=self.root)

    def output_dir(self) -> Path:
        """Where Gradle writes its APKs."""
        return self.root / "build" / "outputs" / "apk"

    def find_output_apks(self, build_type: BuildType | None) -> list[Path]:
        """APKs in the output directory, newest first."""
        return find_output_apks(self.output_dir(), build_type)
