"""Backend used with --nobuild: finds APKs that were built out-of-band."""

from __future__ import annotations

from pathlib import Path

from ..artifacts import sort_files_by_date
from ..options import BuildMethod, BuildType
from .ant import AntBackend
from .base import BuildBackend
from .gradle import GradleBackend


class NoBuildBackend(BuildBackend):
    method = BuildMethod.NONE

    def prepare_environment(self) -> None:
        """Nothing to prepare."""

    def build(self, build_type: BuildType) -> None:
        """Report that the build step is skipped."""
        print("Skipping build...")

    def clean(self) -> None:
        """Nothing to clean."""

    def find_output_apks(self, build_type: BuildType | None) -> list[Path]:
        """APKs from both the Ant and Gradle output directories."""
        # Best effort: whichever tool produced them, newest wins.
        found = AntBackend(self.config).find_output_apks(build_type)
        found += GradleBackend(self.config).find_output_apks(build_type)
        return sort_files_by_date(found)
