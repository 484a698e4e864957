"""Common interface of the build backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from ..options import BuildMethod, BuildType
from ..shared.config import BuildConfig
from ..shared.project_files import extract_sub_project_paths


class BuildBackend(ABC):
    """A build method: Ant, Gradle, or none.

    Backends hold nothing but the configuration of the project they build.
    """

    method: ClassVar[BuildMethod]

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def root(self) -> Path:
        return self.config.project_root

    def sub_projects(self) -> list[str]:
        return extract_sub_project_paths(self.root)

    @abstractmethod
    def prepare_environment(self) -> None:
        """Check requirements and sync tool-specific files into the project."""

    @abstractmethod
    def build(self, build_type: BuildType) -> None:
        """Run the external build tool."""

    @abstractmethod
    def clean(self) -> None:
        """Run the external tool's clean target."""

    @abstractmethod
    def find_output_apks(self, build_type: BuildType | None) -> list[Path]:
        """Return this backend's APK outputs, newest first."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self.root)!r})"
