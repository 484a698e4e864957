"""Build shim for Android platform projects (Ant / Gradle)."""

from .artifacts import find_output_apks, select_for_architecture
from .device import detect_architecture
from .options import BuildMethod, BuildRequest, BuildType, resolve_options
from .orchestrator import BuildResult, print_help, run_build, run_clean
from .shared.config import BuildConfig

__all__ = [
    "BuildConfig",
    "BuildMethod",
    "BuildRequest",
    "BuildResult",
    "BuildType",
    "detect_architecture",
    "find_output_apks",
    "print_help",
    "resolve_options",
    "run_build",
    "run_clean",
    "select_for_architecture",
]
