"""Shared utilities for the build shim."""

from .config import (
    BuildConfig,
    load_config_file,
    is_truthy,
)
from .naming import (
    architecture_of,
    has_marker,
    is_architecture_specific,
    is_debug_apk,
    is_release_apk,
    matches_architecture,
)
from .project_files import (
    extract_project_name_from_manifest,
    extract_sub_project_paths,
    has_custom_rules,
)
from .errors import (
    AndroidBuildError,
    ArtifactNotFoundError,
    BuildEnvironmentError,
    BuildToolError,
    ConfigError,
    ManifestParseError,
    UnrecognizedOptionError,
)

__all__ = [
    # Configuration
    "BuildConfig",
    "load_config_file",
    "is_truthy",
    # APK naming
    "architecture_of",
    "has_marker",
    "is_architecture_specific",
    "is_debug_apk",
    "is_release_apk",
    "matches_architecture",
    # Project files
    "extract_project_name_from_manifest",
    "extract_sub_project_paths",
    "has_custom_rules",
    # Errors
    "AndroidBuildError",
    "ArtifactNotFoundError",
    "BuildEnvironmentError",
    "BuildToolError",
    "ConfigError",
    "ManifestParseError",
    "UnrecognizedOptionError",
]
