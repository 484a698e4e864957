"""Custom exceptions for the Android build shim."""

from __future__ import annotations


class AndroidBuildError(Exception):
    """Base exception for all build shim failures."""


class UnrecognizedOptionError(AndroidBuildError):
    """Raised when a build option token is not recognized."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Build option '{token}' not recognized.")


class BuildEnvironmentError(AndroidBuildError):
    """Raised when a required tool or SDK path cannot be discovered."""

    def __init__(self, message: str, tool: str | None = None) -> None:
        self.tool = tool
        full_message = message if not tool else f"[{tool}] {message}"
        super().__init__(full_message)


class BuildToolError(AndroidBuildError):
    """Raised when an external build tool exits with a non-zero status."""

    def __init__(self, tool: str, exit_code: int, output: str = "") -> None:
        self.tool = tool
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"Command '{tool}' failed with exit code {exit_code}")


class ArtifactNotFoundError(AndroidBuildError):
    """Raised when no APK matches the requested architecture and build type."""

    def __init__(self, architecture: str, build_type: str) -> None:
        self.architecture = architecture
        self.build_type = build_type
        super().__init__(
            f"Could not find apk architecture: {architecture} build-type: {build_type}"
        )


class ManifestParseError(AndroidBuildError):
    """Raised when expected metadata cannot be extracted from a manifest."""

    def __init__(self, message: str, manifest_path: str | None = None) -> None:
        self.manifest_path = manifest_path
        full_message = message if not manifest_path else f"[{manifest_path}] {message}"
        super().__init__(full_message)


class ConfigError(AndroidBuildError):
    """Raised when the build configuration file is invalid."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        full_message = message if not config_path else f"[{config_path}] {message}"
        super().__init__(full_message)
