"""Requirement checks for the Ant and Gradle backends."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .shared.config import SDK_ENV_VAR, BuildConfig
from .shared.errors import BuildEnvironmentError


@dataclass
class ToolCheck:
    """Result of a tool availability check."""
    name: str
    command: str
    available: bool
    version: str = ""


def check_tool(name: str, command: str, version_flag: str = "--version") -> ToolCheck:
    """Check if a tool is available."""
    try:
        result = subprocess.run(
            [command, version_flag],
            capture_output=True,
            text=True,
            timeout=30,
        )
        if result.returncode == 0:
            # Extract first line of version output
            output = result.stdout.strip() or result.stderr.strip()
            version = output.split("\n")[0] if output else ""
            return ToolCheck(name, command, True, version)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        pass
    return ToolCheck(name, command, False)


def gradle_wrapper_dir(sdk_dir: Path) -> Path:
    """Location of the Gradle wrapper template shipped with the SDK."""
    return sdk_dir / "tools" / "templates" / "gradle" / "wrapper"


def check_android_sdk(config: BuildConfig, tool: str) -> Path:
    """Return the SDK directory, failing when it is unset or missing."""
    if config.sdk_dir is None:
        raise BuildEnvironmentError(
            f"{SDK_ENV_VAR} is not set and no sdk_dir is configured", tool
        )
    if not config.sdk_dir.is_dir():
        raise BuildEnvironmentError(
            f"Android SDK directory not found: {config.sdk_dir}", tool
        )
    return config.sdk_dir


def check_ant(config: BuildConfig) -> Path:
    """Ensure Ant and the Android SDK are available.

    Returns:
        The Android SDK directory.

    Raises:
        BuildEnvironmentError: If either cannot be found.
    """
    sdk_dir = check_android_sdk(config, "ant")
    result = check_tool("Apache Ant", "ant", version_flag="-version")
    if not result.available:
        raise BuildEnvironmentError(
            "Could not find ant. Please install it and add it to your PATH.", "ant"
        )
    return sdk_dir


def check_gradle(config: BuildConfig) -> Path:
    """Ensure the SDK ships the Gradle wrapper template.

    The build itself runs through the project's ``gradlew``, so no global
    Gradle install is needed.

    Returns:
        The Android SDK directory.

    Raises:
        BuildEnvironmentError: If the SDK or its wrapper template is missing.
    """
    sdk_dir = check_android_sdk(config, "gradle")
    wrapper_dir = gradle_wrapper_dir(sdk_dir)
    if not wrapper_dir.is_dir():
        raise BuildEnvironmentError(
            f"Could not find gradle wrapper within Android SDK: {wrapper_dir}",
            "gradle",
        )
    return sdk_dir
