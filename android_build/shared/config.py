"""Build configuration loaded from an optional YAML file and the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Mapping

import yaml

from .errors import ConfigError

CONFIG_FILE_NAME: Final[str] = "android-build.yaml"

# Environment overrides
SDK_ENV_VAR: Final[str] = "ANDROID_HOME"
BUILD_METHOD_ENV_VAR: Final[str] = "ANDROID_BUILD"
MULTIPLE_APKS_ENV_VAR: Final[str] = "BUILD_MULTIPLE_APKS"

DEFAULT_BUILD_METHOD: Final[str] = "ant"

_FALSE_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


def is_truthy(value: Any) -> bool:
    """Interpret a boolean-like config or environment value."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Resolved settings shared by every backend for one process run."""

    project_root: Path
    sdk_dir: Path | None = None
    default_build_method: str = DEFAULT_BUILD_METHOD
    build_multiple_apks: bool = False
    platform: str = sys.platform

    @classmethod
    def load(
        cls,
        project_root: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> BuildConfig:
        """Load configuration for a project.

        Values from ``android-build.yaml`` in the project root are applied
        first; environment variables override them.

        Args:
            project_root: The Android project directory. Defaults to the
                current working directory.
            environ: Environment mapping. Defaults to ``os.environ``.

        Raises:
            ConfigError: If the YAML file exists but is malformed.
        """
        root = (project_root or Path.cwd()).resolve()
        env = os.environ if environ is None else environ
        data = load_config_file(root / CONFIG_FILE_NAME)

        sdk_dir = env.get(SDK_ENV_VAR) or data.get("sdk_dir")
        build_method = env.get(BUILD_METHOD_ENV_VAR) or data.get(
            "build_method", DEFAULT_BUILD_METHOD
        )
        if MULTIPLE_APKS_ENV_VAR in env:
            multiple_apks = is_truthy(env[MULTIPLE_APKS_ENV_VAR])
        else:
            multiple_apks = is_truthy(data.get("build_multiple_apks", False))

        return cls(
            project_root=root,
            sdk_dir=Path(sdk_dir).expanduser() if sdk_dir else None,
            default_build_method=str(build_method),
            build_multiple_apks=multiple_apks,
        )


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML config file, returning ``{}`` when absent."""
    if not config_path.is_file():
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    return data
