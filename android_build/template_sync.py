"""Idempotent synchronization of SDK-provided build files into the project.

Build files are copied in on every build so that the project does not need
the Android SDK at creation time and always uses the SDK's latest version of
them. Every function here overwrites unconditionally and is safe to re-run.
"""

from __future__ import annotations

import shutil
from functools import lru_cache
from pathlib import Path
from typing import Final, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .check_reqs import gradle_wrapper_dir
from .shared.errors import BuildEnvironmentError

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"
PROJECT_NAME_PLACEHOLDER: Final[str] = "PROJECT_NAME"


@lru_cache(maxsize=1)
def _template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def ant_build_template(sdk_dir: Path) -> Path:
    return sdk_dir / "tools" / "lib" / "build.template"


def render_local_properties(sdk_dir: Path | None = None) -> str:
    """Render the generated local.properties content."""
    template = _template_env().get_template("local.properties.j2")
    return template.render(sdk_dir=sdk_dir.as_posix() if sdk_dir else None)


def sync_ant_build_files(project_path: Path, project_name: str, sdk_dir: Path) -> None:
    """Write build.xml from the SDK template, and local.properties if missing."""
    if not project_path.is_dir():
        raise BuildEnvironmentError(f"Sub-project not found: {project_path}", "ant")

    template_path = ant_build_template(sdk_dir)
    try:
        build_template = template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise BuildEnvironmentError(
            f"Could not read Ant build template: {template_path}", "ant"
        ) from e

    build_xml = build_template.replace(PROJECT_NAME_PLACEHOLDER, project_name)
    (project_path / "build.xml").write_text(build_xml, encoding="utf-8")

    local_properties = project_path / "local.properties"
    if not local_properties.exists():
        local_properties.write_text(render_local_properties(sdk_dir), encoding="utf-8")


def sync_gradle_wrapper(project_path: Path, sdk_dir: Path, platform: str) -> None:
    """Copy gradlew and the gradle/wrapper directory from the SDK."""
    wrapper_dir = gradle_wrapper_dir(sdk_dir)
    script_name = "gradlew.bat" if platform == "win32" else "gradlew"
    script = wrapper_dir / script_name
    if not script.is_file():
        raise BuildEnvironmentError(f"Gradle wrapper script not found: {script}", "gradle")

    shutil.copy2(script, project_path / script_name)

    target_wrapper = project_path / "gradle" / "wrapper"
    shutil.rmtree(target_wrapper, ignore_errors=True)
    target_wrapper.parent.mkdir(parents=True, exist_ok=True)
    source_wrapper = wrapper_dir / "gradle" / "wrapper"
    if source_wrapper.is_dir():
        shutil.copytree(source_wrapper, target_wrapper)


def plugin_build_gradle(project_path: Path) -> Path:
    return project_path / "cordova" / "lib" / "plugin-build.gradle"


def sync_plugin_build_gradle(project_path: Path, sub_projects: Iterable[str]) -> None:
    """Update the build.gradle of each dependent library project."""
    sub_projects = list(sub_projects)
    if not sub_projects:
        return

    source = plugin_build_gradle(project_path)
    if not source.is_file():
        raise BuildEnvironmentError(f"Plugin build.gradle not found: {source}", "gradle")

    for sub_project in sub_projects:
        sub_project_path = project_path / sub_project
        if not sub_project_path.is_dir():
            raise BuildEnvironmentError(
                f"Sub-project not found: {sub_project_path}", "gradle"
            )
        shutil.copyfile(source, sub_project_path / "build.gradle")
