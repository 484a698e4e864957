"""Ant backend for legacy build.xml projects."""

from __future__ import annotations

from pathlib import Path

from ..artifacts import find_output_apks
from ..check_reqs import check_ant
from ..options import BuildMethod, BuildType
from ..process import spawn
from ..shared.project_files import extract_project_name_from_manifest, has_custom_rules
from ..template_sync import sync_ant_build_files
from .base import BuildBackend

ANT_BUILD_DIR = "ant-build"
ANT_GEN_DIR = "ant-gen"


class AntBackend(BuildBackend):
    method = BuildMethod.ANT

    def get_args(self, command: str) -> list[str]:
        """Ant arguments for a target such as ``debug`` or ``clean``."""
        args = [command, "-f", str(self.root / "build.xml")]
        # custom_rules.xml is required for incremental builds.
        if has_custom_rules(self.root):
            args += [f"-Dout.dir={ANT_BUILD_DIR}", f"-Dgen.absolute.dir={ANT_GEN_DIR}"]
        return args

    def prepare_environment(self) -> None:
        """Check for Ant and write build.xml into every project."""
        sdk_dir = check_ant(self.config)

        # Every build.xml is named after the root project's activity
        project_name = extract_project_name_from_manifest(self.root)
        for project_path in [self.root, *(self.root / p for p in self.sub_projects())]:
            sync_ant_build_files(project_path, project_name, sdk_dir)

    def build(self, build_type: BuildType) -> None:
        """Run the Ant target for ``build_type``."""
        # Without our custom_rules.xml, we need to clean before building.
        if not has_custom_rules(self.root):
            self.clean()

        args = self.get_args(BuildType(build_type).value)
        check_ant(self.config)
        spawn("ant", args, cwd=self.root)

    def clean(self) -> None:
        """Run ``ant clean``."""
        args = self.get_args("clean")
        check_ant(self.config)
        spawn("ant", args, cwd=self.root)

    def output_dir(self) -> Path:
        """Where Ant writes its APKs."""
        return self.root / (ANT_BUILD_DIR if has_custom_rules(self.root) else "bin")

    def find_output_apks(self, build_type: BuildType | None) -> list[Path]:
        """APKs in the output directory, newest first."""
        return find_output_apks(self.output_dir(), build_type)
