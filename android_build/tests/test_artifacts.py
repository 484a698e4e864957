import os
from pathlib import Path

import pytest

from android_build.artifacts import (
    ArtifactCandidate,
    find_apks,
    find_output_apks,
    keep_consistent_architecture,
    select_for_architecture,
    sort_files_by_date,
)
from android_build.options import BuildMethod, BuildType
from android_build.orchestrator import BuildResult
from android_build.shared.errors import ArtifactNotFoundError
from android_build.shared.naming import is_architecture_specific


def make_apk(directory: Path, name: str, mtime: float) -> Path:
    path = directory / name
    path.write_bytes(b"apk")
    os.utime(path, (mtime, mtime))
    return path


class TestFindApks:
    def test_only_apks_directly_inside(self, tmp_path):
        make_apk(tmp_path, "app-debug.apk", 100)
        (tmp_path / "output.json").write_text("{}")
        (tmp_path / "nested").mkdir()
        make_apk(tmp_path / "nested", "other-debug.apk", 100)

        assert [p.name for p in find_apks(tmp_path)] == ["app-debug.apk"]

    def test_missing_directory(self, tmp_path):
        assert list(find_apks(tmp_path / "missing")) == []


class TestSortFilesByDate:
    def test_newest_first(self, tmp_path):
        old = make_apk(tmp_path, "a-debug.apk", 100)
        new = make_apk(tmp_path, "zzzzzzzz-debug.apk", 200)

        assert sort_files_by_date([old, new]) == [new, old]

    def test_ties_prefer_shorter_path(self, tmp_path):
        long = make_apk(tmp_path, "app-debug-long.apk", 100)
        short = make_apk(tmp_path, "app-debug.apk", 100)

        assert sort_files_by_date([long, short]) == [short, long]

    def test_candidate_from_path(self, tmp_path):
        path = make_apk(tmp_path, "app-debug.apk", 123)
        candidate = ArtifactCandidate.from_path(path)
        assert candidate.path == path
        assert candidate.modified_time == 123


class TestFindOutputApks:
    def test_debug_excludes_unaligned(self, tmp_path):
        make_apk(tmp_path, "app-debug.apk", 100)
        make_apk(tmp_path, "app-debug-unaligned.apk", 200)

        result = find_output_apks(tmp_path, BuildType.DEBUG)
        assert [p.name for p in result] == ["app-debug.apk"]

    def test_debug_excludes_unsigned(self, tmp_path):
        make_apk(tmp_path, "app-debug-unsigned.apk", 200)
        assert find_output_apks(tmp_path, BuildType.DEBUG) == []

    def test_release_keeps_unsigned(self, tmp_path):
        make_apk(tmp_path, "app-release-unsigned.apk", 200)
        make_apk(tmp_path, "app-release-unaligned.apk", 300)
        make_apk(tmp_path, "app-debug.apk", 400)

        result = find_output_apks(tmp_path, BuildType.RELEASE)
        assert [p.name for p in result] == ["app-release-unsigned.apk"]

    def test_any_build_type(self, tmp_path):
        make_apk(tmp_path, "app-debug.apk", 100)
        make_apk(tmp_path, "app-release.apk", 200)

        result = find_output_apks(tmp_path, None)
        assert [p.name for p in result] == ["app-release.apk", "app-debug.apk"]

    def test_empty_directory(self, tmp_path):
        assert find_output_apks(tmp_path, BuildType.DEBUG) == []

    def test_missing_directory(self, tmp_path):
        assert find_output_apks(tmp_path / "bin", BuildType.DEBUG) == []

    def test_newest_split_apks_drop_universal(self, tmp_path):
        make_apk(tmp_path, "app-debug.apk", 50)
        make_apk(tmp_path, "app-x86-debug.apk", 200)
        make_apk(tmp_path, "app-armv7-debug.apk", 100)

        result = find_output_apks(tmp_path, BuildType.DEBUG)
        assert [p.name for p in result] == ["app-x86-debug.apk", "app-armv7-debug.apk"]

    def test_newest_universal_drops_split_apks(self, tmp_path):
        make_apk(tmp_path, "app-debug.apk", 300)
        make_apk(tmp_path, "app-x86-debug.apk", 200)

        result = find_output_apks(tmp_path, BuildType.DEBUG)
        assert [p.name for p in result] == ["app-debug.apk"]

    def test_project_named_alarm_is_universal(self, tmp_path):
        make_apk(tmp_path, "alarm-debug.apk", 300)
        make_apk(tmp_path, "alarm-x86-debug.apk", 200)

        result = find_output_apks(tmp_path, BuildType.DEBUG)
        assert [p.name for p in result] == ["alarm-debug.apk"]

    def test_repeated_scans_identical(self, tmp_path):
        for i, name in enumerate(["a-debug.apk", "bb-debug.apk", "c-x86-debug.apk"]):
            make_apk(tmp_path, name, 100 + (i % 2))

        assert find_output_apks(tmp_path, BuildType.DEBUG) == find_output_apks(
            tmp_path, BuildType.DEBUG
        )

    def test_never_mixed(self, tmp_path):
        names = [
            "app-debug.apk",
            "app-x86-debug.apk",
            "app-armv7-debug.apk",
            "app2-debug.apk",
        ]
        for i, name in enumerate(names):
            make_apk(tmp_path, name, 100 + i)

        result = find_output_apks(tmp_path, BuildType.DEBUG)
        assert result
        kinds = {is_architecture_specific(p) for p in result}
        assert kinds == {is_architecture_specific(result[0])}


class TestKeepConsistentArchitecture:
    def test_empty(self):
        assert keep_consistent_architecture([]) == []


def make_result(paths, build_type=BuildType.RELEASE):
    return BuildResult(
        apk_paths=tuple(Path(p) for p in paths),
        build_type=build_type,
        build_method=BuildMethod.GRADLE,
    )


class TestSelectForArchitecture:
    def test_picks_matching_split_apk(self, tmp_path):
        x86 = make_apk(tmp_path, "app-x86-release.apk", 50)
        arm = make_apk(tmp_path, "app-arm-release.apk", 10)
        result = make_result(find_output_apks(tmp_path, BuildType.RELEASE))

        assert result.apk_paths == (x86, arm)
        assert select_for_architecture(result, "arm") == arm
        assert select_for_architecture(result, "x86") == x86

    def test_arm_family_matches_armv7(self):
        result = make_result(["out/app-armv7-release.apk"])
        assert select_for_architecture(result, "arm") == Path("out/app-armv7-release.apk")

    def test_universal_accepted_for_any_architecture(self):
        result = make_result(["out/app-release.apk"])
        assert select_for_architecture(result, "x86") == Path("out/app-release.apk")

    def test_debug_build_ignores_release_apks(self):
        result = make_result(
            ["out/app-release.apk", "out/app-debug.apk"], build_type=BuildType.DEBUG
        )
        assert select_for_architecture(result, "arm") == Path("out/app-debug.apk")

    def test_release_build_ignores_debug_apks(self):
        result = make_result(["out/app-debug.apk"])
        with pytest.raises(ArtifactNotFoundError):
            select_for_architecture(result, "arm")

    def test_no_match(self):
        result = make_result(["out/app-x86-release.apk"])
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            select_for_architecture(result, "arm")
        assert exc_info.value.architecture == "arm"
        assert exc_info.value.build_type == "release"

    def test_empty_result(self):
        with pytest.raises(ArtifactNotFoundError):
            select_for_architecture(make_result([]), "x86")
