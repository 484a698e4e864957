from pathlib import Path

import pytest

from android_build.shared.config import BuildConfig

BUILD_TEMPLATE = '<project name="PROJECT_NAME" default="help"></project>\n'


@pytest.fixture
def android_sdk(tmp_path: Path) -> Path:
    """A minimal Android SDK layout with the templates the backends copy."""
    sdk = tmp_path / "sdk"
    (sdk / "tools" / "lib").mkdir(parents=True)
    (sdk / "tools" / "lib" / "build.template").write_text(BUILD_TEMPLATE)

    wrapper = sdk / "tools" / "templates" / "gradle" / "wrapper"
    (wrapper / "gradle" / "wrapper").mkdir(parents=True)
    (wrapper / "gradlew").write_text("#!/bin/sh\n")
    (wrapper / "gradlew.bat").write_text("@echo off\n")
    (wrapper / "gradle" / "wrapper" / "gradle-wrapper.properties").write_text(
        "distributionUrl=gradle-1.12-all.zip\n"
    )
    return sdk


@pytest.fixture
def android_project(tmp_path: Path) -> Path:
    """A Cordova-style Android platform directory with one library project."""
    project = tmp_path / "platforms" / "android"
    project.mkdir(parents=True)
    (project / "AndroidManifest.xml").write_text(
        '<manifest><application><activity android:name="HelloApp">'
        "</activity></application></manifest>"
    )
    (project / "project.properties").write_text(
        "target=android-19\nandroid.library.reference.1=CordovaLib\n"
    )
    (project / "CordovaLib").mkdir()
    (project / "cordova" / "lib").mkdir(parents=True)
    (project / "cordova" / "lib" / "plugin-build.gradle").write_text("// plugin build\n")
    return project


@pytest.fixture
def build_config(android_project: Path, android_sdk: Path) -> BuildConfig:
    return BuildConfig(
        project_root=android_project,
        sdk_dir=android_sdk,
        platform="linux",
    )
