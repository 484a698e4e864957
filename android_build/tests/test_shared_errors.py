from android_build.shared.errors import (
    AndroidBuildError,
    ArtifactNotFoundError,
    BuildEnvironmentError,
    BuildToolError,
    ConfigError,
    ManifestParseError,
    UnrecognizedOptionError,
)


class TestUnrecognizedOptionError:
    def test_init(self):
        error = UnrecognizedOptionError("--foo")
        assert str(error) == "Build option '--foo' not recognized."
        assert error.token == "--foo"
        assert isinstance(error, AndroidBuildError)


class TestBuildEnvironmentError:
    def test_init_no_tool(self):
        error = BuildEnvironmentError("SDK missing")
        assert str(error) == "SDK missing"
        assert error.tool is None

    def test_init_with_tool(self):
        error = BuildEnvironmentError("not on PATH", "ant")
        assert str(error) == "[ant] not on PATH"
        assert error.tool == "ant"

    def test_does_not_shadow_builtin(self):
        assert not issubclass(BuildEnvironmentError, OSError)


class TestBuildToolError:
    def test_init(self):
        error = BuildToolError("ant", 2, "BUILD FAILED")
        assert str(error) == "Command 'ant' failed with exit code 2"
        assert error.exit_code == 2
        assert error.output == "BUILD FAILED"

    def test_default_output(self):
        assert BuildToolError("gradlew", 1).output == ""


class TestArtifactNotFoundError:
    def test_init(self):
        error = ArtifactNotFoundError("x86", "release")
        assert str(error) == "Could not find apk architecture: x86 build-type: release"
        assert error.architecture == "x86"
        assert error.build_type == "release"


class TestManifestParseError:
    def test_init_no_path(self):
        error = ManifestParseError("Could not find activity name")
        assert str(error) == "Could not find activity name"
        assert error.manifest_path is None

    def test_init_with_path(self):
        error = ManifestParseError("Could not find activity name", "AndroidManifest.xml")
        assert str(error) == "[AndroidManifest.xml] Could not find activity name"


class TestConfigError:
    def test_init_with_path(self):
        error = ConfigError("Invalid YAML", "android-build.yaml")
        assert str(error) == "[android-build.yaml] Invalid YAML"
        assert error.config_path == "android-build.yaml"
