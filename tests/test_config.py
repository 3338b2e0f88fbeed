"""Tests for configuration normalization and the environment inputs."""

import logging

import pytest

from base_image_versioner.config import (
    DEFAULT_CONFIG_PATH,
    apply_version_range,
    default_config,
    load_config,
    parse_config,
)
from base_image_versioner.environment import EnvironmentConfig
from base_image_versioner.exceptions import ConfigError, InvalidStrategyError, MissingRangeError
from base_image_versioner.io_layer import IOLayer
from base_image_versioner.models import StrategyKind


class TestParseConfig:
    """Test parse_config defaults and validation."""

    def test_empty_document_uses_defaults(self):
        config = parse_config(None)
        assert config.strategy.kind == StrategyKind.LATEST
        assert len(config.builds) == 1
        assert config.builds[0].name == "default"
        assert config.builds[0].tags == ["{version}", "latest"]

    def test_semver_strategy(self):
        config = parse_config({"strategy": "semver", "semverRange": "^1|^2", "maxVersions": 3})
        assert config.strategy.kind == StrategyKind.SEMVER
        assert config.strategy.ranges == ("^1", "^2")
        assert config.strategy.range_expression == "^1 || ^2"
        assert config.strategy.max_versions == 3

    def test_semver_requires_range(self):
        with pytest.raises(MissingRangeError):
            parse_config({"strategy": "semver"})

    def test_invalid_strategy(self):
        with pytest.raises(InvalidStrategyError) as exc_info:
            parse_config({"strategy": "newest"})
        assert "Invalid strategy: newest" in str(exc_info.value)

    def test_max_versions_zero_means_no_cap(self):
        assert parse_config({"strategy": "all", "maxVersions": 0}).strategy.max_versions is None
        assert parse_config({"strategy": "all"}).strategy.max_versions is None

    def test_negative_max_versions_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"strategy": "all", "maxVersions": -1})

    def test_non_integer_max_versions_rejected(self):
        with pytest.raises(ConfigError):
            parse_config({"strategy": "all", "maxVersions": "5"})
        with pytest.raises(ConfigError):
            parse_config({"strategy": "all", "maxVersions": True})

    def test_build_defaults(self):
        """Test that unnamed builds are numbered and other fields defaulted."""
        config = parse_config({
            "builds": [
                {"name": "alpine", "dockerfilePath": "Dockerfile.alpine", "buildArgs": {"NODE_ENV": "production", "PORT": 4873}},
                {},
            ]
        })
        alpine, unnamed = config.builds
        assert alpine.dockerfile_path == "Dockerfile.alpine"
        assert alpine.build_args == {"NODE_ENV": "production", "PORT": "4873"}
        assert alpine.tags == ["{version}"]
        assert unnamed.name == "build-1"
        assert unnamed.dockerfile_path == "Dockerfile"
        assert unnamed.context_path == "."
        assert unnamed.build_args == {}

    def test_invalid_shapes(self):
        with pytest.raises(ConfigError):
            parse_config(["strategy", "all"])
        with pytest.raises(ConfigError):
            parse_config({"builds": {"name": "x"}})
        with pytest.raises(ConfigError):
            parse_config({"builds": [{"buildArgs": ["A=1"]}]})


class TestVersionRangeOverride:
    """Test the version-range input overriding the file strategy."""

    def test_no_override(self):
        config = default_config()
        assert apply_version_range(config, "") is config

    def test_latest_and_all(self):
        config = parse_config({"strategy": "semver", "semverRange": "^1", "maxVersions": 2})
        assert apply_version_range(config, "latest").strategy.kind == StrategyKind.LATEST
        overridden = apply_version_range(config, "all")
        assert overridden.strategy.kind == StrategyKind.ALL
        assert overridden.strategy.max_versions == 2

    def test_range_override(self):
        config = default_config()
        overridden = apply_version_range(config, "^1|^2")
        assert overridden.strategy.kind == StrategyKind.SEMVER
        assert overridden.strategy.range_expression == "^1 || ^2"
        assert overridden.builds == config.builds


class TestLoadConfig:
    """Test loading the configuration file."""

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(str(tmp_path / "missing.yml"), IOLayer())
        assert config == default_config()
        assert "using defaults" in caplog.text

    def test_loads_file(self, config_file):
        path = config_file({"strategy": "all", "builds": [{"name": "slim", "tags": ["{version}-slim"]}]})
        config = load_config(path, IOLayer())
        assert config.strategy.kind == StrategyKind.ALL
        assert config.builds[0].tags == ["{version}-slim"]

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("strategy: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path), IOLayer())
        assert str(path) in str(exc_info.value)


class TestEnvironmentConfig:
    """Test parsing of action inputs."""

    def test_from_env(self):
        config = EnvironmentConfig.from_env({
            "INPUT_BASE-IMAGE": " verdaccio/verdaccio ",
            "INPUT_VERSION-RANGE": "^5",
            "GITHUB_OUTPUT": "/tmp/output",
            "RUNNER_DEBUG": "1",
        })
        assert config.base_image == "verdaccio/verdaccio"
        assert config.config_path == DEFAULT_CONFIG_PATH
        assert config.version_range == "^5"
        assert config.output_path == "/tmp/output"
        assert config.debug
        assert config.validate() == []

    def test_base_image_required(self):
        config = EnvironmentConfig.from_env({})
        assert config.validate() == ["Input required and not supplied: base-image"]
