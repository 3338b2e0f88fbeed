"""
Configuration Module for Base Image Versioner

This module contains the constants used throughout the application and the
normalization boundary for the YAML configuration file. The raw document is
turned into a strict VersionerConfig exactly once, with every default
applied, before any selection logic runs.

Constants:
    DOCKER_HUB_URL: Base URL of the Docker Hub API
    IMPLICIT_NAMESPACE: Namespace used for official images without a '/'
    PAGE_SIZE: Number of tags requested per page
    MAX_PAGES: Safety limit on the number of pages fetched
    MAX_RETRIES: Retry attempts per page on transient failures
    DEFAULT_CONFIG_PATH: Configuration file used when no path is given

Functions:
    default_config: Configuration used when no file exists
    parse_config: Validate and normalize a raw configuration mapping
    apply_version_range: Apply the version-range invocation override
    load_config: Read and normalize the configuration file
"""

import logging
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigError, InvalidStrategyError
from .models import (
    VERSION_PLACEHOLDER,
    BuildConfig,
    Strategy,
    StrategyKind,
    VersionerConfig,
)

logger = logging.getLogger(__name__)

# Constants
DOCKER_HUB_URL = "https://hub.docker.com"
IMPLICIT_NAMESPACE = "library"
PAGE_SIZE = 100
MAX_PAGES = 100
MAX_RETRIES = 3
REQUEST_TIMEOUT = 30
USER_AGENT = "base-image-versioner"
DEFAULT_CONFIG_PATH = ".github/base-image-versioner.yml"


def default_builds() -> List[BuildConfig]:
    return [BuildConfig(name="default", tags=[VERSION_PLACEHOLDER, "latest"])]


def default_config() -> VersionerConfig:
    """Configuration used when no configuration file exists."""
    return VersionerConfig(strategy=Strategy.latest(), builds=default_builds())


def _parse_max_versions(value: Any) -> Optional[int]:
    """Missing or zero means no cap; negative values are rejected."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"maxVersions must be an integer, got: {value!r}")
    if value < 0:
        raise ConfigError("maxVersions must be greater than 0")
    return value or None


def _parse_strategy(raw: Dict[str, Any]) -> Strategy:
    name = raw.get("strategy") or StrategyKind.LATEST.value
    try:
        kind = StrategyKind(name)
    except (ValueError, TypeError):
        raise InvalidStrategyError(name)

    max_versions = _parse_max_versions(raw.get("maxVersions"))

    if kind == StrategyKind.LATEST:
        return Strategy.latest()
    if kind == StrategyKind.ALL:
        return Strategy.all(max_versions)
    return Strategy.semver_range(raw.get("semverRange"), max_versions)


def _parse_build(raw: Any, index: int) -> BuildConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"builds[{index}] must be a mapping")

    build_args = raw.get("buildArgs") or {}
    if not isinstance(build_args, dict):
        raise ConfigError(f"builds[{index}].buildArgs must be a mapping")

    tags = raw.get("tags") or [VERSION_PLACEHOLDER]
    if isinstance(tags, str):
        tags = [tags]

    return BuildConfig(
        name=str(raw.get("name") or f"build-{index}"),
        dockerfile_path=str(raw.get("dockerfilePath") or "Dockerfile"),
        context_path=str(raw.get("contextPath") or "."),
        build_args={str(k): str(v) for k, v in build_args.items()},
        tags=[str(tag) for tag in tags],
    )


def parse_config(raw: Optional[Dict[str, Any]]) -> VersionerConfig:
    """Validate a raw configuration mapping and apply defaults.

    Args:
        raw: Parsed YAML document (None is treated as an empty document)

    Returns:
        VersionerConfig with every field populated

    Raises:
        InvalidStrategyError: Unknown strategy name
        MissingRangeError: semver strategy without semverRange
        ConfigError: Any other invalid value
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Configuration must be a mapping")

    strategy = _parse_strategy(raw)

    builds_raw = raw.get("builds") or []
    if not isinstance(builds_raw, list):
        raise ConfigError("builds must be a list")

    builds = [_parse_build(build, i) for i, build in enumerate(builds_raw)]
    if not builds:
        builds = default_builds()

    return VersionerConfig(strategy=strategy, builds=builds)


def apply_version_range(config: VersionerConfig, version_range: Optional[str]) -> VersionerConfig:
    """Override the configured strategy with the version-range input.

    'latest' and 'all' select those strategies; anything else is treated as
    a semver range, pipe-delimited alternatives included. The configured
    maxVersions cap is kept.
    """
    if not version_range or not version_range.strip():
        return config

    version_range = version_range.strip()
    max_versions = config.strategy.max_versions

    if version_range == StrategyKind.LATEST.value:
        strategy = Strategy.latest()
    elif version_range == StrategyKind.ALL.value:
        strategy = Strategy.all(max_versions)
    else:
        strategy = Strategy.semver_range(version_range, max_versions)

    logger.info(
        f"Version range override applied: {version_range} (strategy: {strategy.kind.value})"
    )
    return VersionerConfig(strategy=strategy, builds=config.builds)


def load_config(path: str, io_layer) -> VersionerConfig:
    """Load and normalize the configuration file.

    A missing file is not an error: the default configuration is used.

    Raises:
        ConfigError: If the file cannot be parsed or is invalid
    """
    logger.info(f"Loading configuration from: {path}")

    if not io_layer.file_exists(path):
        logger.warning(f"Configuration file not found at {path}, using defaults")
        return default_config()

    try:
        raw = io_layer.read_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load configuration from {path}: {e}") from e

    return parse_config(raw)
