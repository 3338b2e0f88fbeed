"""Test fixtures for Base Image Versioner.

This module provides shared fixtures used across multiple test modules.

Fixtures:
    make_tag: Factory for Tag objects with optional ISO timestamps
    verdaccio_tags: A realistic tag list mixing versions and named tags
    config_file: Writes a configuration YAML file into a temporary directory
"""

import pytest
import yaml

from base_image_versioner.models import Tag, parse_timestamp


@pytest.fixture
def make_tag():
    """Factory creating a Tag from a name and an optional ISO timestamp."""
    def _make_tag(name, last_updated=None):
        return Tag(name=name, last_updated=parse_timestamp(last_updated))
    return _make_tag


@pytest.fixture
def verdaccio_tags(make_tag):
    """Tags in the order Docker Hub returns them (newest first)."""
    return [
        make_tag("latest", "2024-06-10T08:00:00Z"),
        make_tag("2.0.0", "2024-06-01T08:00:00Z"),
        make_tag("1.5.0", "2024-03-01T08:00:00Z"),
        make_tag("nightly-master", "2024-02-15T08:00:00Z"),
        make_tag("v1.2", "2024-02-01T08:00:00Z"),
        make_tag("1.0.0", "2024-01-01T08:00:00Z"),
    ]


@pytest.fixture
def config_file(tmp_path):
    """Writes a configuration document and returns its path.

    Args:
        tmp_path (Path): Built-in pytest fixture providing a temporary directory path

    Returns:
        callable: Takes the configuration dict, returns the file path as str
    """
    def _write(data):
        path = tmp_path / ".github" / "base-image-versioner.yml"
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            yaml.dump(data, f)
        return str(path)
    return _write
