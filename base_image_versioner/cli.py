#!/usr/bin/env python3

"""
Build Matrix Generator for Base Images

Simplified CLI using the Functional Core, Imperative Shell pattern.
All selection logic is in pure functions, all I/O is in the I/O layer and
the registry client.
"""

import logging
import os
import sys

from .config import apply_version_range, load_config
from .environment import EnvironmentConfig
from .exceptions import VersionerError
from .io_layer import IOLayer
from .pipeline import generate_matrix
from .registry import DockerHubClient
from .utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Main entry point - load configuration, generate matrix, set output."""
    env_config = EnvironmentConfig.from_env(os.environ)
    setup_logging(logging.DEBUG if env_config.debug else logging.INFO)

    try:
        # Step 1: Validate inputs
        errors = env_config.validate()
        if errors:
            for error in errors:
                print(f"::error::{error}")
            sys.exit(1)

        logger.info(f"Base image: {env_config.base_image}")
        logger.info(f"Config path: {env_config.config_path}")
        if env_config.version_range:
            logger.info(f"Version range: {env_config.version_range}")

        # Step 2: Load configuration and apply the override
        io_layer = IOLayer(env_config.output_path)
        config = load_config(env_config.config_path, io_layer)
        config = apply_version_range(config, env_config.version_range)

        # Step 3: Discover tags and build the matrix
        result = generate_matrix(env_config.base_image, config, DockerHubClient())

        # Step 4: Hand the matrix to the workflow
        io_layer.set_output("matrix", result.to_json())
        logger.info(f"Matrix: {result.to_json(indent=2)}")
    except VersionerError as e:
        print(f"::error::{e}")
        sys.exit(1)
    except Exception as e:
        print(f"::error::Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
