"""
Environment Configuration Module

Handles parsing and validation of the action inputs passed as environment
variables. This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .config import DEFAULT_CONFIG_PATH


def get_input(env: Dict[str, str], name: str) -> str:
    """Read an action input the way the Actions runner exposes it.

    'base-image' is read from INPUT_BASE-IMAGE.
    """
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return env.get(key, "").strip()


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    base_image: str
    config_path: str = DEFAULT_CONFIG_PATH
    version_range: str = ""
    output_path: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        return cls(
            base_image=get_input(env, "base-image"),
            config_path=get_input(env, "config-path") or DEFAULT_CONFIG_PATH,
            version_range=get_input(env, "version-range"),
            output_path=env.get("GITHUB_OUTPUT") or None,
            debug=env.get("RUNNER_DEBUG", "") == "1",
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.base_image:
            errors.append("Input required and not supplied: base-image")
        elif any(c.isspace() for c in self.base_image):
            errors.append(f"Invalid base-image: '{self.base_image}'")

        return errors
