"""
I/O Layer for Base Image Versioner

This module contains the file system operations (configuration file,
workflow output file) separated from business logic. This is the
"imperative shell" that handles side effects; the registry client lives in
registry.py.
"""

import uuid
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class IOLayer:
    """Handles file I/O for the application."""

    def __init__(self, output_path: Optional[str] = None):
        """Initialize the I/O layer.

        Args:
            output_path: Workflow output file (GITHUB_OUTPUT); when None,
                outputs are printed to stdout
        """
        self.output_path = output_path

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_yaml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file

        Returns:
            Parsed YAML document or None if the file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)

    # -----------------------------------------------------------------------------
    # Workflow Outputs
    # -----------------------------------------------------------------------------

    def set_output(self, name: str, value: str) -> None:
        """Set a workflow step output.

        Appends a delimited block to the output file so values may span
        several lines.
        """
        if not self.output_path:
            print(f"{name}={value}")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: output value contains the delimiter {delimiter}")

        with Path(self.output_path).open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
