"""
Utility Functions Module for Base Image Versioner

This module provides logging helpers used by the command line entry point.

Functions:
    setup_logging: Configures application logging

Classes:
    GitHubActionsFormatter: Renders log records as workflow commands
"""

import logging
import os
from typing import Optional

WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class GitHubActionsFormatter(logging.Formatter):
    """Format warnings and errors as ::warning:: / ::error:: annotations."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        # Workflow commands are single-line
        message = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{message}"


def setup_logging(level: int = logging.INFO, github_actions: Optional[bool] = None) -> None:
    """Configure logging for the application."""
    if github_actions is None:
        github_actions = os.environ.get("GITHUB_ACTIONS") == "true"

    if github_actions:
        handler = logging.StreamHandler()
        handler.setFormatter(GitHubActionsFormatter("%(message)s"))
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
