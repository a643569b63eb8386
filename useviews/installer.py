"""
Package manager detection and dependency installation.

Yarn is used when the project already has a yarn.lock, npm otherwise.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import InstallError


logger = logging.getLogger(__name__)


def has_yarn(project_root: Path) -> bool:
    """Whether the project is managed with yarn."""
    return (project_root / "yarn.lock").is_file()


def detect_package_manager(project_root: Path, preferred: str | None = None) -> str:
    """Pick the package manager: preferred if given, else yarn when there is a yarn.lock."""
    if preferred:
        return preferred
    return "yarn" if has_yarn(project_root) else "npm"


def install_command(manager: str) -> list[str]:
    return ["yarn"] if manager == "yarn" else ["npm", "install"]


def run_command(manager: str) -> str:
    """Command that starts the dev server, for the help text."""
    return "yarn start" if manager == "yarn" else "npm start"


def install_dependencies(project_root: Path, manager: str) -> None:
    """Install package.json dependencies in the project root."""
    command = install_command(manager)
    logger.info("Running %s in %s", " ".join(command), project_root)

    try:
        result = subprocess.run(
            command,
            cwd=project_root,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise InstallError(command, stderr=f"{command[0]} is not installed ({e})") from e

    if result.stdout:
        logger.debug(result.stdout)

    if result.returncode != 0:
        raise InstallError(command, result.returncode, result.stderr)
