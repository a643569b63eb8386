"""Exceptions raised by use-views."""

from __future__ import annotations


class UseViewsError(Exception):
    """Base error for anything that stops a conversion."""


class ConfigError(UseViewsError):
    """use-views.yml could not be read."""


class UnsupportedProjectError(UseViewsError):
    """The directory is not a create-react-app or create-react-native-app project."""


class RegistryError(UseViewsError):
    """Error from the npm registry."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PackageNotFoundError(RegistryError):
    """The registry has no such package."""
    def __init__(self, package: str):
        super().__init__(f"Package not found in registry: {package}", 404)
        self.package = package


class InstallError(UseViewsError):
    """The package manager failed to install the dependencies."""
    def __init__(self, command: list[str], returncode: int | None = None, stderr: str = ""):
        message = f"`{' '.join(command)}` failed"
        if returncode is not None:
            message += f" with exit code {returncode}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
