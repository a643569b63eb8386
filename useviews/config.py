"""
Configuration management for use-views.

Loads the optional use-views.yml from the project root:
- registry: npm registry URL, timeouts and concurrency for version lookups
- install: whether to install dependencies and with which package manager
- extra_dependencies / extra_dev_dependencies: packages added on top of the
  Views defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


CONFIG_FILENAME = "use-views.yml"
PACKAGE_MANAGERS = ("yarn", "npm")


@dataclass
class RegistryConfig:
    """npm registry settings."""
    url: str | None = None  # None: resolve from env/.npmrc
    timeout: float = 10.0
    max_concurrency: int = 8
    retries: int = 3


@dataclass
class InstallConfig:
    """Dependency installation settings."""
    enabled: bool = True
    package_manager: str | None = None  # yarn, npm or None for auto-detect


@dataclass
class UseViewsConfig:
    """Complete use-views configuration."""
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    install: InstallConfig = field(default_factory=InstallConfig)
    extra_dependencies: list[str] = field(default_factory=list)
    extra_dev_dependencies: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, project_root: Path) -> "UseViewsConfig":
        """Load configuration from the project root directory."""
        config_path = project_root / CONFIG_FILENAME
        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: expected a mapping at the top level")

        return cls._parse(data)

    @classmethod
    def _parse(cls, data: dict[str, Any]) -> "UseViewsConfig":
        """Parse configuration dictionary."""
        config = cls()

        registry_data = data.get("registry")
        if registry_data is None:
            registry_data = {}
        if isinstance(registry_data, str):
            registry_data = {"url": registry_data}
        registry_data = _parse_section(registry_data, "registry")
        url = registry_data.get("url")
        if url is not None and not isinstance(url, str):
            raise ConfigError("Invalid registry.url: expected a URL")
        config.registry = RegistryConfig(
            url=url,
            timeout=_parse_number(registry_data, "registry", "timeout", float, 10.0),
            max_concurrency=_parse_number(registry_data, "registry", "max_concurrency", int, 8),
            retries=_parse_number(registry_data, "registry", "retries", int, 3),
        )

        install_data = data.get("install")
        install_data = _parse_section({} if install_data is None else install_data, "install")
        package_manager = install_data.get("package_manager")
        if package_manager is not None and package_manager not in PACKAGE_MANAGERS:
            raise ConfigError(
                f"Invalid install.package_manager: {package_manager!r} "
                f"(expected one of: {', '.join(PACKAGE_MANAGERS)})"
            )
        enabled = install_data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigError(f"Invalid install.enabled: {enabled!r} (expected true or false)")
        config.install = InstallConfig(
            enabled=enabled,
            package_manager=package_manager,
        )

        config.extra_dependencies = _parse_package_list(data, "extra_dependencies")
        config.extra_dev_dependencies = _parse_package_list(data, "extra_dev_dependencies")

        return config


def _parse_section(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"Invalid {name}: expected a mapping")
    return value


def _parse_number(section: dict[str, Any], name: str, key: str, kind: type, default: Any) -> Any:
    value = section.get(key, default)
    # yaml gives bools for yes/no, which int()/float() would accept
    if isinstance(value, bool):
        raise ConfigError(f"Invalid {name}.{key}: {value!r} (expected a number)")
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid {name}.{key}: {value!r} (expected a number)") from e


def _parse_package_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key) or []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Invalid {key}: expected a list of package names")
    return value


def get_project_root(path: str | Path | None = None) -> Path:
    """Get the project directory to convert (the current directory by default)."""
    if path is None:
        return Path.cwd()
    return Path(path).expanduser().resolve()
