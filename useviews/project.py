"""
package.json handling for use-views.

Detects what kind of React project a directory holds and applies the
Views changes to its package.json:
- dependencies and devDependencies at ^latest
- views-morph scripts run alongside the original start/ios/android ones
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import UnsupportedProjectError


logger = logging.getLogger(__name__)

MORPH_PACKAGE = "@viewstools/morph"
VIEWS_DEV_DEPENDENCIES = [MORPH_PACKAGE, "@viewstools/e2e", "concurrently"]


class ProjectKind(Enum):
    """React flavour of the project."""
    WEB = "react-dom"
    NATIVE = "react-native"

    @property
    def as_target(self) -> str:
        """Value passed to views-morph --as."""
        return self.value

    @property
    def label(self) -> str:
        return "web" if self is ProjectKind.WEB else "native"

    @property
    def router_package(self) -> str:
        return "react-router-dom" if self is ProjectKind.WEB else "react-router-native"


def _dedupe(packages: list[str]) -> list[str]:
    return list(dict.fromkeys(packages))


class Project:
    """A project directory and its parsed package.json."""

    def __init__(
        self,
        root: Path,
        pkg: dict[str, Any],
        extra_dependencies: list[str] | None = None,
        extra_dev_dependencies: list[str] | None = None,
    ):
        self.root = root
        self.pkg = pkg
        self.extra_dependencies = list(extra_dependencies or [])
        self.extra_dev_dependencies = list(extra_dev_dependencies or [])

        if not isinstance(pkg.get("dependencies"), dict):
            pkg["dependencies"] = {}
        if not isinstance(pkg.get("devDependencies"), dict):
            pkg["devDependencies"] = {}
        if not isinstance(pkg.get("scripts"), dict):
            pkg["scripts"] = {}

    @property
    def package_json_path(self) -> Path:
        return self.root / "package.json"

    @classmethod
    def load(cls, root: Path, **kwargs: Any) -> "Project":
        """Read package.json from a project root."""
        pkg_path = root / "package.json"
        if not pkg_path.is_file():
            raise UnsupportedProjectError(f"No package.json in {root}")

        try:
            pkg = json.loads(pkg_path.read_text(encoding="utf-8-sig"))
        except (OSError, ValueError) as e:
            raise UnsupportedProjectError(f"Could not read {pkg_path}: {e}") from e

        if not isinstance(pkg, dict):
            raise UnsupportedProjectError(f"{pkg_path} is not a JSON object")

        logger.debug("Loaded %s", pkg_path)
        return cls(root, pkg, **kwargs)

    @property
    def dependencies(self) -> dict[str, str]:
        return self.pkg["dependencies"]

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return self.pkg["devDependencies"]

    @property
    def scripts(self) -> dict[str, str]:
        return self.pkg["scripts"]

    @property
    def kind(self) -> ProjectKind | None:
        """WEB if react-dom is a dependency, NATIVE if react-native is, else None."""
        if "react-dom" in self.dependencies:
            return ProjectKind.WEB
        if "react-native" in self.dependencies:
            return ProjectKind.NATIVE
        return None

    @property
    def is_views_project(self) -> bool:
        return MORPH_PACKAGE in self.dev_dependencies

    def require_kind(self) -> ProjectKind:
        kind = self.kind
        if kind is None:
            raise UnsupportedProjectError(
                f"{self.root} depends on neither react-dom nor react-native"
            )
        return kind

    @property
    def router_package(self) -> str:
        return self.require_kind().router_package

    def required_dev_dependencies(self) -> list[str]:
        return _dedupe(VIEWS_DEV_DEPENDENCIES + self.extra_dev_dependencies)

    def required_dependencies(self) -> list[str]:
        kind = self.require_kind()
        packages = [kind.router_package, "prop-types"]
        if kind is ProjectKind.WEB:
            packages.append("emotion")
        return _dedupe(packages + self.extra_dependencies)

    def add_dependency(self, name: str, version: str) -> None:
        self.dependencies[name] = f"^{version}"

    def add_dev_dependency(self, name: str, version: str) -> None:
        self.dev_dependencies[name] = f"^{version}"

    def _move_script(self, source: str, target: str) -> None:
        # An absent source leaves no target key behind
        if source in self.scripts:
            self.scripts[target] = self.scripts[source]
        else:
            self.scripts.pop(target, None)

    def setup_scripts(self) -> None:
        """Run views-morph next to the original dev commands."""
        kind = self.require_kind()
        scripts = self.scripts

        self._move_script("start", "dev")
        scripts["start"] = 'concurrently "npm run dev" "npm run views"'
        scripts["views"] = f"views-morph src --watch --as {kind.as_target}"

        if kind is ProjectKind.WEB:
            scripts["prebuild"] = "views-morph src --as react-dom"
        else:
            for platform in ("ios", "android"):
                self._move_script(platform, f"dev:{platform}")
                scripts[platform] = f'concurrently "npm run dev:{platform}" "npm run views"'

    def dumps(self) -> str:
        return json.dumps(self.pkg, indent=2, ensure_ascii=False)

    def save(self) -> Path:
        """Write package.json back to disk."""
        self.package_json_path.write_text(self.dumps(), encoding="utf-8")
        logger.debug("Wrote %s", self.package_json_path)
        return self.package_json_path
