"""
Sample View bootstrapping for use-views.

Writes src/Main/App.view with the logic file that renders it, wires the
entry point to it, and removes the create-react-app boilerplate it replaces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from . import templates
from .project import Project, ProjectKind


logger = logging.getLogger(__name__)

MAIN_VIEW = Path("src") / "Main" / "App.view"
MAIN_LOGIC = Path("src") / "Main" / "App.view.logic.js"


@dataclass
class ScaffoldResult:
    """Paths touched while scaffolding, relative to the project root."""
    written: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def ensure_directories(root: Path) -> None:
    """Create src/ and src/Main/ under the project root."""
    (root / "src" / "Main").mkdir(parents=True, exist_ok=True)


class Scaffolder:
    """Writes the bootstrap files of a Views project."""

    def __init__(self, root: Path):
        self.root = root
        self.result = ScaffoldResult()

    def _rel(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def write(self, rel_path: Path | str, content: str) -> None:
        path = self.root / rel_path
        path.write_text(content, encoding="utf-8")
        self.result.written.append(self._rel(path))
        logger.debug("Wrote %s", path)

    def remove(self, rel_path: Path | str) -> None:
        path = self.root / rel_path
        try:
            path.unlink()
        except FileNotFoundError:
            return
        self.result.removed.append(self._rel(path))
        logger.debug("Removed %s", path)

    def ensure_directories(self) -> None:
        ensure_directories(self.root)

    def point_index_at_logic(self) -> None:
        """Make src/index.js render Main/App.view.logic.js instead of App."""
        index_path = self.root / "src" / "index.js"
        if not index_path.is_file():
            logger.warning("%s not found, point it at ./Main/App.view.logic.js by hand", index_path)
            self.result.skipped.append(self._rel(index_path))
            return

        index = index_path.read_text(encoding="utf-8")
        index_path.write_text(index.replace("./App", "./Main/App.view.logic.js", 1), encoding="utf-8")
        self.result.updated.append(self._rel(index_path))

    def append_gitignore(self) -> None:
        gitignore_path = self.root / ".gitignore"
        existed = gitignore_path.exists()
        with open(gitignore_path, "a", encoding="utf-8") as f:
            f.write(templates.GITIGNORE)
        if existed:
            self.result.updated.append(self._rel(gitignore_path))
        else:
            self.result.written.append(self._rel(gitignore_path))

    def scaffold_web(self) -> None:
        self.point_index_at_logic()
        for name in templates.WEB_BOILERPLATE:
            self.remove(Path("src") / name)
        self.write(Path("src") / "index.css", templates.VIEWS_CSS)
        self.write(MAIN_LOGIC, templates.APP_VIEW_LOGIC_DOM)

    def scaffold_native(self) -> None:
        self.write("App.js", templates.APP_NATIVE)
        self.write(MAIN_LOGIC, templates.APP_VIEW_LOGIC_NATIVE)
        self.write(Path("src") / "fonts.js", templates.FONTS_NATIVE)


def scaffold(project: Project) -> ScaffoldResult:
    """Write the sample View and the files it needs for the project's kind."""
    kind = project.require_kind()
    scaffolder = Scaffolder(project.root)
    scaffolder.ensure_directories()

    if kind is ProjectKind.WEB:
        scaffolder.scaffold_web()
    else:
        scaffolder.scaffold_native()

    scaffolder.append_gitignore()
    scaffolder.write(MAIN_VIEW, templates.APP_VIEW)

    return scaffolder.result
