from __future__ import annotations

import pytest

from useviews import templates
from useviews.errors import UnsupportedProjectError
from useviews.project import Project
from useviews.scaffold import ensure_directories, scaffold


INDEX_JS = """import React from 'react';
import ReactDOM from 'react-dom';
import './index.css';
import App from './App';

ReactDOM.render(<App />, document.getElementById('root'));
"""


def make_web_project(root):
    src = root / "src"
    src.mkdir()
    (src / "index.js").write_text(INDEX_JS)
    for name in ("App.css", "App.js", "App.test.js", "logo.svg"):
        (src / name).write_text("boilerplate")
    (root / ".gitignore").write_text("node_modules")
    return Project(root, {"dependencies": {"react-dom": "16.0.0"}})


def test_scaffold_web(tmp_path):
    project = make_web_project(tmp_path)

    result = scaffold(project)

    src = tmp_path / "src"
    index = (src / "index.js").read_text()
    assert "import App from './Main/App.view.logic.js';" in index
    assert "'./App'" not in index
    for name in ("App.css", "App.js", "App.test.js", "logo.svg"):
        assert not (src / name).exists()
    assert (src / "index.css").read_text() == templates.VIEWS_CSS
    assert (src / "Main" / "App.view.logic.js").read_text() == templates.APP_VIEW_LOGIC_DOM
    assert (src / "Main" / "App.view").read_text() == templates.APP_VIEW
    assert (tmp_path / ".gitignore").read_text() == "node_modules" + templates.GITIGNORE

    assert sorted(result.removed) == ["src/App.css", "src/App.js", "src/App.test.js", "src/logo.svg"]
    assert result.updated == ["src/index.js", ".gitignore"]
    assert "src/Main/App.view" in result.written


def test_scaffold_web_replaces_only_first_app_import(tmp_path):
    project = make_web_project(tmp_path)
    (tmp_path / "src" / "index.js").write_text("import App from './App'\n// ./App\n")

    scaffold(project)

    assert (tmp_path / "src" / "index.js").read_text() == (
        "import App from './Main/App.view.logic.js'\n// ./App\n"
    )


def test_scaffold_web_without_index_or_boilerplate(tmp_path):
    project = Project(tmp_path, {"dependencies": {"react-dom": "16.0.0"}})

    result = scaffold(project)

    assert result.skipped == ["src/index.js"]
    assert result.removed == []
    assert (tmp_path / "src" / "Main" / "App.view").exists()
    assert ".gitignore" in result.written


def test_scaffold_native(tmp_path):
    (tmp_path / "src" / "Main").mkdir(parents=True)
    project = Project(tmp_path, {"dependencies": {"react-native": "0.50.0"}})

    result = scaffold(project)

    assert (tmp_path / "App.js").read_text() == templates.APP_NATIVE
    assert (tmp_path / "src" / "fonts.js").read_text() == templates.FONTS_NATIVE
    assert (tmp_path / "src" / "Main" / "App.view.logic.js").read_text() == templates.APP_VIEW_LOGIC_NATIVE
    assert (tmp_path / "src" / "Main" / "App.view").read_text() == templates.APP_VIEW
    assert not (tmp_path / "src" / "index.css").exists()
    assert result.written == [
        "App.js",
        "src/Main/App.view.logic.js",
        "src/fonts.js",
        ".gitignore",
        "src/Main/App.view",
    ]


def test_scaffold_requires_kind(tmp_path):
    with pytest.raises(UnsupportedProjectError):
        scaffold(Project(tmp_path, {"dependencies": {}}))
    assert not (tmp_path / "src").exists()


def test_ensure_directories_is_idempotent(tmp_path):
    ensure_directories(tmp_path)
    ensure_directories(tmp_path)

    assert (tmp_path / "src" / "Main").is_dir()
