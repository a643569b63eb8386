from __future__ import annotations

import json

import pytest

from useviews.errors import UnsupportedProjectError
from useviews.project import Project, ProjectKind


def write_pkg(path, pkg):
    (path / "package.json").write_text(json.dumps(pkg, indent=2))


def test_load_without_package_json(tmp_path):
    with pytest.raises(UnsupportedProjectError):
        Project.load(tmp_path)


def test_load_invalid_package_json(tmp_path):
    (tmp_path / "package.json").write_text("{not json")

    with pytest.raises(UnsupportedProjectError):
        Project.load(tmp_path)


def test_detects_web_and_native(tmp_path):
    write_pkg(tmp_path, {"dependencies": {"react": "16.0.0", "react-dom": "16.0.0"}})
    assert Project.load(tmp_path).kind is ProjectKind.WEB

    write_pkg(tmp_path, {"dependencies": {"react": "16.0.0", "react-native": "0.50.0"}})
    assert Project.load(tmp_path).kind is ProjectKind.NATIVE

    write_pkg(tmp_path, {"dependencies": {"react": "16.0.0"}})
    assert Project.load(tmp_path).kind is None


def test_react_dom_wins_over_react_native(tmp_path):
    write_pkg(tmp_path, {"dependencies": {"react-dom": "1", "react-native": "1"}})
    assert Project.load(tmp_path).kind is ProjectKind.WEB


def test_missing_sections_are_created(tmp_path):
    write_pkg(tmp_path, {"name": "app"})
    project = Project.load(tmp_path)

    assert project.dependencies == {}
    assert project.dev_dependencies == {}
    assert project.scripts == {}
    assert project.kind is None


def test_is_views_project(tmp_path):
    write_pkg(tmp_path, {
        "dependencies": {"react-dom": "16.0.0"},
        "devDependencies": {"@viewstools/morph": "^1.0.0"},
    })
    assert Project.load(tmp_path).is_views_project is True


def test_required_packages_web(tmp_path):
    project = Project(tmp_path, {"dependencies": {"react-dom": "16.0.0"}})

    assert project.required_dev_dependencies() == ["@viewstools/morph", "@viewstools/e2e", "concurrently"]
    assert project.required_dependencies() == ["react-router-dom", "prop-types", "emotion"]


def test_required_packages_native_with_extras(tmp_path):
    project = Project(
        tmp_path,
        {"dependencies": {"react-native": "0.50.0"}},
        extra_dependencies=["prop-types", "expo-font"],
        extra_dev_dependencies=["eslint"],
    )

    assert project.router_package == "react-router-native"
    assert project.required_dependencies() == ["react-router-native", "prop-types", "expo-font"]
    assert project.required_dev_dependencies()[-1] == "eslint"


def test_required_dependencies_needs_kind(tmp_path):
    project = Project(tmp_path, {"dependencies": {}})

    with pytest.raises(UnsupportedProjectError):
        project.required_dependencies()


def test_add_dependencies_use_caret_range(tmp_path):
    project = Project(tmp_path, {"dependencies": {"react-dom": "16.0.0", "prop-types": "15.0.0"}})

    project.add_dependency("prop-types", "15.6.0")
    project.add_dev_dependency("concurrently", "3.5.1")

    assert project.dependencies["prop-types"] == "^15.6.0"
    assert project.dev_dependencies == {"concurrently": "^3.5.1"}


def test_setup_scripts_web(tmp_path):
    project = Project(tmp_path, {
        "dependencies": {"react-dom": "16.0.0"},
        "scripts": {"start": "react-scripts start", "build": "react-scripts build"},
    })

    project.setup_scripts()

    assert project.scripts == {
        "start": 'concurrently "npm run dev" "npm run views"',
        "build": "react-scripts build",
        "dev": "react-scripts start",
        "views": "views-morph src --watch --as react-dom",
        "prebuild": "views-morph src --as react-dom",
    }


def test_setup_scripts_native(tmp_path):
    project = Project(tmp_path, {
        "dependencies": {"react-native": "0.50.0"},
        "scripts": {
            "start": "react-native-scripts start",
            "ios": "react-native-scripts ios",
            "android": "react-native-scripts android",
        },
    })

    project.setup_scripts()

    scripts = project.scripts
    assert scripts["dev"] == "react-native-scripts start"
    assert scripts["views"] == "views-morph src --watch --as react-native"
    assert scripts["dev:ios"] == "react-native-scripts ios"
    assert scripts["ios"] == 'concurrently "npm run dev:ios" "npm run views"'
    assert scripts["dev:android"] == "react-native-scripts android"
    assert scripts["android"] == 'concurrently "npm run dev:android" "npm run views"'
    assert "prebuild" not in scripts


def test_setup_scripts_without_previous_commands(tmp_path):
    project = Project(tmp_path, {
        "dependencies": {"react-native": "0.50.0"},
        "scripts": {"dev": "stale"},
    })

    project.setup_scripts()

    assert "dev" not in project.scripts
    assert "dev:ios" not in project.scripts
    assert project.scripts["start"] == 'concurrently "npm run dev" "npm run views"'


def test_save_keeps_key_order_and_unicode(tmp_path):
    project = Project(tmp_path, {"name": "app", "description": "héllo 🎉", "dependencies": {"react-dom": "16"}})
    project.add_dependency("emotion", "9.0.0")

    project.save()

    text = (tmp_path / "package.json").read_text(encoding="utf-8")
    assert "héllo 🎉" in text
    assert not text.endswith("\n")
    assert text.startswith('{\n  "name": "app"')
    assert json.loads(text)["dependencies"]["emotion"] == "^9.0.0"


def test_load_package_json_with_bom(tmp_path):
    (tmp_path / "package.json").write_bytes(
        b"\xef\xbb\xbf" + json.dumps({"dependencies": {"react-dom": "16.0.0"}}).encode()
    )

    assert Project.load(tmp_path).kind is ProjectKind.WEB


def test_load_package_json_not_utf8(tmp_path):
    (tmp_path / "package.json").write_bytes(b'{"name": "\xff"}')

    with pytest.raises(UnsupportedProjectError):
        Project.load(tmp_path)
