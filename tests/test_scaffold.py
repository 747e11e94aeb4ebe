"""Tests for laying out the project skeleton."""

import json

import pytest

from create_ts_project.core.scaffold import scaffold_project
from create_ts_project.templates import TemplateNotFoundError


@pytest.mark.unit
class TestDefaultTemplate:
    def test_creates_skeleton(self, tmp_path):
        project_dir = tmp_path / "my-app"
        scaffold_project(project_dir, "my-app")

        assert (project_dir / "src").is_dir()
        assert (project_dir / "tests").is_dir()
        assert list((project_dir / "tests").iterdir()) == []
        assert (project_dir / "package.json").is_file()
        assert (project_dir / "tsconfig.json").is_file()
        assert (project_dir / "src" / "index.ts").is_file()

    def test_package_json(self, tmp_path):
        project_dir = tmp_path / "my-app"
        scaffold_project(project_dir, "my-app")

        package_json = json.loads((project_dir / "package.json").read_text())
        assert package_json == {
            "name": "my-app",
            "version": "1.0.0",
            "scripts": {"start": "node dist/index.js", "build": "tsc"},
        }
        assert list(package_json) == ["name", "version", "scripts"]

    def test_tsconfig_json(self, tmp_path):
        project_dir = tmp_path / "my-app"
        scaffold_project(project_dir, "my-app")

        tsconfig = json.loads((project_dir / "tsconfig.json").read_text())
        assert tsconfig == {
            "compilerOptions": {
                "target": "ES6",
                "module": "CommonJS",
                "outDir": "dist",
                "rootDir": "src",
            }
        }

    def test_index_ts(self, tmp_path):
        project_dir = tmp_path / "my-app"
        scaffold_project(project_dir, "my-app")

        assert (project_dir / "src" / "index.ts").read_text().strip() == "console.log('Hello, world!');"

    def test_package_name_is_normalized(self, tmp_path):
        project_dir = tmp_path / "My App"
        scaffold_project(project_dir, "My App")

        assert json.loads((project_dir / "package.json").read_text())["name"] == "my-app"

    def test_no_git_files(self, tmp_path):
        project_dir = tmp_path / "my-app"
        scaffold_project(project_dir, "my-app")

        assert not (project_dir / ".git").exists()
        assert not (project_dir / ".gitignore").exists()

    def test_refuses_existing_directory(self, tmp_path):
        project_dir = tmp_path / "my-app"
        project_dir.mkdir()
        with pytest.raises(FileExistsError):
            scaffold_project(project_dir, "my-app")
        assert list(project_dir.iterdir()) == []


@pytest.mark.unit
class TestUserTemplates:
    def test_copies_template_files(self, tmp_path, user_templates):
        project_dir = tmp_path / "api"
        scaffold_project(project_dir, "api", template="express", templates_dir=user_templates)

        assert (project_dir / "src" / "server.ts").read_text() == "import express from 'express';\n"
        assert (project_dir / "tests").is_dir()
        assert not (project_dir / "tsconfig.json").exists()

    def test_rewrites_package_name(self, tmp_path, user_templates):
        project_dir = tmp_path / "api"
        scaffold_project(project_dir, "api", template="express", templates_dir=user_templates)

        package_json = json.loads((project_dir / "package.json").read_text())
        assert package_json["name"] == "api"
        assert package_json["dependencies"] == {"express": "^4.19.0"}
        assert list(package_json)[0] == "name"

    def test_template_without_package_json(self, tmp_path, user_templates):
        (user_templates / "bare").mkdir()
        project_dir = tmp_path / "bare-app"
        scaffold_project(project_dir, "bare-app", template="bare", templates_dir=user_templates)

        package_json = json.loads((project_dir / "package.json").read_text())
        assert package_json["name"] == "bare-app"
        assert package_json["scripts"]["build"] == "tsc"

    def test_unknown_template_creates_nothing(self, tmp_path, user_templates):
        project_dir = tmp_path / "api"
        with pytest.raises(TemplateNotFoundError):
            scaffold_project(project_dir, "api", template="missing", templates_dir=user_templates)
        assert not project_dir.exists()
