"""Shared test fixtures and configuration."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Test runner for CLI commands."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CREATE_TS_PROJECT_TEMPLATES_DIR", raising=False)
    return tmp_path


@pytest.fixture
def fake_run():
    """Replace subprocess.run for commands started by create-ts-project.

    ``git init`` still creates a .git directory so the filesystem looks as it would after a real run.
    """

    def _run(cmd, cwd=None, **kwargs):
        if cmd[:2] == ["git", "init"]:
            (Path(cwd) / ".git").mkdir()
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    with patch("create_ts_project.utils.runner.subprocess.run", side_effect=_run) as mock_run:
        yield mock_run


@pytest.fixture
def user_templates(tmp_path):
    """A templates directory holding a single 'express' template."""
    templates_dir = tmp_path / "user-templates"
    express = templates_dir / "express"
    (express / "src").mkdir(parents=True)
    (express / "src" / "server.ts").write_text("import express from 'express';\n")
    (express / "package.json").write_text(
        '{\n  "name": "template-name",\n  "version": "0.0.1",\n  "dependencies": {\n    "express": "^4.19.0"\n  }\n}\n'
    )
    return templates_dir
