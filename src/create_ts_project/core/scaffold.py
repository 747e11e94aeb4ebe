"""Lay out the project skeleton from a template."""

import json
import shutil
from pathlib import Path

from create_ts_project.core.config import normalize_package_name
from create_ts_project.templates import DEFAULT_TEMPLATE, TEMPLATES_DIR, get_template_dir

SCAFFOLD_DIRS = ["src", "tests"]


def scaffold_project(
    project_dir: Path,
    project_name: str,
    template: str = DEFAULT_TEMPLATE,
    templates_dir: Path | None = None,
) -> None:
    """Create the project directory and populate it from a template.

    Args:
        project_dir: Directory to create. Must not exist.
        project_name: Project name written to package.json.
        template: Template name (``default`` or a subdirectory of ``templates_dir``).
        templates_dir: Optional directory of user templates.
    """
    template_dir = get_template_dir(template, templates_dir)

    project_dir.mkdir(parents=True)
    shutil.copytree(template_dir, project_dir, dirs_exist_ok=True)
    for d in SCAFFOLD_DIRS:
        (project_dir / d).mkdir(exist_ok=True)

    _write_package_json(project_dir, project_name)


def _write_package_json(project_dir: Path, project_name: str) -> None:
    """Set the package name, falling back to the default package.json if the template has none."""
    package_json = project_dir / "package.json"
    source = package_json if package_json.exists() else TEMPLATES_DIR / DEFAULT_TEMPLATE / "package.json"

    data = json.loads(source.read_text())
    data.pop("name", None)
    data = {"name": normalize_package_name(project_name), **data}
    package_json.write_text(json.dumps(data, indent=2) + "\n")
