"""Project configuration and name validation."""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from create_ts_project.templates import DEFAULT_TEMPLATE


class PackageManager(str, Enum):
    """JavaScript package managers the generated project can be installed with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM
MAX_NAME_BYTES = 255


class InvalidProjectNameError(RuntimeError):
    """Raised when a project name cannot be used as a directory name."""


class ProjectExistsError(RuntimeError):
    """Raised when the target project directory already exists."""


@dataclass
class ProjectConfig:
    """Answers collected for a single project."""

    name: str
    package_manager: PackageManager = DEFAULT_PACKAGE_MANAGER
    install_dependencies: bool = True
    init_git: bool = True
    template: str = DEFAULT_TEMPLATE


def validate_project_name(name: str) -> str:
    """Return the stripped project name, or raise InvalidProjectNameError.

    Args:
        name: Raw project name from the command line or prompt.
    """
    name = name.strip()
    if not name:
        raise InvalidProjectNameError("The project name cannot be empty")
    if name in (".", ".."):
        raise InvalidProjectNameError(f"Invalid project name: {name}")
    if "/" in name or "\\" in name:
        raise InvalidProjectNameError(f"The project name cannot contain path separators: {name}")
    if len(name.encode()) > MAX_NAME_BYTES:
        raise InvalidProjectNameError(f"The project name is longer than {MAX_NAME_BYTES} bytes")
    return name


def normalize_package_name(name: str) -> str:
    """Lowercase the name and collapse whitespace runs into hyphens (npm package name)."""
    return re.sub(r"\s+", "-", name.strip().lower())


def resolve_project_dir(name: str, base_dir: Path | None = None) -> Path:
    """Return the directory the project will be created in.

    Args:
        name: Validated project name.
        base_dir: Parent directory (defaults to the current working directory).

    Raises:
        ProjectExistsError: If the directory already exists.
        InvalidProjectNameError: If the path cannot be checked (e.g. name too long).
    """
    if base_dir is None:
        base_dir = Path.cwd()
    project_dir = Path(base_dir) / name
    try:
        exists = project_dir.exists()
    except OSError as e:
        raise InvalidProjectNameError(f"Cannot use {project_dir}: {e.strerror}") from e
    if exists:
        raise ProjectExistsError(f"Directory already exists: {project_dir}")
    return project_dir
