"""Dependency installation with the selected package manager."""

from pathlib import Path

from create_ts_project.core.config import PackageManager
from create_ts_project.utils.runner import run_command

INSTALL_COMMANDS = {
    PackageManager.NPM: ["npm", "install"],
    PackageManager.YARN: ["yarn", "install"],
    PackageManager.PNPM: ["pnpm", "install"],
    PackageManager.BUN: ["bun", "install"],
}


def install_command(package_manager: PackageManager | str) -> list[str]:
    """Return the install command for a package manager."""
    return list(INSTALL_COMMANDS[PackageManager(package_manager)])


def install_dependencies(project_dir: Path, package_manager: PackageManager | str) -> None:
    """Install the project's dependencies, streaming the package manager's output."""
    run_command(install_command(package_manager), cwd=project_dir)
