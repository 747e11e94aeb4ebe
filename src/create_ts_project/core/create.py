"""Core logic for creating a new TypeScript project."""

import subprocess
from pathlib import Path

import typer
from rich.markup import escape

from create_ts_project.core.config import (
    InvalidProjectNameError,
    PackageManager,
    ProjectConfig,
    ProjectExistsError,
    resolve_project_dir,
    validate_project_name,
)
from create_ts_project.core.git import init_git_repo
from create_ts_project.core.install import install_dependencies
from create_ts_project.core.scaffold import scaffold_project
from create_ts_project.templates import DEFAULT_TEMPLATE, TemplateNotFoundError, get_template_dir, list_templates
from create_ts_project.utils import prompts
from create_ts_project.utils.console import console, err_console, spinner


def create_project(
    project_name: str | None = None,
    template: str | None = None,
    templates_dir: Path | None = None,
    package_manager: PackageManager | None = None,
    install: bool | None = None,
    git: bool | None = None,
    base_dir: Path | None = None,
) -> ProjectConfig:
    """Create a new TypeScript project.

    Any argument left as None is asked for interactively.

    Args:
        project_name: Name of the project and of the directory to create.
        template: Template to copy (``default`` or a subdirectory of ``templates_dir``).
        templates_dir: Directory of user templates.
        package_manager: Package manager used for the install step.
        install: Whether to install dependencies.
        git: Whether to initialize a git repository.
        base_dir: Directory the project is created in (defaults to the cwd).

    Returns:
        The answers the project was created with.

    Raises:
        typer.Exit: With code 1 if the name is invalid, the directory exists,
            the template is unknown or scaffolding fails.
    """
    if project_name is None:
        project_name = prompts.prompt_project_name()

    try:
        name = validate_project_name(project_name)
        project_dir = resolve_project_dir(name, base_dir)
        template = _choose_template(template, templates_dir)
    except (InvalidProjectNameError, ProjectExistsError, TemplateNotFoundError) as e:
        err_console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    try:
        with spinner("Creating project...", "Project created", "Failed to create the project"):
            scaffold_project(project_dir, name, template=template, templates_dir=templates_dir)
    except Exception as e:
        err_console.print(f"[red]{escape(repr(e))}[/red]")
        raise typer.Exit(code=1) from e

    config = ProjectConfig(
        name=name,
        package_manager=package_manager if package_manager is not None else prompts.prompt_package_manager(),
        install_dependencies=install if install is not None else prompts.prompt_install_dependencies(),
        init_git=git if git is not None else prompts.prompt_git_init(),
        template=template,
    )

    installed = False
    if config.install_dependencies:
        installed = _run_step(
            lambda: install_dependencies(project_dir, config.package_manager),
            f"Installing dependencies with {config.package_manager.value}...",
            "Dependencies installed",
            "Failed to install dependencies",
            live=False,
        )

    if config.init_git:
        _run_step(
            lambda: init_git_repo(project_dir),
            "Initializing git repository...",
            "Git repository initialized",
            "Failed to initialize the git repository",
        )

    _print_next_steps(config, installed)
    return config


def _choose_template(template: str | None, templates_dir: Path | None) -> str:
    """Pick a template, prompting only when there is more than one to choose from."""
    choices = list_templates(templates_dir)
    if template is None:
        template = prompts.prompt_template(choices) if len(choices) > 1 else DEFAULT_TEMPLATE
    get_template_dir(template, templates_dir)
    return template


def _run_step(step, text: str, success: str, failure: str, live: bool = True) -> bool:
    """Run an optional step; report and absorb its failure so the flow can continue."""
    try:
        with spinner(text, success, failure, live=live):
            step()
    except (subprocess.CalledProcessError, OSError) as e:
        err_console.print(f"  [dim]{escape(str(e))}[/dim]")
        return False
    return True


def _print_next_steps(config: ProjectConfig, installed: bool) -> None:
    pm = config.package_manager.value
    console.print(f"\n[bold green]✨ Project '{escape(config.name)}' created successfully![/bold green]")
    console.print("\nTo get started:")
    console.print(f"  cd {escape(config.name)}")
    if not installed:
        console.print(f"  {pm} install")
    console.print(f"  {pm} start\n")
