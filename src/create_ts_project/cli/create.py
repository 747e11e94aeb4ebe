from pathlib import Path
from typing import Annotated

import typer

from create_ts_project import __version__
from create_ts_project.core.config import PackageManager


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"create-ts-project {__version__}")
        raise typer.Exit()


def create(
    project_name: Annotated[
        str | None,
        typer.Argument(
            help="Project name, also used as the directory name (prompted for if omitted).",
            show_default=False,
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Project name (alternative to the positional argument).",
        ),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            help="Template to scaffold from: 'default' or a subdirectory of --templates-dir.",
        ),
    ] = None,
    templates_dir: Annotated[
        Path | None,
        typer.Option(
            envvar="CREATE_TS_PROJECT_TEMPLATES_DIR",
            file_okay=False,
            help="Directory holding additional project templates, one per subdirectory.",
        ),
    ] = None,
    package_manager: Annotated[
        PackageManager | None,
        typer.Option(
            "--package-manager",
            "-p",
            case_sensitive=False,
            help="Package manager used to install dependencies (prompted for if omitted).",
        ),
    ] = None,
    install: Annotated[
        bool | None,
        typer.Option(
            "--install/--no-install",
            help="Install dependencies after scaffolding (prompted for if omitted).",
            show_default=False,
        ),
    ] = None,
    git: Annotated[
        bool | None,
        typer.Option(
            "--git/--no-git",
            help="Initialize a git repository (prompted for if omitted).",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
):
    """
    Create a new TypeScript project with src/, tests/, package.json, tsconfig.json and src/index.ts.
    """
    from create_ts_project.core.create import create_project  # noqa: E402

    if project_name is not None and name is not None and project_name != name:
        raise typer.BadParameter(
            f"conflicting project names '{project_name}' and '{name}'; pass only one.",
            param_hint="'--name'",
        )

    try:
        create_project(
            project_name=project_name if project_name is not None else name,
            template=template,
            templates_dir=templates_dir,
            package_manager=package_manager,
            install=install,
            git=git,
        )
    except EOFError as e:
        raise typer.Abort() from e
