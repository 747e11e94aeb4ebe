"""Lightweight CLI for create-ts-project."""

import typer

app = typer.Typer(
    name="create-ts-project",
    help="Scaffold a new TypeScript project",
    add_completion=False,
)

# Register commands
from create_ts_project.cli.create import create  # noqa: E402

app.command(name="create")(create)

__all__ = ["app"]
