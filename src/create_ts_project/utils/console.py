"""Shared rich consoles and the progress spinner."""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


@contextmanager
def spinner(text: str, success: str, failure: str, live: bool = True) -> Iterator[None]:
    """Show a spinner while the body runs, then report success or failure.

    Exceptions raised by the body are re-raised after the failure line is printed.

    Args:
        text: Message shown next to the spinner.
        success: Message printed when the body completes.
        failure: Message printed when the body raises.
        live: Animate the spinner. Pass False when the body writes to the terminal
            itself (e.g. a subprocess inheriting stdout); ``text`` is then printed once.
    """
    try:
        if live:
            with console.status(text, spinner="dots"):
                yield
        else:
            console.print(f"[cyan]{text}[/cyan]")
            yield
    except Exception:
        console.print(f"[red]✗ {failure}[/red]")
        raise
    console.print(f"[green]✓ {success}[/green]")
