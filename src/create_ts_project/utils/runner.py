"""Synchronous subprocess execution for post-scaffold steps."""

import subprocess
from pathlib import Path

from rich.markup import escape

from create_ts_project.utils.console import console, err_console


def run_command(cmd: list[str], cwd: Path, capture: bool = False) -> subprocess.CompletedProcess:
    """Run a command in ``cwd`` and raise on a non-zero exit status.

    Args:
        cmd: Command and arguments.
        cwd: Working directory for the command.
        capture: Capture stdout/stderr instead of inheriting the terminal.

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero.
        FileNotFoundError: If the executable is not on PATH.
    """
    cmd_str = " ".join(cmd)
    console.print(f"  [dim]Running: {escape(cmd_str)}[/dim]")
    try:
        return subprocess.run(cmd, cwd=cwd, check=True, capture_output=capture, text=True)
    except subprocess.CalledProcessError as e:
        err_console.print(f"  [yellow]Warning: '{escape(cmd_str)}' failed with exit code {e.returncode}[/yellow]")
        if e.stdout:
            err_console.print(f"    stdout: {escape(e.stdout.strip())}")
        if e.stderr:
            err_console.print(f"    stderr: {escape(e.stderr.strip())}")
        raise
