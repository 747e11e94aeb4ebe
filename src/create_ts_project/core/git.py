"""Git repository initialization."""

from pathlib import Path

from create_ts_project.utils.runner import run_command

GITIGNORE_CONTENT = "node_modules\ndist\n"


def init_git_repo(project_dir: Path) -> None:
    """Run ``git init`` in the project and write its .gitignore."""
    run_command(["git", "init"], cwd=project_dir, capture=True)
    (project_dir / ".gitignore").write_text(GITIGNORE_CONTENT)
