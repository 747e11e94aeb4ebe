"""Interactive prompts for the create flow."""

from rich.prompt import Confirm, Prompt

from create_ts_project.core.config import DEFAULT_PACKAGE_MANAGER, PackageManager
from create_ts_project.templates import DEFAULT_TEMPLATE
from create_ts_project.utils.console import console


def prompt_project_name() -> str:
    """Ask for the project name until a non-empty answer is given."""
    while True:
        answer = Prompt.ask("Project name", console=console)
        if answer and answer.strip():
            return answer.strip()
        console.print("[red]The project name cannot be empty.[/red]")


def prompt_template(choices: list[str]) -> str:
    default = DEFAULT_TEMPLATE if DEFAULT_TEMPLATE in choices else choices[0]
    return Prompt.ask("Select a template", choices=choices, default=default, console=console)


def prompt_package_manager() -> PackageManager:
    answer = Prompt.ask(
        "Which package manager do you want to use?",
        choices=[pm.value for pm in PackageManager],
        default=DEFAULT_PACKAGE_MANAGER.value,
        console=console,
    )
    return PackageManager(answer)


def prompt_install_dependencies() -> bool:
    return Confirm.ask("Install dependencies?", default=True, console=console)


def prompt_git_init() -> bool:
    return Confirm.ask("Initialize a git repository?", default=True, console=console)
