"""Project templates shipped with create-ts-project.

A template is a directory whose contents are copied verbatim into the new
project. The built-in ``default`` template lives next to this module; users
can point ``--templates-dir`` at a directory holding additional templates,
one per subdirectory.
"""

from pathlib import Path

TEMPLATES_DIR = Path(__file__).parent
DEFAULT_TEMPLATE = "default"


class TemplateNotFoundError(RuntimeError):
    """Raised when a requested template or templates directory does not exist."""


def list_templates(templates_dir: Path | None = None) -> list[str]:
    """List available template names.

    Args:
        templates_dir: Optional directory of user templates (one per subdirectory).

    Returns:
        ``"default"`` followed by the sorted names of the user templates.

    Raises:
        TemplateNotFoundError: If ``templates_dir`` is given but is not a directory.
    """
    templates = [DEFAULT_TEMPLATE]
    if templates_dir is None:
        return templates

    templates_dir = Path(templates_dir)
    if not templates_dir.is_dir():
        raise TemplateNotFoundError(f"Templates directory does not exist: {templates_dir}")

    for entry in sorted(templates_dir.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.name.startswith(".") and entry.name not in templates:
            templates.append(entry.name)
    return templates


def get_template_dir(name: str, templates_dir: Path | None = None) -> Path:
    """Resolve a template name to the directory holding its files.

    ``default`` always resolves to the built-in template, even if ``templates_dir`` has one.
    """
    if name == DEFAULT_TEMPLATE:
        return TEMPLATES_DIR / DEFAULT_TEMPLATE

    if name not in list_templates(templates_dir):
        raise TemplateNotFoundError(f"Template not found: {name}")
    return Path(templates_dir) / name


__all__ = ["TEMPLATES_DIR", "DEFAULT_TEMPLATE", "TemplateNotFoundError", "list_templates", "get_template_dir"]
