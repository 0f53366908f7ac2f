"""Jinja2 template rendering for Laravel scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``laravel_scaffold/scaffolder/templates/`` directory (or a user-supplied
directory) and renders them with resource-specific context data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for resource scaffolding.

    Templates are ``.j2`` files under a configurable template directory.
    Undefined variables raise instead of rendering as empty strings, so a
    template set written for another framework fails loudly when it asks
    for context the generator does not provide.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["ucfirst"] = ucfirst
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["php_str"] = php_str
        self.env.filters["php_list"] = php_list

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"controller.php.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def ucfirst(value: str) -> str:
    """Upper-case the first character only (``post_tag`` -> ``Post_tag``)."""
    return value[:1].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert ``blog_post`` to ``BlogPost``.

    Only the first letter of each underscore-separated part is upper-cased,
    so ``blog_postTag`` becomes ``BlogPostTag``.
    """
    return "".join(ucfirst(part) for part in value.split("_"))


def php_str(value: str) -> str:
    """Render *value* as a single-quoted PHP string literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def php_list(values: list[str]) -> str:
    """Render a list of strings as quoted PHP array items: ``'a', 'b'``."""
    return ", ".join(php_str(v) for v in values)
