"""
Jinja2 environment for the bundled code templates.
"""

from typing import Dict, Any
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from .errors import TemplateError
from .naming import upper_first


def comment_lines(value: Any, style: str = "//") -> str:
    """Prefix each line with a comment marker, without trailing blanks."""
    lines = str(value).split("\n")
    return "\n".join(
        f"{style} {line.rstrip()}" if line.strip() else style for line in lines
    )


class TemplateEngine:
    """Loads templates from one directory and renders them."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files

        Raises:
            TemplateError: If the directory does not exist
        """
        if not template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {template_dir}")

        self.template_dir = template_dir
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            # trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["upper_first"] = upper_first
        self._env.filters["comment"] = comment_lines

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template does not exist
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        return template.render(**context)


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a template engine backed by a template directory."""
    return TemplateEngine(template_dir)
