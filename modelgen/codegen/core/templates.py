"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Callable, List, Optional, Sequence
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, search_path: Sequence[Path] = ()):
        """
        Initialize template engine.

        Args:
            search_path: Directories searched in order for template files;
                earlier entries override later ones
        """
        self.search_path: List[Path] = [Path(p) for p in search_path if Path(p).is_dir()]
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=FileSystemLoader([str(p) for p in self.search_path]),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["comment"] = self._comment_filter
        self._env.filters["single_line"] = self._single_line_filter

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    def load(self, template_name: str):
        """
        Load and compile a template once so it can be rendered from many threads.

        Raises:
            TemplateError: If the template is missing or does not compile
        """
        try:
            return self._env.get_template(template_name)
        except TemplateNotFound:
            searched = ", ".join(str(p) for p in self.search_path) or "<none>"
            raise TemplateError(f"Template {template_name} not found (searched: {searched})")
        except TemplateSyntaxError as e:
            raise TemplateError(f"Template {template_name} line {e.lineno}: {e.message}")

    def render_template(
        self,
        template_name: str,
        context: Dict[str, Any],
        helpers: Optional[Dict[str, Callable]] = None,
    ) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template
            helpers: Named functions callable from the template

        Returns:
            Rendered template content
        """
        template = self.load(template_name)
        try:
            return template.render(**context, **(helpers or {}))
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    # Template filters for code generation

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)

    def _single_line_filter(self, value: str) -> str:
        """Fold a multi-line value onto one line."""
        return " ".join(line.strip() for line in str(value).splitlines() if line.strip())


def create_template_engine(*search_path: Path) -> TemplateEngine:
    """Create a template engine over the given directories."""
    return TemplateEngine(search_path)
