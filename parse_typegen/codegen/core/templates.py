"""
Jinja2 environment used by the artifact generators.

Templates produce TypeScript/JavaScript, so HTML autoescaping is off and
undefined variables are errors rather than empty strings.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2 import TemplateError as JinjaTemplateError

from .errors import TemplateError


def ts_string(value: Any) -> str:
    """Quote a value as a double-quoted TypeScript string literal."""
    return json.dumps(str(value), ensure_ascii=False)


def comment(value: str, marker: str = "//") -> str:
    """Turn every non-blank line into a line comment."""
    return "\n".join(
        f"{marker} {line}" if line.strip() else line for line in str(value).split("\n")
    )


FILTERS = {
    "ts_string": ts_string,
    "comment": comment,
}


class TemplateEngine:
    """Renders generator templates from a template directory."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory of `.j2` files; without one no template
                can be found
        """
        self.template_dir = template_dir
        if template_dir and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: The template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
