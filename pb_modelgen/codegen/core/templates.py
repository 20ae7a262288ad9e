"""
Jinja2 rendering for the model templates.

Templates come from a generator's template directory; in-memory templates
registered with ``add_template`` take precedence over files of the same
name. Rendering is strict: an undefined variable is an error, never an
empty string in the generated source.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import jinja2
from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)

from .naming import to_member_name, to_type_name


class TemplateError(Exception):
    """Raised when a template is missing or fails to render."""

    pass


def dart_string(value: Any) -> str:
    """Quote a value as a single-quoted Dart string literal."""
    escaped = (
        str(value)
        .replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


class TemplateEngine:
    """Jinja2 environment set up for emitting source code."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory holding ``*.j2`` files, if any
        """
        self.template_dir = template_dir
        self._overrides: Dict[str, str] = {}

        loaders = [DictLoader(self._overrides)]
        if template_dir is not None and template_dir.is_dir():
            loaders.append(FileSystemLoader(str(template_dir)))

        # Generated code, not markup: no autoescaping
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters.update(
            camel_case=to_member_name,
            pascal_case=to_type_name,
            dart_string=dart_string,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing, malformed, or uses a
                variable absent from ``context``
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        try:
            return self._env.from_string(source).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template, shadowing any file of that name."""
        self._overrides[name] = content
        # A file template loaded earlier would otherwise stay cached
        if self._env.cache is not None:
            self._env.cache.clear()

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
