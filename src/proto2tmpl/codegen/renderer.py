"""Jinja2 backed rendering of :class:`~proto2tmpl.model.SchemaModel` objects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import jinja2

from ..errors import TemplateLoadError, TemplateRenderError
from ..model import SchemaModel

logger = logging.getLogger(__name__)


class ITemplateRenderer(Protocol):
    """Renders one model into the text of one output file."""

    def render(self, schema: SchemaModel) -> str:
        ...


def create_environment(search_path: str | Path) -> jinja2.Environment:
    """Return the Jinja2 environment used for user templates."""

    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(search_path)),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


class TemplateRenderer:
    """Render a compiled Jinja2 template against the intermediate model.

    Templates see the model's top-level fields (``name``, ``package``,
    ``messages``, ``services``) as variables. Referencing anything else is an
    error rather than silently rendering an empty string.
    """

    def __init__(self, template: jinja2.Template) -> None:
        self._template = template

    @classmethod
    def from_path(cls, template_path: str | Path) -> "TemplateRenderer":
        path = Path(template_path).expanduser()
        if not path.is_file():
            raise TemplateLoadError(f"unable to parse template: {path} does not exist")

        environment = create_environment(path.parent)
        try:
            template = environment.get_template(path.name)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateLoadError(
                f"unable to parse template: {path}:{exc.lineno}: {exc.message}"
            ) from exc
        except (jinja2.TemplateNotFound, OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(f"unable to read template: {path}: {exc}") from exc

        logger.info("Loaded template %s", path)
        return cls(template)

    @classmethod
    def from_string(cls, source: str) -> "TemplateRenderer":
        environment = create_environment(".")
        try:
            template = environment.from_string(source)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateLoadError(
                f"unable to parse template: line {exc.lineno}: {exc.message}"
            ) from exc
        return cls(template)

    def render(self, schema: SchemaModel) -> str:
        try:
            return self._template.render(**schema.template_context())
        except Exception as exc:
            raise TemplateRenderError(f"failed to render {schema.name}: {exc}") from exc


__all__ = ["ITemplateRenderer", "TemplateRenderer", "create_environment"]
