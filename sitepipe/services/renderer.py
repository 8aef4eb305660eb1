"""Template rendering capability used by the site generator.

The generator only depends on :class:`Renderer`: any object exposing
``render(template_name, context) -> str`` can replace the bundled Jinja2
implementation.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from sitepipe.services.errors import RenderError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE = "page.html"


class Renderer(Protocol):
    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        ...


class JinjaRenderer:
    """Render templates from *templates_dir* with HTML autoescaping enabled."""

    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as exc:
            logger.error("Template %s failed to render: %s", template_name, exc)
            raise RenderError(f"Failed to render template '{template_name}': {exc}") from exc


@lru_cache
def get_renderer() -> JinjaRenderer:
    """Return the shared renderer for the bundled templates."""
    return JinjaRenderer()
