"""Renders one React component module per icon size."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment

from ..config import DEFAULT_COLOR
from ..models import ExtractedAttributes
from ..svg.colors import COLOR_PLACEHOLDER
from ..templating import create_environment


def escape_template_literal(markup: str, placeholder: str = COLOR_PLACEHOLDER) -> str:
    """Escape ``markup`` for a JS template literal, leaving ``placeholder`` live."""
    parts = markup.split(placeholder)
    escaped = [
        part.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
        for part in parts
    ]
    return placeholder.join(escaped)


def _escape_double_quoted(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _escape_single_quoted(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


class ComponentSynthesizer:
    """Combines extracted attributes and processed markup into module source."""

    TEMPLATE_NAME = "component.js.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        default_color: str = DEFAULT_COLOR,
        environment: Environment | None = None,
    ) -> None:
        self.default_color = default_color
        self._env = environment or create_environment(templates_dir)

    def render(
        self,
        identifier: str,
        markup: str,
        size: str,
        attributes: ExtractedAttributes,
        *,
        is_colorful: bool,
    ) -> str:
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(
            identifier=identifier,
            size=size,
            view_box=_escape_double_quoted(attributes.view_box),
            markup=escape_template_literal(markup),
            colorful=is_colorful,
            default_color=_escape_single_quoted(self.default_color),
        )