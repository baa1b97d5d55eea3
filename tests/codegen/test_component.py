"""Tests for glyphgen.codegen.component."""

from __future__ import annotations

from pathlib import Path

from glyphgen.codegen.component import ComponentSynthesizer, escape_template_literal
from glyphgen.models import ExtractedAttributes

_ATTRIBUTES = ExtractedAttributes(width=24, height=24, view_box="0 0 24 24", inner_markup="")


def test_render_exposes_named_and_default_export() -> None:
    source = ComponentSynthesizer().render(
        "ArrowDown24",
        '<path fill="${color}" d="M0 0"/>',
        "24",
        _ATTRIBUTES,
        is_colorful=False,
    )

    assert "import React from 'react';" in source
    assert "export const ArrowDown24 = ({" in source
    assert "export default ArrowDown24;" in source
    assert "  color = '#FAFBFB'," in source
    assert "width: 24," in source
    assert "height: 24," in source
    assert 'viewBox: "0 0 24 24",' in source
    assert 'dangerouslySetInnerHTML: { __html: `<path fill="${color}" d="M0 0"/>` }' in source
    assert source.endswith(";\n")


def test_render_uses_requested_size_not_source_dimensions() -> None:
    attributes = ExtractedAttributes(width=48, height=48, view_box="0 0 48 48", inner_markup="")

    source = ComponentSynthesizer().render("Box16", "<rect/>", "16", attributes, is_colorful=False)

    assert "width: 16," in source
    assert "height: 16," in source
    assert 'viewBox: "0 0 48 48",' in source


def test_colorful_component_comments_out_color_option() -> None:
    source = ComponentSynthesizer().render(
        "ColorfulBadge24", '<path fill="#FF0000"/>', "24", _ATTRIBUTES, is_colorful=True
    )

    assert "  // color = '#FAFBFB'," in source
    assert '<path fill="#FF0000"/>' in source


def test_default_color_is_configurable() -> None:
    source = ComponentSynthesizer(default_color="#123456").render(
        "Dot16", "<circle/>", "16", _ATTRIBUTES, is_colorful=False
    )

    assert "color = '#123456'," in source


def test_escape_template_literal_keeps_placeholder_live() -> None:
    markup = '<text>`quoted` ${not-a-color} \\n</text><path fill="${color}"/>'

    escaped = escape_template_literal(markup)

    assert escaped == '<text>\\`quoted\\` \\${not-a-color} \\\\n</text><path fill="${color}"/>'


def test_backticks_in_markup_are_escaped_in_module() -> None:
    source = ComponentSynthesizer().render(
        "Code24", "<title>`code`</title>", "24", _ATTRIBUTES, is_colorful=True
    )

    assert "<title>\\`code\\`</title>" in source


def test_view_box_quotes_are_escaped() -> None:
    attributes = ExtractedAttributes(width=24, height=24, view_box='0 0 "24" 24', inner_markup="")

    source = ComponentSynthesizer().render("Odd24", "", "24", attributes, is_colorful=False)

    assert 'viewBox: "0 0 \\"24\\" 24",' in source


def test_custom_templates_dir_overrides_bundled_template(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "component.js.j2").write_text(
        "export const {{ identifier }} = () => `{{ markup }}`;\n", encoding="utf-8"
    )

    source = ComponentSynthesizer(templates).render(
        "Plain16", "<rect/>", "16", _ATTRIBUTES, is_colorful=False
    )

    assert source == "export const Plain16 = () => `<rect/>`;\n"
