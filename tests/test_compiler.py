"""Tests for glyphgen.compiler."""

from __future__ import annotations

import logging
import re

import pytest

from glyphgen.compiler import IconCompiler
from glyphgen.models import ManifestEntry
from glyphgen.svg.attributes import AttributeExtractor
from tests._fixtures.icon_builder import IconTreeBuilder, svg

_EMBEDDED = re.compile(r"__html: `(.*)` \}", re.DOTALL)


def _embedded_markup(source_text: str) -> str:
    match = _EMBEDDED.search(source_text)
    assert match, source_text
    return match.group(1)


def test_compile_writes_one_module_per_present_size(icon_tree: IconTreeBuilder) -> None:
    icon_dir = icon_tree.add_icon(
        "arrow-down",
        {
            "16": svg(16, '<path fill="#000000" d="M0 0"/>'),
            "24": svg(24, '<path fill="#000000" d="M0 0"/>'),
        },
    )
    compiler = IconCompiler(icon_tree.config())

    entry = compiler.compile(icon_dir)

    assert entry == ManifestEntry(name="arrow-down", identifier="ArrowDown", sizes=["16", "24"])
    out = icon_tree.out_dir / "icons" / "arrow-down"
    assert sorted(path.name for path in out.iterdir()) == ["16.js", "24.js"]
    module = (out / "16.js").read_text(encoding="utf-8")
    assert "export const ArrowDown16 = ({" in module
    assert _embedded_markup(module) == '<path fill="${color}" d="M0 0"/>'


def test_compile_returns_none_and_warns_for_empty_directory(
    icon_tree: IconTreeBuilder, caplog: pytest.LogCaptureFixture
) -> None:
    icon_dir = icon_tree.add_icon("empty", {})
    (icon_dir / "notes.txt").write_text("no icons here", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="glyphgen")

    entry = IconCompiler(icon_tree.config()).compile(icon_dir)

    assert entry is None
    assert not (icon_tree.out_dir / "icons" / "empty").exists()
    assert any("No .svg files found" in record.getMessage() for record in caplog.records)


def test_colorful_icon_keeps_literal_fills(icon_tree: IconTreeBuilder) -> None:
    body = '<path fill="#FF0000" d="M0 0"/><path fill="#00FF00" d="M1 1"/>'
    icon_dir = icon_tree.add_icon("colorful-badge", {"24": svg(24, body)})
    compiler = IconCompiler(icon_tree.config())

    entry = compiler.compile(icon_dir)

    assert entry is not None
    assert entry.sizes == ["24"]
    module = (icon_tree.out_dir / "icons" / "colorful-badge" / "24.js").read_text(encoding="utf-8")
    assert _embedded_markup(module) == body
    assert "// color = '#FAFBFB'," in module


def test_synthesize_is_pure_and_uses_extracted_view_box(icon_tree: IconTreeBuilder) -> None:
    icon_dir = icon_tree.add_icon("grid", {"20": svg(20, "<rect/>", view_box="0 0 32 32")})
    compiler = IconCompiler(icon_tree.config())

    components = compiler.synthesize(compiler.scanner.load(icon_dir))

    assert [component.identifier for component in components] == ["Grid20"]
    assert 'viewBox: "0 0 32 32",' in components[0].source_text
    assert not icon_tree.out_dir.exists()


def test_missing_view_box_uses_default(icon_tree: IconTreeBuilder) -> None:
    icon_dir = icon_tree.add_icon("plain", {"24": '<svg width="24" height="24"><rect/></svg>'})
    compiler = IconCompiler(icon_tree.config())

    components = compiler.synthesize(compiler.scanner.load(icon_dir))

    assert 'viewBox: "0 0 24 24",' in components[0].source_text


def test_recompile_overwrites_previous_module(icon_tree: IconTreeBuilder) -> None:
    icon_dir = icon_tree.add_icon("dot", {"16": svg(16, '<circle r="1"/>')})
    compiler = IconCompiler(icon_tree.config())
    compiler.compile(icon_dir)

    (icon_dir / "16.svg").write_text(svg(16, '<circle r="7"/>'), encoding="utf-8")
    compiler.compile(icon_dir)

    module = (icon_tree.out_dir / "icons" / "dot" / "16.js").read_text(encoding="utf-8")
    assert 'r="7"' in module
    assert 'r="1"' not in module


def test_injected_collaborators_are_used(icon_tree: IconTreeBuilder) -> None:
    icon_dir = icon_tree.add_icon("wide", {"24": "<svg><rect/></svg>"})
    compiler = IconCompiler(
        icon_tree.config(),
        extractor=AttributeExtractor(default_view_box="0 0 48 48"),
    )

    components = compiler.synthesize(compiler.scanner.load(icon_dir))

    assert 'viewBox: "0 0 48 48",' in components[0].source_text


def test_custom_sizes_from_config(icon_tree: IconTreeBuilder) -> None:
    icon_tree.write_config(
        """
        sizes: [32, 48]
        module_extension: ".mjs"
        """
    )
    icon_dir = icon_tree.add_icon("big", {"24": svg(24, ""), "48": svg(48, "")})

    entry = IconCompiler(icon_tree.config()).compile(icon_dir)

    assert entry is not None
    assert entry.sizes == ["48"]
    assert (icon_tree.out_dir / "icons" / "big" / "48.mjs").exists()
