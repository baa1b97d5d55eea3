"""CLI parser and entrypoint tests."""

from __future__ import annotations

import json

import pytest

from glyphgen.cli import _build_parser, main
from tests._fixtures.icon_builder import IconTreeBuilder, svg


def test_cli_defaults_to_full_build() -> None:
    parser = _build_parser()
    args = parser.parse_args([])
    assert args.command is None
    assert args.watch is False
    assert args.verbose is False
    assert args.config == "."


def test_cli_accepts_watch_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--watch", "--config", "icons"])
    assert args.watch is True
    assert args.config == "icons"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["gallery", "--verbose", "--output", "out.html"])
    assert args.command == "gallery"
    assert args.verbose is True
    assert args.output == "out.html"


def test_cli_serve_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["serve", "--port", "9000"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 9000


def test_main_runs_full_build(icon_tree: IconTreeBuilder) -> None:
    icon_tree.add_icon("arrow-down", {"16": svg(16, '<path fill="#000000"/>')})

    main(["--config", str(icon_tree.root)])

    assert (icon_tree.out_dir / "icons" / "arrow-down" / "16.js").exists()
    index = (icon_tree.out_dir / "index.js").read_text(encoding="utf-8")
    assert index == "export { ArrowDown16 } from './icons/arrow-down/16.js';\n"
    manifest = json.loads((icon_tree.out_dir / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["icons"][0]["name"] == "arrow-down"


def test_main_gallery_writes_page_from_last_build(icon_tree: IconTreeBuilder) -> None:
    icon_tree.add_icon("bell", {"20": svg(20, "")})
    main(["--config", str(icon_tree.root)])
    output = icon_tree.root / "site" / "gallery.html"

    main(["--config", str(icon_tree.root), "gallery", "--output", str(output)])

    assert "Bell20" in output.read_text(encoding="utf-8")


def test_main_exits_on_invalid_config(icon_tree: IconTreeBuilder) -> None:
    icon_tree.write_config("sizes: []\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(icon_tree.root)])

    assert excinfo.value.code == 1


def test_main_exits_when_icons_directory_missing(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path)])

    assert excinfo.value.code == 1


def test_main_gallery_requires_a_build(icon_tree: IconTreeBuilder) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(icon_tree.root), "gallery"])

    assert excinfo.value.code == 1
