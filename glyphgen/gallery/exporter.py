"""Renders the standalone icon gallery page."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment

from ..codegen.index import INDEX_FILENAME
from ..config import DEFAULT_COLOR, DEFAULT_SIZES, GlyphGenConfig
from ..logging import get_logger
from ..models import ManifestEntry
from ..templating import create_environment


@dataclass(frozen=True)
class GalleryIcon:
    """One row of the gallery's embedded icon table."""

    name: str
    identifier: str
    sizes: List[int]
    components: List[str]


def _size_key(size: str) -> tuple[int, str]:
    return (int(size), size) if size.isdigit() else (0, size)


class GalleryExporter:
    """Builds the gallery HTML from typed manifest entries."""

    TEMPLATE_NAME = "gallery.html.j2"

    def __init__(
        self,
        index_path: Path,
        templates_dir: Path | None = None,
        *,
        title: str = "Icon Gallery",
        sizes: Sequence[str] = DEFAULT_SIZES,
        default_color: str = DEFAULT_COLOR,
        react_url: str = "https://esm.sh/react@18.3.1",
        react_dom_server_url: str = "https://esm.sh/react-dom@18.3.1/server",
        environment: Environment | None = None,
    ) -> None:
        self.index_path = index_path
        self.title = title
        self.sizes = list(sizes)
        self.default_color = default_color
        self.react_url = react_url
        self.react_dom_server_url = react_dom_server_url
        self._env = environment or create_environment(templates_dir)
        self.logger = get_logger("gallery")

    @classmethod
    def from_config(cls, config: GlyphGenConfig) -> "GalleryExporter":
        return cls(
            config.out_dir / INDEX_FILENAME,
            config.templates_dir,
            title=config.gallery.title,
            sizes=config.sizes,
            default_color=config.default_color,
            react_url=config.gallery.react_url,
            react_dom_server_url=config.gallery.react_dom_server_url,
        )

    def icon_table(self, entries: Sequence[ManifestEntry]) -> List[GalleryIcon]:
        """Sort icons by name and each icon's sizes ascending."""
        table: List[GalleryIcon] = []
        for entry in sorted(entries, key=lambda item: item.name):
            sizes = sorted((size for size in entry.sizes if size.isdigit()), key=_size_key)
            if not sizes:
                continue
            table.append(
                GalleryIcon(
                    name=entry.name,
                    identifier=entry.identifier,
                    sizes=[int(size) for size in sizes],
                    components=[f"{entry.identifier}{size}" for size in sizes],
                )
            )
        return table

    def render(self, entries: Sequence[ManifestEntry], *, import_path: str) -> str:
        icons = self.icon_table(entries)
        imports = [component for icon in icons for component in icon.components]
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(
            title=self.title,
            icons=icons,
            imports=imports,
            import_path=import_path,
            sizes=self.sizes,
            default_color=self.default_color,
            react_url=self.react_url,
            react_dom_server_url=self.react_dom_server_url,
        )

    def export(self, entries: Sequence[ManifestEntry], destination: Path) -> Path:
        """Write the gallery page to ``destination`` and return its path."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        html = self.render(entries, import_path=self._import_path(destination))
        destination.write_text(html, encoding="utf-8")
        self.logger.info("Generated gallery with %d icons", len(self.icon_table(entries)))
        return destination

    def _import_path(self, destination: Path) -> str:
        relative = os.path.relpath(self.index_path.resolve(), destination.parent.resolve())
        relative = Path(relative).as_posix()
        if not relative.startswith("."):
            relative = f"./{relative}"
        return relative
