"""Aggregate export index and type declarations for a full build."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from jinja2 import Environment

from ..logging import get_logger
from ..models import ManifestEntry
from ..templating import create_environment

INDEX_FILENAME = "index.js"
TYPES_FILENAME = "index.d.ts"


@dataclass(frozen=True)
class IndexExport:
    """One (icon, size) re-export."""

    identifier: str
    module_path: str


class IndexGenerator:
    """Writes ``index.js`` and ``index.d.ts`` from the ordered manifest."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        module_extension: str = ".js",
        environment: Environment | None = None,
    ) -> None:
        self.module_extension = module_extension
        self._env = environment or create_environment(templates_dir)
        self.logger = get_logger("index")

    def exports(self, entries: Sequence[ManifestEntry]) -> List[IndexExport]:
        """Flatten entries into re-exports, preserving manifest order."""
        result: List[IndexExport] = []
        for entry in entries:
            for size, identifier in zip(entry.sizes, entry.component_names()):
                result.append(
                    IndexExport(
                        identifier=identifier,
                        module_path=f"icons/{entry.name}/{size}{self.module_extension}",
                    )
                )
        return result

    def render_index(self, entries: Sequence[ManifestEntry]) -> str:
        template = self._env.get_template("index.js.j2")
        return template.render(exports=self.exports(entries))

    def render_types(self, entries: Sequence[ManifestEntry]) -> str:
        template = self._env.get_template("index.d.ts.j2")
        return template.render(exports=self.exports(entries))

    def generate(self, entries: Sequence[ManifestEntry], out_dir: Path) -> Tuple[Path, Path]:
        """Truncate and rewrite both index modules under ``out_dir``."""
        self.logger.info("Generating index files for %d icons", len(entries))
        out_dir.mkdir(parents=True, exist_ok=True)
        index_path = out_dir / INDEX_FILENAME
        types_path = out_dir / TYPES_FILENAME
        index_path.write_text(self.render_index(entries), encoding="utf-8")
        types_path.write_text(self.render_types(entries), encoding="utf-8")
        return index_path, types_path
