"""Pipeline orchestration for full builds."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .codegen.index import IndexGenerator
from .compiler import IconCompiler
from .config import ConfigError, GlyphGenConfig
from .gallery import GalleryExporter
from .icon_scanner import IconScanner
from .logging import get_logger
from .manifest import write_manifest
from .models import BuildResult, ManifestEntry


class BuildError(RuntimeError):
    """Raised when a full build cannot prepare its output tree."""


class BuildOrchestrator:
    """Clears the output tree and regenerates every icon plus the aggregate index."""

    def __init__(
        self,
        config: GlyphGenConfig,
        *,
        scanner: IconScanner | None = None,
        compiler: IconCompiler | None = None,
        index_generator: IndexGenerator | None = None,
        gallery_exporter: GalleryExporter | None = None,
    ) -> None:
        self.config = config
        self.scanner = scanner or IconScanner(
            config.sizes,
            source_extension=config.source_extension,
            colorful_prefix=config.colorful_prefix,
            ignore_hidden=config.watch.ignore_hidden,
        )
        self.compiler = compiler or IconCompiler(config, scanner=self.scanner)
        self.index_generator = index_generator or IndexGenerator(
            config.templates_dir, module_extension=config.module_extension
        )
        self._gallery_exporter = gallery_exporter
        self.logger = get_logger("orchestrator")

    @property
    def gallery_exporter(self) -> GalleryExporter:
        if self._gallery_exporter is None:
            self._gallery_exporter = GalleryExporter.from_config(self.config)
        return self._gallery_exporter

    def run_full_build(self) -> BuildResult:
        """Rebuild the whole output tree from the icons directory."""
        out_dir = self.config.out_dir
        self.logger.info("Starting build of %s into %s", self.config.icons_dir, out_dir)
        # Discovery fails on a missing icons root before anything is deleted.
        icon_dirs = self.scanner.discover(self.config.icons_dir)
        self.logger.info("Found %d icon directories", len(icon_dirs))
        self._reset_output(out_dir)

        entries: List[ManifestEntry] = []
        skipped: List[str] = []
        for icon_dir in icon_dirs:
            entry = self.compiler.compile(icon_dir)
            if entry is None:
                skipped.append(icon_dir.name)
            else:
                entries.append(entry)

        index_path, types_path, manifest_path = self.reindex(entries)

        gallery_path: Optional[Path] = None
        if self.config.gallery.enabled:
            gallery_path = self.export_gallery(entries)

        result = BuildResult(
            entries=entries,
            skipped=skipped,
            index_path=index_path,
            types_path=types_path,
            manifest_path=manifest_path,
            gallery_path=gallery_path,
        )
        self.logger.info(
            "Build complete! Generated %d icons (%d components)",
            len(entries),
            result.component_count,
        )
        if skipped:
            self.logger.warning("Skipped %d icon directories: %s", len(skipped), ", ".join(skipped))
        self.logger.info("Output directory: %s", out_dir)
        return result

    def compile_icon(self, icon_dir: Path) -> Optional[ManifestEntry]:
        """Recompile a single icon directory without touching the aggregate index."""
        return self.compiler.compile(icon_dir)

    def reindex(self, entries: Sequence[ManifestEntry]) -> Tuple[Path, Path, Path]:
        """Regenerate index, type declarations and manifest for ``entries``."""
        out_dir = self.config.out_dir
        index_path, types_path = self.index_generator.generate(entries, out_dir)
        manifest_path = write_manifest(entries, out_dir)
        return index_path, types_path, manifest_path

    def export_gallery(self, entries: Sequence[ManifestEntry]) -> Path:
        destination = self.config.gallery.path or self.config.root / "demo" / "index.html"
        path = self.gallery_exporter.export(entries, destination)
        self.logger.info("Gallery saved to %s", path)
        return path

    def _reset_output(self, out_dir: Path) -> None:
        icons_dir = self.config.icons_dir.resolve()
        resolved_out = out_dir.resolve()
        if resolved_out == icons_dir or resolved_out in icons_dir.parents:
            raise ConfigError(
                f"Refusing to clear {out_dir}: it contains the icons directory {icons_dir}"
            )
        if icons_dir in resolved_out.parents:
            raise ConfigError(f"Output directory {out_dir} must not live inside {icons_dir}")
        try:
            if out_dir.exists():
                shutil.rmtree(out_dir)
            out_dir.mkdir(parents=True)
        except OSError as exc:
            raise BuildError(f"Could not reset output directory {out_dir}: {exc}") from exc
