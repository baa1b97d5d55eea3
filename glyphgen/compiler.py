"""Per-icon compilation: source variants in, component modules out."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .codegen.component import ComponentSynthesizer
from .config import GlyphGenConfig
from .icon_scanner import IconScanner
from .logging import get_logger
from .models import GeneratedComponent, IconSource, ManifestEntry
from .svg.attributes import AttributeExtractor
from .svg.colors import ColorParameterizer


class IconCompiler:
    """Compiles one icon directory into a module per available size."""

    def __init__(
        self,
        config: GlyphGenConfig,
        *,
        scanner: IconScanner | None = None,
        extractor: AttributeExtractor | None = None,
        parameterizer: ColorParameterizer | None = None,
        synthesizer: ComponentSynthesizer | None = None,
    ) -> None:
        self.config = config
        self.scanner = scanner or IconScanner(
            config.sizes,
            source_extension=config.source_extension,
            colorful_prefix=config.colorful_prefix,
            ignore_hidden=config.watch.ignore_hidden,
        )
        self.extractor = extractor or AttributeExtractor()
        self.parameterizer = parameterizer or ColorParameterizer()
        self.synthesizer = synthesizer or ComponentSynthesizer(
            config.templates_dir, default_color=config.default_color
        )
        self.logger = get_logger("compiler")

    def output_dir(self, name: str) -> Path:
        return self.config.out_dir / "icons" / name

    def synthesize(self, source: IconSource) -> List[GeneratedComponent]:
        """Generate module text for every variant of ``source`` without touching disk."""
        components: List[GeneratedComponent] = []
        for size, markup in source.variants.items():
            attributes = self.extractor.extract(markup)
            processed = self.parameterizer.apply(attributes.inner_markup, source.is_colorful)
            identifier = f"{source.identifier}{size}"
            source_text = self.synthesizer.render(
                identifier,
                processed,
                size,
                attributes,
                is_colorful=source.is_colorful,
            )
            components.append(
                GeneratedComponent(identifier=identifier, size=size, source_text=source_text)
            )
        return components

    def compile(self, icon_dir: Path) -> Optional[ManifestEntry]:
        """Compile ``icon_dir``; returns ``None`` when it has no usable variants."""
        icon_dir = Path(icon_dir)
        self.logger.debug("Processing %s", icon_dir.name)
        source = self.scanner.load(icon_dir)
        if not source.variants:
            self.logger.warning(
                "No %s files found in %s", self.config.source_extension, icon_dir
            )
            return None

        target_dir = self.output_dir(source.name)
        target_dir.mkdir(parents=True, exist_ok=True)
        for component in self.synthesize(source):
            path = target_dir / f"{component.size}{self.config.module_extension}"
            path.write_text(component.source_text, encoding="utf-8")

        return ManifestEntry(
            name=source.name,
            identifier=source.identifier,
            sizes=list(source.variants),
        )
