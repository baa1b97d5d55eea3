"""Template-driven generation of component, index and type modules."""

from .component import ComponentSynthesizer, escape_template_literal
from .index import IndexExport, IndexGenerator

__all__ = [
    "ComponentSynthesizer",
    "IndexExport",
    "IndexGenerator",
    "escape_template_literal",
]
