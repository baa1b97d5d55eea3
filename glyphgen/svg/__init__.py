"""Best-effort SVG markup helpers used by the compiler."""

from .attributes import (
    DEFAULT_HEIGHT,
    DEFAULT_VIEW_BOX,
    DEFAULT_WIDTH,
    AttributeExtractor,
    extract_attributes,
)
from .colors import COLOR_PLACEHOLDER, ColorParameterizer

__all__ = [
    "AttributeExtractor",
    "COLOR_PLACEHOLDER",
    "ColorParameterizer",
    "DEFAULT_HEIGHT",
    "DEFAULT_VIEW_BOX",
    "DEFAULT_WIDTH",
    "extract_attributes",
]
