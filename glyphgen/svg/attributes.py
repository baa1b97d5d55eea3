"""Attribute and inner-markup extraction for raw SVG sources.

Extraction is pattern based rather than a real XML parse. Every lookup has a
documented fallback so malformed input degrades instead of failing a build:

* ``width`` / ``height`` fall back to :data:`DEFAULT_WIDTH` / :data:`DEFAULT_HEIGHT`
  when the outer ``<svg>`` tag lacks an integer value.
* ``viewBox`` falls back to :data:`DEFAULT_VIEW_BOX`.
* The wrapper is removed by dropping the first ``<svg ...>`` opening tag and the
  first literal ``</svg>``. A closing tag written any other way is left in place.
"""

from __future__ import annotations

import re

from ..models import ExtractedAttributes

DEFAULT_WIDTH = 24
DEFAULT_HEIGHT = 24
DEFAULT_VIEW_BOX = "0 0 24 24"

_OPEN_TAG = re.compile(r"<svg\b[^>]*>")
_CLOSE_TAG = "</svg>"


def _attribute_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'(?<![\w:-]){name}\s*=\s*"([^"]*)"')


_WIDTH = _attribute_pattern("width")
_HEIGHT = _attribute_pattern("height")
_VIEW_BOX = _attribute_pattern("viewBox")


class AttributeExtractor:
    """Pulls dimensions and reusable inner markup out of SVG source text."""

    def __init__(
        self,
        *,
        default_width: int = DEFAULT_WIDTH,
        default_height: int = DEFAULT_HEIGHT,
        default_view_box: str = DEFAULT_VIEW_BOX,
    ) -> None:
        self.default_width = default_width
        self.default_height = default_height
        self.default_view_box = default_view_box

    def extract(self, markup: str) -> ExtractedAttributes:
        open_match = _OPEN_TAG.search(markup)
        opening_tag = open_match.group(0) if open_match else ""
        return ExtractedAttributes(
            width=self._int_attribute(_WIDTH, opening_tag, self.default_width),
            height=self._int_attribute(_HEIGHT, opening_tag, self.default_height),
            view_box=self._view_box(opening_tag),
            inner_markup=self.strip_wrapper(markup),
        )

    @staticmethod
    def strip_wrapper(markup: str) -> str:
        """Return ``markup`` without its outer ``<svg>`` element, trimmed."""
        inner = _OPEN_TAG.sub("", markup, count=1)
        inner = inner.replace(_CLOSE_TAG, "", 1)
        return inner.strip()

    def _view_box(self, opening_tag: str) -> str:
        match = _VIEW_BOX.search(opening_tag)
        if match and match.group(1).strip():
            return match.group(1)
        return self.default_view_box

    @staticmethod
    def _int_attribute(pattern: re.Pattern[str], opening_tag: str, default: int) -> int:
        match = pattern.search(opening_tag)
        if not match:
            return default
        value = match.group(1).strip()
        if value.endswith("px"):
            value = value[:-2]
        return int(value) if value.isdigit() else default


_DEFAULT_EXTRACTOR = AttributeExtractor()


def extract_attributes(markup: str) -> ExtractedAttributes:
    """Extract attributes using the default fallbacks."""
    return _DEFAULT_EXTRACTOR.extract(markup)
