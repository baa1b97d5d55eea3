"""Rewrites fixed fill colors into the component's runtime color parameter."""

from __future__ import annotations

import re

COLOR_PLACEHOLDER = "${color}"

# 3, 4, 6 or 8 hex digits; named colors, currentColor and url(#id) never match.
_HEX_FILL = re.compile(
    r'(?<![\w:-])fill="#(?:[0-9A-Fa-f]{8}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3,4})"'
)


class ColorParameterizer:
    """Decides per icon whether hex fills become the color placeholder."""

    def __init__(self, placeholder: str = COLOR_PLACEHOLDER) -> None:
        self.placeholder = placeholder

    def apply(self, markup: str, is_colorful: bool) -> str:
        if is_colorful:
            return markup
        return _HEX_FILL.sub(f'fill="{self.placeholder}"', markup)
