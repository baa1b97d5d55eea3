"""Core data models shared across glyphgen components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


def to_pascal_case(name: str) -> str:
    """Convert a kebab-case icon name into a JavaScript-safe PascalCase identifier."""
    parts = [part for part in _WORD_SPLIT.split(name) if part]
    identifier = "".join(part[0].upper() + part[1:] for part in parts)
    if not identifier or identifier[0].isdigit():
        identifier = f"Icon{identifier}"
    return identifier


@dataclass
class IconSource:
    """One icon directory and the raw markup of each size variant found in it."""

    name: str
    path: Path
    is_colorful: bool
    variants: Dict[str, str] = field(default_factory=dict)

    @property
    def identifier(self) -> str:
        return to_pascal_case(self.name)


@dataclass(frozen=True)
class ExtractedAttributes:
    """Structural metadata pulled from the outer ``<svg>`` element."""

    width: int
    height: int
    view_box: str
    inner_markup: str


@dataclass
class GeneratedComponent:
    """Source text for one (icon, size) component module."""

    identifier: str
    size: str
    source_text: str


@dataclass
class ManifestEntry:
    """Compiled summary of one icon."""

    name: str
    identifier: str
    sizes: List[str]

    def component_names(self) -> List[str]:
        return [f"{self.identifier}{size}" for size in self.sizes]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "identifier": self.identifier, "sizes": list(self.sizes)}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> Optional["ManifestEntry"]:
        name = payload.get("name")
        sizes = payload.get("sizes")
        if not isinstance(name, str) or not isinstance(sizes, list) or not sizes:
            return None
        identifier = payload.get("identifier")
        if not isinstance(identifier, str) or not identifier:
            identifier = to_pascal_case(name)
        return cls(name=name, identifier=identifier, sizes=[str(size) for size in sizes])


@dataclass
class BuildResult:
    """Outcome of a full build pass."""

    entries: List[ManifestEntry]
    skipped: List[str]
    index_path: Path
    types_path: Path
    manifest_path: Path
    gallery_path: Optional[Path] = None

    @property
    def component_count(self) -> int:
        return sum(len(entry.sizes) for entry in self.entries)
