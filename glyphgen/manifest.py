"""Persisted build manifest shared with downstream consumers."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, List, Sequence

from .codegen.index import INDEX_FILENAME
from .models import ManifestEntry

MANIFEST_FILENAME = "manifest.json"
_MANIFEST_VERSION = 1

_EXPORT_LINE = re.compile(
    r"^export \{ (?P<export>\w+) \} from '\./icons/(?P<name>[^/']+)/(?P<size>[^/'.]+)\.\w+';\s*$"
)


def write_manifest(entries: Sequence[ManifestEntry], out_dir: Path) -> Path:
    """Write ``manifest.json`` for ``entries`` into ``out_dir``."""
    path = out_dir / MANIFEST_FILENAME
    payload = {
        "version": _MANIFEST_VERSION,
        "icons": [entry.to_dict() for entry in entries],
    }
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def read_manifest(path: Path) -> List[ManifestEntry]:
    """Return entries stored in ``path``; raises ValueError on an unknown layout."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict) or payload.get("version") != _MANIFEST_VERSION:
        raise ValueError(f"Unsupported manifest format in {path}")
    icons = payload.get("icons")
    if not isinstance(icons, list):
        raise ValueError(f"Manifest {path} has no icon list")

    entries: List[ManifestEntry] = []
    for item in icons:
        if not isinstance(item, dict):
            continue
        entry = ManifestEntry.from_dict(item)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_index_exports(text: str) -> List[ManifestEntry]:
    """Recover manifest entries from the export lines of a generated index module.

    Only used for output trees built without ``manifest.json``. Entries keep the
    order in which each icon first appears.
    """
    grouped: Dict[str, ManifestEntry] = {}
    for line in text.splitlines():
        match = _EXPORT_LINE.match(line)
        if not match:
            continue
        name = match.group("name")
        size = match.group("size")
        export = match.group("export")
        entry = grouped.get(name)
        if entry is None:
            identifier = export[: -len(size)] if export.endswith(size) else export
            entry = ManifestEntry(name=name, identifier=identifier, sizes=[])
            grouped[name] = entry
        if size not in entry.sizes:
            entry.sizes.append(size)
    return list(grouped.values())


def load_manifest(out_dir: Path) -> List[ManifestEntry]:
    """Load the manifest of a built output tree, falling back to the index module."""
    manifest_path = out_dir / MANIFEST_FILENAME
    if manifest_path.exists():
        return read_manifest(manifest_path)
    index_path = out_dir / INDEX_FILENAME
    if not index_path.exists():
        raise FileNotFoundError(f"No build output found in {out_dir}. Run `glyphgen` first.")
    return parse_index_exports(index_path.read_text(encoding="utf-8"))


__all__ = [
    "MANIFEST_FILENAME",
    "load_manifest",
    "parse_index_exports",
    "read_manifest",
    "write_manifest",
]
