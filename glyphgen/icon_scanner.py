"""Icon directory discovery and source loading."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from .logging import get_logger
from .models import IconSource

_EXCLUDED_DIRS = {
    "node_modules",
    "__pycache__",
}

logger = get_logger("scanner")


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


class IconScanner:
    """Lists icon directories and reads their size variants."""

    def __init__(
        self,
        sizes: Sequence[str],
        *,
        source_extension: str = ".svg",
        colorful_prefix: str = "colorful-",
        ignore_hidden: bool = True,
    ) -> None:
        self.sizes = list(sizes)
        self.source_extension = source_extension
        self.colorful_prefix = colorful_prefix
        self.ignore_hidden = ignore_hidden

    def discover(self, root: Path) -> List[Path]:
        """Return icon directories directly under ``root``, sorted by name."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Icons directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Icons path is not a directory: {root}")

        directories: List[Path] = []
        for child in sorted(root_path.iterdir(), key=lambda path: path.name):
            if not child.is_dir() or child.name in _EXCLUDED_DIRS:
                continue
            if self.ignore_hidden and _is_hidden(child.name):
                continue
            directories.append(child)
        return directories

    def variant_path(self, icon_dir: Path, size: str) -> Path:
        return icon_dir / f"{size}{self.source_extension}"

    def is_colorful(self, name: str) -> bool:
        return bool(self.colorful_prefix) and name.startswith(self.colorful_prefix)

    def load(self, icon_dir: Path) -> IconSource:
        """Read every configured size variant present in ``icon_dir``.

        Unreadable files are logged and skipped so one bad variant does not
        stop the rest of the directory from compiling.
        """
        name = icon_dir.name
        variants: Dict[str, str] = {}
        for size in self.sizes:
            path = self.variant_path(icon_dir, size)
            if not path.is_file():
                continue
            try:
                variants[size] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Failed to read %s; skipping size %s: %s", path, size, exc)
        return IconSource(
            name=name,
            path=icon_dir,
            is_colorful=self.is_colorful(name),
            variants=variants,
        )
