"""Configuration loading for glyphgen (.glyphgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".glyphgen.yml"

DEFAULT_SIZES: tuple[str, ...] = ("16", "20", "24")
DEFAULT_COLOR = "#FAFBFB"
DEFAULT_COLORFUL_PREFIX = "colorful-"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class WatchConfig:
    """Incremental rebuild behaviour."""

    reindex_on_change: bool = False
    ignore_hidden: bool = True


@dataclass
class GalleryConfig:
    """Settings for the derivative HTML gallery page."""

    enabled: bool = False
    path: Optional[Path] = None
    title: str = "Icon Gallery"
    react_url: str = "https://esm.sh/react@18.3.1"
    react_dom_server_url: str = "https://esm.sh/react-dom@18.3.1/server"


@dataclass
class GlyphGenConfig:
    """Represents the settings defined in .glyphgen.yml."""

    root: Path
    icons_dir: Path = Path("all-icons")
    out_dir: Path = Path("dist")
    sizes: List[str] = field(default_factory=lambda: list(DEFAULT_SIZES))
    default_color: str = DEFAULT_COLOR
    colorful_prefix: str = DEFAULT_COLORFUL_PREFIX
    source_extension: str = ".svg"
    module_extension: str = ".js"
    templates_dir: Optional[Path] = None
    log_file: Optional[Path] = None
    watch: WatchConfig = field(default_factory=WatchConfig)
    gallery: GalleryConfig = field(default_factory=GalleryConfig)

    def __post_init__(self) -> None:
        self.icons_dir = self._anchor(self.icons_dir)
        self.out_dir = self._anchor(self.out_dir)
        if self.gallery.path is None:
            self.gallery.path = Path("demo") / "index.html"
        self.gallery.path = self._anchor(self.gallery.path)

    def _anchor(self, path: Path) -> Path:
        path = Path(path).expanduser()
        return path if path.is_absolute() else self.root / path


def load_config(config_path: Path) -> GlyphGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GlyphGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    kwargs: Dict[str, Any] = {}
    for key in ("icons_dir", "out_dir"):
        value = _as_str(data.get(key))
        if value:
            kwargs[key] = Path(value)

    if "sizes" in data:
        kwargs["sizes"] = _as_sizes(data.get("sizes"))

    for key in ("default_color", "colorful_prefix"):
        value = _as_str(data.get(key))
        if value is not None:
            kwargs[key] = value

    for key in ("source_extension", "module_extension"):
        value = _as_str(data.get(key))
        if value is not None:
            if not value.startswith(".") or len(value) < 2:
                raise ConfigError(f"{key} must start with '.', got {value!r}")
            kwargs[key] = value

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        kwargs["templates_dir"] = root / templates_dir
    log_file = _as_str(data.get("log_file"))
    if log_file:
        kwargs["log_file"] = root / log_file

    watch_data = _as_dict(data.get("watch"))
    watch = WatchConfig()
    if watch_data:
        reindex = _as_bool(watch_data.get("reindex_on_change"))
        if reindex is not None:
            watch.reindex_on_change = reindex
        ignore_hidden = _as_bool(watch_data.get("ignore_hidden"))
        if ignore_hidden is not None:
            watch.ignore_hidden = ignore_hidden

    gallery_data = _as_dict(data.get("gallery"))
    gallery = GalleryConfig()
    if gallery_data:
        gallery.enabled = _as_bool(gallery_data.get("enabled")) or False
        gallery_path = _as_str(gallery_data.get("path"))
        if gallery_path:
            gallery.path = Path(gallery_path)
        for key in ("title", "react_url", "react_dom_server_url"):
            value = _as_str(gallery_data.get(key))
            if value:
                setattr(gallery, key, value)

    return GlyphGenConfig(root=root, watch=watch, gallery=gallery, **kwargs)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_sizes(value: Any) -> List[str]:
    sizes = _as_str_list(value)
    if not sizes:
        raise ConfigError("sizes must list at least one pixel size")
    result: List[str] = []
    for size in sizes:
        if not size.isdigit():
            raise ConfigError(f"sizes must be whole numbers, got {size!r}")
        if size not in result:
            result.append(size)
    return result


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (str, int)):
        return [str(value)]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int))]
    return []
