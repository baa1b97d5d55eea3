"""Static HTML gallery generated from the build manifest."""

from .exporter import GalleryExporter, GalleryIcon

__all__ = ["GalleryExporter", "GalleryIcon"]
