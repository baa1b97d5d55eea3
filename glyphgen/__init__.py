"""Compile directories of SVG icons into React component modules."""

__version__ = "0.1.0"
