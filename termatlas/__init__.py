"""Bitmap font atlases for grid-based terminal renderers: generation, metadata format and cell packing."""

__version__ = "0.1.0"