"""Concrete document variants. Pixel primitives stay private to this package."""

from .portable import PortableDocument
from .raster import RasterDocument
from .vector import VectorDocument

__all__ = ["RasterDocument", "VectorDocument", "PortableDocument"]
