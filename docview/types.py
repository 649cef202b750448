"""
Type definitions and dataclasses for docview.

This module defines the value objects exchanged between the document core
and its collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image

RASTER_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "webp", "gif", "bmp", "tiff", "tif"})
VECTOR_EXTENSIONS = frozenset({"svg"})
PORTABLE_EXTENSIONS = frozenset({"pdf"})


class DocumentKind(Enum):
    """The three document representations handled by the core."""

    RASTER = "raster"
    VECTOR = "vector"
    PORTABLE = "portable"

    @classmethod
    def from_path(cls, path: str | Path) -> Optional["DocumentKind"]:
        extension = Path(path).suffix.lower().lstrip(".")
        if extension in RASTER_EXTENSIONS:
            return cls.RASTER
        if extension in VECTOR_EXTENSIONS:
            return cls.VECTOR
        if extension in PORTABLE_EXTENSIONS:
            return cls.PORTABLE
        return None


class InterpolationQuality(Enum):
    """Resampling quality for fine rotation and resizing."""

    FAST = "fast"
    BALANCED = "balanced"
    BEST = "best"

    @property
    def resample(self) -> Image.Resampling:
        return {
            InterpolationQuality.FAST: Image.Resampling.NEAREST,
            InterpolationQuality.BALANCED: Image.Resampling.BILINEAR,
            InterpolationQuality.BEST: Image.Resampling.BICUBIC,
        }[self]


@dataclass(frozen=True, slots=True)
class Surface:
    """
    Displayable output of a render call.

    Attributes:
        width: Surface width in pixels
        height: Surface height in pixels
        image: Pillow image for pixel surfaces
        svg: Standalone SVG markup for vector surfaces
    """

    width: int
    height: int
    image: Image.Image | None = None
    svg: str | None = None

    def __post_init__(self) -> None:
        if (self.image is None) == (self.svg is None):
            raise ValueError("Surface requires exactly one of image or svg")

    @property
    def is_vector(self) -> bool:
        return self.svg is not None

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        kind = "svg" if self.is_vector else "image"
        return f"Surface({kind}, {self.width}x{self.height})"


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    """
    Intrinsic information about a document.

    Attributes:
        width: Native width before transforms
        height: Native height before transforms
        format: Human readable format label (e.g. "PNG", "SVG", "PDF")
    """

    width: int
    height: int
    format: str
