"""
Low-level pixel primitives.

Only the variant modules in this package may import this module; the
boundary is checked by ``tests/test_architecture.py``. Every function is
pure: the input image is left untouched and a new image is returned.
"""

from __future__ import annotations

import math

from PIL import Image

from ...exceptions import InvalidRegionError
from ...geometry import FlipAxis, Rotation
from ...types import InterpolationQuality

TRANSPARENT_WHITE = (255, 255, 255, 0)

_ROTATIONS = {
    Rotation.CW90: Image.Transpose.ROTATE_270,
    Rotation.CW180: Image.Transpose.ROTATE_180,
    Rotation.CW270: Image.Transpose.ROTATE_90,
}

_FLIPS = {
    FlipAxis.HORIZONTAL: Image.Transpose.FLIP_LEFT_RIGHT,
    FlipAxis.VERTICAL: Image.Transpose.FLIP_TOP_BOTTOM,
}


def apply_rotation(image: Image.Image, rotation: Rotation) -> Image.Image:
    """Rotate clockwise by a quarter turn."""

    if rotation is Rotation.NONE:
        return image.copy()
    return image.transpose(_ROTATIONS[rotation])


def apply_fine_rotation(
    image: Image.Image,
    degrees: float,
    quality: InterpolationQuality = InterpolationQuality.BALANCED,
) -> Image.Image:
    """Rotate clockwise by *degrees*, growing the canvas to keep every pixel."""

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    # Pillow rotates counter-clockwise for positive angles
    return rgba.rotate(
        -degrees,
        resample=quality.resample,
        expand=True,
        fillcolor=TRANSPARENT_WHITE,
    )


def apply_flip(image: Image.Image, axis: FlipAxis) -> Image.Image:
    return image.transpose(_FLIPS[axis])


def check_region(x: int, y: int, width: int, height: int, bounds: tuple[int, int]) -> None:
    """Raise :class:`InvalidRegionError` unless the rectangle fits in *bounds*."""

    bound_width, bound_height = bounds
    if not all(math.isfinite(value) for value in (x, y, width, height)):
        raise InvalidRegionError(f"Crop region must be finite, got ({x}, {y}, {width}, {height})")
    if width <= 0 or height <= 0:
        raise InvalidRegionError(f"Crop region has zero or negative size: {width}x{height}")
    if x < 0 or y < 0 or x + width > bound_width or y + height > bound_height:
        raise InvalidRegionError(
            f"Crop rectangle {width}x{height} at ({x}, {y}) exceeds document size "
            f"{bound_width}x{bound_height}"
        )


def crop_to_image(image: Image.Image, x: int, y: int, width: int, height: int) -> Image.Image:
    check_region(x, y, width, height, image.size)
    return image.crop((x, y, x + width, y + height))


def resize_image(
    image: Image.Image,
    width: int,
    height: int,
    quality: InterpolationQuality = InterpolationQuality.BALANCED,
) -> Image.Image:
    if (width, height) == image.size:
        return image.copy()
    return image.resize((max(1, width), max(1, height)), resample=quality.resample)


def fit_within(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Return a copy scaled down (never up) to fit inside *size*."""

    thumb = image.copy()
    thumb.thumbnail(size, Image.Resampling.LANCZOS)
    return thumb
