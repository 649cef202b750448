"""Raster documents backed by a decoded Pillow image."""

from __future__ import annotations

from PIL import Image

from ...exceptions import InvalidPageError, RenderFailureError
from ...geometry import Fine, FlipAxis, Rotation, Standard, TransformState, nearest_quarter_turn
from ...types import DocumentInfo, InterpolationQuality, Surface
from ...utils import get_logger, normalize_degrees
from . import _pixels

LOGGER = get_logger("docview.document.raster")


class RasterDocument:
    """
    Pixel document whose buffer is the single source of truth.

    Every transform rewrites the buffer, so the buffer always equals the
    baseline image rotated then flipped according to :meth:`transform_state`.
    Transforms are lossy: resetting the state rebases the baseline on the
    current pixels instead of restoring the originals.
    """

    def __init__(
        self,
        image: Image.Image,
        *,
        format_label: str | None = None,
        interpolation: InterpolationQuality = InterpolationQuality.BALANCED,
        thumbnail_size: tuple[int, int] = (160, 160),
    ) -> None:
        self._image = image
        self._native_size: tuple[int, int] = image.size
        self._format = format_label or image.format or "Raster"
        self._transform = TransformState()
        self._interpolation = interpolation
        self._thumbnail_size = thumbnail_size
        self._surface: Surface | None = None
        self._thumbnail: Surface | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def interpolation(self) -> InterpolationQuality:
        return self._interpolation

    def set_interpolation_quality(self, quality: InterpolationQuality) -> None:
        self._interpolation = quality

    def dimensions(self) -> tuple[int, int]:
        return self._image.size

    def native_dimensions(self) -> tuple[int, int]:
        return self._native_size

    def duplicate(self) -> "RasterDocument":
        twin = RasterDocument(
            self._image.copy(),
            format_label=self._format,
            interpolation=self._interpolation,
            thumbnail_size=self._thumbnail_size,
        )
        twin._native_size = self._native_size
        twin._transform = self._transform
        return twin

    # ------------------------------------------------------------------
    # Renderable
    # ------------------------------------------------------------------
    def render(self, scale: float = 1.0) -> Surface:
        if scale <= 0:
            raise RenderFailureError(f"Render scale must be positive, got {scale}")
        if scale == 1.0:
            if self._surface is None:
                width, height = self._image.size
                self._surface = Surface(width=width, height=height, image=self._image.copy())
            return self._surface

        width, height = self._image.size
        target = (max(1, round(width * scale)), max(1, round(height * scale)))
        scaled = _pixels.resize_image(self._image, target[0], target[1], self._interpolation)
        return Surface(width=scaled.width, height=scaled.height, image=scaled)

    def info(self) -> DocumentInfo:
        width, height = self._native_size
        return DocumentInfo(width=width, height=height, format=self._format)

    # ------------------------------------------------------------------
    # Transformable
    # ------------------------------------------------------------------
    def transform_state(self) -> TransformState:
        return self._transform

    def rotate(self, rotation: Rotation) -> None:
        current = self._transform.rotation.nearest()
        delta = (rotation.degrees - current.degrees) % 360
        if self._transform.mirrored:
            delta = (360 - delta) % 360
        if delta:
            self._replace_buffer(_pixels.apply_rotation(self._image, Rotation(delta)))
        self._transform = self._transform.with_rotation(Standard(rotation))
        LOGGER.debug("Raster rotated to %s (buffer delta %s)", rotation.degrees, delta)

    def rotate_fine(self, degrees: float) -> None:
        target = normalize_degrees(degrees)
        if Fine(target).is_multiple_of_90():
            self.rotate(nearest_quarter_turn(target))
            return

        delta = target - self._transform.rotation.degrees
        if self._transform.mirrored:
            delta = -delta
        self._replace_buffer(_pixels.apply_fine_rotation(self._image, delta, self._interpolation))
        self._transform = self._transform.with_rotation(Fine(target))
        LOGGER.debug("Raster fine-rotated to %.2f (buffer delta %.2f)", target, delta)

    def flip(self, axis: FlipAxis) -> None:
        self._replace_buffer(_pixels.apply_flip(self._image, axis))
        self._transform = self._transform.toggled(axis)
        LOGGER.debug("Raster flipped %s", axis.value)

    def crop(self, x: int, y: int, width: int, height: int) -> None:
        self._replace_buffer(_pixels.crop_to_image(self._image, x, y, width, height))
        self._native_size = (width, height)
        self._transform = TransformState()
        LOGGER.debug("Raster cropped to %sx%s at (%s, %s)", width, height, x, y)

    def reset_transform(self) -> None:
        # State reset only: rewritten pixels stay as they are.
        self._transform = TransformState()
        self._native_size = self._image.size

    # ------------------------------------------------------------------
    # MultiPage
    # ------------------------------------------------------------------
    def page_count(self) -> int:
        return 1

    def current_page(self) -> int:
        return 0

    def go_to_page(self, page: int) -> None:
        if page != 0:
            raise InvalidPageError(page, 1)

    def thumbnail(self, page: int) -> Surface:
        if page != 0:
            raise InvalidPageError(page, 1)
        if self._thumbnail is None:
            thumb = _pixels.fit_within(self._image, self._thumbnail_size)
            self._thumbnail = Surface(width=thumb.width, height=thumb.height, image=thumb)
        return self._thumbnail

    def _replace_buffer(self, image: Image.Image) -> None:
        self._image = image
        self._surface = None
        self._thumbnail = None
