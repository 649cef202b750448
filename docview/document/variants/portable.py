"""Paginated documents whose transforms are view parameters of a backend."""

from __future__ import annotations

from pathlib import Path

from ...backends.base import PortableBackend
from ...exceptions import InvalidPageError, RenderFailureError, UnsupportedOperationError
from ...geometry import FlipAxis, Rotation, Standard, TransformState
from ...types import DocumentInfo, Surface
from ...utils import get_logger
from . import _pixels

LOGGER = get_logger("docview.document.portable")


class PortableDocument:
    """
    Multi-page document rendered through a backend handle.

    Rotation and flips are applied at render time and never touch the
    stored pages. The backend handle is not duplicable, so neither is the
    document.
    """

    def __init__(
        self,
        backend: PortableBackend,
        *,
        format_label: str = "PDF",
        thumbnail_size: tuple[int, int] = (160, 160),
    ) -> None:
        self._backend = backend
        self._page = 0
        self._page_count = backend.page_count()
        self._format = format_label
        self._transform = TransformState()
        self._thumbnail_size = thumbnail_size

    def __copy__(self) -> "PortableDocument":
        raise UnsupportedOperationError("Portable documents cannot be duplicated.")

    def __deepcopy__(self, memo: dict) -> "PortableDocument":
        raise UnsupportedOperationError("Portable documents cannot be duplicated.")

    @property
    def backend(self) -> PortableBackend:
        return self._backend

    @property
    def view_rotation(self) -> Rotation:
        return self._transform.rotation.nearest()

    # ------------------------------------------------------------------
    # Renderable
    # ------------------------------------------------------------------
    def render(self, scale: float = 1.0) -> Surface:
        if scale <= 0:
            raise RenderFailureError(f"Render scale must be positive, got {scale}")
        image = self._backend.render_page(self._page, scale, self.view_rotation)
        image = self._apply_flips(image)
        return Surface(width=image.width, height=image.height, image=image)

    def info(self) -> DocumentInfo:
        width, height = self._backend.page_size(self._page)
        return DocumentInfo(width=round(width), height=round(height), format=self._format)

    def dimensions(self) -> tuple[int, int]:
        width, height = self._backend.page_size(self._page)
        size = (max(1, round(width)), max(1, round(height)))
        if self.view_rotation.swaps_dimensions:
            return (size[1], size[0])
        return size

    # ------------------------------------------------------------------
    # Transformable
    # ------------------------------------------------------------------
    def transform_state(self) -> TransformState:
        return self._transform

    def rotate(self, rotation: Rotation) -> None:
        self._transform = self._transform.with_rotation(Standard(rotation))
        LOGGER.debug("Portable view rotated to %s", rotation.degrees)

    def flip(self, axis: FlipAxis) -> None:
        self._transform = self._transform.toggled(axis)
        LOGGER.debug("Portable view flipped %s", axis.value)

    def reset_transform(self) -> None:
        self._transform = TransformState()

    # ------------------------------------------------------------------
    # MultiPage
    # ------------------------------------------------------------------
    def page_count(self) -> int:
        return self._page_count

    def current_page(self) -> int:
        return self._page

    def go_to_page(self, page: int) -> None:
        if not 0 <= page < self._page_count:
            raise InvalidPageError(page, self._page_count)
        self._page = page
        LOGGER.debug("Portable navigated to page %s", page)

    def thumbnail(self, page: int) -> Surface:
        if not 0 <= page < self._page_count:
            raise InvalidPageError(page, self._page_count)
        image = self._backend.thumbnail(page, self._thumbnail_size)
        image = _pixels.apply_rotation(image, self.view_rotation)
        image = self._apply_flips(image)
        return Surface(width=image.width, height=image.height, image=image)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    def write_native(self, destination: str | Path) -> None:
        self._backend.write(
            destination,
            rotation=self.view_rotation,
            flip_horizontal=self._transform.flip_horizontal,
            flip_vertical=self._transform.flip_vertical,
        )

    def close(self) -> None:
        self._backend.close()

    def _apply_flips(self, image):
        if self._transform.flip_horizontal:
            image = _pixels.apply_flip(image, FlipAxis.HORIZONTAL)
        if self._transform.flip_vertical:
            image = _pixels.apply_flip(image, FlipAxis.VERTICAL)
        return image
