"""Vector documents (SVG) transformed purely by matrix composition."""

from __future__ import annotations

import copy
import math
import xml.etree.ElementTree as ET

from ...exceptions import InvalidPageError, RenderFailureError
from ...geometry import (
    AffineTransform,
    Fine,
    FlipAxis,
    Rotation,
    Standard,
    TransformState,
    nearest_quarter_turn,
)
from ...types import DocumentInfo, Surface
from ...utils import get_logger, normalize_degrees
from . import _pixels

LOGGER = get_logger("docview.document.vector")

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


def _number(value: float) -> str:
    return f"{value:.10g}"


def _ceil(value: float) -> int:
    # Absorb floating-point residue from rotated bounding boxes.
    return max(1, math.ceil(value - 1e-9))


def _embeddable(source: str, width: float, height: float) -> str:
    """Return *source* as a nested ``<svg>`` element pinned to its native size."""

    try:
        root = ET.fromstring(source)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid SVG source: {exc}") from exc
    if root.tag not in (f"{{{SVG_NS}}}svg", "svg"):
        raise ValueError(f"Expected an <svg> root element, got <{root.tag}>")

    root.set("width", _number(width))
    root.set("height", _number(height))
    root.attrib.pop("x", None)
    root.attrib.pop("y", None)
    return ET.tostring(root, encoding="unicode")


class VectorDocument:
    """
    SVG document whose source geometry is never modified.

    The effective view is ``flip @ rotation @ base`` where ``base`` holds
    any crop. Every transform is lossless and can be undone by resetting
    the state.
    """

    def __init__(
        self,
        source: str,
        width: float,
        height: float,
        *,
        thumbnail_size: tuple[int, int] = (160, 160),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Vector dimensions must be positive, got {width}x{height}")
        self._source = source
        self._embedded = _embeddable(source, width, height)
        self._native_size = (float(width), float(height))
        self._base = AffineTransform.identity()
        self._transform = TransformState()
        self._thumbnail_size = thumbnail_size
        self._thumbnail: Surface | None = None
        self._recompose()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def source(self) -> str:
        return self._source

    @property
    def matrix(self) -> AffineTransform:
        return self._matrix

    @property
    def base_matrix(self) -> AffineTransform:
        return self._base

    @property
    def effective_size(self) -> tuple[float, float]:
        return self._effective_size

    def dimensions(self) -> tuple[int, int]:
        width, height = self._effective_size
        return (_ceil(width), _ceil(height))

    def native_dimensions(self) -> tuple[int, int]:
        width, height = self._native_size
        return (_ceil(width), _ceil(height))

    def duplicate(self) -> "VectorDocument":
        # All state is immutable values, so a shallow copy is independent.
        return copy.copy(self)

    # ------------------------------------------------------------------
    # Renderable
    # ------------------------------------------------------------------
    def render(self, scale: float = 1.0) -> Surface:
        if scale <= 0:
            raise RenderFailureError(f"Render scale must be positive, got {scale}")
        view_width, view_height = self._effective_size
        width = _ceil(view_width * scale)
        height = _ceil(view_height * scale)
        markup = (
            f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
            f'width="{width}" height="{height}" '
            f'viewBox="0 0 {_number(view_width)} {_number(view_height)}">'
            f'<g transform="{self._matrix.to_svg()}">{self._embedded}</g>'
            "</svg>"
        )
        return Surface(width=width, height=height, svg=markup)

    def info(self) -> DocumentInfo:
        width, height = self.native_dimensions()
        return DocumentInfo(width=width, height=height, format="SVG")

    # ------------------------------------------------------------------
    # Transformable
    # ------------------------------------------------------------------
    def transform_state(self) -> TransformState:
        return self._transform

    def rotate(self, rotation: Rotation) -> None:
        self._transform = self._transform.with_rotation(Standard(rotation))
        self._recompose()
        LOGGER.debug("Vector rotated to %s", rotation.degrees)

    def rotate_fine(self, degrees: float) -> None:
        target = normalize_degrees(degrees)
        if Fine(target).is_multiple_of_90():
            self.rotate(nearest_quarter_turn(target))
            return
        self._transform = self._transform.with_rotation(Fine(target))
        self._recompose()
        LOGGER.debug("Vector fine-rotated to %.2f", target)

    def flip(self, axis: FlipAxis) -> None:
        self._transform = self._transform.toggled(axis)
        self._recompose()
        LOGGER.debug("Vector flipped %s", axis.value)

    def crop(self, x: int, y: int, width: int, height: int) -> None:
        _pixels.check_region(x, y, width, height, self.dimensions())
        self._base = AffineTransform.translation(-x, -y) @ self._matrix
        self._native_size = (float(width), float(height))
        self._transform = TransformState()
        self._recompose()
        LOGGER.debug("Vector cropped to %sx%s at (%s, %s)", width, height, x, y)

    def reset_transform(self) -> None:
        self._transform = TransformState()
        self._recompose()

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
            view_width, view_height = self._effective_size
            max_width, max_height = self._thumbnail_size
            self._thumbnail = self.render(min(max_width / view_width, max_height / view_height))
        return self._thumbnail

    def _recompose(self) -> None:
        native_width, native_height = self._native_size
        rotation = AffineTransform.rotation(self._transform.rotation.degrees)
        min_x, min_y, max_x, max_y = rotation.transform_rect(0.0, 0.0, native_width, native_height)
        rotation = AffineTransform.translation(-min_x, -min_y) @ rotation
        view_width, view_height = max_x - min_x, max_y - min_y

        flip = AffineTransform.identity()
        if self._transform.flip_horizontal:
            flip = AffineTransform(a=-1.0, e=view_width) @ flip
        if self._transform.flip_vertical:
            flip = AffineTransform(d=-1.0, f=view_height) @ flip

        self._matrix = flip @ rotation @ self._base
        self._effective_size = (view_width, view_height)
        self._thumbnail = None
