"""Rendering helpers built on the container's render capability."""

from __future__ import annotations

from typing import Optional

from ..document.content import DocumentContent
from ..exceptions import NoActiveDocumentError
from ..geometry import Rotation, RotationMode
from ..types import Surface


def scale_dimensions(width: float, height: float, scale: float) -> tuple[int, int]:
    """Scale a size, never going below 1x1."""

    return (max(1, round(width * scale)), max(1, round(height * scale)))


def calculate_fit_scale(width: float, height: float, max_width: float, max_height: float) -> float:
    """Largest scale at which the content fits entirely inside the target."""

    if width == 0 or height == 0:
        return 1.0
    return min(max_width / width, max_height / height)


def calculate_fill_scale(width: float, height: float, max_width: float, max_height: float) -> float:
    """Smallest scale at which the content covers the whole target."""

    if width == 0 or height == 0:
        return 1.0
    return max(max_width / width, max_height / height)


def dimensions_after_rotation(width: int, height: int, rotation: Rotation | RotationMode) -> tuple[int, int]:
    quarter = rotation if isinstance(rotation, Rotation) else rotation.nearest()
    if quarter.swaps_dimensions:
        return (height, width)
    return (width, height)


def render_document(document: Optional[DocumentContent], scale: float = 1.0) -> Surface:
    if document is None:
        raise NoActiveDocumentError()
    return document.render(scale)


def render_to_fit(document: Optional[DocumentContent], max_width: float, max_height: float) -> Surface:
    if document is None:
        raise NoActiveDocumentError()
    width, height = document.dimensions()
    return document.render(calculate_fit_scale(width, height, max_width, max_height))


def render_thumbnail(document: Optional[DocumentContent], page: int | None = None) -> Surface:
    if document is None:
        raise NoActiveDocumentError()
    return document.thumbnail(document.current_page() if page is None else page)


__all__ = [
    "scale_dimensions",
    "calculate_fit_scale",
    "calculate_fill_scale",
    "dimensions_after_rotation",
    "render_document",
    "render_to_fit",
    "render_thumbnail",
]
