"""Capability protocols implemented by the document variants."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..geometry import FlipAxis, Rotation, TransformState
from ..types import DocumentInfo, Surface


@runtime_checkable
class Renderable(Protocol):
    """Documents that can produce a displayable surface."""

    def render(self, scale: float = 1.0) -> Surface:
        """Render the document; must not mutate it."""

    def info(self) -> DocumentInfo:
        """Return native size and a format label."""

    def dimensions(self) -> tuple[int, int]:
        """Return the effective (post-transform) width and height."""


@runtime_checkable
class Transformable(Protocol):
    """Documents that support quarter-turn rotation and flips."""

    def rotate(self, rotation: Rotation) -> None:
        """Rotate to the *target* quarter turn (not by a delta)."""

    def flip(self, axis: FlipAxis) -> None:
        """Toggle a flip along *axis*."""

    def transform_state(self) -> TransformState:
        """Return the accumulated transform state."""

    def reset_transform(self) -> None:
        """Set the transform state to identity."""


@runtime_checkable
class FineRotatable(Protocol):
    def rotate_fine(self, degrees: float) -> None:
        """Rotate to an arbitrary *target* angle in degrees."""


@runtime_checkable
class Croppable(Protocol):
    def crop(self, x: int, y: int, width: int, height: int) -> None:
        """Crop to a rectangle in effective coordinates."""


@runtime_checkable
class MultiPage(Protocol):
    """Page navigation; single-page variants report one page."""

    def page_count(self) -> int:
        ...

    def current_page(self) -> int:
        ...

    def go_to_page(self, page: int) -> None:
        """Navigate to *page*, raising ``InvalidPageError`` when out of range."""

    def thumbnail(self, page: int) -> Surface:
        """Return a lazily generated, cached thumbnail for *page*."""


__all__ = ["Renderable", "Transformable", "FineRotatable", "Croppable", "MultiPage"]
