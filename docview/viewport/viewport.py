"""
Viewport state: zoom, pan and view mode.

The content is centred on the canvas and then offset by the pan, so a
document point ``(dx, dy)`` lands on screen at::

    ((canvas_w - content_w * zoom) / 2 + pan_x + dx * zoom,
     (canvas_h - content_h * zoom) / 2 + pan_y + dy * zoom)

After every change the pan is clamped so the scaled content overlaps the
canvas by at least ``min_overlap`` pixels on each axis (or by as much as
the smaller of the two allows).
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from ..config import ViewerSettings
from ..utils import get_logger
from .bounds import Bounds

LOGGER = get_logger("docview.viewport")


def _require_finite(name: str, *values: float) -> None:
    if not all(math.isfinite(value) for value in values):
        raise ValueError(f"{name} must be finite, got {values!r}")


class ViewMode(Enum):
    FIT = "fit"
    ACTUAL_SIZE = "actual_size"
    CUSTOM = "custom"


class Viewport:
    """Pan/zoom state, independent of which document is displayed."""

    def __init__(self, settings: ViewerSettings | None = None) -> None:
        self._settings = settings or ViewerSettings()
        self._mode = ViewMode.FIT
        self._zoom = 1.0
        self._pan_x = 0.0
        self._pan_y = 0.0
        self._canvas = (0.0, 0.0)
        self._content = (0.0, 0.0)

    def __repr__(self) -> str:
        return (
            f"Viewport(mode={self._mode.value}, zoom={self._zoom:.4f}, "
            f"pan=({self._pan_x:.1f}, {self._pan_y:.1f}))"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def settings(self) -> ViewerSettings:
        return self._settings

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def pan(self) -> tuple[float, float]:
        return (self._pan_x, self._pan_y)

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def canvas_size(self) -> tuple[float, float]:
        return self._canvas

    @property
    def content_size(self) -> tuple[float, float]:
        return self._content

    @property
    def scaled_content_size(self) -> tuple[float, float]:
        return (self._content[0] * self._zoom, self._content[1] * self._zoom)

    def set_canvas_size(self, width: float, height: float) -> None:
        _require_finite("Canvas size", width, height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must not be negative, got {width}x{height}")
        self._canvas = (float(width), float(height))
        self._refresh()

    def set_content_size(self, width: float, height: float) -> None:
        _require_finite("Content size", width, height)
        if width < 0 or height < 0:
            raise ValueError(f"Content size must not be negative, got {width}x{height}")
        self._content = (float(width), float(height))
        self._refresh()

    def set_view_mode(self, mode: ViewMode) -> None:
        self._mode = mode
        if mode is ViewMode.FIT:
            self._reset_pan()
            self._zoom = self.calculate_fit_zoom()
        elif mode is ViewMode.ACTUAL_SIZE:
            self._reset_pan()
            self._zoom = self._clamp_zoom(1.0)
        self._clamp_pan()

    def reset(self) -> None:
        """Return to Fit mode with no pan, as on a document switch."""

        self.set_view_mode(ViewMode.FIT)

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------
    def calculate_fit_zoom(self) -> float:
        content_width, content_height = self._content
        canvas_width, canvas_height = self._canvas
        if not (content_width and content_height and canvas_width and canvas_height):
            return self._clamp_zoom(1.0)
        return self._clamp_zoom(min(canvas_width / content_width, canvas_height / content_height))

    def set_zoom(self, zoom: float) -> None:
        """Set an absolute zoom factor; switches to Custom mode."""

        self._zoom = self._clamp_zoom(zoom)
        self._mode = ViewMode.CUSTOM
        self._clamp_pan()

    def zoom_in(self) -> None:
        self.set_zoom(self._zoom * (1.0 + self._settings.zoom_step))

    def zoom_out(self) -> None:
        self.set_zoom(self._zoom / (1.0 + self._settings.zoom_step))

    def zoom_at_point(self, zoom: float, screen_x: float, screen_y: float) -> None:
        """Change zoom keeping the document point under ``(screen_x, screen_y)`` fixed.

        Pan and zoom are written together, then clamped once. The pan clamp
        runs after re-anchoring, so when it applies the document point drifts
        away from the cursor by the clamped amount.
        """

        _require_finite("Zoom anchor", screen_x, screen_y)
        doc_x, doc_y = self.screen_to_document(screen_x, screen_y)
        new_zoom = self._clamp_zoom(zoom)
        origin_x, origin_y = self._centering_offset(new_zoom)

        self._zoom = new_zoom
        self._pan_x = screen_x - origin_x - doc_x * new_zoom
        self._pan_y = screen_y - origin_y - doc_y * new_zoom
        self._mode = ViewMode.CUSTOM
        self._clamp_pan()
        LOGGER.debug("Zoomed to %.4f at (%.1f, %.1f)", new_zoom, screen_x, screen_y)

    # ------------------------------------------------------------------
    # Pan
    # ------------------------------------------------------------------
    def set_pan(self, x: float, y: float) -> None:
        _require_finite("Pan", x, y)
        self._pan_x = float(x)
        self._pan_y = float(y)
        if self._mode is ViewMode.FIT:
            self._mode = ViewMode.CUSTOM
        self._clamp_pan()

    def pan_by(self, dx: float, dy: float) -> None:
        self.set_pan(self._pan_x + dx, self._pan_y + dy)

    def reset_pan(self) -> None:
        self._reset_pan()

    def max_pan(self) -> Optional[tuple[float, float]]:
        """Largest allowed ``|pan|`` per axis, or None while sizes are unknown."""

        canvas_width, canvas_height = self._canvas
        content_width, content_height = self.scaled_content_size
        if not (canvas_width and canvas_height and content_width and content_height):
            return None
        overlap = self._settings.min_overlap
        overlap_x = min(overlap, content_width, canvas_width)
        overlap_y = min(overlap, content_height, canvas_height)
        return (
            (canvas_width + content_width) / 2.0 - overlap_x,
            (canvas_height + content_height) / 2.0 - overlap_y,
        )

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def screen_to_document(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        origin_x, origin_y = self._centering_offset(self._zoom)
        return (
            (screen_x - origin_x - self._pan_x) / self._zoom,
            (screen_y - origin_y - self._pan_y) / self._zoom,
        )

    def document_to_screen(self, doc_x: float, doc_y: float) -> tuple[float, float]:
        origin_x, origin_y = self._centering_offset(self._zoom)
        return (
            origin_x + self._pan_x + doc_x * self._zoom,
            origin_y + self._pan_y + doc_y * self._zoom,
        )

    def content_bounds(self) -> Bounds:
        """Screen rectangle covered by the scaled content."""

        left, top = self.document_to_screen(0.0, 0.0)
        width, height = self.scaled_content_size
        return Bounds(left, top, width, height)

    def canvas_bounds(self) -> Bounds:
        return Bounds(0.0, 0.0, *self._canvas)

    def visible_bounds(self) -> Optional[Bounds]:
        """The part of the document visible on the canvas, in document coordinates."""

        left, top = self.screen_to_document(0.0, 0.0)
        right, bottom = self.screen_to_document(*self._canvas)
        visible = Bounds.from_corners(left, top, right, bottom)
        return visible.intersection(Bounds(0.0, 0.0, *self._content))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _centering_offset(self, zoom: float) -> tuple[float, float]:
        canvas_width, canvas_height = self._canvas
        content_width, content_height = self._content
        return (
            (canvas_width - content_width * zoom) / 2.0,
            (canvas_height - content_height * zoom) / 2.0,
        )

    def _clamp_zoom(self, zoom: float) -> float:
        _require_finite("Zoom", zoom)
        return min(max(zoom, self._settings.min_zoom), self._settings.max_zoom)

    def _reset_pan(self) -> None:
        self._pan_x = 0.0
        self._pan_y = 0.0

    def _refresh(self) -> None:
        if self._mode is ViewMode.FIT:
            self._reset_pan()
            self._zoom = self.calculate_fit_zoom()
        self._clamp_pan()

    def _clamp_pan(self) -> None:
        limits = self.max_pan()
        if limits is None:
            return
        limit_x, limit_y = limits
        self._pan_x = min(max(self._pan_x, -limit_x), limit_x)
        self._pan_y = min(max(self._pan_y, -limit_y), limit_y)
