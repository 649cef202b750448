"""Directional and point-based navigation on top of a :class:`Viewport`."""

from __future__ import annotations

from enum import Enum

from ..config import PanSpeed
from .viewport import Viewport


class PanDirection(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Camera:
    """
    Camera controller for viewport navigation.

    Panning moves the view, so panning right shifts the content left on
    screen. Steps are a fraction of the canvas size chosen by
    :class:`~docview.config.PanSpeed`.
    """

    def __init__(self, viewport: Viewport, pan_speed: PanSpeed | None = None) -> None:
        self.viewport = viewport
        self.pan_speed = pan_speed or viewport.settings.pan_speed

    def pan(self, direction: PanDirection) -> None:
        self.pan_with_speed(direction, self.pan_speed)

    def pan_with_speed(self, direction: PanDirection, speed: PanSpeed) -> None:
        canvas_width, canvas_height = self.viewport.canvas_size
        step_x = canvas_width * speed.multiplier
        step_y = canvas_height * speed.multiplier
        dx, dy = {
            PanDirection.LEFT: (step_x, 0.0),
            PanDirection.RIGHT: (-step_x, 0.0),
            PanDirection.UP: (0.0, step_y),
            PanDirection.DOWN: (0.0, -step_y),
        }[direction]
        self.viewport.pan_by(dx, dy)

    def zoom_in(self) -> None:
        self.viewport.zoom_in()

    def zoom_out(self) -> None:
        self.viewport.zoom_out()

    def zoom_to(self, zoom: float) -> None:
        self.viewport.set_zoom(zoom)

    def zoom_at_point(self, screen_x: float, screen_y: float, factor: float) -> None:
        """Multiply the zoom by *factor* while keeping the point under the cursor."""

        self.viewport.zoom_at_point(self.viewport.zoom * factor, screen_x, screen_y)

    def center(self) -> None:
        self.viewport.reset_pan()

    def calculate_pan_to_center_point(self, doc_x: float, doc_y: float) -> tuple[float, float]:
        canvas_width, canvas_height = self.viewport.canvas_size
        screen_x, screen_y = self.viewport.document_to_screen(doc_x, doc_y)
        return (canvas_width / 2.0 - screen_x, canvas_height / 2.0 - screen_y)

    def pan_to_center_point(self, doc_x: float, doc_y: float) -> None:
        dx, dy = self.calculate_pan_to_center_point(doc_x, doc_y)
        self.viewport.pan_by(dx, dy)
