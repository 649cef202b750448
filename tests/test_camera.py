from __future__ import annotations

import pytest

from docview.config import PanSpeed, ViewerSettings
from docview.viewport import Camera, PanDirection, ViewMode, Viewport


@pytest.fixture()
def viewport() -> Viewport:
    viewport = Viewport(ViewerSettings())
    viewport.set_canvas_size(800, 600)
    viewport.set_content_size(400, 300)
    viewport.set_view_mode(ViewMode.ACTUAL_SIZE)
    return viewport


def test_pan_speed_multipliers() -> None:
    assert PanSpeed.SLOW.multiplier == 0.10
    assert PanSpeed.NORMAL.multiplier == 0.25
    assert PanSpeed.FAST.multiplier == 0.50


def test_pan_right_moves_content_left(viewport: Viewport) -> None:
    camera = Camera(viewport)
    camera.pan(PanDirection.RIGHT)
    assert viewport.pan == (-200.0, 0.0)

    camera.pan(PanDirection.LEFT)
    assert viewport.pan == (0.0, 0.0)


def test_pan_with_speed(viewport: Viewport) -> None:
    camera = Camera(viewport)
    camera.pan_with_speed(PanDirection.UP, PanSpeed.FAST)
    assert viewport.pan == (0.0, 300.0)

    camera.pan_with_speed(PanDirection.DOWN, PanSpeed.SLOW)
    assert viewport.pan == pytest.approx((0.0, 240.0))


def test_default_speed_comes_from_settings() -> None:
    viewport = Viewport(ViewerSettings(pan_speed=PanSpeed.SLOW))
    assert Camera(viewport).pan_speed is PanSpeed.SLOW
    assert Camera(viewport, PanSpeed.FAST).pan_speed is PanSpeed.FAST


def test_zoom_controls(viewport: Viewport) -> None:
    camera = Camera(viewport)
    camera.zoom_in()
    assert viewport.zoom == pytest.approx(1.1)
    camera.zoom_out()
    assert viewport.zoom == pytest.approx(1.0)
    camera.zoom_to(2.5)
    assert viewport.zoom == 2.5


def test_zoom_at_point_keeps_point_fixed(viewport: Viewport) -> None:
    camera = Camera(viewport)
    point = viewport.screen_to_document(500, 350)
    camera.zoom_at_point(500, 350, 1.8)

    assert viewport.zoom == pytest.approx(1.8)
    assert viewport.document_to_screen(*point) == pytest.approx((500, 350))


def test_center_and_pan_to_point(viewport: Viewport) -> None:
    camera = Camera(viewport)
    camera.pan_to_center_point(0, 0)
    assert viewport.document_to_screen(0, 0) == pytest.approx((400, 300))
    assert viewport.pan == pytest.approx((200, 150))

    camera.center()
    assert viewport.pan == (0.0, 0.0)
