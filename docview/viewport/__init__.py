"""Viewport, camera and bounds: pan/zoom state independent of document content."""

from .bounds import Bounds
from .camera import Camera, PanDirection
from .viewport import ViewMode, Viewport

__all__ = ["Bounds", "Camera", "PanDirection", "ViewMode", "Viewport"]
