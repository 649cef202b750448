"""Backend protocol for paginated documents."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PIL import Image

from ..geometry import Rotation


class PortableBackend(Protocol):
    """Protocol defining the operations a paginated backend handle provides."""

    def page_count(self) -> int:
        """Return the number of pages in the document."""

    def page_size(self, index: int) -> tuple[float, float]:
        """Return the displayed size of page *index* in points."""

    def render_page(self, index: int, scale: float, rotation: Rotation) -> Image.Image:
        """Rasterize page *index* with a clockwise view rotation applied."""

    def thumbnail(self, index: int, size: tuple[int, int]) -> Image.Image:
        """Return a cached, unrotated thumbnail that fits within *size*."""

    def write(
        self,
        destination: str | Path,
        *,
        rotation: Rotation = Rotation.NONE,
        flip_horizontal: bool = False,
        flip_vertical: bool = False,
    ) -> None:
        """Persist every page with the view transform baked into the file."""

    def document_properties(self) -> dict[str, str]:
        """Return the document information dictionary with the leading slash removed from keys."""

    def close(self) -> None:
        """Release the underlying document handle."""
