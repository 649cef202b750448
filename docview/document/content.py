"""
The type-erased document container.

:class:`DocumentContent` holds exactly one variant and forwards every
capability call to it. Each dispatch site matches the closed union
exhaustively, so adding a variant is a type error until every arm exists.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union, assert_never

from PIL import Image

from ..backends.base import PortableBackend
from ..exceptions import UnsupportedOperationError
from ..geometry import FlipAxis, Rotation, TransformState
from ..types import DocumentInfo, DocumentKind, InterpolationQuality, Surface
from .variants import PortableDocument, RasterDocument, VectorDocument

DocumentVariant = Union[RasterDocument, VectorDocument, PortableDocument]


class DocumentContent:
    """Single owner of one raster, vector or portable document."""

    __slots__ = ("_variant",)

    def __init__(self, variant: DocumentVariant) -> None:
        if not isinstance(variant, (RasterDocument, VectorDocument, PortableDocument)):
            raise TypeError(f"Unsupported document variant: {type(variant).__name__}")
        self._variant = variant

    @classmethod
    def raster(cls, image: Image.Image, **options) -> "DocumentContent":
        return cls(RasterDocument(image, **options))

    @classmethod
    def vector(cls, source: str, width: float, height: float, **options) -> "DocumentContent":
        return cls(VectorDocument(source, width, height, **options))

    @classmethod
    def portable(cls, backend: PortableBackend, **options) -> "DocumentContent":
        return cls(PortableDocument(backend, **options))

    def __repr__(self) -> str:
        width, height = self.dimensions()
        return f"DocumentContent({self.kind.value}, {width}x{height})"

    @property
    def variant(self) -> DocumentVariant:
        return self._variant

    @property
    def kind(self) -> DocumentKind:
        match self._variant:
            case RasterDocument():
                return DocumentKind.RASTER
            case VectorDocument():
                return DocumentKind.VECTOR
            case PortableDocument():
                return DocumentKind.PORTABLE
            case _ as unreachable:
                assert_never(unreachable)

    # ------------------------------------------------------------------
    # Renderable
    # ------------------------------------------------------------------
    def render(self, scale: float = 1.0) -> Surface:
        return self._active().render(scale)

    def info(self) -> DocumentInfo:
        return self._active().info()

    def dimensions(self) -> tuple[int, int]:
        return self._active().dimensions()

    # ------------------------------------------------------------------
    # Transformable
    # ------------------------------------------------------------------
    def rotate(self, rotation: Rotation) -> None:
        self._active().rotate(rotation)

    def flip(self, axis: FlipAxis) -> None:
        self._active().flip(axis)

    def transform_state(self) -> TransformState:
        return self._active().transform_state()

    def reset_transform(self) -> None:
        self._active().reset_transform()

    def rotate_fine(self, degrees: float) -> None:
        match self._variant:
            case RasterDocument() | VectorDocument() as document:
                document.rotate_fine(degrees)
            case PortableDocument():
                raise UnsupportedOperationError(
                    "Portable documents only support quarter-turn rotation."
                )
            case _ as unreachable:
                assert_never(unreachable)

    def crop(self, x: int, y: int, width: int, height: int) -> None:
        match self._variant:
            case RasterDocument() | VectorDocument() as document:
                document.crop(x, y, width, height)
            case PortableDocument():
                raise UnsupportedOperationError(
                    "Portable documents cannot be cropped; export the page to an image first."
                )
            case _ as unreachable:
                assert_never(unreachable)

    # ------------------------------------------------------------------
    # MultiPage
    # ------------------------------------------------------------------
    def page_count(self) -> int:
        return self._active().page_count()

    def current_page(self) -> int:
        return self._active().current_page()

    def go_to_page(self, page: int) -> None:
        self._active().go_to_page(page)

    def thumbnail(self, page: int) -> Surface:
        return self._active().thumbnail(page)

    # ------------------------------------------------------------------
    # Variant-specific capabilities
    # ------------------------------------------------------------------
    def set_interpolation_quality(self, quality: InterpolationQuality) -> None:
        """Set resampling quality; only raster documents resample."""

        match self._variant:
            case RasterDocument() as document:
                document.set_interpolation_quality(quality)
            case VectorDocument() | PortableDocument():
                pass
            case _ as unreachable:
                assert_never(unreachable)

    @property
    def is_duplicable(self) -> bool:
        match self._variant:
            case RasterDocument() | VectorDocument():
                return True
            case PortableDocument():
                return False
            case _ as unreachable:
                assert_never(unreachable)

    def clone(self) -> "DocumentContent":
        match self._variant:
            case RasterDocument() | VectorDocument() as document:
                return DocumentContent(document.duplicate())
            case PortableDocument():
                raise UnsupportedOperationError("Portable documents cannot be duplicated.")
            case _ as unreachable:
                assert_never(unreachable)

    def __copy__(self) -> "DocumentContent":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "DocumentContent":
        return self.clone()

    def write_native(self, destination: str | Path) -> Path:
        """Write the transformed document losslessly in its own format."""

        path = Path(destination)
        match self._variant:
            case VectorDocument() as document:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(document.render().svg or "", encoding="utf-8")
            case PortableDocument() as document:
                document.write_native(path)
            case RasterDocument():
                raise UnsupportedOperationError(
                    "Raster documents have no lossless native form; export an image format."
                )
            case _ as unreachable:
                assert_never(unreachable)
        return path

    def close(self) -> None:
        match self._variant:
            case PortableDocument() as document:
                document.close()
            case RasterDocument() | VectorDocument():
                pass
            case _ as unreachable:
                assert_never(unreachable)

    def _active(self) -> DocumentVariant:
        match self._variant:
            case RasterDocument() | VectorDocument() | PortableDocument() as document:
                return document
            case _ as unreachable:
                assert_never(unreachable)
