"""Writing transformed documents to disk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image

from ..document.content import DocumentContent
from ..exceptions import ExportError, NoActiveDocumentError, RenderFailureError, UnsupportedOperationError
from ..types import DocumentKind
from ..utils import get_logger
from .render import calculate_fit_scale, scale_dimensions

LOGGER = get_logger("docview.operations.export")


class ExportFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"
    PDF = "pdf"
    SVG = "svg"

    @property
    def extension(self) -> str:
        return "jpg" if self is ExportFormat.JPEG else self.value

    @property
    def mime_type(self) -> str:
        return {
            ExportFormat.PNG: "image/png",
            ExportFormat.JPEG: "image/jpeg",
            ExportFormat.WEBP: "image/webp",
            ExportFormat.PDF: "application/pdf",
            ExportFormat.SVG: "image/svg+xml",
        }[self]

    @property
    def is_raster(self) -> bool:
        return self in (ExportFormat.PNG, ExportFormat.JPEG, ExportFormat.WEBP)

    @classmethod
    def from_path(cls, path: str | Path) -> Optional["ExportFormat"]:
        extension = Path(path).suffix.lower().lstrip(".")
        if extension == "jpg":
            return cls.JPEG
        try:
            return cls(extension)
        except ValueError:
            return None


@dataclass(slots=True)
class ImageExportOptions:
    """
    Options for raster output.

    Attributes:
        quality: Encoder quality for JPEG and WebP (1-100)
        preserve_metadata: Carry ICC profile and EXIF data into the output
    """

    quality: int = 90
    preserve_metadata: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be within 1..100, got {self.quality}")


def export_document(
    document: Optional[DocumentContent],
    path: str | Path,
    fmt: ExportFormat | None = None,
    options: ImageExportOptions | None = None,
) -> Path:
    """Write *document* with its current transforms applied.

    Vector to SVG and portable to PDF are lossless. Any other supported
    combination writes the rendered surface as an image.
    """

    if document is None:
        raise NoActiveDocumentError()
    target = Path(path)
    fmt = fmt or ExportFormat.from_path(target)
    if fmt is None:
        raise ExportError(f"Cannot infer export format from file name: {target.name}")
    options = options or ImageExportOptions()

    match (document.kind, fmt):
        case (DocumentKind.VECTOR, ExportFormat.SVG) | (DocumentKind.PORTABLE, ExportFormat.PDF):
            document.write_native(target)
        case (DocumentKind.VECTOR, _):
            raise UnsupportedOperationError(
                f"Vector documents export to SVG only, not {fmt.value.upper()}"
            )
        case (_, ExportFormat.SVG):
            raise UnsupportedOperationError(
                f"{document.kind.value.capitalize()} documents cannot be exported to SVG"
            )
        case _:
            surface = document.render()
            if surface.image is None:
                raise RenderFailureError(
                    f"{document.kind.value.capitalize()} render produced no pixels to encode"
                )
            save_image(surface.image, target, fmt, options)

    LOGGER.info("Exported %s document to %s (%s)", document.kind.value, target, fmt.value)
    return target


def export_to_paper_format(
    document: Optional[DocumentContent],
    path: str | Path,
    width: int,
    height: int,
    fmt: ExportFormat | None = None,
) -> Path:
    """Export the rendered document resized to fit within ``width`` x ``height``."""

    if document is None:
        raise NoActiveDocumentError()
    target = Path(path)
    fmt = fmt or ExportFormat.from_path(target)
    if fmt is None or fmt is ExportFormat.SVG:
        raise ExportError(f"Paper export needs an image or PDF format, got {fmt}")

    surface = document.render()
    if surface.image is None:
        raise UnsupportedOperationError("Vector documents cannot be exported to a paper format")

    scale = calculate_fit_scale(surface.width, surface.height, width, height)
    size = scale_dimensions(surface.width, surface.height, scale)
    resized = surface.image.resize(size, Image.Resampling.LANCZOS)
    save_image(resized, target, fmt, ImageExportOptions())
    return target


def save_image(image: Image.Image, path: str | Path, fmt: ExportFormat, options: ImageExportOptions) -> None:
    path = Path(path)
    params: dict[str, object] = {}
    if fmt in (ExportFormat.JPEG, ExportFormat.WEBP):
        params["quality"] = options.quality
    if options.preserve_metadata:
        for key in ("icc_profile", "exif"):
            if image.info.get(key):
                params[key] = image.info[key]

    if fmt in (ExportFormat.JPEG, ExportFormat.PDF):
        image = _flatten(image)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format=fmt.value.upper(), **params)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Unable to write {fmt.value.upper()} file: {path}. Error: {exc}") from exc


def _flatten(image: Image.Image) -> Image.Image:
    """Composite any transparency onto white and return an RGB image."""

    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


__all__ = [
    "ExportFormat",
    "ImageExportOptions",
    "export_document",
    "export_to_paper_format",
    "save_image",
]
