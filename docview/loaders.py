"""Turn files on disk into :class:`DocumentContent` instances."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from PIL import Image

from .backends import PdfBackend
from .config import ViewerSettings
from .document.content import DocumentContent
from .exceptions import DocumentLoadError, UnsupportedFormatError
from .types import DocumentKind
from .utils import get_logger

LOGGER = get_logger("docview.loaders")

# CSS pixels per unit
_SVG_UNITS = {
    "": 1.0,
    "px": 1.0,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
    "mm": 96.0 / 25.4,
    "cm": 96.0 / 2.54,
    "in": 96.0,
}

_LENGTH_PATTERN = re.compile(r"^\s*([+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z%]*)\s*$")


def is_supported(path: str | Path) -> bool:
    return DocumentKind.from_path(path) is not None


def parse_svg_length(value: Optional[str]) -> Optional[float]:
    """Convert an SVG length attribute to pixels; relative units give None."""

    if not value:
        return None
    match = _LENGTH_PATTERN.match(value)
    if not match:
        return None
    number, unit = match.groups()
    factor = _SVG_UNITS.get(unit.lower())
    if factor is None:
        return None
    return float(number) * factor


def svg_dimensions(source: str) -> tuple[float, float]:
    """Return the intrinsic size of an SVG document in pixels."""

    try:
        root = ET.fromstring(source)
    except ET.ParseError as exc:
        raise DocumentLoadError(f"Invalid SVG markup: {exc}") from exc

    width = parse_svg_length(root.get("width"))
    height = parse_svg_length(root.get("height"))
    if width and height:
        return (width, height)

    view_box = root.get("viewBox")
    if view_box:
        parts = re.split(r"[\s,]+", view_box.strip())
        try:
            box_width, box_height = float(parts[2]), float(parts[3])
        except (IndexError, ValueError) as exc:
            raise DocumentLoadError(f"Invalid viewBox: {view_box!r}") from exc
        if box_width > 0 and box_height > 0:
            if width:
                return (width, width * box_height / box_width)
            if height:
                return (height * box_width / box_height, height)
            return (box_width, box_height)

    raise DocumentLoadError("SVG has no usable width/height or viewBox")


def load_raster(path: Path, settings: ViewerSettings) -> DocumentContent:
    try:
        with Image.open(path) as image:
            image.load()
            label = image.format or path.suffix.lstrip(".").upper()
            if image.mode in ("P", "PA"):
                decoded = image.convert("RGBA")
            else:
                decoded = image.copy()
    except OSError as exc:
        raise DocumentLoadError(f"Unable to decode image: {path}. Error: {exc}") from exc

    return DocumentContent.raster(
        decoded,
        format_label=label,
        interpolation=settings.interpolation,
        thumbnail_size=settings.thumbnail_size,
    )


def load_vector(path: Path, settings: ViewerSettings) -> DocumentContent:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Unable to read SVG file: {path}. Error: {exc}") from exc

    width, height = svg_dimensions(source)
    try:
        return DocumentContent.vector(source, width, height, thumbnail_size=settings.thumbnail_size)
    except ValueError as exc:
        raise DocumentLoadError(f"Invalid SVG document: {path}. Error: {exc}") from exc


def load_portable(path: Path, settings: ViewerSettings, password: str | None = None) -> DocumentContent:
    backend = PdfBackend.load(path, password=password)
    return DocumentContent.portable(backend, thumbnail_size=settings.thumbnail_size)


def load_document(
    path: str | Path,
    settings: ViewerSettings | None = None,
    password: str | None = None,
) -> DocumentContent:
    """Detect the document kind from the file extension and load it."""

    settings = settings or ViewerSettings()
    file_path = Path(path)
    kind = DocumentKind.from_path(file_path)
    if kind is None:
        raise UnsupportedFormatError(f"Unsupported file type: {file_path.suffix or file_path.name}")
    if not file_path.is_file():
        raise DocumentLoadError(f"File not found: {file_path}")

    match kind:
        case DocumentKind.RASTER:
            content = load_raster(file_path, settings)
        case DocumentKind.VECTOR:
            content = load_vector(file_path, settings)
        case DocumentKind.PORTABLE:
            content = load_portable(file_path, settings, password)

    LOGGER.debug("Loaded %s as %r", file_path, content)
    return content


__all__ = [
    "is_supported",
    "parse_svg_length",
    "svg_dimensions",
    "load_document",
    "load_raster",
    "load_vector",
    "load_portable",
]
