"""Document metadata extraction: file facts, EXIF tags and PDF properties."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, assert_never

from PIL import ExifTags, Image

from .document import DocumentContent, PortableDocument, RasterDocument, VectorDocument
from .exceptions import DocumentLoadError
from .utils import format_file_size, get_logger

LOGGER = get_logger("docview.metadata")

MINUTES_PER_DEGREE = 60.0
SECONDS_PER_DEGREE = 3600.0


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, tuple) and len(value) == 2:
        numerator, denominator = value
        return float(numerator) / float(denominator) if denominator else None
    try:
        return float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    cleaned = str(value).strip("\x00").strip()
    return cleaned or None


def _sub_ifd(exif: Image.Exif, tag: ExifTags.IFD) -> Mapping[int, Any]:
    value = exif.get(tag)
    if isinstance(value, dict):
        return value
    return exif.get_ifd(tag)


def _gps_coordinate(gps: Mapping[int, Any], coordinate_tag: int, reference_tag: int) -> Optional[float]:
    coordinate = gps.get(coordinate_tag)
    reference = _text(gps.get(reference_tag))
    if reference is None or not isinstance(coordinate, (tuple, list)) or len(coordinate) < 3:
        return None
    parts = [_to_float(part) for part in coordinate[:3]]
    if any(part is None for part in parts):
        return None
    degrees, minutes, seconds = parts
    decimal = degrees + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE
    return -decimal if reference.upper() in ("S", "W") else decimal


@dataclass(frozen=True)
class ExifMetadata:
    """Camera, exposure and location tags read from an image's EXIF block."""

    camera_make: Optional[str] = None
    camera_model: Optional[str] = None
    date_time: Optional[str] = None
    exposure_time: Optional[str] = None
    f_number: Optional[str] = None
    iso: Optional[int] = None
    focal_length: Optional[str] = None
    gps_latitude: Optional[float] = None
    gps_longitude: Optional[float] = None

    @classmethod
    def from_exif(cls, exif: Image.Exif) -> Optional["ExifMetadata"]:
        """
        Build from a Pillow ``Image.Exif`` mapping.

        Exposure tags are looked up in the Exif sub-IFD first and then in
        IFD0. GPS coordinates are converted from degrees, minutes and seconds
        to signed decimal degrees. Returns None when no known tag is present.
        """
        detail = _sub_ifd(exif, ExifTags.IFD.Exif)
        gps = _sub_ifd(exif, ExifTags.IFD.GPSInfo)

        def lookup(tag: int) -> Any:
            value = detail.get(tag)
            return exif.get(tag) if value is None else value

        exposure = _to_float(lookup(ExifTags.Base.ExposureTime))
        if exposure is None or exposure <= 0:
            exposure_time = None
        elif exposure < 1:
            exposure_time = f"1/{round(1 / exposure)} s"
        else:
            exposure_time = f"{exposure:g} s"

        aperture = _to_float(lookup(ExifTags.Base.FNumber))
        focal = _to_float(lookup(ExifTags.Base.FocalLength))

        iso = lookup(ExifTags.Base.ISOSpeedRatings)
        if isinstance(iso, (tuple, list)):
            iso = iso[0] if iso else None

        metadata = cls(
            camera_make=_text(exif.get(ExifTags.Base.Make)),
            camera_model=_text(exif.get(ExifTags.Base.Model)),
            date_time=_text(exif.get(ExifTags.Base.DateTime) or detail.get(ExifTags.Base.DateTimeOriginal)),
            exposure_time=exposure_time,
            f_number=f"f/{aperture:g}" if aperture else None,
            iso=int(iso) if iso is not None else None,
            focal_length=f"{focal:g} mm" if focal else None,
            gps_latitude=_gps_coordinate(gps, ExifTags.GPS.GPSLatitude, ExifTags.GPS.GPSLatitudeRef),
            gps_longitude=_gps_coordinate(gps, ExifTags.GPS.GPSLongitude, ExifTags.GPS.GPSLongitudeRef),
        )
        if metadata == cls():
            return None
        return metadata

    @property
    def camera_display(self) -> Optional[str]:
        make, model = self.camera_make, self.camera_model
        if make and model:
            return model if model.startswith(make) else f"{make} {model}"
        return make or model

    @property
    def gps_display(self) -> Optional[str]:
        if self.gps_latitude is None or self.gps_longitude is None:
            return None
        return f"{self.gps_latitude:.5f}, {self.gps_longitude:.5f}"


@dataclass(frozen=True)
class DocumentMetadata:
    """File facts for a loaded document plus optional EXIF tags and PDF properties."""

    file_name: str
    file_path: str
    format: str
    width: int
    height: int
    file_size: int
    color_type: str
    page_count: int = 1
    exif: Optional[ExifMetadata] = None
    properties: Mapping[str, str] = field(default_factory=dict)

    @property
    def file_size_display(self) -> str:
        return format_file_size(self.file_size)

    @property
    def resolution_display(self) -> str:
        return f"{self.width} x {self.height}"


def read_exif(path: str | Path) -> Optional[ExifMetadata]:
    """Read EXIF tags from an image file; unreadable files yield None."""
    try:
        with Image.open(path) as image:
            exif = image.getexif()
    except OSError as exc:
        LOGGER.warning("Unable to read EXIF from %s: %s", path, exc)
        return None
    return ExifMetadata.from_exif(exif)


def extract_metadata(input_path: str | Path, document: DocumentContent) -> DocumentMetadata:
    """Collect metadata for *document*, which was loaded from *input_path*."""
    path = Path(input_path)
    LOGGER.info("Extracting metadata from %s", path)
    try:
        file_size = path.stat().st_size
    except OSError as exc:
        raise DocumentLoadError(f"Unable to read file metadata: {path}. Error: {exc}") from exc

    exif: Optional[ExifMetadata] = None
    properties: dict[str, str] = {}
    match document.variant:
        case RasterDocument() as raster:
            color_type = raster.image.mode
            exif = read_exif(path)
        case VectorDocument():
            color_type = "Vector"
        case PortableDocument() as portable:
            color_type = "Document"
            properties = portable.backend.document_properties()
        case _ as unreachable:
            assert_never(unreachable)

    info = document.info()
    return DocumentMetadata(
        file_name=path.name,
        file_path=str(path.resolve()),
        format=info.format,
        width=info.width,
        height=info.height,
        file_size=file_size,
        color_type=color_type,
        page_count=document.page_count(),
        exif=exif,
        properties=properties,
    )
