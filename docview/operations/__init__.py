"""High-level operations on :class:`~docview.document.DocumentContent`."""

from .export import ExportFormat, ImageExportOptions, export_document, export_to_paper_format
from .render import (
    calculate_fill_scale,
    calculate_fit_scale,
    dimensions_after_rotation,
    render_document,
    render_thumbnail,
    render_to_fit,
    scale_dimensions,
)
from .transform import (
    crop_document,
    flip_document_horizontal,
    flip_document_vertical,
    reset_document_transforms,
    rotate_document_ccw,
    rotate_document_cw,
    rotate_document_to,
)

__all__ = [
    "rotate_document_cw",
    "rotate_document_ccw",
    "flip_document_horizontal",
    "flip_document_vertical",
    "rotate_document_to",
    "reset_document_transforms",
    "crop_document",
    "scale_dimensions",
    "calculate_fit_scale",
    "calculate_fill_scale",
    "dimensions_after_rotation",
    "render_document",
    "render_to_fit",
    "render_thumbnail",
    "ExportFormat",
    "ImageExportOptions",
    "export_document",
    "export_to_paper_format",
]
