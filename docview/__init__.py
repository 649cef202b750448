"""
docview - Uniform transform and render core for raster, vector and PDF documents.

This library wraps decoded images, SVG sources and paginated PDF handles
in one container so that rotate, flip, crop and scale-to-fit can be
expressed once. Raster documents rewrite pixels, vector documents compose
an affine matrix and PDF documents keep a view rotation for the backend.

Quick Start:
    >>> from docview import load_document, rotate_document_cw
    >>> document = load_document('scan.png')
    >>> rotate_document_cw(document)
    >>> document.dimensions()

Main Classes:
    - DocumentContent: The container every operation works on
    - DocumentSession: Active document plus viewport for a viewer
    - Viewport / Camera: Pan and zoom state with bounds clamping

Operations:
    - rotate_document_cw / rotate_document_ccw / rotate_document_to
    - flip_document_horizontal / flip_document_vertical
    - reset_document_transforms / crop_document
    - export_document / export_to_paper_format

Exceptions:
    - DocViewError: Base exception
    - UnsupportedOperationError, InvalidRegionError, RenderFailureError,
      InvalidValueError, NoActiveDocumentError, DocumentLoadError, ExportError

For CLI usage, use the 'docview' command after installation.
"""

__version__ = "1.0.0"

# Core classes
from docview.document import DocumentContent, PortableDocument, RasterDocument, VectorDocument
from docview.session import DocumentSession
from docview.viewport import Bounds, Camera, PanDirection, ViewMode, Viewport

# Value types
from docview.geometry import AffineTransform, Fine, FlipAxis, Rotation, Standard, TransformState
from docview.types import DocumentInfo, DocumentKind, InterpolationQuality, Surface
from docview.config import PanSpeed, ViewerSettings

# Exceptions
from docview.exceptions import (
    DocViewError,
    DocumentLoadError,
    ExportError,
    InvalidPageError,
    InvalidRegionError,
    InvalidValueError,
    NoActiveDocumentError,
    RenderFailureError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)

# Operations
from docview.operations import (
    ExportFormat,
    ImageExportOptions,
    crop_document,
    export_document,
    export_to_paper_format,
    flip_document_horizontal,
    flip_document_vertical,
    render_document,
    reset_document_transforms,
    rotate_document_ccw,
    rotate_document_cw,
    rotate_document_to,
)
from docview.loaders import load_document
from docview.metadata import DocumentMetadata, ExifMetadata, extract_metadata

__author__ = "docview contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "DocumentContent",
    "RasterDocument",
    "VectorDocument",
    "PortableDocument",
    "DocumentSession",
    "Viewport",
    "ViewMode",
    "Camera",
    "PanDirection",
    "Bounds",
    # Value types
    "AffineTransform",
    "Rotation",
    "Standard",
    "Fine",
    "FlipAxis",
    "TransformState",
    "DocumentInfo",
    "DocumentKind",
    "InterpolationQuality",
    "Surface",
    "PanSpeed",
    "ViewerSettings",
    # Exceptions
    "DocViewError",
    "UnsupportedOperationError",
    "InvalidRegionError",
    "InvalidPageError",
    "InvalidValueError",
    "RenderFailureError",
    "NoActiveDocumentError",
    "DocumentLoadError",
    "UnsupportedFormatError",
    "ExportError",
    # Operations
    "rotate_document_cw",
    "rotate_document_ccw",
    "rotate_document_to",
    "flip_document_horizontal",
    "flip_document_vertical",
    "reset_document_transforms",
    "crop_document",
    "render_document",
    "export_document",
    "export_to_paper_format",
    "ExportFormat",
    "ImageExportOptions",
    "load_document",
    "extract_metadata",
    "DocumentMetadata",
    "ExifMetadata",
    # Version info
    "__version__",
]
