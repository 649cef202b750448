"""Backend abstractions for portable documents."""

from .base import PortableBackend
from .pdf_backend import PdfBackend

__all__ = [
    "PortableBackend",
    "PdfBackend",
]
