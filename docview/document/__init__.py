"""Document container, capability protocols and variants."""

from .content import DocumentContent, DocumentVariant
from .traits import Croppable, FineRotatable, MultiPage, Renderable, Transformable
from .variants import PortableDocument, RasterDocument, VectorDocument

__all__ = [
    "DocumentContent",
    "DocumentVariant",
    "Renderable",
    "Transformable",
    "FineRotatable",
    "Croppable",
    "MultiPage",
    "RasterDocument",
    "VectorDocument",
    "PortableDocument",
]
