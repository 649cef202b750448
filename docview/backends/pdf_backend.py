"""pypdf + pypdfium2 backend for portable documents."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path

import pypdfium2 as pdfium
from PIL import Image
from pypdf import PdfReader, PdfWriter, Transformation
from pypdf.errors import PdfReadError

from ..exceptions import DocumentLoadError, ExportError, InvalidPageError, RenderFailureError
from ..geometry import Rotation
from ..utils import get_logger
from .base import PortableBackend

LOGGER = get_logger("docview.backends.pdf")


@dataclass
class PdfBackend(PortableBackend):
    """
    Backend that validates and writes with `pypdf` and rasterizes with `pypdfium2`.

    The pdfium handle is opened lazily on first render. Thumbnails are
    generated on demand and cached per page.
    """

    reader: PdfReader
    raw_bytes: bytes
    source: Path | None = None
    _renderer: pdfium.PdfDocument | None = field(default=None, init=False, repr=False)
    _thumbnails: dict[int, Image.Image] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def load(cls, pdf_path: str | Path, password: str | None = None) -> "PdfBackend":
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise DocumentLoadError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        backend = cls.from_bytes(raw_bytes, password=password, label=str(pdf_path))
        backend.source = path
        return backend

    @classmethod
    def from_bytes(cls, raw_bytes: bytes, password: str | None = None, label: str = "<bytes>") -> "PdfBackend":
        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise DocumentLoadError(f"Corrupted or invalid PDF file: {label}. Error: {exc}") from exc
        except Exception as exc:
            raise DocumentLoadError(f"Unexpected error reading PDF: {label}. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise DocumentLoadError("Failed to decrypt PDF with supplied password.")
            else:
                raise DocumentLoadError("PDF is encrypted. Supply a password to open this file.")

        if len(reader.pages) == 0:
            raise DocumentLoadError(f"PDF has no pages: {label}")

        return cls(reader=reader, raw_bytes=raw_bytes)

    def page_count(self) -> int:
        return len(self.reader.pages)

    def page_size(self, index: int) -> tuple[float, float]:
        page = self.reader.pages[self._check_index(index)]
        box = page.cropbox
        width, height = float(box.width), float(box.height)
        if page.rotation % 180 == 90:
            return (height, width)
        return (width, height)

    def render_page(self, index: int, scale: float, rotation: Rotation) -> Image.Image:
        index = self._check_index(index)
        try:
            page = self._document()[index]
            bitmap = page.render(scale=scale, rotation=rotation.degrees)
            return bitmap.to_pil()
        except Exception as exc:
            LOGGER.warning("Rendering page %s failed: %s", index, exc)
            raise RenderFailureError(f"Unable to render page {index}: {exc}") from exc

    def thumbnail(self, index: int, size: tuple[int, int]) -> Image.Image:
        index = self._check_index(index)
        if index not in self._thumbnails:
            width, height = self.page_size(index)
            scale = min(size[0] / width, size[1] / height)
            self._thumbnails[index] = self.render_page(index, scale, Rotation.NONE)
            LOGGER.debug("Generated thumbnail for page %s", index)
        return self._thumbnails[index]

    def write(
        self,
        destination: str | Path,
        *,
        rotation: Rotation = Rotation.NONE,
        flip_horizontal: bool = False,
        flip_vertical: bool = False,
    ) -> None:
        writer = PdfWriter()
        for source_page in self.reader.pages:
            page = writer.add_page(source_page)
            flip_x, flip_y = flip_horizontal, flip_vertical
            # /Rotate is applied after the content stream, so a flip on the
            # displayed page lands on the swapped content axis whenever the
            # page's own rotation plus the view rotation is an odd quarter turn.
            if (source_page.rotation + rotation.degrees) % 180 == 90:
                flip_x, flip_y = flip_y, flip_x
            box = page.cropbox
            if flip_x:
                page.add_transformation(
                    Transformation().scale(-1, 1).translate(float(box.left) + float(box.right), 0)
                )
            if flip_y:
                page.add_transformation(
                    Transformation().scale(1, -1).translate(0, float(box.bottom) + float(box.top))
                )
            if rotation is not Rotation.NONE:
                page.rotate(rotation.degrees)

        path = Path(destination)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open('wb') as handle:
                writer.write(handle)
        except OSError as exc:
            raise ExportError(f"Unable to write PDF: {destination}. Error: {exc}") from exc

    def document_properties(self) -> dict[str, str]:
        properties: dict[str, str] = {}
        for key, value in (self.reader.metadata or {}).items():
            if not value:
                continue
            properties[key[1:] if key.startswith("/") else key] = str(value)
        return properties

    def close(self) -> None:
        if self._renderer is not None:
            self._renderer.close()
            self._renderer = None
        self._thumbnails.clear()

    def _document(self) -> pdfium.PdfDocument:
        if self._renderer is None:
            self._renderer = pdfium.PdfDocument(self.raw_bytes)
        return self._renderer

    def _check_index(self, index: int) -> int:
        total = len(self.reader.pages)
        if not 0 <= index < total:
            raise InvalidPageError(index, total)
        return index
