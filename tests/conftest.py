from __future__ import annotations

from pathlib import Path
import sys

import pytest
from PIL import Image
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docview.document import DocumentContent  # noqa: E402
from docview.exceptions import InvalidPageError, RenderFailureError  # noqa: E402
from docview.geometry import Rotation  # noqa: E402

RED = (255, 0, 0)
WHITE = (255, 255, 255)

CLOCKWISE = {
    Rotation.CW90: Image.Transpose.ROTATE_270,
    Rotation.CW180: Image.Transpose.ROTATE_180,
    Rotation.CW270: Image.Transpose.ROTATE_90,
}

SVG_SOURCE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="120" height="80" viewBox="0 0 120 80">'
    '<rect x="0" y="0" width="60" height="40" fill="red"/>'
    "</svg>"
)


class FakePortableBackend:
    """In-memory paginated backend recording how it was driven."""

    def __init__(self, sizes=((200.0, 100.0), (300.0, 400.0), (50.0, 50.0)), broken_pages=(), properties=None):
        self.sizes = list(sizes)
        self.properties = dict(properties or {})
        self.broken_pages = set(broken_pages)
        self.render_calls: list[tuple[int, float, Rotation]] = []
        self.thumbnail_renders = 0
        self.writes: list[dict] = []
        self.closed = False
        self._thumbnails: dict[int, Image.Image] = {}

    def page_count(self) -> int:
        return len(self.sizes)

    def page_size(self, index: int) -> tuple[float, float]:
        if not 0 <= index < len(self.sizes):
            raise InvalidPageError(index, len(self.sizes))
        return self.sizes[index]

    def render_page(self, index: int, scale: float, rotation: Rotation) -> Image.Image:
        self.render_calls.append((index, scale, rotation))
        if index in self.broken_pages:
            raise RenderFailureError(f"Unable to render page {index}")
        width, height = self.page_size(index)
        image = Image.new("RGB", (round(width * scale), round(height * scale)), WHITE)
        image.putpixel((0, 0), RED)
        if rotation is not Rotation.NONE:
            image = image.transpose(CLOCKWISE[rotation])
        return image

    def thumbnail(self, index: int, size: tuple[int, int]) -> Image.Image:
        if index not in self._thumbnails:
            self.thumbnail_renders += 1
            width, height = self.page_size(index)
            scale = min(size[0] / width, size[1] / height)
            self._thumbnails[index] = self.render_page(index, scale, Rotation.NONE)
        return self._thumbnails[index]

    def write(self, destination, *, rotation=Rotation.NONE, flip_horizontal=False, flip_vertical=False) -> None:
        self.writes.append(
            {
                "destination": Path(destination),
                "rotation": rotation,
                "flip_horizontal": flip_horizontal,
                "flip_vertical": flip_vertical,
            }
        )

    def document_properties(self) -> dict[str, str]:
        return dict(self.properties)

    def close(self) -> None:
        self.closed = True


def _marked_image(width: int = 100, height: int = 200) -> Image.Image:
    image = Image.new("RGB", (width, height), WHITE)
    image.putpixel((0, 0), RED)
    return image


@pytest.fixture()
def raster_image() -> Image.Image:
    return _marked_image()


@pytest.fixture()
def raster_document(raster_image: Image.Image) -> DocumentContent:
    return DocumentContent.raster(raster_image, format_label="PNG")


@pytest.fixture()
def svg_source() -> str:
    return SVG_SOURCE


@pytest.fixture()
def vector_document(svg_source: str) -> DocumentContent:
    return DocumentContent.vector(svg_source, 120, 80)


@pytest.fixture()
def fake_backend() -> FakePortableBackend:
    return FakePortableBackend()


@pytest.fixture()
def portable_document(fake_backend: FakePortableBackend) -> DocumentContent:
    return DocumentContent.portable(fake_backend)


@pytest.fixture(params=["raster", "vector", "portable"])
def any_document(request) -> DocumentContent:
    if request.param == "raster":
        return DocumentContent.raster(_marked_image(), format_label="PNG")
    if request.param == "vector":
        return DocumentContent.vector(SVG_SOURCE, 120, 80)
    return DocumentContent.portable(FakePortableBackend())


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=100)
    writer.add_blank_page(width=300, height=400)
    writer.add_blank_page(width=72, height=72)
    writer.add_metadata({"/Producer": "docview-tests", "/Title": "Sample"})
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def encrypted_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "encrypted.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    writer.encrypt("secret")
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "photo.png"
    _marked_image().save(path)
    return path


@pytest.fixture()
def svg_file(tmp_path: Path) -> Path:
    path = tmp_path / "drawing.svg"
    path.write_text(SVG_SOURCE, encoding="utf-8")
    return path
