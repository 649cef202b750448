from __future__ import annotations

from pathlib import Path

import pytest
from pypdf import PdfReader

from docview.backends import PdfBackend
from docview.exceptions import DocumentLoadError, InvalidPageError
from docview.geometry import Rotation


def test_load_reports_pages_and_sizes(sample_pdf: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    assert backend.page_count() == 3
    assert backend.page_size(0) == (200.0, 100.0)
    assert backend.page_size(1) == (300.0, 400.0)
    assert backend.source == sample_pdf


def test_render_page_applies_rotation(sample_pdf: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    try:
        assert backend.render_page(0, 1.0, Rotation.NONE).size == (200, 100)
        assert backend.render_page(0, 0.5, Rotation.CW90).size == (50, 100)
    finally:
        backend.close()


def test_thumbnail_is_generated_once(sample_pdf: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    try:
        thumbnail = backend.thumbnail(1, (60, 60))
        assert backend.thumbnail(1, (60, 60)) is thumbnail
        assert max(thumbnail.size) <= 60
    finally:
        backend.close()


def test_out_of_range_page(sample_pdf: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    with pytest.raises(InvalidPageError):
        backend.page_size(3)


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoadError):
        PdfBackend.load(tmp_path / "missing.pdf")


def test_empty_pdf_is_rejected(empty_pdf: Path) -> None:
    with pytest.raises(DocumentLoadError, match="no pages"):
        PdfBackend.load(empty_pdf)


def test_encrypted_pdf_requires_password(encrypted_pdf: Path) -> None:
    with pytest.raises(DocumentLoadError, match="encrypted"):
        PdfBackend.load(encrypted_pdf)


def test_garbage_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")
    with pytest.raises(DocumentLoadError):
        PdfBackend.load(path)


def test_write_applies_rotation(sample_pdf: Path, tmp_path: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    destination = tmp_path / "nested" / "rotated.pdf"
    backend.write(destination, rotation=Rotation.CW90, flip_horizontal=True)

    reader = PdfReader(destination)
    assert len(reader.pages) == 3
    assert reader.pages[0].rotation == 90
    assert float(reader.pages[0].mediabox.width) == 200.0


def test_write_without_view_state_keeps_pages(sample_pdf: Path, tmp_path: Path) -> None:
    backend = PdfBackend.load(sample_pdf)
    destination = tmp_path / "copy.pdf"
    backend.write(destination)

    reader = PdfReader(destination)
    assert [page.rotation for page in reader.pages] == [0, 0, 0]
