from __future__ import annotations

import pytest
from PIL import Image

from docview.config import ViewerSettings
from docview.document import DocumentContent
from docview.exceptions import NoActiveDocumentError
from docview.geometry import Rotation
from docview.operations import crop_document, rotate_document_cw
from docview.session import DocumentSession
from docview.types import InterpolationQuality
from docview.viewport import ViewMode

from conftest import WHITE, FakePortableBackend


@pytest.fixture()
def session() -> DocumentSession:
    session = DocumentSession()
    session.resize(800, 600)
    return session


def test_empty_session(session: DocumentSession) -> None:
    assert not session.has_document
    with pytest.raises(NoActiveDocumentError):
        session.document
    with pytest.raises(NoActiveDocumentError):
        session.apply(rotate_document_cw)


def test_open_syncs_viewport(session: DocumentSession, raster_document: DocumentContent) -> None:
    session.open(raster_document)

    assert session.has_document
    assert session.viewport.content_size == (100, 200)
    assert session.viewport.zoom == pytest.approx(3.0)


def test_apply_follows_dimension_swap(session: DocumentSession, raster_document: DocumentContent) -> None:
    session.open(raster_document)
    state = session.apply(rotate_document_cw)

    assert state.rotation.degrees == 90
    assert session.viewport.content_size == (200, 100)
    assert session.viewport.zoom == pytest.approx(4.0)


def test_apply_forwards_arguments(session: DocumentSession, raster_document: DocumentContent) -> None:
    session.open(raster_document)
    session.apply(crop_document, 0, 0, 40, 50)
    assert session.viewport.content_size == (40, 50)


def test_open_resets_custom_view_and_closes_previous(session: DocumentSession) -> None:
    backend = FakePortableBackend()
    session.open(DocumentContent.portable(backend))
    session.viewport.set_zoom(7)
    assert session.viewport.mode is ViewMode.CUSTOM

    session.open(DocumentContent.raster(Image.new("RGB", (10, 20), WHITE)))

    assert backend.closed
    assert session.viewport.mode is ViewMode.FIT
    assert session.viewport.content_size == (10, 20)


def test_go_to_page_resyncs(session: DocumentSession) -> None:
    session.open(DocumentContent.portable(FakePortableBackend()))
    assert session.viewport.content_size == (200, 100)

    session.go_to_page(1)
    assert session.document.current_page() == 1
    assert session.viewport.content_size == (300, 400)


def test_close(session: DocumentSession) -> None:
    backend = FakePortableBackend()
    session.open(DocumentContent.portable(backend))
    session.close()

    assert backend.closed
    assert not session.has_document
    assert session.viewport.content_size == (0, 0)
    assert session.viewport.mode is ViewMode.FIT


def test_open_applies_interpolation_setting(raster_document: DocumentContent) -> None:
    session = DocumentSession(ViewerSettings(interpolation=InterpolationQuality.BEST))
    session.open(raster_document)
    assert raster_document.variant.interpolation is InterpolationQuality.BEST


def test_camera_shares_viewport(session: DocumentSession, raster_document: DocumentContent) -> None:
    session.open(raster_document)
    session.camera.zoom_to(2.0)
    assert session.viewport.zoom == 2.0
    assert session.document.transform_state().rotation.nearest() is Rotation.NONE
