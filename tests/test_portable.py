from __future__ import annotations

import copy
from pathlib import Path

import pytest

from docview.document import PortableDocument
from docview.exceptions import InvalidPageError, RenderFailureError, UnsupportedOperationError
from docview.geometry import FlipAxis, Rotation, Standard

from conftest import RED, FakePortableBackend


def test_dimensions_follow_view_rotation(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    assert document.dimensions() == (200, 100)

    document.rotate(Rotation.CW90)
    assert document.dimensions() == (100, 200)
    assert document.transform_state().rotation == Standard(Rotation.CW90)
    assert document.info().width == 200


def test_render_delegates_rotation_to_backend(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    document.rotate(Rotation.CW270)
    surface = document.render(0.5)

    assert fake_backend.render_calls[-1] == (0, 0.5, Rotation.CW270)
    assert surface.size == (50, 100)


def test_render_applies_flips_after_rotation(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    document.flip(FlipAxis.HORIZONTAL)
    surface = document.render()
    assert surface.image.getpixel((199, 0)) == RED

    document.rotate(Rotation.CW90)
    surface = document.render()
    # rotation puts the marker top-right of a 100x200 page, the flip moves it left
    assert surface.image.getpixel((0, 0)) == RED


def test_backend_failure_is_reported() -> None:
    document = PortableDocument(FakePortableBackend(broken_pages={0}))
    with pytest.raises(RenderFailureError):
        document.render()


def test_render_rejects_non_positive_scale(fake_backend: FakePortableBackend) -> None:
    with pytest.raises(RenderFailureError):
        PortableDocument(fake_backend).render(0)


def test_page_navigation(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    assert document.page_count() == 3

    document.go_to_page(1)
    assert document.current_page() == 1
    assert document.dimensions() == (300, 400)

    for page in (3, -1):
        with pytest.raises(InvalidPageError):
            document.go_to_page(page)
    assert document.current_page() == 1


def test_thumbnails_are_cached_by_backend(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    first = document.thumbnail(0)
    document.thumbnail(0)

    assert fake_backend.thumbnail_renders == 1
    assert first.size == (160, 80)

    document.rotate(Rotation.CW90)
    assert document.thumbnail(0).size == (80, 160)
    assert fake_backend.thumbnail_renders == 1

    with pytest.raises(InvalidPageError):
        document.thumbnail(7)


def test_reset_clears_view_state(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    document.rotate(Rotation.CW180)
    document.flip(FlipAxis.VERTICAL)
    document.reset_transform()
    assert document.transform_state().is_identity


def test_write_native_bakes_view_state(fake_backend: FakePortableBackend, tmp_path: Path) -> None:
    document = PortableDocument(fake_backend)
    document.rotate(Rotation.CW90)
    document.flip(FlipAxis.HORIZONTAL)
    document.write_native(tmp_path / "out.pdf")

    assert fake_backend.writes == [
        {
            "destination": tmp_path / "out.pdf",
            "rotation": Rotation.CW90,
            "flip_horizontal": True,
            "flip_vertical": False,
        }
    ]


def test_portable_documents_cannot_be_copied(fake_backend: FakePortableBackend) -> None:
    document = PortableDocument(fake_backend)
    with pytest.raises(UnsupportedOperationError):
        copy.copy(document)
    with pytest.raises(UnsupportedOperationError):
        copy.deepcopy(document)


def test_close_releases_backend(fake_backend: FakePortableBackend) -> None:
    PortableDocument(fake_backend).close()
    assert fake_backend.closed
