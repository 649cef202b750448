"""
Format-agnostic transform operations.

These functions are the transform surface for code outside the document
core. Each takes the active :class:`DocumentContent`, computes the next
state from the current one, and calls the matching capability. On success
the resulting :class:`TransformState` is returned; every failure raises a
:class:`~docview.exceptions.DocViewError` subclass.
"""

from __future__ import annotations

from typing import Optional

from ..document.content import DocumentContent
from ..exceptions import NoActiveDocumentError
from ..geometry import Fine, FlipAxis, Rotation, TransformState, nearest_quarter_turn
from ..utils import get_logger, normalize_degrees

LOGGER = get_logger("docview.operations.transform")


def _require(document: Optional[DocumentContent]) -> DocumentContent:
    if document is None:
        raise NoActiveDocumentError()
    return document


def _finish(document: DocumentContent, operation: str) -> TransformState:
    state = document.transform_state()
    LOGGER.debug("%s on %s document -> %s", operation, document.kind.value, state)
    return state


def rotate_document_cw(document: Optional[DocumentContent]) -> TransformState:
    """Advance to the next clockwise quarter turn.

    A fine angle is first rounded to its nearest quarter turn, so the fine
    part of the rotation is lost.
    """

    doc = _require(document)
    current = doc.transform_state().rotation
    doc.rotate(current.nearest().rotate_cw())
    return _finish(doc, "rotate_cw")


def rotate_document_ccw(document: Optional[DocumentContent]) -> TransformState:
    """Step back to the previous quarter turn, rounding fine angles first."""

    doc = _require(document)
    current = doc.transform_state().rotation
    doc.rotate(current.nearest().rotate_ccw())
    return _finish(doc, "rotate_ccw")


def flip_document_horizontal(document: Optional[DocumentContent]) -> TransformState:
    doc = _require(document)
    doc.flip(FlipAxis.HORIZONTAL)
    return _finish(doc, "flip_horizontal")


def flip_document_vertical(document: Optional[DocumentContent]) -> TransformState:
    doc = _require(document)
    doc.flip(FlipAxis.VERTICAL)
    return _finish(doc, "flip_vertical")


def rotate_document_to(document: Optional[DocumentContent], angle: float | Rotation) -> TransformState:
    """Rotate to an absolute clockwise *angle*.

    Multiples of 90 degrees use the quarter-turn path. Other angles need
    fine rotation, which portable documents reject with
    ``UnsupportedOperationError``.
    """

    doc = _require(document)
    if isinstance(angle, Rotation):
        doc.rotate(angle)
        return _finish(doc, "rotate_to")

    target = normalize_degrees(angle)
    if Fine(target).is_multiple_of_90():
        doc.rotate(nearest_quarter_turn(target))
    else:
        doc.rotate_fine(target)
    return _finish(doc, "rotate_to")


def reset_document_transforms(document: Optional[DocumentContent]) -> TransformState:
    """Reset the transform state to identity.

    Raster pixels that were already rewritten are not restored; only
    further relative transforms stop compounding on the old state.
    """

    doc = _require(document)
    doc.reset_transform()
    return _finish(doc, "reset")


def crop_document(
    document: Optional[DocumentContent],
    x: int,
    y: int,
    width: int,
    height: int,
) -> TransformState:
    """Crop to a rectangle given in effective (post-transform) coordinates."""

    doc = _require(document)
    doc.crop(x, y, width, height)
    return _finish(doc, "crop")


__all__ = [
    "rotate_document_cw",
    "rotate_document_ccw",
    "flip_document_horizontal",
    "flip_document_vertical",
    "rotate_document_to",
    "reset_document_transforms",
    "crop_document",
]
