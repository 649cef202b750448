"""The owner of the active document and its viewport."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .config import ViewerSettings
from .document.content import DocumentContent
from .exceptions import NoActiveDocumentError
from .utils import get_logger
from .viewport import Camera, Viewport

LOGGER = get_logger("docview.session")

T = TypeVar("T")


class DocumentSession:
    """
    Holds at most one :class:`DocumentContent` plus one :class:`Viewport`.

    Collaborators pass the session's document to the operation layer
    through :meth:`apply`, which keeps the viewport's content size in sync
    so Fit mode follows rotations that swap width and height.
    """

    def __init__(self, settings: ViewerSettings | None = None) -> None:
        self.settings = settings or ViewerSettings()
        self.viewport = Viewport(self.settings)
        self.camera = Camera(self.viewport)
        self._document: Optional[DocumentContent] = None

    @property
    def has_document(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> DocumentContent:
        if self._document is None:
            raise NoActiveDocumentError()
        return self._document

    def open(self, content: DocumentContent) -> None:
        """Replace the active document and reset the view."""

        if self._document is not None:
            self._document.close()
        content.set_interpolation_quality(self.settings.interpolation)
        self._document = content
        self.viewport.reset()
        self._sync_viewport()
        LOGGER.info("Opened %r", content)

    def close(self) -> None:
        if self._document is not None:
            self._document.close()
        self._document = None
        self.viewport.set_content_size(0, 0)
        self.viewport.reset()

    def apply(self, operation: Callable[..., T], *args, **kwargs) -> T:
        """Run *operation* on the active document and refresh the viewport."""

        result = operation(self.document, *args, **kwargs)
        self._sync_viewport()
        return result

    def resize(self, width: float, height: float) -> None:
        self.viewport.set_canvas_size(width, height)

    def go_to_page(self, page: int) -> None:
        self.document.go_to_page(page)
        self._sync_viewport()

    def _sync_viewport(self) -> None:
        width, height = self.document.dimensions()
        self.viewport.set_content_size(width, height)
