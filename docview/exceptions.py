"""
Custom exceptions for docview.

Every failure raised by the document core, the operation layer and the
loaders derives from :class:`DocViewError`, so collaborators can catch one
type and still classify the failure by subclass.
"""


class DocViewError(Exception):
    """Base exception for all docview errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown docview error occurred."


class UnsupportedOperationError(DocViewError):
    """Raised when the active document variant cannot honor a capability."""

    @property
    def default_message(self) -> str:
        return "Operation is not supported for this document type."


class InvalidRegionError(DocViewError):
    """Raised when a crop rectangle or page index is out of bounds."""

    @property
    def default_message(self) -> str:
        return "Requested region is outside the document bounds."


class InvalidPageError(InvalidRegionError):
    """Raised when page navigation targets a page that does not exist."""

    def __init__(self, requested: int, total: int) -> None:
        self.requested = requested
        self.total = total
        super().__init__(f"Invalid page index {requested} (document has {total} pages)")


class RenderFailureError(DocViewError):
    """Raised when the active variant cannot currently produce a surface."""

    @property
    def default_message(self) -> str:
        return "Rendering failed."


class NoActiveDocumentError(DocViewError):
    """Raised when an operation is requested without a document."""

    @property
    def default_message(self) -> str:
        return "No document is loaded."


class DocumentLoadError(DocViewError):
    """Raised when a file cannot be turned into a document."""

    @property
    def default_message(self) -> str:
        return "Failed to load document."


class UnsupportedFormatError(DocumentLoadError):
    """Raised when no loader handles the file extension."""

    @property
    def default_message(self) -> str:
        return "Unsupported document format."


class ExportError(DocViewError):
    """Raised when writing a document to disk fails."""

    @property
    def default_message(self) -> str:
        return "Export failed."


class InvalidValueError(DocViewError):
    """Raised when an angle or coordinate is NaN or infinite."""

    @property
    def default_message(self) -> str:
        return "Value must be a finite number."
