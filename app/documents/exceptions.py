class DocumentError(Exception):
    """Base exception for download document errors."""


class NoBulletsError(DocumentError):
    """Raised when a bullet document is requested without bullets."""


class NoTextError(DocumentError):
    """Raised when a text or draft download is requested without text."""
