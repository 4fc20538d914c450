class ExtractionError(Exception):
    """Base exception for all extraction pipeline errors."""


class InvalidContentTypeError(ExtractionError):
    """Raised when the request body is not multipart form data."""


class InvalidFormError(ExtractionError):
    """Raised when the multipart body cannot be parsed."""


class NoFileUploadedError(ExtractionError):
    """Raised when no usable file entry is present in the form."""


class FileTooLargeError(ExtractionError):
    """Raised when an upload exceeds the configured size limit."""


class UnsupportedFormatError(ExtractionError):
    """Raised when neither filename nor MIME type maps to a supported format."""


class FileReadError(ExtractionError):
    """Raised when the uploaded file cannot be read."""
