"""Upload format classification from filename and MIME type."""

from enum import Enum
from pathlib import PurePath


class DocumentFormat(str, Enum):
    DOCX = "docx"
    PDF = "pdf"
    TXT = "txt"


_EXTENSIONS: dict[str, DocumentFormat] = {
    ".docx": DocumentFormat.DOCX,
    ".pdf": DocumentFormat.PDF,
    ".txt": DocumentFormat.TXT,
}


def classify_format(filename: str | None, mime_type: str | None) -> DocumentFormat | None:
    """Resolve the upload format, or None when it is not supported.

    The lower-cased filename extension wins. The MIME type is consulted only
    when the extension is missing or unknown.
    """
    extension = PurePath(filename or "").suffix.lower()
    if extension in _EXTENSIONS:
        return _EXTENSIONS[extension]

    mime = (mime_type or "").lower()
    if "wordprocessingml" in mime:
        return DocumentFormat.DOCX
    if "pdf" in mime:
        return DocumentFormat.PDF
    if mime.startswith("text/"):
        return DocumentFormat.TXT
    return None
