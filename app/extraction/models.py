from dataclasses import dataclass
from typing import BinaryIO

from app.extraction.formats import DocumentFormat


@dataclass(frozen=True)
class UploadedFile:
    """One file entry from a parsed multipart form.

    ``file`` is the temporary stream owned by the form parser. It is None
    for plain (non-file) form values.
    """

    file: BinaryIO | None
    original_filename: str | None = None
    mime_type: str | None = None
    size: int | None = None


@dataclass(frozen=True)
class ExtractionResult:
    text: str
    format: DocumentFormat
