from collections.abc import Mapping, Sequence

from app.config.settings import Settings
from app.decoders.base import BaseTextExtractor
from app.decoders.factory import DecoderFactory
from app.extraction.exceptions import InvalidContentTypeError, UnsupportedFormatError
from app.extraction.file_loader import FileLoader
from app.extraction.formats import DocumentFormat, classify_format
from app.extraction.models import ExtractionResult, UploadedFile
from app.extraction.normalizer import normalize_text
from app.extraction.selector import DEFAULT_FIELD_PRIORITY, select_upload
from app.logging.logger import Log

MULTIPART_FORM_DATA = "multipart/form-data"


def ensure_multipart(content_type: str | None) -> None:
    """Reject requests whose body is not multipart form data.

    Raises:
        InvalidContentTypeError: if the content type does not match.
    """
    if not (content_type or "").lower().startswith(MULTIPART_FORM_DATA):
        raise InvalidContentTypeError(
            f"Expected {MULTIPART_FORM_DATA}, got '{content_type or 'none'}'"
        )


class ExtractionPipeline:
    """Turns one uploaded document into normalized plain text.

    Pipeline: select -> classify -> load -> decode -> normalize.
    """

    def __init__(
        self,
        *,
        decoders: Mapping[DocumentFormat, BaseTextExtractor],
        file_loader: FileLoader,
        field_priority: Sequence[str] = DEFAULT_FIELD_PRIORITY,
    ) -> None:
        self._decoders = decoders
        self._file_loader = file_loader
        self._field_priority = tuple(field_priority)

    def check_request_size(self, content_length: str | None) -> None:
        """Reject oversized request bodies before the form is parsed."""
        self._file_loader.check_request_size(content_length)

    def run(self, fields: Mapping[str, Sequence[UploadedFile]]) -> ExtractionResult:
        """Select the upload from parsed form fields and extract its text."""
        upload = select_upload(fields, self._field_priority)
        return self.extract(upload)

    def extract(self, upload: UploadedFile) -> ExtractionResult:
        document_format = classify_format(upload.original_filename, upload.mime_type)
        if document_format is None:
            raise UnsupportedFormatError(
                f"Unsupported file type (filename: '{upload.original_filename or ''}', "
                f"mime type: '{upload.mime_type or ''}'). Upload a .docx, .pdf or .txt file."
            )

        content = self._file_loader.load(upload)
        Log.info(
            f"Loaded {len(content)} bytes from '{upload.original_filename}' "
            f"as {document_format.value}"
        )

        raw_text = self._decoders[document_format].extract(content) or ""
        text = normalize_text(raw_text)
        Log.info(f"Extracted {len(text)} chars from '{upload.original_filename}'")
        return ExtractionResult(text=text, format=document_format)


def build_pipeline(settings: Settings) -> ExtractionPipeline:
    """Build an ExtractionPipeline with the configured decoders and limits."""
    return ExtractionPipeline(
        decoders=DecoderFactory.create(settings),
        file_loader=FileLoader(max_bytes=settings.max_upload_bytes),
        field_priority=settings.upload_field_priority,
    )
