import pymupdf

from app.decoders.base import BaseTextExtractor
from app.decoders.exceptions import DecoderError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts PDF text page by page using PyMuPDF."""

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() or "" for page in doc]
        except Exception as exc:
            raise DecoderError(f"pymupdf could not read the PDF: {exc}") from exc
        return "\n".join(pages)
