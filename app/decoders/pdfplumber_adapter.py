import io

import pdfplumber

from app.decoders.base import BaseTextExtractor
from app.decoders.exceptions import DecoderError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts PDF text page by page using pdfplumber."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise DecoderError(f"pdfplumber could not read the PDF: {exc}") from exc
        return "\n".join(pages)
