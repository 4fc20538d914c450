import io

import docx

from app.decoders.base import BaseTextExtractor
from app.decoders.exceptions import DecoderError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw paragraph text from a Word document using python-docx."""

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
            paragraphs = [paragraph.text or "" for paragraph in document.paragraphs]
        except Exception as exc:
            raise DecoderError(f"python-docx could not read the document: {exc}") from exc
        return "\n".join(paragraphs)
