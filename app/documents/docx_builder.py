"""Word document builders for the download endpoints."""

import io
import re

import docx
from docx.document import Document as DocxDocument
from docx.shared import Pt

from app.documents.exceptions import NoBulletsError, NoTextError

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_PARAGRAPH_BREAKS = re.compile(r"\n{2,}|\r?\n")
_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def build_bullets_docx(title: str, bullets: object) -> bytes:
    """Render a bold 14pt title followed by one bulleted paragraph per item.

    Raises:
        NoBulletsError: if bullets is not a non-empty list.
    """
    if not isinstance(bullets, list) or not bullets:
        raise NoBulletsError("No bullets provided")
    document = docx.Document()
    heading = document.add_paragraph()
    run = heading.add_run(_xml_safe(title))
    run.bold = True
    run.font.size = Pt(14)
    heading.paragraph_format.space_after = Pt(10)
    for bullet in bullets:
        document.add_paragraph(_xml_safe(bullet), style="List Bullet")
    return _to_bytes(document)


def build_draft_docx(text: str) -> bytes:
    """Render free text as one paragraph per non-empty line.

    Raises:
        NoTextError: if the text has no content.
    """
    paragraphs = [part.strip() for part in _PARAGRAPH_BREAKS.split(text) if part.strip()]
    if not paragraphs:
        raise NoTextError("No text provided")
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(_xml_safe(paragraph))
    return _to_bytes(document)


def _xml_safe(text: object) -> str:
    return _XML_INVALID_CHARS.sub("", str(text))


def _to_bytes(document: DocxDocument) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
