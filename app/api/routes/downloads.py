from fastapi import APIRouter, Response

from app.api.schemas import BulletsDocxRequest, DraftDownloadRequest
from app.documents.docx_builder import DOCX_MEDIA_TYPE, build_bullets_docx, build_draft_docx
from app.documents.exceptions import NoTextError
from app.documents.filenames import safe_filename
from app.logging.logger import Log

router = APIRouter(prefix="/api", tags=["downloads"])

DEFAULT_DRAFT_TITLE = "Draft Resume"


def _attachment(content: bytes | str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/download-docx")
def download_docx(payload: BulletsDocxRequest) -> Response:
    content = build_bullets_docx(payload.title, payload.bullets)
    Log.info(f"Built bullets DOCX: {len(payload.bullets)} bullets, {len(content)} bytes")
    return _attachment(content, DOCX_MEDIA_TYPE, "ai_resume_bullets.docx")


@router.post("/download-docx-draft")
def download_docx_draft(payload: DraftDownloadRequest) -> Response:
    content = build_draft_docx(payload.text)
    filename = safe_filename(payload.title or DEFAULT_DRAFT_TITLE, ".docx")
    Log.info(f"Built draft DOCX '{filename}': {len(content)} bytes")
    return _attachment(content, DOCX_MEDIA_TYPE, filename)


@router.post("/download-text")
def download_text(payload: DraftDownloadRequest) -> Response:
    if not payload.text.strip():
        raise NoTextError("No text provided")
    filename = safe_filename(payload.title or DEFAULT_DRAFT_TITLE, ".txt")
    return _attachment(payload.text, "text/plain; charset=utf-8", filename)
