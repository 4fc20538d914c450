from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.dependencies import get_extraction_pipeline
from app.api.errors import ApiError
from app.api.forms import form_fields
from app.api.schemas import ExtractResponse
from app.decoders.exceptions import DecoderError
from app.extraction.exceptions import ExtractionError, InvalidFormError
from app.extraction.pipeline import ExtractionPipeline, ensure_multipart
from app.logging.logger import Log

router = APIRouter(prefix="/api", tags=["extract"])


@router.post("/extract", response_model=ExtractResponse)
async def extract(
    request: Request,
    pipeline: ExtractionPipeline = Depends(get_extraction_pipeline),
) -> ExtractResponse:
    """Upload a resume (DOCX/PDF/TXT) and get its normalized plain text."""
    ensure_multipart(request.headers.get("content-type"))
    pipeline.check_request_size(request.headers.get("content-length"))
    form = await _parse_form(request)
    try:
        result = await run_in_threadpool(pipeline.run, form_fields(form))
    except (ExtractionError, DecoderError):
        raise
    except Exception as exc:
        Log.exception(f"Unexpected extraction failure: {exc}")
        raise ApiError(500, "extraction_failed", str(exc) or type(exc).__name__) from exc
    finally:
        await form.close()
    return ExtractResponse(text=result.text)


async def _parse_form(request: Request) -> FormData:
    try:
        return await request.form()
    except StarletteHTTPException as exc:
        raise InvalidFormError(f"Could not parse multipart body: {exc.detail}") from exc
