from fastapi import APIRouter, Depends

from app.api.dependencies import get_settings
from app.api.errors import ApiError
from app.api.schemas import AnalyzeRequest, AnalyzeResponse, RewriteRequest, RewriteResponse
from app.config.settings import Settings
from app.logging.logger import Log
from app.tailoring.factory import TailoringFactory

router = APIRouter(prefix="/api", tags=["tailoring"])

_MISSING_INPUT = "Missing resume or job description"


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(payload: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    """Score how well a resume lines up with a job description."""
    if not payload.resume.strip() or not payload.job_desc.strip():
        raise ApiError(400, "missing_input", _MISSING_INPUT)
    try:
        analyzer = TailoringFactory.create_analyzer(settings)
        result = analyzer.analyze(payload.resume, payload.job_desc)
    except Exception as exc:
        Log.exception(f"analyze error: {exc}")
        raise ApiError(500, "server_error", str(exc)) from exc
    return AnalyzeResponse(
        analysis=result.analysis,
        top_terms=result.top_terms,
        missing_terms=result.missing_terms,
        suggestions=result.suggestions,
    )


@router.post("/rewrite", response_model=RewriteResponse)
def rewrite(payload: RewriteRequest, settings: Settings = Depends(get_settings)) -> RewriteResponse:
    """Rewrite resume content into bullets aligned with a job description."""
    if not payload.resume.strip() or not payload.jd.strip():
        raise ApiError(400, "missing_input", _MISSING_INPUT)
    try:
        rewriter = TailoringFactory.create_rewriter(settings)
        result = rewriter.rewrite(payload.resume, payload.jd)
    except Exception as exc:
        Log.exception(f"rewrite error: {exc}")
        raise ApiError(500, "server_error", str(exc)) from exc
    return RewriteResponse(bullets=result.bullets)
