"""Maps domain exceptions to ``{"error", "detail"}`` JSON responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.decoders.exceptions import DecoderError
from app.documents.exceptions import NoBulletsError, NoTextError
from app.extraction.exceptions import (
    FileReadError,
    FileTooLargeError,
    InvalidContentTypeError,
    InvalidFormError,
    NoFileUploadedError,
    UnsupportedFormatError,
)
from app.leads.exceptions import LeadError
from app.logging.logger import Log


class ApiError(Exception):
    """An error with an HTTP status and a machine-readable code."""

    def __init__(self, status_code: int, code: str, detail: str = "") -> None:
        super().__init__(detail or code)
        self.status_code = status_code
        self.code = code
        self.detail = detail


DOMAIN_ERRORS: dict[type[Exception], tuple[int, str]] = {
    InvalidContentTypeError: (400, "invalid_content_type"),
    InvalidFormError: (400, "invalid_form"),
    NoFileUploadedError: (400, "no_file_uploaded"),
    FileTooLargeError: (413, "file_too_large"),
    UnsupportedFormatError: (415, "unsupported_media_type"),
    FileReadError: (500, "extraction_failed"),
    DecoderError: (500, "extraction_failed"),
    NoBulletsError: (400, "no_bullets"),
    NoTextError: (400, "no_text"),
    LeadError: (400, "invalid_email"),
}

_HTTP_ERROR_CODES: dict[int, str] = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    413: "file_too_large",
}


def error_response(
    status_code: int,
    code: str,
    detail: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    if status_code >= 500:
        Log.error(f"{code}: {detail}")
    else:
        Log.warning(f"{code}: {detail}")
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "detail": detail},
        headers=headers,
    )


async def _handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.detail)


async def _handle_domain_error(_request: Request, exc: Exception) -> JSONResponse:
    for exc_type in type(exc).__mro__:
        if exc_type in DOMAIN_ERRORS:
            status_code, code = DOMAIN_ERRORS[exc_type]
            return error_response(status_code, code, str(exc))
    return error_response(500, "server_error", str(exc) or type(exc).__name__)


async def _handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return error_response(exc.status_code, code, str(exc.detail), headers=exc.headers)


async def _handle_validation_error(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    return error_response(400, "invalid_request", problems or "Invalid request body")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _handle_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
    for exc_type in DOMAIN_ERRORS:
        app.add_exception_handler(exc_type, _handle_domain_error)
    app.add_exception_handler(Exception, _handle_domain_error)
