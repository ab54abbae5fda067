# quote_scribe\adapters\api\errors.py
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quote_scribe.core.domain.exceptions import (
    AuthenticationError,
    DomainError,
    EmptyResponseError,
    EntityValidationError,
    GenerationError,
    InsufficientCreditsError,
    MissingCredentialError,
    NetworkError,
    QuoteNotFoundError,
    RateLimitError,
    ReflectionNotFoundError,
    StorageWriteError,
    UpstreamServiceError,
)
from quote_scribe.shared.config import settings

logger = structlog.get_logger()

UNPROCESSABLE_CONTENT = 422

# Looked up along the exception's MRO, so the most specific class wins
STATUS_BY_ERROR = {
    EntityValidationError: UNPROCESSABLE_CONTENT,
    QuoteNotFoundError: status.HTTP_404_NOT_FOUND,
    ReflectionNotFoundError: status.HTTP_404_NOT_FOUND,
    StorageWriteError: status.HTTP_507_INSUFFICIENT_STORAGE,
    MissingCredentialError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    InsufficientCreditsError: status.HTTP_402_PAYMENT_REQUIRED,
    RateLimitError: status.HTTP_429_TOO_MANY_REQUESTS,
    NetworkError: status.HTTP_503_SERVICE_UNAVAILABLE,
    UpstreamServiceError: status.HTTP_502_BAD_GATEWAY,
    EmptyResponseError: status.HTTP_502_BAD_GATEWAY,
    GenerationError: status.HTTP_502_BAD_GATEWAY,
    DomainError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: DomainError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_for(exc: DomainError) -> str:
    """Generation failures carry a user-facing text; the upstream's own message is kept as is."""
    if isinstance(exc, GenerationError) and not isinstance(exc, UpstreamServiceError):
        return exc.user_message
    return exc.message


def error_body(code: int, message) -> dict:
    return {"status": "error", "code": code, "message": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        code = status_for(exc)
        log = logger.error if code >= 500 else logger.info
        log("request_failed", path=request.url.path, error_type=type(exc).__name__, error=exc.message, code=code)
        return JSONResponse(status_code=code, content=error_body(code, message_for(exc)))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        messages = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
        code = UNPROCESSABLE_CONTENT
        return JSONResponse(status_code=code, content=error_body(code, "; ".join(messages)))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors raised by routing itself (unknown path, wrong method).
        """
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return JSONResponse(
            status_code=code,
            content=error_body(code, "Internal Server Error" if not settings.DEBUG else str(exc)),
        )
