from dataclasses import dataclass, asdict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class RecipeBookError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class ValidationFailure(RecipeBookError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Validation failed"

    def __init__(self, errors: list[FieldError], detail: str | None = None):
        self.errors = list(errors)
        super().__init__(detail)


class DuplicateEmail(RecipeBookError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Email already registered"


class NotFound(RecipeBookError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class RecipeNotFound(NotFound):
    detail = "Recipe not found"


class PrincipalNotFound(NotFound):
    detail = "Email not registered."


class Forbidden(RecipeBookError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Forbidden"


class Unauthenticated(RecipeBookError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


async def recipebook_error_handler(request: Request, exc: RecipeBookError) -> JSONResponse:
    logger.warning(
        "request_failed",
        path=request.url.path,
        method=request.method,
        error=type(exc).__name__,
        status_code=exc.status_code,
    )
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationFailure):
        content["errors"] = [asdict(e) for e in exc.errors]
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Basic"}
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


def _loc_to_field(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    field = ""
    for p in parts:
        field += f"[{p}]" if p.isdigit() else (f".{p}" if field else p)
    return field or "body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [FieldError(_loc_to_field(e.get("loc", ())), e.get("msg", "")) for e in exc.errors()]
    return await recipebook_error_handler(request, ValidationFailure(errors, "Malformed request body"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecipeBookError, recipebook_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
