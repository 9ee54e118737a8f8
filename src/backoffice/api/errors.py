"""Reusable error primitives for API exception handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..exceptions import (
    AccountDisabledError,
    AppError,
    InvalidCredentialsError,
    InvalidDataError,
    NilModelError,
    NotFoundError,
    VersionConflictError,
    ZeroIDError,
)

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ApiError(Exception):
    """Structured application-level error for HTTP handlers."""

    status_code: int
    code: str
    message: str
    headers: Mapping[str, str] | None = None

    def to_response(self) -> JSONResponse:
        """Materialise the error into a ``JSONResponse`` instance."""

        return JSONResponse(
            status_code=self.status_code,
            content={"error": {"code": self.code, "message": self.message}},
            headers=dict(self.headers or {}),
        )


# Most specific first; subclasses of InvalidDataError keep their own code.
_ERROR_MAP: tuple[tuple[type[AppError], int, str], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (VersionConflictError, status.HTTP_409_CONFLICT, "version_conflict"),
    (NilModelError, status.HTTP_400_BAD_REQUEST, "nil_model"),
    (ZeroIDError, status.HTTP_400_BAD_REQUEST, "zero_id"),
    (InvalidDataError, status.HTTP_400_BAD_REQUEST, "invalid_data"),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED, "invalid_credentials"),
    (AccountDisabledError, status.HTTP_403_FORBIDDEN, "account_disabled"),
)


def to_api_error(exc: AppError) -> ApiError:
    """Map a domain error onto its HTTP status; unknown kinds become 500."""

    for error_cls, status_code, code in _ERROR_MAP:
        if isinstance(exc, error_cls):
            return ApiError(status_code, code, str(exc))
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "internal server error")


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    """Convert :class:`ApiError` exceptions into JSON payloads."""

    return exc.to_response()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    api_error = to_api_error(exc)
    if api_error.status_code >= 500:
        logger.error(
            "api.request.failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return api_error.to_response()


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(AppError, app_error_handler)


__all__ = [
    "ApiError",
    "api_error_handler",
    "app_error_handler",
    "register_error_handlers",
    "to_api_error",
]
