"""Uniform JSON response envelope.

Mirrors ``src/lib/helpers/response.ts``: eight constructors, each bound to a
fixed HTTP status, all producing ``{success, status, message, data?, error?}``.
The error constructors always carry ``data: null``; ``error`` only appears
when one is supplied.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool
    status: int
    message: str
    data: Any = None
    error: Any = None

    def body(self) -> dict[str, Any]:
        """The JSON body exactly as the TypeScript helper would serialize it."""
        return self.model_dump(exclude_unset=True)


def _failure(status: int, message: str, error: Any = None) -> ApiResponse:
    extra = {"error": error} if error is not None else {}
    return ApiResponse(success=False, status=status, message=message, data=None, **extra)


def ok(data: Any, message: str | None = None) -> ApiResponse:
    return ApiResponse(success=True, status=200, message=message or "Success", data=data)


def created(data: Any, message: str | None = None) -> ApiResponse:
    return ApiResponse(
        success=True, status=201, message=message or "Created successfully", data=data
    )


def bad_request(message: str, error: Any = None) -> ApiResponse:
    return _failure(400, message, error)


def unauthorized(message: str | None = None) -> ApiResponse:
    return ApiResponse(success=False, status=401, message=message or "Unauthorized")


def forbidden(message: str | None = None) -> ApiResponse:
    return ApiResponse(success=False, status=403, message=message or "Forbidden")


def not_found(message: str, error: Any = None) -> ApiResponse:
    return _failure(404, message, error)


def server_error(message: str, error: Any = None) -> ApiResponse:
    return _failure(500, message, error)


def validation_error(message: str, error: Any = None) -> ApiResponse:
    return _failure(422, message, error)
