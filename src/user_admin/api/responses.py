"""Response helpers for admin handlers."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from user_admin.errors import AdminError, ErrorKind


def created(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body)


def deleted(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


def ok(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


def error_body(status_code: int, name: str, message: str, details: dict | None = None) -> dict:
    return {
        "data": None,
        "error": {
            "status": status_code,
            "name": name,
            "message": message,
            "details": details or {},
        },
    }


def not_found(message: str) -> JSONResponse:
    """404 for an expected missing record. Not raised as an exception."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(status.HTTP_404_NOT_FOUND, ErrorKind.not_found.value, message),
    )


def from_error(exc: AdminError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"data": None, "error": exc.to_dict()},
    )
