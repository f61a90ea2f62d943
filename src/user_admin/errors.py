"""Error kinds surfaced by the admin user handlers."""

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    validation = "ValidationError"
    application = "ApplicationError"
    not_found = "NotFoundError"


class AdminError(Exception):
    """Base error carrying a kind, a human-readable message and optional details."""

    kind: ErrorKind = ErrorKind.application
    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status_code,
            "name": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AdminError):
    """Malformed input. ``details["errors"]`` lists the violated constraints."""

    kind = ErrorKind.validation


class ApplicationError(AdminError):
    kind = ErrorKind.application
