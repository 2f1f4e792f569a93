"""Error taxonomy shared by the policy layer, services and HTTP boundary.

Policy functions return these as values; route handlers turn them into
``HTTPException`` via ``AppError.to_http_exception``.
"""

from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException, status


class ErrorKind(str, Enum):
    """Failure categories; see STATUS_BY_KIND for the HTTP mapping."""

    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    BAD_REQUEST = "bad_request"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self]


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


@dataclass(frozen=True)
class AppError:
    """A failure described as data: kind, HTTP status and user-facing message."""

    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_http_exception(self) -> HTTPException:
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if self.kind is ErrorKind.UNAUTHENTICATED
            else None
        )
        return HTTPException(
            status_code=self.status_code, detail=self.message, headers=headers
        )


def validation_error(message: str) -> AppError:
    return AppError(ErrorKind.VALIDATION, message)


def forbidden(message: str) -> AppError:
    return AppError(ErrorKind.FORBIDDEN, message)


def not_found(message: str) -> AppError:
    return AppError(ErrorKind.NOT_FOUND, message)


def unauthenticated(message: str) -> AppError:
    return AppError(ErrorKind.UNAUTHENTICATED, message)


class DuplicateEmailError(Exception):
    """Raised by the user store when the email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email

    def to_app_error(self) -> AppError:
        return AppError(ErrorKind.DUPLICATE_EMAIL, "User already exists with this email")
