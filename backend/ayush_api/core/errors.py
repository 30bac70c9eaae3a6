"""Error taxonomy shared by the store and the request layer.

Core services never raise for expected failures. They return an
``OperationResult`` carrying either a value or an ``ErrorKind`` with a
message, and the API layer turns error results into ``ApiError`` so the
exception handlers in ``ayush_api.main`` can render the response envelope.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

REDACTED_ERROR = "Something went wrong"


class ErrorKind(str, Enum):
    """Kinds of failure an operation can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP status code for this kind of failure."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a store operation: a value or an error kind and message."""

    value: T | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult[T]":
        return cls(error_kind=kind, message=message)


class ApiError(Exception):
    """Failure raised at the request boundary and rendered as an envelope.

    Attributes:
        kind: The error kind, which decides the status code.
        message: Human-readable summary placed in the envelope ``message``.
        error: Optional detail placed in the envelope ``error``.
    """

    def __init__(self, kind: ErrorKind, message: str, error: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.error = error

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class ValidationError(ApiError):
    """Missing or invalid required input (400)."""

    def __init__(self, message: str, error: str | None = None):
        super().__init__(ErrorKind.VALIDATION, message, error)


class NotFoundError(ApiError):
    """Referenced entity does not exist (404)."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.NOT_FOUND, message)


class InternalError(ApiError):
    """Unexpected failure (500).

    The underlying exception text is only exposed when ``debug`` is set.
    """

    def __init__(self, message: str, exc: BaseException | None = None, debug: bool = False):
        detail = REDACTED_ERROR
        if debug and exc is not None:
            detail = str(exc)
        super().__init__(ErrorKind.INTERNAL, message, detail)


def unwrap(result: OperationResult[T]) -> T:
    """Return the value of a successful result or raise the matching ApiError."""
    if result.ok:
        return result.value  # type: ignore[return-value]
    if result.error_kind == ErrorKind.VALIDATION:
        raise ValidationError(result.message or "Invalid request")
    if result.error_kind == ErrorKind.NOT_FOUND:
        raise NotFoundError(result.message or "Not found")
    raise ApiError(ErrorKind.INTERNAL, result.message or "Internal server error", REDACTED_ERROR)
