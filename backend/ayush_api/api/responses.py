"""Helpers building the uniform response envelope."""

from typing import Any

from fastapi.encoders import jsonable_encoder

from ayush_api.schemas import ApiResponse, PaginationMeta


def success_response(
    data: Any = None,
    message: str | None = None,
    meta: PaginationMeta | None = None,
) -> ApiResponse:
    """Wrap a payload in a successful envelope.

    Models inside ``data`` are encoded with their camelCase aliases and
    without null fields.
    """
    return ApiResponse(
        success=True,
        data=jsonable_encoder(data, by_alias=True, exclude_none=True),
        message=message,
        meta=meta,
    )


def error_response(message: str, error: str | None = None) -> ApiResponse:
    """Envelope for a failed request."""
    return ApiResponse(success=False, message=message, error=error)
