"""Core application configuration and utilities."""

from ayush_api.core.audit import AuditAction, AuditEvent, log_audit, log_data_access, log_export
from ayush_api.core.config import Settings, settings
from ayush_api.core.errors import (
    ApiError,
    ErrorKind,
    InternalError,
    NotFoundError,
    OperationResult,
    ValidationError,
    unwrap,
)

__all__ = [
    # Config
    "Settings",
    "settings",
    # Errors
    "ApiError",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "OperationResult",
    "ValidationError",
    "unwrap",
    # Audit
    "AuditAction",
    "AuditEvent",
    "log_audit",
    "log_data_access",
    "log_export",
]
