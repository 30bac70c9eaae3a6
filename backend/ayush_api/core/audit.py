"""Audit logging for clinical data access.

Records who touched which patient data and how:
- Record creation (patients, conditions)
- Record reads
- FHIR exports and ad-hoc bundle generation
- FHIR validation requests

Events go to the dedicated ``audit`` logger so deployments can route them
to a separate handler.
"""

import logging
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

audit_logger = logging.getLogger("audit")


class AuditAction(str, Enum):
    """Types of auditable actions."""

    READ = "read"
    CREATE = "create"
    EXPORT = "export"
    VALIDATE = "validate"


class AuditEvent(BaseModel):
    """Audit event record."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    action: AuditAction = Field(..., description="Type of action performed")
    resource_type: str = Field(..., description="Type of resource accessed")
    resource_id: str | None = Field(None, description="ID of specific resource")
    patient_id: str | None = Field(None, description="Patient ID if applicable")
    ip_address: str | None = Field(None, description="Client IP address")
    details: dict | None = Field(None, description="Additional context")
    success: bool = Field(True, description="Whether action succeeded")


def log_audit(
    action: AuditAction,
    resource_type: str,
    resource_id: str | None = None,
    patient_id: str | None = None,
    ip_address: str | None = None,
    details: dict | None = None,
    success: bool = True,
) -> AuditEvent:
    """Log an audit event.

    Args:
        action: Type of action being audited
        resource_type: The type of resource being accessed
        resource_id: Specific resource identifier
        patient_id: Patient ID if this is patient data
        ip_address: Client IP address
        details: Additional context
        success: Whether the action succeeded

    Returns:
        The created AuditEvent
    """
    event = AuditEvent(
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        patient_id=patient_id,
        ip_address=ip_address,
        details=details,
        success=success,
    )

    log_level = logging.INFO if success else logging.WARNING
    audit_logger.log(
        log_level,
        f"AUDIT: {action.value} {resource_type}"
        f"{f'/{resource_id}' if resource_id else ''}"
        f"{f' patient={patient_id}' if patient_id else ''}"
        f" success={success}",
        extra={"audit_event": event.model_dump()},
    )

    return event


def log_data_access(
    resource_type: str,
    resource_id: str | None = None,
    patient_id: str | None = None,
    action: AuditAction = AuditAction.READ,
    success: bool = True,
    ip_address: str | None = None,
) -> AuditEvent:
    """Log a data access event (defaults to READ)."""
    return log_audit(
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        patient_id=patient_id,
        ip_address=ip_address,
        success=success,
    )


def log_export(
    patient_id: str | None,
    export_type: str,
    record_count: int = 0,
    ip_address: str | None = None,
) -> AuditEvent:
    """Log a FHIR export event.

    Args:
        patient_id: Patient whose data is being exported
        export_type: Type of export (e.g., "fhir_bundle")
        record_count: Number of resources in the export
        ip_address: Client IP address

    Returns:
        The created AuditEvent
    """
    return log_audit(
        action=AuditAction.EXPORT,
        resource_type="export",
        patient_id=patient_id,
        ip_address=ip_address,
        details={"export_type": export_type, "record_count": record_count},
    )
