"""FHIR API endpoints for exporting and validating FHIR resources."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body

from ayush_api.api.deps import ClientIpDep, MapperDep, SettingsDep, StoreDep
from ayush_api.api.responses import success_response
from ayush_api.core.audit import AuditAction, log_audit, log_export
from ayush_api.core.errors import InternalError, ValidationError, unwrap
from ayush_api.schemas import ApiResponse, FHIRGenerateRequest
from ayush_api.services.fhir_validator import validate_resource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fhir", tags=["FHIR"])

BUNDLE_GENERATED = "FHIR bundle generated successfully"


@router.get(
    "/patient/{patient_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Export a stored patient as a FHIR Bundle",
    description="Build a collection Bundle holding the Patient and one Condition per recorded condition.",
)
def export_patient_bundle(
    patient_id: str,
    store: StoreDep,
    mapper: MapperDep,
    settings: SettingsDep,
    client_ip: ClientIpDep,
) -> ApiResponse:
    """Export a stored patient and their conditions as FHIR R4.

    Raises:
        NotFoundError: 404 if the patient does not exist.
    """
    try:
        patient_result = store.get_patient(patient_id)
    except Exception as e:
        logger.exception(f"Error fetching patient {patient_id}: {e}")
        raise InternalError("Error generating FHIR bundle", e, settings.debug) from e

    patient = unwrap(patient_result)

    try:
        conditions = store.list_conditions_for_patient(patient_id).value or []
        bundle = mapper.map_bundle(patient, conditions)
    except Exception as e:
        logger.exception(f"Error generating FHIR bundle for patient {patient_id}: {e}")
        raise InternalError("Error generating FHIR bundle", e, settings.debug) from e

    log_export(patient_id=patient_id, export_type="fhir_bundle",
               record_count=len(bundle["entry"]), ip_address=client_ip)
    return success_response(bundle, message=BUNDLE_GENERATED)


@router.post(
    "/generate",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Generate a FHIR Bundle from a payload",
    description="Build a Patient + Condition Bundle from ad-hoc patient and disease data without storing anything.",
)
def generate_bundle(
    request: FHIRGenerateRequest,
    mapper: MapperDep,
    settings: SettingsDep,
    client_ip: ClientIpDep,
) -> ApiResponse:
    """Generate a FHIR Bundle directly from the request body.

    Raises:
        ValidationError: 400 if patient or disease is missing, or the patient has no name.
    """
    if request.patient is None or request.disease is None:
        raise ValidationError("Patient data and disease information are required")
    if not (request.patient.name or "").strip():
        raise ValidationError("Patient name is required")

    try:
        bundle = mapper.generate_bundle(request)
    except Exception as e:
        logger.exception(f"Error generating FHIR bundle: {e}")
        raise InternalError("Error generating FHIR bundle", e, settings.debug) from e

    log_export(patient_id=request.patient.id, export_type="fhir_generate",
               record_count=len(bundle["entry"]), ip_address=client_ip)
    return success_response(bundle, message=BUNDLE_GENERATED)


@router.post(
    "/validate",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Validate a FHIR resource",
    description="Run structural checks on a Patient, Condition or Bundle resource.",
)
def validate_fhir_resource(
    settings: SettingsDep,
    client_ip: ClientIpDep,
    resource: Annotated[Any, Body()] = None,
) -> ApiResponse:
    """Validate the posted FHIR resource.

    Always answers 200 with a validation result; ``valid`` is false when
    any blocking error was found.
    """
    try:
        result = validate_resource(resource)
    except Exception as e:
        logger.exception(f"Error validating FHIR resource: {e}")
        raise InternalError("Error validating FHIR resource", e, settings.debug) from e

    log_audit(
        action=AuditAction.VALIDATE,
        resource_type=str(result.resource_type or "unknown"),
        resource_id=str(result.resource_id) if result.resource_id else None,
        ip_address=client_ip,
        details={"errors": len(result.errors), "warnings": len(result.warnings)},
    )
    message = "FHIR resource is valid" if result.valid else "FHIR resource has validation errors"
    return success_response(result, message=message)
