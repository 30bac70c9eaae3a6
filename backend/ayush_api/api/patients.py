"""Patient and condition API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Query, status

from ayush_api.api.deps import ClientIpDep, SettingsDep, StoreDep
from ayush_api.api.responses import success_response
from ayush_api.core.audit import AuditAction, log_data_access
from ayush_api.core.errors import InternalError, unwrap
from ayush_api.schemas import ApiResponse, ConditionCreate, PatientCreate
from ayush_api.services.clinical_store import DEFAULT_PATIENT_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a patient",
    description="Register a patient. Name, date of birth and gender are required; other fields are kept as given.",
)
def create_patient(
    payload: PatientCreate,
    store: StoreDep,
    settings: SettingsDep,
    client_ip: ClientIpDep,
) -> ApiResponse:
    """Create a patient record.

    Args:
        payload: Patient demographics plus any extra fields.

    Returns:
        Envelope with the stored patient.

    Raises:
        ValidationError: 400 if name, dob or gender is missing.
    """
    try:
        result = store.create_patient(payload)
    except Exception as e:
        logger.exception(f"Error creating patient: {e}")
        raise InternalError("Error creating patient", e, settings.debug) from e

    log_data_access("patient", resource_id=result.value.id if result.ok else None,
                    action=AuditAction.CREATE, success=result.ok, ip_address=client_ip)
    patient = unwrap(result)
    return success_response(patient, message="Patient created successfully")


@router.get(
    "",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="List patients",
    description="List patients, optionally searching name, email or phone.",
)
def list_patients(
    store: StoreDep,
    settings: SettingsDep,
    search: Annotated[str | None, Query(description="Match name, email or phone")] = None,
    limit: Annotated[int, Query(ge=0, description="Max patients to return")] = DEFAULT_PATIENT_LIMIT,
    offset: Annotated[int, Query(ge=0, description="Offset for pagination")] = 0,
) -> ApiResponse:
    """List or search patients with pagination."""
    try:
        result = store.list_patients(search=search, limit=limit, offset=offset)
    except Exception as e:
        logger.exception(f"Error fetching patients: {e}")
        raise InternalError("Error fetching patients", e, settings.debug) from e

    page = unwrap(result)
    return success_response(page.items, meta=page.meta)


@router.get(
    "/{patient_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Get a patient",
)
def get_patient(
    patient_id: str,
    store: StoreDep,
    settings: SettingsDep,
    client_ip: ClientIpDep,
) -> ApiResponse:
    """Get a patient by id.

    Raises:
        NotFoundError: 404 if the patient does not exist.
    """
    try:
        result = store.get_patient(patient_id)
    except Exception as e:
        logger.exception(f"Error fetching patient {patient_id}: {e}")
        raise InternalError("Error fetching patient", e, settings.debug) from e

    log_data_access("patient", resource_id=patient_id, patient_id=patient_id,
                    success=result.ok, ip_address=client_ip)
    return success_response(unwrap(result))


@router.post(
    "/{patient_id}/conditions",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Record a condition",
    description="Record a diagnosed condition for a patient, optionally linked to a catalog disease.",
)
def create_condition(
    patient_id: str,
    store: StoreDep,
    settings: SettingsDep,
    client_ip: ClientIpDep,
    payload: Annotated[ConditionCreate | None, Body()] = None,
) -> ApiResponse:
    """Create a condition for an existing patient.

    Raises:
        NotFoundError: 404 if the patient or the referenced disease does not exist.
    """
    try:
        result = store.create_condition(patient_id, payload or ConditionCreate())
    except Exception as e:
        logger.exception(f"Error creating condition for patient {patient_id}: {e}")
        raise InternalError("Error creating condition", e, settings.debug) from e

    log_data_access("condition", resource_id=result.value.id if result.ok else None,
                    patient_id=patient_id, action=AuditAction.CREATE, success=result.ok,
                    ip_address=client_ip)
    condition = unwrap(result)
    return success_response(condition, message="Condition created successfully")


@router.get(
    "/{patient_id}/conditions",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="List a patient's conditions",
)
def list_conditions(patient_id: str, store: StoreDep, settings: SettingsDep) -> ApiResponse:
    """Conditions for a patient, each with its resolved catalog disease."""
    try:
        result = store.list_conditions_for_patient(patient_id)
    except Exception as e:
        logger.exception(f"Error fetching conditions for patient {patient_id}: {e}")
        raise InternalError("Error fetching patient conditions", e, settings.debug) from e

    conditions = unwrap(result)
    logger.info(f"Found {len(conditions)} conditions for patient_id={patient_id}")
    return success_response(conditions)
