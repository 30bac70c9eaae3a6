"""In-memory clinical store for patients and their conditions.

Records live only for the lifetime of the process. One store is created per
application by ``create_app`` and reached through ``app.state``.

FastAPI serves synchronous endpoints from a thread pool, so every mutation
and every read snapshot happens under a single lock. Condition creation
checks the patient and appends the condition within one acquisition.
"""

from collections.abc import Callable
from datetime import UTC, datetime
import logging
import threading
import uuid

from pydantic import BaseModel

from ayush_api.core.errors import ErrorKind, OperationResult
from ayush_api.schemas import (
    ConditionCreate,
    ConditionRecord,
    ConditionWithDisease,
    Page,
    PatientCreate,
    PatientRecord,
    paginate,
)
from ayush_api.schemas.patient import RESERVED_FIELDS
from ayush_api.services.catalog import ReferenceCatalog

logger = logging.getLogger(__name__)

DEFAULT_PATIENT_LIMIT = 10

REQUIRED_PATIENT_FIELDS = ("name", "dob", "gender")
MISSING_PATIENT_FIELDS_MESSAGE = "Name, date of birth, and gender are required"
PATIENT_NOT_FOUND = "Patient not found"
DISEASE_NOT_FOUND = "Disease not found"

_RESERVED_CONDITION_FIELDS = RESERVED_FIELDS + ("patientId", "patient_id", "disease")


def _utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _caller_fields(payload: BaseModel, reserved: tuple[str, ...]) -> dict:
    """Dump a request model by alias, dropping keys the store assigns itself."""
    fields = payload.model_dump(by_alias=True, exclude_none=True)
    for key in reserved:
        fields.pop(key, None)
    return fields


class ClinicalStore:
    """Patient and condition collections with create/get/list operations."""

    def __init__(
        self,
        catalog: ReferenceCatalog,
        clock: Callable[[], str] = _utc_now_iso,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._catalog = catalog
        self._clock = clock
        self._id_factory = id_factory
        self._patients: list[PatientRecord] = []
        self._conditions: list[ConditionRecord] = []
        self._lock = threading.Lock()

    @property
    def patient_count(self) -> int:
        with self._lock:
            return len(self._patients)

    @property
    def condition_count(self) -> int:
        with self._lock:
            return len(self._conditions)

    # ------------------------------------------------------------------
    # Patients
    # ------------------------------------------------------------------

    def create_patient(self, payload: PatientCreate) -> OperationResult[PatientRecord]:
        """Create a patient.

        Fails with a validation error when name, dob or gender is missing
        or blank; nothing is stored in that case.
        """
        if any(_is_blank(getattr(payload, field)) for field in REQUIRED_PATIENT_FIELDS):
            return OperationResult.failure(ErrorKind.VALIDATION, MISSING_PATIENT_FIELDS_MESSAGE)

        timestamp = self._clock()
        patient = PatientRecord(
            **_caller_fields(payload, RESERVED_FIELDS),
            id=self._id_factory(),
            createdAt=timestamp,
            updatedAt=timestamp,
        )

        with self._lock:
            self._patients.append(patient)

        logger.info(f"Created patient id={patient.id}")
        return OperationResult.success(patient)

    def get_patient(self, patient_id: str) -> OperationResult[PatientRecord]:
        """Get a patient by id."""
        with self._lock:
            patient = self._find_patient(patient_id)
        if patient is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, PATIENT_NOT_FOUND)
        return OperationResult.success(patient)

    def list_patients(
        self,
        search: str | None = None,
        limit: int = DEFAULT_PATIENT_LIMIT,
        offset: int = 0,
    ) -> OperationResult[Page]:
        """List patients, optionally filtered by a search term.

        Name and email match case-insensitively; phone matches the raw
        search term as a case-sensitive substring.
        """
        with self._lock:
            patients = list(self._patients)

        if search:
            term = search.lower()
            patients = [
                patient
                for patient in patients
                if term in patient.name.lower()
                or (patient.email is not None and term in patient.email.lower())
                or (patient.phone is not None and search in patient.phone)
            ]

        return OperationResult.success(paginate(patients, limit=limit, offset=offset))

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def create_condition(
        self,
        patient_id: str,
        payload: ConditionCreate,
    ) -> OperationResult[ConditionRecord]:
        """Record a condition for an existing patient.

        Fails with not-found when the patient does not exist, checked first,
        or when a non-empty disease id is not in the catalog.
        """
        timestamp = self._clock()
        fields = _caller_fields(payload, _RESERVED_CONDITION_FIELDS)

        with self._lock:
            if self._find_patient(patient_id) is None:
                return OperationResult.failure(ErrorKind.NOT_FOUND, PATIENT_NOT_FOUND)

            if payload.disease_id and self._catalog.get_disease(payload.disease_id) is None:
                return OperationResult.failure(ErrorKind.NOT_FOUND, DISEASE_NOT_FOUND)

            condition = ConditionRecord(
                **fields,
                id=self._id_factory(),
                patientId=patient_id,
                createdAt=timestamp,
                updatedAt=timestamp,
            )
            self._conditions.append(condition)

        logger.info(f"Created condition id={condition.id} for patient_id={patient_id}")
        return OperationResult.success(condition)

    def list_conditions_for_patient(self, patient_id: str) -> OperationResult[list[ConditionWithDisease]]:
        """Conditions recorded for a patient, each with its resolved disease."""
        with self._lock:
            conditions = [c for c in self._conditions if c.patient_id == patient_id]

        enriched = [
            ConditionWithDisease(
                **condition.model_dump(by_alias=True),
                disease=self._catalog.get_disease(condition.disease_id),
            )
            for condition in conditions
        ]
        return OperationResult.success(enriched)

    def _find_patient(self, patient_id: str) -> PatientRecord | None:
        for patient in self._patients:
            if patient.id == patient_id:
                return patient
        return None
