"""FHIR R4 Mapper.

Renders clinical records as FHIR R4 resources:
- Patient resources from stored or ad-hoc patient demographics
- Condition resources dual-coded to ICD-11 and NAMASTE
- Bundle (collection) resources grouping a patient with its conditions

Mapping is pure: nothing is stored and inputs are never mutated. The clock
and the id factory are injectable so output can be reproduced exactly.
Keys whose value would be empty are omitted rather than emitted as null.
"""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any
import threading
import uuid

from ayush_api.schemas import (
    ConditionRecord,
    ConditionWithDisease,
    DiseaseCode,
    DiseaseRecord,
    FHIRGenerateRequest,
    GeneratePatient,
    PatientBase,
)


# ============================================================================
# FHIR Code Systems and Constants
# ============================================================================


FHIR_CODE_SYSTEMS = {
    "icd11": "http://id.who.int/icd/release/11/mms",
    "namaste": "http://namaste.local/code-system",
    "snomed": "http://snomed.info/sct",
    "patient_id": "http://ayush.gov.in/patient-id",
    "contact_role": "http://terminology.hl7.org/CodeSystem/v2-0131",
}

PATIENT_PROFILE = "http://hl7.org/fhir/StructureDefinition/Patient"
CONDITION_PROFILE = "http://hl7.org/fhir/StructureDefinition/Condition"

DEFAULT_COUNTRY = "India"
RECORDER_DISPLAY = "AYUSH Healthcare System"
UNKNOWN_CONDITION_TEXT = "Unknown condition"

EMERGENCY_CONTACT_CODE = {
    "system": FHIR_CODE_SYSTEMS["contact_role"],
    "code": "EP",
    "display": "Emergency contact person",
}

# Condition status fields are fixed for every mapped condition.
CLINICAL_STATUS_ACTIVE = {
    "system": "http://terminology.hl7.org/CodeSystem/condition-clinical",
    "code": "active",
    "display": "Active",
}

VERIFICATION_STATUS_CONFIRMED = {
    "system": "http://terminology.hl7.org/CodeSystem/condition-ver-status",
    "code": "confirmed",
    "display": "Confirmed",
}

CONDITION_CATEGORY_PROBLEM_LIST = {
    "system": "http://terminology.hl7.org/CodeSystem/condition-category",
    "code": "problem-list-item",
    "display": "Problem List Item",
}

SEVERITY_SEVERE = {
    "system": FHIR_CODE_SYSTEMS["snomed"],
    "code": "24484000",
    "display": "Severe",
}

NOTE_PLACEHOLDERS = {
    "medical_history": "Not specified",
    "allergies": "None reported",
    "current_medications": "None reported",
}


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}


def split_name(full_name: str | None) -> tuple[str, list[str]]:
    """Split a full name into (family, given).

    The last whitespace-delimited token is the family name; every preceding
    token is a given name.
    """
    tokens = (full_name or "").split()
    if not tokens:
        return "", []
    return tokens[-1], tokens[:-1]


def _default_clock() -> datetime:
    return datetime.now(UTC)


def _default_id_factory() -> str:
    return str(uuid.uuid4())


# ============================================================================
# FHIR Mapper
# ============================================================================


class FHIRMapper:
    """Maps patients and conditions to FHIR R4 resources."""

    def __init__(
        self,
        clock: Callable[[], datetime] = _default_clock,
        id_factory: Callable[[], str] = _default_id_factory,
    ):
        self._clock = clock
        self._id_factory = id_factory

    def _now(self) -> str:
        return self._clock().isoformat()

    # ------------------------------------------------------------------
    # Patient
    # ------------------------------------------------------------------

    def map_patient(self, patient: PatientBase) -> dict[str, Any]:
        """Create a FHIR Patient resource.

        Args:
            patient: Stored patient record or ad-hoc patient payload

        Returns:
            FHIR Patient resource as a dict
        """
        family, given = split_name(patient.name)

        resource: dict[str, Any] = _compact({
            "resourceType": "Patient",
            "id": patient.id,
            "meta": {"profile": [PATIENT_PROFILE]},
            "identifier": [
                _compact({
                    "use": "usual",
                    "system": FHIR_CODE_SYSTEMS["patient_id"],
                    "value": patient.id,
                })
            ],
            "active": True,
            "name": [
                _compact({
                    "use": "official",
                    "text": patient.name,
                    "family": family,
                    "given": given,
                })
            ],
        })

        telecom = self._patient_telecom(patient)
        if telecom:
            resource["telecom"] = telecom

        if patient.gender is not None:
            resource["gender"] = patient.gender
        if patient.dob is not None:
            resource["birthDate"] = patient.dob

        if patient.address is not None and patient.address.line:
            address = patient.address
            resource["address"] = [
                _compact({
                    "use": "home",
                    "type": "physical",
                    "line": [address.line],
                    "city": address.city,
                    "state": address.state,
                    "postalCode": address.postal_code,
                    "country": address.country or DEFAULT_COUNTRY,
                })
            ]

        contact = patient.emergency_contact
        if contact is not None and contact.name:
            resource["contact"] = [
                {
                    "relationship": [{"coding": [dict(EMERGENCY_CONTACT_CODE)]}],
                    "name": {"text": contact.name},
                    "telecom": [_compact({"system": "phone", "value": contact.phone})],
                }
            ]

        return resource

    @staticmethod
    def _patient_telecom(patient: PatientBase) -> list[dict[str, str]]:
        """Phone entry first, then email; absent fields contribute nothing."""
        telecom = []
        if patient.phone:
            telecom.append({"system": "phone", "value": patient.phone, "use": "mobile"})
        if patient.email:
            telecom.append({"system": "email", "value": patient.email, "use": "home"})
        return telecom

    # ------------------------------------------------------------------
    # Condition
    # ------------------------------------------------------------------

    def _condition_skeleton(self, condition_id: str | None) -> dict[str, Any]:
        """Fields shared by every mapped Condition, including the fixed statuses."""
        return _compact({
            "resourceType": "Condition",
            "id": condition_id,
            "meta": {"profile": [CONDITION_PROFILE]},
            "clinicalStatus": {"coding": [dict(CLINICAL_STATUS_ACTIVE)]},
            "verificationStatus": {"coding": [dict(VERIFICATION_STATUS_CONFIRMED)]},
            "category": [{"coding": [dict(CONDITION_CATEGORY_PROBLEM_LIST)]}],
            "severity": {"coding": [dict(SEVERITY_SEVERE)]},
        })

    @staticmethod
    def _condition_code(disease: DiseaseRecord | DiseaseCode | None) -> dict[str, Any]:
        """ICD-11 coding followed by NAMASTE coding, or an unknown-condition text."""
        if disease is None:
            return {"text": UNKNOWN_CONDITION_TEXT}
        return _compact({
            "coding": [
                _compact({
                    "system": FHIR_CODE_SYSTEMS["icd11"],
                    "code": disease.icd,
                    "display": disease.name,
                }),
                _compact({
                    "system": FHIR_CODE_SYSTEMS["namaste"],
                    "code": disease.tm2,
                    "display": f"{disease.name} (NAMASTE)",
                }),
            ],
            "text": disease.name,
        })

    @staticmethod
    def _subject(patient_id: str | None, patient_name: str | None) -> dict[str, Any]:
        return _compact({
            "reference": f"Patient/{patient_id}",
            "display": patient_name,
        })

    def map_condition(
        self,
        condition: ConditionRecord,
        disease: DiseaseRecord | None,
        patient: PatientBase,
    ) -> dict[str, Any]:
        """Create a FHIR Condition resource for a stored condition.

        Args:
            condition: Stored condition record
            disease: Resolved catalog disease, or None
            patient: Patient the condition belongs to

        Returns:
            FHIR Condition resource as a dict
        """
        resource = self._condition_skeleton(condition.id)
        resource["code"] = self._condition_code(disease)
        resource["subject"] = self._subject(patient.id, patient.name)
        resource["onsetDateTime"] = condition.onset_date or self._now()
        resource["recordedDate"] = condition.created_at
        resource["recorder"] = {"display": RECORDER_DISPLAY}

        if condition.notes:
            resource["note"] = [{"text": condition.notes}]

        return resource

    # ------------------------------------------------------------------
    # Bundle
    # ------------------------------------------------------------------

    def _bundle(self, resources: Sequence[dict[str, Any]]) -> dict[str, Any]:
        return {
            "resourceType": "Bundle",
            "id": f"bundle-{self._id_factory()}",
            "type": "collection",
            "timestamp": self._now(),
            "entry": [{"resource": resource} for resource in resources],
        }

    def map_bundle(
        self,
        patient: PatientBase,
        conditions: Sequence[ConditionWithDisease],
    ) -> dict[str, Any]:
        """Create a collection Bundle: the Patient, then one Condition per input.

        Args:
            patient: Stored patient record
            conditions: The patient's conditions, enriched with their diseases

        Returns:
            FHIR Bundle resource as a dict
        """
        resources = [self.map_patient(patient)]
        resources.extend(
            self.map_condition(condition, condition.disease, patient)
            for condition in conditions
        )
        return self._bundle(resources)

    def generate_bundle(self, request: FHIRGenerateRequest) -> dict[str, Any]:
        """Create a Patient + Condition Bundle from an ad-hoc payload.

        The Condition note is always present and summarises medical history,
        allergies and current medications, with placeholders for anything
        missing.
        """
        patient_data = request.patient
        patient = patient_data.model_copy(update={"id": patient_data.id or self._id_factory()})
        onset_date = request.condition.onset_date if request.condition else None

        condition = self._condition_skeleton(self._id_factory())
        condition["code"] = self._condition_code(request.disease)
        condition["subject"] = self._subject(patient.id, patient.name)
        condition["onsetDateTime"] = onset_date or self._now()
        condition["recordedDate"] = self._now()
        condition["recorder"] = {"display": RECORDER_DISPLAY}
        condition["note"] = [{"text": self._history_note(patient_data)}]

        return self._bundle([self.map_patient(patient), condition])

    @staticmethod
    def _history_note(patient: GeneratePatient) -> str:
        history = patient.medical_history or NOTE_PLACEHOLDERS["medical_history"]
        allergies = patient.allergies or NOTE_PLACEHOLDERS["allergies"]
        medications = patient.current_medications or NOTE_PLACEHOLDERS["current_medications"]
        return (
            f"Patient history: {history}. "
            f"Allergies: {allergies}. "
            f"Current medications: {medications}."
        )


# ============================================================================
# Singleton Pattern
# ============================================================================


_mapper_instance: FHIRMapper | None = None
_mapper_lock = threading.Lock()


def get_fhir_mapper() -> FHIRMapper:
    """Get or create the shared mapper using the system clock."""
    global _mapper_instance

    if _mapper_instance is None:
        with _mapper_lock:
            if _mapper_instance is None:
                _mapper_instance = FHIRMapper()

    return _mapper_instance


def reset_fhir_mapper() -> None:
    """Reset the singleton instance (for testing)."""
    global _mapper_instance
    with _mapper_lock:
        _mapper_instance = None
