"""Structural validation for FHIR resources.

Checks a handful of presence rules per resource type. This is not a full
FHIR conformance check: profiles, cardinality and terminology bindings are
ignored. Validation never raises; malformed input is reported through the
result.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ayush_api.schemas import FHIRValidationResult

logger = logging.getLogger(__name__)

MISSING_RESOURCE_TYPE = "Missing required field: resourceType"
MISSING_ID = "Missing recommended field: id"
PATIENT_MISSING_NAME = "Patient must have at least one name"
PATIENT_MISSING_GENDER = "Patient gender is recommended"
CONDITION_MISSING_CODE = "Condition must have a code"
CONDITION_MISSING_SUBJECT = "Condition must have a subject reference"
BUNDLE_MISSING_TYPE = "Bundle must have a type"
BUNDLE_EMPTY_ENTRY = "Bundle should contain at least one entry"


class FHIRValidator:
    """Validator for FHIR Patient, Condition and Bundle resources.

    Each rule is (field, severity, message, non_empty). A rule fires when the
    field is absent, null, false, zero or an empty string; rules marked
    non_empty also fire on an empty list. Empty objects count as present.
    Every rule for the resource type is evaluated.
    """

    def __init__(self) -> None:
        self.base_rules = [
            ("resourceType", "error", MISSING_RESOURCE_TYPE, False),
            ("id", "warning", MISSING_ID, False),
        ]
        self.type_rules = {
            "Patient": [
                ("name", "error", PATIENT_MISSING_NAME, True),
                ("gender", "warning", PATIENT_MISSING_GENDER, False),
            ],
            "Condition": [
                ("code", "error", CONDITION_MISSING_CODE, False),
                ("subject", "error", CONDITION_MISSING_SUBJECT, False),
            ],
            "Bundle": [
                ("type", "error", BUNDLE_MISSING_TYPE, False),
                ("entry", "warning", BUNDLE_EMPTY_ENTRY, True),
            ],
        }

    def validate(self, resource: Any) -> FHIRValidationResult:
        """Validate a FHIR resource.

        Args:
            resource: Decoded JSON value; anything other than an object is
                treated as a resource with no fields

        Returns:
            FHIRValidationResult with errors, warnings and validity
        """
        fields: Mapping[str, Any] = resource if isinstance(resource, Mapping) else {}
        resource_type = fields.get("resourceType")

        errors: list[str] = []
        warnings: list[str] = []

        rules = list(self.base_rules)
        if isinstance(resource_type, str):
            rules.extend(self.type_rules.get(resource_type, []))

        for field, severity, message, non_empty in rules:
            if self._is_missing(fields.get(field), non_empty):
                (errors if severity == "error" else warnings).append(message)

        result = FHIRValidationResult(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            resource_type=resource_type,
            resource_id=fields.get("id"),
        )
        logger.debug(
            f"Validated resourceType={resource_type}: "
            f"errors={len(errors)}, warnings={len(warnings)}"
        )
        return result

    @staticmethod
    def _is_missing(value: Any, non_empty: bool = False) -> bool:
        """Absent, null, false, zero or an empty string; an empty list only when non_empty."""
        if value is None:
            return True
        if isinstance(value, (bool, int, float, str)):
            return not value
        if non_empty and isinstance(value, list):
            return not value
        return False


_validator = FHIRValidator()


def validate_resource(resource: Any) -> FHIRValidationResult:
    """Validate a FHIR resource with the default rule set."""
    return _validator.validate(resource)
