"""FHIR request and validation schemas."""

from typing import Any

from pydantic import BaseModel, Field

from ayush_api.schemas.base import CamelModel, OpenCamelModel
from ayush_api.schemas.disease import DiseaseCode
from ayush_api.schemas.patient import GeneratePatient


class GenerateCondition(OpenCamelModel):
    """Optional condition details for ad-hoc FHIR generation."""

    onset_date: str | None = Field(None, description="When the condition started")


class FHIRGenerateRequest(BaseModel):
    """Request body for POST /api/fhir/generate."""

    patient: GeneratePatient | None = Field(None, description="Patient demographics")
    disease: DiseaseCode | None = Field(None, description="Disease coding")
    condition: GenerateCondition | None = Field(None, description="Condition details")


class FHIRValidationResult(CamelModel):
    """Outcome of structural FHIR validation.

    ``valid`` is false exactly when ``errors`` is non-empty; warnings are
    advisory only.
    """

    valid: bool = Field(..., description="True when no errors were found")
    errors: list[str] = Field(default_factory=list, description="Blocking problems")
    warnings: list[str] = Field(default_factory=list, description="Advisory problems")
    resource_type: Any = Field(None, description="resourceType of the input, if any")
    resource_id: Any = Field(None, description="id of the input, if any")
