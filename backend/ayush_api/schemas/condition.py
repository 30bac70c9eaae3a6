"""Condition schemas."""

from pydantic import Field

from ayush_api.schemas.base import OpenCamelModel
from ayush_api.schemas.disease import DiseaseRecord


class ConditionCreate(OpenCamelModel):
    """Request body for recording a condition against a patient."""

    disease_id: str | None = Field(None, description="Catalog disease identifier")
    onset_date: str | None = Field(None, description="When the condition started")
    notes: str | None = Field(None, description="Clinician notes")


class ConditionRecord(ConditionCreate):
    """A condition held by the clinical store."""

    id: str = Field(..., description="Generated condition identifier")
    patient_id: str = Field(..., description="Owning patient identifier")
    created_at: str = Field(..., description="ISO-8601 creation timestamp")
    updated_at: str = Field(..., description="ISO-8601 update timestamp (equals created_at)")


class ConditionWithDisease(ConditionRecord):
    """Condition enriched with its resolved catalog disease, if any."""

    disease: DiseaseRecord | None = Field(None, description="Resolved disease record")
