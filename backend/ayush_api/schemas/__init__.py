"""Pydantic schemas for the AYUSH Healthcare API."""

from ayush_api.schemas.base import CamelModel, DiseaseCategory, OpenCamelModel
from ayush_api.schemas.condition import ConditionCreate, ConditionRecord, ConditionWithDisease
from ayush_api.schemas.disease import DiseaseCode, DiseaseRecord
from ayush_api.schemas.envelope import ApiResponse, Page, PaginationMeta, paginate
from ayush_api.schemas.fhir import FHIRGenerateRequest, FHIRValidationResult, GenerateCondition
from ayush_api.schemas.patient import (
    Address,
    EmergencyContact,
    GeneratePatient,
    PatientBase,
    PatientCreate,
    PatientRecord,
)

__all__ = [
    # Base
    "CamelModel",
    "DiseaseCategory",
    "OpenCamelModel",
    # Disease
    "DiseaseCode",
    "DiseaseRecord",
    # Patient
    "Address",
    "EmergencyContact",
    "GeneratePatient",
    "PatientBase",
    "PatientCreate",
    "PatientRecord",
    # Condition
    "ConditionCreate",
    "ConditionRecord",
    "ConditionWithDisease",
    # FHIR
    "FHIRGenerateRequest",
    "FHIRValidationResult",
    "GenerateCondition",
    # Envelope
    "ApiResponse",
    "Page",
    "PaginationMeta",
    "paginate",
]
