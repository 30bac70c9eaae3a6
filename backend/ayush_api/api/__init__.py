"""API routers for the AYUSH Healthcare API."""

from ayush_api.api.diseases import router as diseases_router
from ayush_api.api.fhir import router as fhir_router
from ayush_api.api.health import router as health_router
from ayush_api.api.patients import router as patients_router

__all__ = [
    "diseases_router",
    "fhir_router",
    "health_router",
    "patients_router",
]
