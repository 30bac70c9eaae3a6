"""Services for the AYUSH Healthcare API.

Services implement the business logic behind the routers:
- ReferenceCatalog: read-only AYUSH disease catalog
- ClinicalStore: in-memory patients and conditions
- FHIRMapper: record to FHIR R4 resource mapping
- FHIRValidator: structural validation of FHIR resources
"""

from ayush_api.services.catalog import (
    DISEASE_RECORDS,
    ReferenceCatalog,
    get_reference_catalog,
    reset_reference_catalog,
)
from ayush_api.services.clinical_store import ClinicalStore
from ayush_api.services.fhir_mapper import (
    FHIRMapper,
    get_fhir_mapper,
    reset_fhir_mapper,
    split_name,
)
from ayush_api.services.fhir_validator import FHIRValidator, validate_resource

__all__ = [
    # Catalog
    "DISEASE_RECORDS",
    "ReferenceCatalog",
    "get_reference_catalog",
    "reset_reference_catalog",
    # Store
    "ClinicalStore",
    # FHIR
    "FHIRMapper",
    "FHIRValidator",
    "get_fhir_mapper",
    "reset_fhir_mapper",
    "split_name",
    "validate_resource",
]
