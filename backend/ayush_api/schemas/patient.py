"""Patient schemas."""

from pydantic import Field

from ayush_api.schemas.base import CamelModel, OpenCamelModel

# Keys the store assigns itself; caller-supplied values are discarded.
RESERVED_FIELDS = ("id", "createdAt", "updatedAt", "created_at", "updated_at")


class Address(CamelModel):
    """Postal address of a patient."""

    line: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class EmergencyContact(CamelModel):
    """Person to contact in an emergency."""

    name: str | None = None
    phone: str | None = None


class PatientBase(OpenCamelModel):
    """Demographics shared by stored patients and ad-hoc FHIR payloads.

    Every field is optional here; presence of the required ones is checked
    by the clinical store so that a missing value becomes a 400 envelope
    rather than a schema error.
    """

    id: str | None = Field(None, description="Patient identifier")
    name: str | None = Field(None, description="Full name")
    dob: str | None = Field(None, description="Date of birth")
    gender: str | None = Field(None, description="Gender (free-form)")
    phone: str | None = Field(None, description="Mobile phone number")
    email: str | None = Field(None, description="Email address")
    address: Address | None = Field(None, description="Home address")
    emergency_contact: EmergencyContact | None = Field(None, description="Emergency contact")


class PatientCreate(PatientBase):
    """Request body for creating a patient."""


class PatientRecord(PatientBase):
    """A patient held by the clinical store."""

    id: str = Field(..., description="Generated patient identifier")
    name: str = Field(..., description="Full name")
    dob: str = Field(..., description="Date of birth")
    gender: str = Field(..., description="Gender (free-form)")
    created_at: str = Field(..., description="ISO-8601 creation timestamp")
    updated_at: str = Field(..., description="ISO-8601 update timestamp (equals created_at)")


class GeneratePatient(PatientBase):
    """Patient payload for ad-hoc FHIR bundle generation."""

    medical_history: str | None = Field(None, description="Free-text medical history")
    allergies: str | None = Field(None, description="Known allergies")
    current_medications: str | None = Field(None, description="Current medications")
