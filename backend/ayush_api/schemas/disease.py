"""Disease catalog schemas."""

from pydantic import ConfigDict, Field

from ayush_api.schemas.base import CamelModel, DiseaseCategory


class DiseaseRecord(CamelModel):
    """A traditional-medicine disease dual-coded to ICD-11 and NAMASTE.

    Catalog records are seeded once at startup and never change.
    """

    id: str = Field(..., description="Stable catalog identifier")
    name: str = Field(..., description="Traditional-medicine disease name")
    icd: str = Field(..., description="ICD-11 code")
    tm2: str = Field(..., description="NAMASTE traditional-medicine code")
    description: str = Field(..., description="Clinical description")
    category: DiseaseCategory = Field(..., description="Body-system category")
    synonyms: tuple[str, ...] = Field(default=(), description="Alternative names, in order")

    model_config = ConfigDict(frozen=True)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, synonyms and description."""
        needle = term.lower()
        return (
            needle in self.name.lower()
            or any(needle in synonym.lower() for synonym in self.synonyms)
            or needle in self.description.lower()
        )


class DiseaseCode(CamelModel):
    """Disease coding supplied inline to the ad-hoc FHIR generator."""

    name: str | None = Field(None, description="Disease display name")
    icd: str | None = Field(None, description="ICD-11 code")
    tm2: str | None = Field(None, description="NAMASTE code")
