"""Base schema configuration and enums for the AYUSH Healthcare API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DiseaseCategory(str, Enum):
    """Body-system categories used by the disease catalog."""

    DIGESTIVE = "Digestive System"
    MUSCULOSKELETAL = "Musculoskeletal System"
    ENDOCRINE = "Endocrine System"
    RESPIRATORY = "Respiratory System"
    CARDIOVASCULAR = "Cardiovascular System"
    MENTAL_HEALTH = "Mental Health"
    NEUROLOGICAL = "Neurological System"


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class OpenCamelModel(CamelModel):
    """CamelModel that keeps arbitrary caller-supplied fields."""

    model_config = ConfigDict(extra="allow")
