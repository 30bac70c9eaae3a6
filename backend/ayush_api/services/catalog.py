"""AYUSH Disease Reference Catalog.

Serves a fixed list of traditional-medicine diseases, each dual-coded to
ICD-11 and the NAMASTE code system. Supports:

- Free-text search over names, synonyms and descriptions
- Exact (case-insensitive) category filtering
- Offset/limit pagination applied after filtering

The catalog is immutable after construction and safe to share between
threads without locking.
"""

from collections.abc import Iterable
import threading

from ayush_api.schemas import DiseaseCategory, DiseaseRecord, Page, paginate

DEFAULT_DISEASE_LIMIT = 50


# ============================================================================
# Seed Data
# ============================================================================


DISEASE_RECORDS: tuple[DiseaseRecord, ...] = (
    DiseaseRecord(
        id="1",
        name="Amlapitta",
        icd="K25.9",
        tm2="TM2001",
        description="A digestive disorder characterized by hyperacidity and burning sensation in the stomach",
        category=DiseaseCategory.DIGESTIVE,
        synonyms=("Hyperacidity", "Acid Peptic Disease"),
    ),
    DiseaseRecord(
        id="2",
        name="Arsha",
        icd="K64.9",
        tm2="TM2002",
        description="Hemorrhoids or piles, characterized by swollen veins in the rectum and anus",
        category=DiseaseCategory.DIGESTIVE,
        synonyms=("Piles", "Hemorrhoids"),
    ),
    DiseaseRecord(
        id="3",
        name="Sandhigata Vata",
        icd="M19.9",
        tm2="TM2003",
        description="Osteoarthritis - degenerative joint disease affecting cartilage and bones",
        category=DiseaseCategory.MUSCULOSKELETAL,
        synonyms=("Osteoarthritis", "Joint Pain"),
    ),
    DiseaseRecord(
        id="4",
        name="Madhumeha",
        icd="E11.9",
        tm2="TM2004",
        description="Diabetes mellitus - a metabolic disorder characterized by high blood sugar levels",
        category=DiseaseCategory.ENDOCRINE,
        synonyms=("Diabetes", "High Blood Sugar"),
    ),
    DiseaseRecord(
        id="5",
        name="Kasa",
        icd="R05",
        tm2="TM2005",
        description="Cough - a sudden expulsion of air from the lungs",
        category=DiseaseCategory.RESPIRATORY,
        synonyms=("Cough", "Tussis"),
    ),
    DiseaseRecord(
        id="6",
        name="Swasa",
        icd="J44.9",
        tm2="TM2006",
        description="Breathlessness or dyspnea, difficulty in breathing",
        category=DiseaseCategory.RESPIRATORY,
        synonyms=("Asthma", "Dyspnea", "Breathlessness"),
    ),
    DiseaseRecord(
        id="7",
        name="Pratishyaya",
        icd="J00",
        tm2="TM2007",
        description="Common cold or rhinitis with nasal congestion and discharge",
        category=DiseaseCategory.RESPIRATORY,
        synonyms=("Common Cold", "Rhinitis"),
    ),
    DiseaseRecord(
        id="8",
        name="Hridroga",
        icd="I25.9",
        tm2="TM2008",
        description="Heart disease including various cardiac conditions",
        category=DiseaseCategory.CARDIOVASCULAR,
        synonyms=("Heart Disease", "Cardiac Disorder"),
    ),
    DiseaseRecord(
        id="9",
        name="Unmada",
        icd="F29",
        tm2="TM2009",
        description="Mental disorder or psychosis with altered consciousness",
        category=DiseaseCategory.MENTAL_HEALTH,
        synonyms=("Psychosis", "Mental Disorder"),
    ),
    DiseaseRecord(
        id="10",
        name="Apasmara",
        icd="G40.9",
        tm2="TM2010",
        description="Epilepsy - a neurological disorder causing seizures",
        category=DiseaseCategory.NEUROLOGICAL,
        synonyms=("Epilepsy", "Seizure Disorder"),
    ),
)


# ============================================================================
# Catalog Service
# ============================================================================


class ReferenceCatalog:
    """Read-only catalog of AYUSH disease records."""

    def __init__(self, records: Iterable[DiseaseRecord] = DISEASE_RECORDS):
        self._records: tuple[DiseaseRecord, ...] = tuple(records)
        self._by_id: dict[str, DiseaseRecord] = {record.id: record for record in self._records}

    def __len__(self) -> int:
        return len(self._records)

    def list_diseases(
        self,
        query: str | None = None,
        category: str | None = None,
        limit: int = DEFAULT_DISEASE_LIMIT,
        offset: int = 0,
    ) -> Page:
        """Filter the catalog and return one page of matches.

        Args:
            query: Substring matched against name, synonyms and description
            category: Category name, compared case-insensitively
            limit: Page size
            offset: Index of the first record to return

        Returns:
            Page of DiseaseRecord items with pagination metadata
        """
        records = list(self._records)

        if query:
            records = [record for record in records if record.matches(query)]

        if category:
            wanted = category.lower()
            records = [record for record in records if record.category.value.lower() == wanted]

        return paginate(records, limit=limit, offset=offset)

    def get_disease(self, disease_id: str | None) -> DiseaseRecord | None:
        """Get a disease by exact id, or None when it does not exist."""
        if disease_id is None:
            return None
        return self._by_id.get(disease_id)

    def list_categories(self) -> list[str]:
        """Distinct categories in first-occurrence order."""
        return list(dict.fromkeys(record.category.value for record in self._records))

    def get_stats(self) -> dict[str, int]:
        """Get catalog statistics."""
        return {
            "disease_count": len(self._records),
            "category_count": len(self.list_categories()),
        }


# ============================================================================
# Singleton Pattern
# ============================================================================


_catalog_instance: ReferenceCatalog | None = None
_catalog_lock = threading.Lock()


def get_reference_catalog() -> ReferenceCatalog:
    """Get or create the shared catalog seeded with DISEASE_RECORDS."""
    global _catalog_instance

    if _catalog_instance is None:
        with _catalog_lock:
            if _catalog_instance is None:
                _catalog_instance = ReferenceCatalog()

    return _catalog_instance


def reset_reference_catalog() -> None:
    """Reset the singleton instance (for testing)."""
    global _catalog_instance
    with _catalog_lock:
        _catalog_instance = None
