"""Tests for disease catalog API endpoints."""

import pytest
from httpx import AsyncClient


class TestListDiseases:
    """Tests for GET /api/diseases."""

    @pytest.mark.asyncio
    async def test_list_returns_full_catalog(self, client: AsyncClient) -> None:
        """Test default listing returns every seeded disease."""
        response = await client.get("/api/diseases")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["meta"] == {"total": 10, "limit": 50, "offset": 0, "hasMore": False}

    @pytest.mark.asyncio
    async def test_disease_fields_are_camel_case_json(self, client: AsyncClient) -> None:
        """Test disease records expose their codes and synonyms."""
        response = await client.get("/api/diseases")
        first = response.json()["data"][0]
        assert first == {
            "id": "1",
            "name": "Amlapitta",
            "icd": "K25.9",
            "tm2": "TM2001",
            "description": "A digestive disorder characterized by hyperacidity and burning sensation in the stomach",
            "category": "Digestive System",
            "synonyms": ["Hyperacidity", "Acid Peptic Disease"],
        }

    @pytest.mark.asyncio
    async def test_query_matches_synonym(self, client: AsyncClient) -> None:
        """Test the free-text query searches synonyms."""
        response = await client.get("/api/diseases", params={"query": "diabetes"})
        data = response.json()["data"]
        assert [d["name"] for d in data] == ["Madhumeha"]

    @pytest.mark.asyncio
    async def test_query_is_case_insensitive(self, client: AsyncClient) -> None:
        """Test the query ignores case."""
        lower = await client.get("/api/diseases", params={"query": "cough"})
        upper = await client.get("/api/diseases", params={"query": "COUGH"})
        assert lower.json()["data"] == upper.json()["data"]
        assert [d["name"] for d in lower.json()["data"]] == ["Kasa"]

    @pytest.mark.asyncio
    async def test_category_filter(self, client: AsyncClient) -> None:
        """Test category filtering is exact and ignores case."""
        response = await client.get("/api/diseases", params={"category": "respiratory system"})
        body = response.json()
        assert [d["name"] for d in body["data"]] == ["Kasa", "Swasa", "Pratishyaya"]
        assert body["meta"]["total"] == 3

    @pytest.mark.asyncio
    async def test_partial_category_matches_nothing(self, client: AsyncClient) -> None:
        """Test a category prefix does not match."""
        response = await client.get("/api/diseases", params={"category": "Respiratory"})
        body = response.json()
        assert body["data"] == []
        assert body["meta"]["total"] == 0

    @pytest.mark.asyncio
    async def test_pagination(self, client: AsyncClient) -> None:
        """Test limit and offset slice the filtered list."""
        response = await client.get("/api/diseases", params={"limit": 3, "offset": 3})
        body = response.json()
        assert [d["id"] for d in body["data"]] == ["4", "5", "6"]
        assert body["meta"] == {"total": 10, "limit": 3, "offset": 3, "hasMore": True}

    @pytest.mark.asyncio
    async def test_offset_past_end(self, client: AsyncClient) -> None:
        """Test an offset beyond the total yields an empty page."""
        response = await client.get("/api/diseases", params={"offset": 20})
        body = response.json()
        assert body["data"] == []
        assert body["meta"]["hasMore"] is False

    @pytest.mark.asyncio
    async def test_limit_above_total(self, client: AsyncClient) -> None:
        """Test a limit far beyond the catalog size returns every record."""
        response = await client.get("/api/diseases", params={"limit": 5000})
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 10
        assert body["meta"] == {"total": 10, "limit": 5000, "offset": 0, "hasMore": False}

    @pytest.mark.asyncio
    async def test_negative_limit_rejected(self, client: AsyncClient) -> None:
        """Test malformed pagination parameters produce a 400 envelope."""
        response = await client.get("/api/diseases", params={"limit": -1})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Invalid request"


class TestDiseaseCategories:
    """Tests for GET /api/diseases/categories."""

    @pytest.mark.asyncio
    async def test_categories_route_is_not_treated_as_id(self, client: AsyncClient) -> None:
        """Test the categories route answers instead of the by-id route."""
        response = await client.get("/api/diseases/categories")
        assert response.status_code == 200
        assert response.json()["data"] == [
            "Digestive System",
            "Musculoskeletal System",
            "Endocrine System",
            "Respiratory System",
            "Cardiovascular System",
            "Mental Health",
            "Neurological System",
        ]


class TestGetDisease:
    """Tests for GET /api/diseases/{id}."""

    @pytest.mark.asyncio
    async def test_get_existing_disease(self, client: AsyncClient) -> None:
        """Test fetching a disease by id."""
        response = await client.get("/api/diseases/3")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Sandhigata Vata"
        assert data["icd"] == "M19.9"

    @pytest.mark.asyncio
    async def test_get_missing_disease(self, client: AsyncClient) -> None:
        """Test an unknown id returns a 404 envelope without data."""
        response = await client.get("/api/diseases/999")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Disease not found"}
