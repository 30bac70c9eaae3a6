"""Disease catalog API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from ayush_api.api.deps import CatalogDep, SettingsDep
from ayush_api.api.responses import success_response
from ayush_api.core.errors import InternalError, NotFoundError
from ayush_api.schemas import ApiResponse
from ayush_api.services.catalog import DEFAULT_DISEASE_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/diseases", tags=["Diseases"])


@router.get(
    "",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="List diseases",
    description="Search the AYUSH disease catalog by free text and category, with pagination.",
)
def list_diseases(
    catalog: CatalogDep,
    settings: SettingsDep,
    query: Annotated[str | None, Query(description="Match name, synonyms or description")] = None,
    category: Annotated[str | None, Query(description="Exact category (case-insensitive)")] = None,
    limit: Annotated[int, Query(ge=0, description="Max records to return")] = DEFAULT_DISEASE_LIMIT,
    offset: Annotated[int, Query(ge=0, description="Offset for pagination")] = 0,
) -> ApiResponse:
    """List catalog diseases matching the filters.

    Args:
        query: Case-insensitive substring matched against name, synonyms
            and description.
        category: Category name, matched exactly ignoring case.
        limit: Page size.
        offset: Pagination offset.

    Returns:
        Envelope with the page of diseases and pagination metadata.
    """
    try:
        page = catalog.list_diseases(query=query, category=category, limit=limit, offset=offset)
    except Exception as e:
        logger.exception(f"Error fetching diseases: {e}")
        raise InternalError("Error fetching diseases", e, settings.debug) from e

    return success_response(page.items, meta=page.meta)


@router.get(
    "/categories",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="List disease categories",
)
def list_categories(catalog: CatalogDep, settings: SettingsDep) -> ApiResponse:
    """Distinct categories present in the catalog."""
    try:
        categories = catalog.list_categories()
    except Exception as e:
        logger.exception(f"Error fetching categories: {e}")
        raise InternalError("Error fetching categories", e, settings.debug) from e

    return success_response(categories)


@router.get(
    "/{disease_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Get a disease",
)
def get_disease(disease_id: str, catalog: CatalogDep, settings: SettingsDep) -> ApiResponse:
    """Get one catalog disease by id.

    Raises:
        NotFoundError: 404 if no disease has this id.
    """
    try:
        disease = catalog.get_disease(disease_id)
    except Exception as e:
        logger.exception(f"Error fetching disease {disease_id}: {e}")
        raise InternalError("Error fetching disease", e, settings.debug) from e

    if disease is None:
        raise NotFoundError("Disease not found")

    return success_response(disease)
