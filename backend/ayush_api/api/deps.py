"""Request dependencies resolving the per-application service instances."""

from typing import Annotated

from fastapi import Depends, Request

from ayush_api.core.config import Settings
from ayush_api.services import ClinicalStore, FHIRMapper, ReferenceCatalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> ReferenceCatalog:
    return request.app.state.catalog


def get_store(request: Request) -> ClinicalStore:
    return request.app.state.store


def get_mapper(request: Request) -> FHIRMapper:
    return request.app.state.mapper


def get_client_ip(request: Request) -> str | None:
    """Address of the calling client, recorded on audit events."""
    return request.client.host if request.client else None


SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogDep = Annotated[ReferenceCatalog, Depends(get_catalog)]
StoreDep = Annotated[ClinicalStore, Depends(get_store)]
MapperDep = Annotated[FHIRMapper, Depends(get_mapper)]
ClientIpDep = Annotated[str | None, Depends(get_client_ip)]
