"""
Main API router that aggregates the routers of every exposed resource.
"""

from typing import Iterable

from fastapi import APIRouter

from myapp.features.crud.domain.resource import ResourceDefinition
from myapp.features.crud.presentation.routes import build_resource_router


def build_api_router(
    resources: Iterable[ResourceDefinition],
    application_name: str,
    api_prefix: str
) -> APIRouter:
    """Aggregate one generic CRUD router per resource (``/as``, ``/bs``, ...)."""
    api_router = APIRouter()

    for resource in resources:
        api_router.include_router(build_resource_router(resource, application_name, api_prefix))

    return api_router
