"""Generic API routes for a CRUD resource.

``build_resource_router`` is called once per ``ResourceDefinition``; every
entity type gets the same handlers parameterised by its schema, model and
capabilities.
"""

from contextlib import aclosing
from typing import AsyncIterator, List, Optional, Type

from fastapi import APIRouter, Body, Depends, Path, Query, Request, Response, status
from fastapi.responses import StreamingResponse

from myapp.core.database import DatabaseManager, get_db_manager
from myapp.core.logger import get_logger
from myapp.features.crud.application.create_entity import CreateEntity
from myapp.features.crud.application.delete_entity import DeleteEntity
from myapp.features.crud.application.get_entity import GetEntity
from myapp.features.crud.application.list_entities import ListEntities
from myapp.features.crud.application.update_entity import PartialUpdateEntity, UpdateEntity
from myapp.features.crud.domain.entities import Entity
from myapp.features.crud.domain.resource import ResourceDefinition
from myapp.features.crud.infrastructure.entity_repository_sql import EntityRepositorySql
from myapp.features.crud.presentation.schemas import ID_MAX, ID_MIN, EntitySchema
from myapp.shared.alerts import EntityAlert
from myapp.shared.exceptions import MethodNotAllowedError
from myapp.shared.helpers import build_location, wants_ndjson

logger = get_logger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"
MERGE_PATCH_MEDIA_TYPE = "application/merge-patch+json"


async def _ndjson_lines(entities: AsyncIterator[Entity], schema_cls: Type[EntitySchema]) -> AsyncIterator[str]:
    """Serialize a stream of entities as one JSON document per line."""
    async with aclosing(entities):
        async for entity in entities:
            yield schema_cls.from_entity(entity).model_dump_json() + "\n"


def _set_headers(response: Response, alert: EntityAlert) -> None:
    for name, value in alert.to_headers().items():
        response.headers[name] = value


def build_resource_router(
    resource: ResourceDefinition,
    application_name: str,
    api_prefix: str = "/api"
) -> APIRouter:
    """Build the router serving ``/<resource.path>`` for one entity type."""
    schema_cls = resource.schema_cls
    entity_name = resource.entity_name
    name = resource.display_name
    sortable = schema_cls.sort_properties()

    # --- Dependency Injection ---
    def get_repository(db: DatabaseManager = Depends(get_db_manager)) -> EntityRepositorySql:
        """Dependency to provide the repository for this entity type."""
        return EntityRepositorySql(db, resource.entity_cls, resource.model_cls)

    router = APIRouter(
        prefix=f"/{resource.path}",
        tags=[name],
    )

    @router.post("", response_model=schema_cls, status_code=status.HTTP_201_CREATED)
    async def create_entity_endpoint(
        response: Response,
        payload: schema_cls = Body(...),
        repository: EntityRepositorySql = Depends(get_repository)
    ):
        """Create a new entity. The payload must not carry an id."""
        logger.debug(f"REST request to save {name} : {payload}")
        created = await CreateEntity(repository, entity_name).execute(payload.to_entity())

        response.headers["Location"] = build_location(api_prefix, resource.path, created.id)
        _set_headers(response, EntityAlert.created(application_name, entity_name, created.id))
        return schema_cls.from_entity(created)

    @router.get("", response_model=List[schema_cls])
    async def list_entities_endpoint(
        request: Request,
        sort: Optional[List[str]] = Query(None, description="Sort order, e.g. id,desc"),
        repository: EntityRepositorySql = Depends(get_repository)
    ):
        """
        Get all entities.

        Answers with a JSON array, or with newline-delimited JSON streamed row
        by row when the client accepts ``application/x-ndjson``.
        """
        use_case = ListEntities(repository, entity_name, sortable)

        if resource.streaming and wants_ndjson(request.headers.get("accept")):
            logger.debug(f"REST request to get all {name} as a stream")
            return StreamingResponse(
                _ndjson_lines(use_case.stream(sort), schema_cls),
                media_type=NDJSON_MEDIA_TYPE
            )

        logger.debug(f"REST request to get all {name}")
        entities = await use_case.execute(sort)
        return [schema_cls.from_entity(entity) for entity in entities]

    @router.get("/{entity_id}", response_model=schema_cls)
    async def get_entity_endpoint(
        entity_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
        repository: EntityRepositorySql = Depends(get_repository)
    ):
        """Get one entity by id, or 404."""
        logger.debug(f"REST request to get {name} : {entity_id}")
        entity = await GetEntity(repository, entity_name).execute(entity_id)
        return schema_cls.from_entity(entity)

    if resource.updatable:

        @router.put("/{entity_id}", response_model=schema_cls)
        async def update_entity_endpoint(
            response: Response,
            entity_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
            payload: schema_cls = Body(...),
            repository: EntityRepositorySql = Depends(get_repository)
        ):
            """Replace an existing entity. The payload id must match the path id."""
            logger.debug(f"REST request to update {name} : {entity_id}, {payload}")
            updated = await UpdateEntity(repository, entity_name).execute(entity_id, payload.to_entity())

            _set_headers(response, EntityAlert.updated(application_name, entity_name, updated.id))
            return schema_cls.from_entity(updated)

        @router.patch(
            "/{entity_id}",
            response_model=schema_cls,
            openapi_extra={"requestBody": {"content": {MERGE_PATCH_MEDIA_TYPE: {}}}}
        )
        async def partial_update_entity_endpoint(
            response: Response,
            entity_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
            payload: schema_cls = Body(...),
            repository: EntityRepositorySql = Depends(get_repository)
        ):
            """Merge the fields present in the payload into an existing entity."""
            logger.debug(f"REST request to partial update {name} partially : {entity_id}, {payload}")
            patched = await PartialUpdateEntity(repository, entity_name).execute(
                entity_id, payload.id, payload.to_changes()
            )

            _set_headers(response, EntityAlert.updated(application_name, entity_name, patched.id))
            return schema_cls.from_entity(patched)

        @router.put("", include_in_schema=False)
        @router.patch("", include_in_schema=False)
        async def mutate_collection_endpoint(request: Request):
            """Updates must address a single entity by id."""
            raise MethodNotAllowedError(entity_name, request.method)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity_endpoint(
        entity_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
        repository: EntityRepositorySql = Depends(get_repository)
    ):
        """Delete an entity. Deleting a missing id still succeeds."""
        logger.debug(f"REST request to delete {name} : {entity_id}")
        await DeleteEntity(repository, entity_name).execute(entity_id)

        response = Response(status_code=status.HTTP_204_NO_CONTENT)
        _set_headers(response, EntityAlert.deleted(application_name, entity_name, entity_id))
        return response

    return router
