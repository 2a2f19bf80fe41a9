"""Full and partial (merge-patch) updates of an existing entity."""

from typing import Any, Dict, Optional

from myapp.features.crud.domain.entities import Entity
from myapp.shared.exceptions import EntityNotFoundError, InvalidArgumentError, MethodNotAllowedError
from myapp.shared.interfaces import Repository
from myapp.core.logger import get_logger

logger = get_logger(__name__)


class _IdentifiedMutation:
    """Shared identifier checks run before any storage call."""

    method = "PUT"

    def __init__(self, repository: Repository, entity_name: str):
        self.repository = repository
        self.entity_name = entity_name

    def _validate_ids(self, path_id: Optional[int], payload_id: Optional[int]) -> int:
        if path_id is None:
            raise MethodNotAllowedError(self.entity_name, self.method)
        if payload_id is None:
            raise InvalidArgumentError("Invalid id", self.entity_name, "idnull")
        if payload_id != path_id:
            raise InvalidArgumentError("Invalid ID", self.entity_name, "idinvalid")
        return path_id


class UpdateEntity(_IdentifiedMutation):
    """Replaces an existing entity. Never inserts."""

    async def execute(self, path_id: Optional[int], entity: Entity) -> Entity:
        entity_id = self._validate_ids(path_id, entity.id)

        updated = await self.repository.update(entity)
        if updated is None:
            raise EntityNotFoundError(self.entity_name, entity_id)

        logger.info(f"Updated {self.entity_name} with id {entity_id}")
        return updated


class PartialUpdateEntity(_IdentifiedMutation):
    """Merges only the fields present in the request into an existing entity."""

    method = "PATCH"

    async def execute(
        self,
        path_id: Optional[int],
        payload_id: Optional[int],
        changes: Dict[str, Any]
    ) -> Entity:
        entity_id = self._validate_ids(path_id, payload_id)

        patched = await self.repository.patch(entity_id, changes)
        if patched is None:
            raise EntityNotFoundError(self.entity_name, entity_id)

        logger.info(f"Partially updated {self.entity_name} with id {entity_id}: {sorted(changes)}")
        return patched
