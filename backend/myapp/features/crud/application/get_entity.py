from myapp.features.crud.domain.entities import Entity
from myapp.shared.exceptions import EntityNotFoundError
from myapp.shared.interfaces import Repository


class GetEntity:

    def __init__(self, repository: Repository, entity_name: str):
        self.repository = repository
        self.entity_name = entity_name

    async def execute(self, entity_id: int) -> Entity:
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity
