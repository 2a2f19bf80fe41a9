from myapp.features.crud.domain.entities import Entity
from myapp.shared.exceptions import InvalidArgumentError
from myapp.shared.interfaces import Repository
from myapp.core.logger import get_logger

logger = get_logger(__name__)


class CreateEntity:

    def __init__(self, repository: Repository, entity_name: str):
        self.repository = repository
        self.entity_name = entity_name

    async def execute(self, entity: Entity) -> Entity:
        if entity.id is not None:
            raise InvalidArgumentError(
                f"A new {self.entity_name} cannot already have an ID",
                self.entity_name,
                "idexists"
            )

        created = await self.repository.save(entity)
        logger.info(f"Created {self.entity_name} with id {created.id}")
        return created
