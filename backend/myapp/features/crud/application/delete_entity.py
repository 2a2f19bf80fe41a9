from myapp.shared.interfaces import Repository
from myapp.core.logger import get_logger

logger = get_logger(__name__)


class DeleteEntity:

    def __init__(self, repository: Repository, entity_name: str):
        self.repository = repository
        self.entity_name = entity_name

    async def execute(self, entity_id: int) -> None:
        # Deleting an absent entity is not an error
        await self.repository.delete(entity_id)
        logger.info(f"Deleted {self.entity_name} with id {entity_id}")
