from typing import AsyncIterator, Iterable, List, Mapping, Optional

from myapp.features.crud.domain.entities import Entity
from myapp.shared.helpers import parse_sort
from myapp.shared.interfaces import Repository


class ListEntities:
    """Reads the whole collection, either collected or as a lazy stream."""

    def __init__(self, repository: Repository, entity_name: str, sortable: Mapping[str, str]):
        self.repository = repository
        self.entity_name = entity_name
        self.sortable = sortable

    async def execute(self, sort: Optional[Iterable[str]] = None) -> List[Entity]:
        orders = parse_sort(sort, self.sortable, self.entity_name)
        return await self.repository.list_all(orders)

    def stream(self, sort: Optional[Iterable[str]] = None) -> AsyncIterator[Entity]:
        """Validate ``sort`` eagerly, then hand back the repository stream unopened."""
        orders = parse_sort(sort, self.sortable, self.entity_name)
        return self.repository.stream_all(orders)
