"""Shared interfaces and protocols."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar


class Identifiable(Protocol):
    """Anything carrying a storage-assigned identifier."""

    id: Optional[int]


class Persistable(Identifiable, Protocol):
    """An identifiable value whose fields can be read and merged as a mapping."""

    def to_dict(self) -> Dict[str, Any]: ...

    def merge(self, changes: Dict[str, Any]) -> None: ...


T = TypeVar("T", bound=Persistable)


class Repository(ABC, Generic[T]):
    """Base repository interface."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert a new entity and return it with its assigned ID."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> Optional[T]:
        """Replace an existing entity; ``None`` if it does not exist."""
        pass

    @abstractmethod
    async def patch(self, entity_id: int, changes: Dict[str, Any]) -> Optional[T]:
        """Merge ``changes`` into an existing entity; ``None`` if it does not exist."""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Delete an entity. Deleting a missing entity is a no-op."""
        pass

    @abstractmethod
    async def list_all(self, sort: Sequence[Tuple[str, bool]] = ()) -> List[T]:
        """List every entity, optionally sorted."""
        pass

    @abstractmethod
    def stream_all(self, sort: Sequence[Tuple[str, bool]] = ()) -> AsyncIterator[T]:
        """Yield every entity one at a time, holding the cursor until exhausted or closed."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored entities."""
        pass
