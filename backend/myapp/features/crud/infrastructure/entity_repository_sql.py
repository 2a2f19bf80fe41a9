"""SQLAlchemy implementation of the generic Repository interface."""

from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from myapp.core.database import DatabaseManager
from myapp.core.logger import get_logger
from myapp.features.crud.domain.entities import Entity
from myapp.shared.exceptions import RepositoryError
from myapp.shared.interfaces import Repository

logger = get_logger(__name__)

E = TypeVar("E", bound=Entity)


class EntityRepositorySql(Repository[E], Generic[E]):
    """Repository for one entity type backed by one SQLAlchemy model.

    Every call opens its own session through ``DatabaseManager.get_session``,
    so each operation is its own transaction.
    """

    def __init__(self, db: DatabaseManager, entity_cls: Type[E], model_cls: Type[Any]):
        self.db = db
        self.entity_cls = entity_cls
        self.model_cls = model_cls

    # --- Mappers to convert between domain entities and DB models ---

    def _to_entity(self, model) -> E:
        return self.entity_cls(**{name: getattr(model, name) for name in self.entity_cls.field_names()})

    def _apply(self, model, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            if name != "id":
                setattr(model, name, value)

    def _order_by(self, sort: Sequence[Tuple[str, bool]]) -> list:
        clauses = []
        for prop, descending in sort:
            column = getattr(self.model_cls, prop)
            clauses.append(column.desc() if descending else column.asc())
        return clauses

    async def save(self, entity: E) -> E:
        """Inserts a new entity and lets the database assign its ID."""
        if entity.id is not None:
            raise RepositoryError(f"{self.entity_cls.__name__} with ID {entity.id} is not new.")
        try:
            async with self.db.get_session() as session:
                model = self.model_cls()
                self._apply(model, entity.to_dict())
                session.add(model)
                await session.flush()
                return self._to_entity(model)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error saving {self.entity_cls.__name__}: {e}") from e

    async def update(self, entity: E) -> Optional[E]:
        """Replaces every field of an existing entity."""
        return await self.patch(entity.id, entity.to_dict())

    async def patch(self, entity_id: int, changes: Dict[str, Any]) -> Optional[E]:
        """Overwrites only the given fields of an existing entity."""
        try:
            async with self.db.get_session() as session:
                model = await session.get(self.model_cls, entity_id)
                if model is None:
                    return None
                entity = self._to_entity(model)
                entity.merge(changes)
                self._apply(model, entity.to_dict())
                await session.flush()
                return self._to_entity(model)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error updating {self.entity_cls.__name__}: {e}") from e

    async def get_by_id(self, entity_id: int) -> Optional[E]:
        """Finds an entity by its ID."""
        try:
            async with self.db.get_session() as session:
                model = await session.get(self.model_cls, entity_id)
                return self._to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error reading {self.entity_cls.__name__}: {e}") from e

    async def delete(self, entity_id: int) -> None:
        """Deletes an entity by its ID."""
        try:
            async with self.db.get_session() as session:
                result = await session.execute(delete(self.model_cls).where(self.model_cls.id == entity_id))
                if result.rowcount == 0:
                    logger.debug(f"No {self.entity_cls.__name__} with id {entity_id} to delete")
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error deleting {self.entity_cls.__name__}: {e}") from e

    async def list_all(self, sort: Sequence[Tuple[str, bool]] = ()) -> List[E]:
        """Lists all entities."""
        stmt = select(self.model_cls).order_by(*self._order_by(sort))
        try:
            async with self.db.get_session() as session:
                result = await session.execute(stmt)
                return [self._to_entity(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error listing {self.entity_cls.__name__}: {e}") from e

    async def stream_all(self, sort: Sequence[Tuple[str, bool]] = ()) -> AsyncIterator[E]:
        """Yields entities row by row from a server-side cursor.

        The session stays open only while the consumer keeps iterating;
        exhausting or closing the generator releases it.
        """
        stmt = select(self.model_cls).order_by(*self._order_by(sort))
        try:
            async with self.db.get_session() as session:
                result = await session.stream_scalars(stmt)
                async for model in result:
                    yield self._to_entity(model)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error streaming {self.entity_cls.__name__}: {e}") from e

    async def count(self) -> int:
        """Counts stored entities."""
        try:
            async with self.db.get_session() as session:
                result = await session.execute(select(func.count()).select_from(self.model_cls))
                return result.scalar_one()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error counting {self.entity_cls.__name__}: {e}") from e
