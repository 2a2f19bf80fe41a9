"""Pydantic schemas (DTOs) for the entities API."""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, Field

from myapp.features.crud.presentation.schemas import EntityId, EntitySchema
from myapp.features.entities.domain.entities import A, B, C, D


class ASchema(EntitySchema):
    """Schema for an A."""
    entity_cls: ClassVar[type] = A


class ARef(BaseModel):
    """Reference to an A by id, as embedded in a B."""
    id: EntityId


class BSchema(EntitySchema):
    """Schema for a B. The related A is sent as ``{"a": {"id": 1}}``."""
    entity_cls: ClassVar[type] = B

    a: Optional[ARef] = Field(None, description="Related A, or null for none")

    def to_entity(self) -> B:
        return B(id=self.id, a_id=self.a.id if self.a else None)

    def to_changes(self) -> Dict[str, Any]:
        changes: Dict[str, Any] = {}
        if "a" in self.model_fields_set:
            changes["a_id"] = self.a.id if self.a else None
        return changes

    @classmethod
    def sort_properties(cls) -> Dict[str, str]:
        return {"id": "id", "a": "a_id", "a.id": "a_id"}

    @classmethod
    def from_entity(cls, entity: B) -> "BSchema":
        return cls(id=entity.id, a=ARef(id=entity.a_id) if entity.a_id is not None else None)


class CSchema(EntitySchema):
    """Schema for a C."""
    entity_cls: ClassVar[type] = C


class DSchema(EntitySchema):
    """Schema for a D."""
    entity_cls: ClassVar[type] = D
