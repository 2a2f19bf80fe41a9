"""Base Pydantic schema (DTO) for CRUD resources."""

from typing import Annotated, Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, Field

from myapp.features.crud.domain.entities import Entity

# Identifiers are signed 64-bit integers in storage
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

EntityId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]


class EntitySchema(BaseModel):
    """Request and response body of a CRUD resource.

    Subclasses whose fields mirror the domain entity one to one only need to
    set ``entity_cls``; the others override the conversion methods and
    ``sort_properties``.
    """

    entity_cls: ClassVar[Type[Entity]] = Entity

    id: Optional[EntityId] = None

    class Config:
        from_attributes = True

    def to_entity(self) -> Entity:
        return self.entity_cls(**self.model_dump())

    def to_changes(self) -> Dict[str, Any]:
        """Fields explicitly sent in a merge-patch body, ``id`` excluded.

        A field set to ``null`` is included (and clears the stored value);
        an omitted field is not.
        """
        return {name: getattr(self, name) for name in self.model_fields_set if name != "id"}

    @classmethod
    def sort_properties(cls) -> Dict[str, str]:
        """Names clients may sort on, mapped to the entity fields they order by."""
        return {name: name for name in cls.entity_cls.field_names()}

    @classmethod
    def from_entity(cls, entity: Entity) -> "EntitySchema":
        return cls.model_validate(entity.to_dict())
