"""Description of one entity type exposed as a CRUD resource."""

from dataclasses import dataclass
from typing import Any, Type

from myapp.features.crud.domain.entities import Entity


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything the generic handlers need to serve one entity type.

    Attributes:
        entity_name: Name used in alerts and error bodies (``a``, ``myApp2C``)
        path: Plural route segment under the API prefix (``as``)
        entity_cls: Domain dataclass
        model_cls: SQLAlchemy model backing ``entity_cls``
        schema_cls: Pydantic schema used for request and response bodies
        updatable: Whether PUT and PATCH are exposed
        streaming: Whether the list endpoint can answer with NDJSON
    """

    entity_name: str
    path: str
    entity_cls: Type[Entity]
    model_cls: Type[Any]
    schema_cls: Type[Any]
    updatable: bool = True
    streaming: bool = True

    @property
    def display_name(self) -> str:
        return self.entity_cls.__name__
