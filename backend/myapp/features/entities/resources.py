"""Resources served by myapp.

Full CRUD is the default contract. A, C and D are deliberately read/create/delete
only: their PUT and PATCH routes are not registered and answer 405.
"""

from myapp.features.crud.domain.resource import ResourceDefinition
from myapp.features.entities.domain.entities import A, B, C, D
from myapp.features.entities.infrastructure.models import AModel, BModel, CModel, DModel
from myapp.features.entities.presentation.schemas import ASchema, BSchema, CSchema, DSchema

A_RESOURCE = ResourceDefinition(
    entity_name="a", path="as", entity_cls=A, model_cls=AModel, schema_cls=ASchema, updatable=False
)
B_RESOURCE = ResourceDefinition(
    entity_name="b", path="bs", entity_cls=B, model_cls=BModel, schema_cls=BSchema
)
C_RESOURCE = ResourceDefinition(
    entity_name="c", path="cs", entity_cls=C, model_cls=CModel, schema_cls=CSchema, updatable=False
)
D_RESOURCE = ResourceDefinition(
    entity_name="d", path="ds", entity_cls=D, model_cls=DModel, schema_cls=DSchema, updatable=False
)

RESOURCES = [A_RESOURCE, B_RESOURCE, C_RESOURCE, D_RESOURCE]
