"""Second application module: serves C under its own name and database.

The list endpoint only answers with a collected JSON array; there is no
NDJSON streaming variant in this application.
"""

import uvicorn

from myapp.features.crud.domain.resource import ResourceDefinition
from myapp.features.entities.domain.entities import C
from myapp.features.entities.presentation.schemas import CSchema
from myapp.main import create_app
from myapp2.core.config import settings
from myapp2.core.database import db_manager
from myapp2.models import CModel

C_RESOURCE = ResourceDefinition(
    entity_name="myApp2C",
    path="cs",
    entity_cls=C,
    model_cls=CModel,
    schema_cls=CSchema,
    updatable=False,
    streaming=False,
)

RESOURCES = [C_RESOURCE]

app = create_app(settings, RESOURCES, db_manager, title="myApp2 API")


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "myapp2.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower()
    )
