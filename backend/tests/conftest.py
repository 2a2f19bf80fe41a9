import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from myapp.core.config import Settings
from myapp.core.database import DatabaseManager
from myapp.features.crud.infrastructure.entity_repository_sql import EntityRepositorySql
from myapp.features.entities.resources import RESOURCES
from myapp.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        app_name="myApp",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'myapp_test.db'}",
        database_create_tables=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_manager(test_settings):
    db = DatabaseManager(test_settings.database_url)
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def repositories(db_manager):
    """One repository per resource path (``as``, ``bs``, ...)."""
    return {
        resource.path: EntityRepositorySql(db_manager, resource.entity_cls, resource.model_cls)
        for resource in RESOURCES
    }


@pytest_asyncio.fixture(scope="function")
async def client(test_settings, db_manager):
    app = create_app(test_settings, RESOURCES, db_manager)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
