"""The second application serves C under its own names and database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from myapp.core.database import DatabaseManager
from myapp.main import create_app
from myapp2.core.config import Settings
from myapp2.core.database import Base
from myapp2.main import RESOURCES

ENTITY_API_URL = "/api/cs"


@pytest_asyncio.fixture(scope="function")
async def myapp2_client(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'myapp2_test.db'}",
        database_create_tables=False,
    )
    db = DatabaseManager(settings.database_url, base=Base)
    await db.create_tables()
    app = create_app(settings, RESOURCES, db, title="myApp2 API")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    await db.close()


@pytest.mark.asyncio
async def test_create_c_uses_application_specific_names(myapp2_client):
    response = await myapp2_client.post(ENTITY_API_URL, json={})

    assert response.status_code == 201
    created = response.json()
    assert response.headers["location"] == f"{ENTITY_API_URL}/{created['id']}"
    assert response.headers["x-myApp2-alert"] == "myApp2.myApp2C.created"
    assert response.headers["x-myApp2-params"] == str(created["id"])


@pytest.mark.asyncio
async def test_create_c_with_existing_id(myapp2_client):
    response = await myapp2_client.post(ENTITY_API_URL, json={"id": 1})

    assert response.status_code == 400
    assert response.json()["entityName"] == "myApp2C"
    assert response.headers["x-myApp2-error"] == "error.idexists"


@pytest.mark.asyncio
async def test_list_is_always_collected(myapp2_client):
    created = (await myapp2_client.post(ENTITY_API_URL, json={})).json()

    response = await myapp2_client.get(ENTITY_API_URL, headers={"Accept": "application/x-ndjson"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == [created]


@pytest.mark.asyncio
async def test_get_and_delete_c(myapp2_client):
    created = (await myapp2_client.post(ENTITY_API_URL, json={})).json()

    assert (await myapp2_client.get(f"{ENTITY_API_URL}/{created['id']}")).json() == created

    response = await myapp2_client.delete(f"{ENTITY_API_URL}/{created['id']}")
    assert response.status_code == 204
    assert response.headers["x-myApp2-alert"] == "myApp2.myApp2C.deleted"
    assert (await myapp2_client.get(f"{ENTITY_API_URL}/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_only_c_is_exposed(myapp2_client):
    assert (await myapp2_client.get("/api/as")).status_code == 404
