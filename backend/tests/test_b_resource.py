"""Full and partial updates, exposed by the B resource."""

import json
import random

import pytest

ENTITY_API_URL = "/api/bs"
MERGE_PATCH_HEADERS = {"Content-Type": "application/merge-patch+json"}


def entity_api_url_id(entity_id) -> str:
    return f"{ENTITY_API_URL}/{entity_id}"


def unused_id() -> int:
    return random.randint(2**31, 2**40)


async def create_a(client) -> int:
    return (await client.post("/api/as", json={})).json()["id"]


async def create_b(client, a_id=None) -> dict:
    payload = {"a": {"id": a_id}} if a_id is not None else {}
    response = await client.post(ENTITY_API_URL, json=payload)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_b_with_related_a(client):
    a_id = await create_a(client)

    created = await create_b(client, a_id)

    assert created["a"] == {"id": a_id}
    fetched = (await client.get(entity_api_url_id(created["id"]))).json()
    assert fetched == created


@pytest.mark.asyncio
async def test_put_existing_b(client, repositories):
    first_a = await create_a(client)
    second_a = await create_a(client)
    inserted = await create_b(client, first_a)
    database_size_before_update = await repositories["bs"].count()

    updated = {"id": inserted["id"], "a": {"id": second_a}}
    response = await client.put(entity_api_url_id(inserted["id"]), json=updated)

    assert response.status_code == 200
    assert response.json() == updated
    assert response.headers["x-myApp-alert"] == "myApp.b.updated"
    assert response.headers["x-myApp-params"] == str(inserted["id"])
    assert await repositories["bs"].count() == database_size_before_update
    persisted = await repositories["bs"].get_by_id(inserted["id"])
    assert persisted.a_id == second_a


@pytest.mark.asyncio
async def test_put_replaces_omitted_fields(client, repositories):
    inserted = await create_b(client, await create_a(client))

    response = await client.put(entity_api_url_id(inserted["id"]), json={"id": inserted["id"]})

    assert response.status_code == 200
    assert response.json()["a"] is None
    assert (await repositories["bs"].get_by_id(inserted["id"])).a_id is None


@pytest.mark.asyncio
async def test_put_non_existing_b(client, repositories):
    database_size_before_update = await repositories["bs"].count()
    entity_id = unused_id()

    response = await client.put(entity_api_url_id(entity_id), json={"id": entity_id})

    assert response.status_code == 404
    assert response.json()["errorKey"] == "idnotfound"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_put_without_payload_id(client, repositories):
    inserted = await create_b(client)
    database_size_before_update = await repositories["bs"].count()

    response = await client.put(entity_api_url_id(inserted["id"]), json={})

    assert response.status_code == 400
    assert response.json()["errorKey"] == "idnull"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_put_with_id_mismatch(client, repositories):
    database_size_before_update = await repositories["bs"].count()
    entity_id = unused_id()

    # If url ID doesn't match entity ID, the request is rejected
    response = await client.put(entity_api_url_id(entity_id + 1), json={"id": entity_id})

    assert response.status_code == 400
    assert response.json()["errorKey"] == "idinvalid"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_put_with_missing_id_path_param(client, repositories):
    database_size_before_update = await repositories["bs"].count()

    response = await client.put(ENTITY_API_URL, json={"id": unused_id()})

    assert response.status_code == 405
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_partial_update_b_with_patch(client, repositories):
    a_id = await create_a(client)
    inserted = await create_b(client, a_id)
    database_size_before_update = await repositories["bs"].count()

    # Only the id is sent: every other field must stay as stored
    response = await client.patch(
        entity_api_url_id(inserted["id"]),
        content=json.dumps({"id": inserted["id"]}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 200
    assert response.json() == inserted
    assert response.headers["x-myApp-alert"] == "myApp.b.updated"
    assert await repositories["bs"].count() == database_size_before_update
    assert (await repositories["bs"].get_by_id(inserted["id"])).a_id == a_id


@pytest.mark.asyncio
async def test_patch_with_explicit_null_clears_field(client, repositories):
    inserted = await create_b(client, await create_a(client))

    response = await client.patch(
        entity_api_url_id(inserted["id"]),
        content=json.dumps({"id": inserted["id"], "a": None}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 200
    assert response.json()["a"] is None
    assert (await repositories["bs"].get_by_id(inserted["id"])).a_id is None


@pytest.mark.asyncio
async def test_full_update_b_with_patch(client, repositories):
    inserted = await create_b(client)
    a_id = await create_a(client)

    response = await client.patch(
        entity_api_url_id(inserted["id"]),
        content=json.dumps({"id": inserted["id"], "a": {"id": a_id}}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 200
    assert response.json() == {"id": inserted["id"], "a": {"id": a_id}}
    assert (await repositories["bs"].get_by_id(inserted["id"])).a_id == a_id


@pytest.mark.asyncio
async def test_patch_accepts_plain_json(client):
    inserted = await create_b(client)

    response = await client.patch(entity_api_url_id(inserted["id"]), json={"id": inserted["id"]})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_patch_non_existing_b(client, repositories):
    database_size_before_update = await repositories["bs"].count()
    entity_id = unused_id()

    response = await client.patch(
        entity_api_url_id(entity_id),
        content=json.dumps({"id": entity_id}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 404
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_patch_with_id_mismatch(client, repositories):
    database_size_before_update = await repositories["bs"].count()
    entity_id = unused_id()

    response = await client.patch(
        entity_api_url_id(entity_id + 1),
        content=json.dumps({"id": entity_id}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["errorKey"] == "idinvalid"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_patch_without_payload_id(client, repositories):
    inserted = await create_b(client)
    database_size_before_update = await repositories["bs"].count()

    response = await client.patch(
        entity_api_url_id(inserted["id"]),
        content=json.dumps({"a": None}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["errorKey"] == "idnull"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_patch_with_missing_id_path_param(client, repositories):
    database_size_before_update = await repositories["bs"].count()

    response = await client.patch(
        ENTITY_API_URL,
        content=json.dumps({"id": unused_id()}),
        headers=MERGE_PATCH_HEADERS
    )

    assert response.status_code == 405
    assert response.headers["allow"] == "GET, POST"
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_get_all_bs_sorted_by_related_a(client):
    first = await create_b(client, await create_a(client))
    second = await create_b(client, await create_a(client))

    response = await client.get(ENTITY_API_URL + "?sort=a,desc", headers={"Accept": "application/json"})

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_get_all_bs_rejects_stored_column_as_sort(client):
    response = await client.get(ENTITY_API_URL + "?sort=a_id")

    assert response.status_code == 400
    assert response.json()["errorKey"] == "sortinvalid"


@pytest.mark.asyncio
async def test_put_with_out_of_range_id(client, repositories):
    database_size_before_update = await repositories["bs"].count()
    out_of_range = 2**63

    response = await client.put(entity_api_url_id(out_of_range), json={"id": out_of_range})

    assert 400 <= response.status_code < 500
    assert await repositories["bs"].count() == database_size_before_update


@pytest.mark.asyncio
async def test_create_b_with_out_of_range_a_id(client, repositories):
    database_size_before_create = await repositories["bs"].count()

    response = await client.post(ENTITY_API_URL, json={"a": {"id": 2**63}})

    assert 400 <= response.status_code < 500
    assert await repositories["bs"].count() == database_size_before_create
