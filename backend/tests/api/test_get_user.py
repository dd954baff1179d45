"""Get User Route: GET /api/v1/user/get?id=<id>.

Invariants:
    - Known id -> 200 with the same User the create call returned
    - Missing or blank id -> 400
    - Unparseable, non-positive or unknown id -> 404 "user not found"
    - Storage failure -> 500 (same mapping as create)
    - Other methods -> 405 whatever the query
"""

import pytest

from user_api.core.errors import StorageError

CREATE_URL = "/api/v1/user/create"
GET_URL = "/api/v1/user/get"


async def _create(client, name="Ana", age=30, department="Eng") -> dict:
    res = await client.post(
        CREATE_URL,
        json={"name": name, "age": age, "department": department},
    )
    assert res.status_code == 201
    return res.json()


async def test_get_returns_created_user(client):
    created = await _create(client)
    res = await client.get(GET_URL, params={"id": str(created["id"])})
    assert res.status_code == 200
    assert res.json() == created


async def test_round_trip_preserves_fields(client):
    created = await _create(client, "Ana", 30, "Eng")
    fetched = (
        await client.get(GET_URL, params={"id": created["id"]})
    ).json()
    assert (fetched["name"], fetched["age"], fetched["department"]) == (
        "Ana", 30, "Eng",
    )


async def test_get_trims_id(client):
    created = await _create(client)
    res = await client.get(GET_URL, params={"id": f"  {created['id']} "})
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


async def test_get_without_id_returns_400(client):
    res = await client.get(GET_URL)
    assert res.status_code == 400
    assert res.text == "missing query param: id"


async def test_get_with_blank_id_returns_400(client):
    res = await client.get(GET_URL, params={"id": "   "})
    assert res.status_code == 400
    assert res.text == "missing query param: id"


@pytest.mark.parametrize("raw_id", ["0", "-5", "abc", "1.5", "1e3"])
async def test_get_with_invalid_id_returns_404(client, raw_id):
    res = await client.get(GET_URL, params={"id": raw_id})
    assert res.status_code == 404
    assert res.text == "user not found"


async def test_get_with_out_of_range_id_returns_404(client):
    res = await client.get(GET_URL, params={"id": str(2**63)})
    assert res.status_code == 404
    assert res.text == "user not found"


async def test_get_unknown_max_int64_id_returns_404(client):
    await _create(client)
    res = await client.get(GET_URL, params={"id": str(2**63 - 1)})
    assert res.status_code == 404
    assert res.text == "user not found"


async def test_get_storage_failure_returns_500(client, monkeypatch):
    async def _failing_get(db, raw_id):
        raise StorageError("server closed the connection", "select")

    monkeypatch.setattr(
        "user_api.infrastructure.user_store.get_by_id", _failing_get,
    )
    res = await client.get(GET_URL, params={"id": "1"})
    assert res.status_code == 500
    assert res.text == "db error: server closed the connection"


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
async def test_get_rejects_other_methods(client, method):
    res = await client.request(method, GET_URL, params={"id": "1"})
    assert res.status_code == 405
    assert res.text == "method not allowed"


async def test_unknown_path_returns_plain_404(client):
    res = await client.get("/api/v1/user/list")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
