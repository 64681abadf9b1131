"""Person Routes: CRUD semantics of the person resource over HTTP.

Invariants:
    - Empty collection is 200 with []
    - Missing person is 404; missing delete is 200
    - POST on a single person is 405 and never touches the store
    - Malformed PUT bodies are 400 and never store a partial person
"""

from httpx import ASGITransport, AsyncClient

from person_service.config import Settings
from person_service.core.person import Person
from person_service.main import create_app

SINGLE = {"email": "foo@example.com", "name": "Mr Foo"}


async def test_empty(client):
    res = await client.get("/resource")

    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    assert res.json() == []


async def test_get_all(client, store):
    store.put("bar", Person("bar@example.com", "Mr Bar"))
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    res = await client.get("/resource")

    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    actual = {(p["email"], p["name"]) for p in res.json()}
    assert actual == {
        ("bar@example.com", "Mr Bar"),
        ("foo@example.com", "Mr Foo"),
    }
    assert len(res.json()) == 2


async def test_get_single(client, store):
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    res = await client.get("/resource/foo")

    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    assert res.json() == SINGLE


async def test_get_missing_returns_404(client):
    res = await client.get("/resource/nobody")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert "nobody" in error["message"]
    assert error["path"] == "/resource/nobody"


async def test_put(client, store):
    res = await client.put("/resource/foo", json=SINGLE)

    assert res.status_code == 200
    assert store.get("foo") == Person("foo@example.com", "Mr Foo")


async def test_put_replaces_whole_person(client, store):
    store.put("foo", Person("old@example.com", "Old Name"))

    res = await client.put(
        "/resource/foo", json={"email": "new@example.com", "name": "New Name"},
    )

    assert res.status_code == 200
    assert store.get("foo") == Person("new@example.com", "New Name")
    assert store.size == 1


async def test_put_then_get_round_trip(client):
    await client.put("/resource/foo", json=SINGLE)

    res = await client.get("/resource/foo")

    assert res.json() == SINGLE


async def test_put_unparsable_json_is_rejected(client, store):
    res = await client.put(
        "/resource/foo",
        content=b'{"email": "foo@example.com", "name":',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert store.get("foo") is None


async def test_put_missing_field_is_rejected(client, store):
    res = await client.put("/resource/foo", json={"email": "foo@example.com"})

    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.name" in fields
    assert store.get("foo") is None


async def test_put_wrong_type_is_rejected(client, store):
    res = await client.put("/resource/foo", json={"email": 42, "name": "Mr Foo"})

    assert res.status_code == 400
    assert store.get("foo") is None


async def test_rejected_put_keeps_previous_person(client, store):
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    res = await client.put("/resource/foo", json={"name": "Half A Person"})

    assert res.status_code == 400
    assert store.get("foo") == Person("foo@example.com", "Mr Foo")


async def test_delete(client, store):
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    res = await client.delete("/resource/foo")

    assert res.status_code == 200
    assert store.get("foo") is None


async def test_delete_missing(client, store):
    res = await client.delete("/resource/foo")

    assert res.status_code == 200
    assert store.get("foo") is None


async def test_delete_twice_both_succeed(client, store):
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    first = await client.delete("/resource/foo")
    second = await client.delete("/resource/foo")

    assert first.status_code == second.status_code == 200
    assert store.get_all() == {}


async def test_post_not_allowed(client, store):
    res = await client.post("/resource/foo", json=SINGLE)

    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert store.get("foo") is None


async def test_post_not_allowed_leaves_existing_person(client, store):
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    res = await client.post(
        "/resource/foo", json={"email": "x@example.com", "name": "X"},
    )

    assert res.status_code == 405
    assert store.get("foo") == Person("foo@example.com", "Mr Foo")


async def test_post_rejected_before_body_is_parsed(client, store):
    res = await client.post(
        "/resource/foo",
        content=b"this is not json",
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 405
    assert store.get("foo") is None


async def test_method_not_allowed_lists_supported_methods(client):
    res = await client.post("/resource/foo", json=SINGLE)

    allowed = {m.strip() for m in res.headers["allow"].split(",")}
    assert allowed == {"GET", "PUT", "DELETE"}


async def test_unknown_path_returns_404_envelope(client):
    res = await client.get("/v2/nothing-here")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_default_prefix_is_resource(store, monkeypatch):
    monkeypatch.delenv("RESOURCE_PREFIX", raising=False)
    app = create_app(Settings(), store)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/resource")

    assert res.status_code == 200
    assert res.json() == []


async def test_resource_prefix_is_configurable(store):
    app = create_app(Settings(resource_prefix="v1/person/"), store)
    store.put("foo", Person("foo@example.com", "Mr Foo"))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        listed = await c.get("/v1/person")
        single = await c.get("/v1/person/foo")
        old = await c.get("/resource/foo")

    assert listed.status_code == 200
    assert single.json() == SINGLE
    assert old.status_code == 404


async def test_collection_allows_only_get(client, store):
    res = await client.post("/resource", json=SINGLE)

    assert res.status_code == 405
    assert res.headers["allow"] == "GET"
    assert res.json()["error"]["path"] == "/resource"
    assert store.size == 0


async def test_allow_header_follows_configured_prefix(store):
    app = create_app(Settings(resource_prefix="/v1/person"), store)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/v1/person/foo", json=SINGLE)

    assert res.status_code == 405
    allowed = {m.strip() for m in res.headers["allow"].split(",")}
    assert allowed == {"GET", "PUT", "DELETE"}
