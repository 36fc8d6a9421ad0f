"""Diagnostics Routes — reset restores the seed, the error probe always fails."""

import pytest


async def test_restart_after_mutations_restores_seed(client, seeded_ids):
    before = (await client.get("/users")).json()["users"]

    await client.post("/users", json={"name": "Amy", "age": 30})
    await client.delete(f"/users/{seeded_ids[0]}")
    await client.patch(f"/users/{seeded_ids[1]}", json={"age": 99})

    res = await client.get("/restart")
    assert res.status_code == 200
    assert res.json() == {"message": "Done"}

    after = (await client.get("/users")).json()["users"]
    assert after == before


async def test_restart_then_create_does_not_leak_into_next_reset(client):
    await client.get("/restart")
    await client.post("/users", json={"name": "Amy", "age": 30})
    await client.get("/restart")
    names = [u["name"] for u in (await client.get("/users")).json()["users"]]
    assert names == ["John", "Jane", "Joe", "Jack"]


@pytest.mark.parametrize("query", ["", "?force=false", "?anything=1"])
async def test_error_probe_always_500(client, query):
    res = await client.get(f"/error{query}")
    assert res.status_code == 500
    assert res.json()["message"] == "error"
    assert res.json()["error"]["code"] == "ARTIFICIAL_ERROR"


async def test_diagnostics_not_rate_limited(client):
    res = await client.get("/restart")
    assert "ratelimit-limit" not in res.headers
