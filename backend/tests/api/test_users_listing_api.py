"""User listing endpoint — query defaults, envelope keys, direction fallback, bad params."""

import pytest


async def _seed(client, names):
    for name in names:
        res = await client.post("/api/v1/users", json={
            "username": name, "email": f"{name}@x.com", "password": "pw",
        })
        assert res.status_code == 201


async def test_list_defaults(client):
    await _seed(client, ["alice", "bob"])
    res = await client.get("/api/v1/users")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {
        "content", "currentPage", "totalItems", "totalPages",
        "size", "first", "last", "sort", "direction",
    }
    assert body["currentPage"] == 0
    assert body["size"] == 10
    assert body["sort"] == "id"
    assert body["direction"] == "asc"
    assert body["totalItems"] == 2
    assert body["totalPages"] == 1
    assert body["first"] is True and body["last"] is True
    assert [u["username"] for u in body["content"]] == ["alice", "bob"]


async def test_list_bogus_direction_sorts_ascending(client):
    await _seed(client, ["carol", "alice", "bob"])
    res = await client.get(
        "/api/v1/users", params={"page": 0, "size": 10, "sortBy": "id", "direction": "bogus"},
    )
    assert res.status_code == 200
    body = res.json()
    ids = [u["id"] for u in body["content"]]
    assert ids == sorted(ids)
    assert body["direction"] == "bogus"


async def test_list_sorted_descending_by_username(client):
    await _seed(client, ["carol", "alice", "bob"])
    res = await client.get(
        "/api/v1/users", params={"sortBy": "username", "direction": "DESC"},
    )
    assert [u["username"] for u in res.json()["content"]] == ["carol", "bob", "alice"]


async def test_list_second_page(client):
    await _seed(client, ["u1", "u2", "u3"])
    res = await client.get("/api/v1/users", params={"page": 1, "size": 2})
    body = res.json()
    assert [u["username"] for u in body["content"]] == ["u3"]
    assert body["totalPages"] == 2
    assert body["first"] is False
    assert body["last"] is True


async def test_list_negative_page_returns_400(client):
    res = await client.get("/api/v1/users", params={"page": -1})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation Error"
    assert body["validationErrors"][0]["field"] == "page"


async def test_list_zero_size_returns_400(client):
    res = await client.get("/api/v1/users", params={"size": 0})
    assert res.status_code == 400


@pytest.mark.parametrize("param", ["page", "size"])
async def test_list_oversized_paging_returns_400(client, param):
    res = await client.get("/api/v1/users", params={param: 10**18})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation Error"
    assert body["validationErrors"][0]["field"] == param


async def test_list_largest_page_is_empty(client):
    await _seed(client, ["alice"])
    res = await client.get("/api/v1/users", params={"page": 2**31 - 1, "size": 2**31 - 1})
    assert res.status_code == 200
    body = res.json()
    assert body["content"] == []
    assert body["totalItems"] == 1


async def test_list_non_numeric_size_returns_400(client):
    res = await client.get("/api/v1/users", params={"size": "ten"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid parameter type for: size"


async def test_list_unknown_sort_field_is_internal_error(client):
    await _seed(client, ["alice"])
    res = await client.get("/api/v1/users", params={"sortBy": "shoeSize"})
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal Server Error"
    assert "shoeSize" not in body["message"]
