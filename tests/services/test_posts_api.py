from __future__ import annotations

from typing import Any, Dict

from tagstore.database.repos.post_repo import PostRepo
from tagstore.domain.errors import ResourceUnavailable, StorageFailure


def _create_post(api_client, title: str, tags=(), body: str = "body", created_by=None) -> Dict[str, Any]:
    r = api_client.post(
        "/api/posts",
        json={"created_by": created_by, "title": title, "body": body, "tags": list(tags)},
    )
    assert r.status_code == 201, r.text
    return r.json()


def test_create_user_and_post(api_client):
    r = api_client.post("/api/users", json={"username": "gina", "first_name": "Gina", "last_name": "Lee"})
    assert r.status_code == 201, r.text
    user = r.json()
    assert user["username"] == "gina" and user["last_name"] == "Lee"

    created = _create_post(api_client, "First post", ["news", "tech"], created_by=user["id"])
    assert created["post"]["created_by"] == user["id"]
    assert created["post"]["title"] == "First post"
    assert sorted(created["tags"]) == ["news", "tech"]

    r = api_client.get(f"/api/posts/{created['post']['id']}")
    assert r.status_code == 200, r.text
    assert r.json() == created


def test_list_posts_shape_and_meta(api_client):
    for i in range(12):
        _create_post(api_client, f"Entry {i}", [f"k{i % 2}"])

    r = api_client.get("/api/posts", params={"page": 2, "limit": 5})
    assert r.status_code == 200, r.text
    data = r.json()
    assert set(data) == {"records", "meta"}
    assert data["meta"] == {
        "current_page": 2, "per_page": 5, "from": 6, "to": 10, "total_pages": 3, "total_docs": 12,
    }
    assert [rec["post"]["title"] for rec in data["records"]] == [f"Entry {i}" for i in range(5, 10)]
    assert all(isinstance(rec["tags"], list) for rec in data["records"])


def test_list_posts_search_and_normalization(api_client):
    _create_post(api_client, "Hello World", body="unrelated")
    _create_post(api_client, "Something else")

    r = api_client.get("/api/posts", params={"search": "HELLO", "page": 0, "limit": 0})
    assert r.status_code == 200, r.text
    data = r.json()
    assert [rec["post"]["title"] for rec in data["records"]] == ["Hello World"]
    assert data["meta"]["current_page"] == 1
    assert data["meta"]["per_page"] == 10

    r = api_client.get("/api/posts", params={"search": "xyz"})
    assert r.json()["meta"]["total_docs"] == 0
    assert r.json()["records"] == []


def test_validation_errors(api_client):
    r = api_client.post("/api/posts", json={"title": "", "body": "b", "tags": []})
    assert r.status_code == 422

    r = api_client.post("/api/users", json={"username": "", "first_name": "X"})
    assert r.status_code == 422


def test_missing_post_is_404(api_client):
    r = api_client.get("/api/posts/999999")
    assert r.status_code == 404


def test_storage_failures_are_opaque(api_client, service, monkeypatch):
    def _fail(*args, **kwargs):
        raise StorageFailure("list_posts")

    monkeypatch.setattr(service, "list_posts", _fail)
    r = api_client.get("/api/posts")
    assert r.status_code == 500
    assert r.json() == {"detail": "Storage failure"}

    def _exhausted(*args, **kwargs):
        raise ResourceUnavailable("list_posts")

    monkeypatch.setattr(service, "list_posts", _exhausted)
    r = api_client.get("/api/posts")
    assert r.status_code == 503
    assert r.headers.get("retry-after") == "1"


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200, r.text
    assert r.json()["db"] is True


def test_huge_page_number_returns_empty_page(api_client):
    _create_post(api_client, "Lonely")

    r = api_client.get("/api/posts", params={"page": "10000000000000000000", "limit": 10})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["records"] == []
    assert data["meta"]["to"] == data["meta"]["from"] - 1
    assert (data["meta"]["total_pages"], data["meta"]["total_docs"]) == (1, 1)


def test_rows_stored_verbatim_are_readable(api_client, session_factory):
    # the repository keeps empty titles/bodies; the read side must render them
    with session_factory() as db, db.begin():
        post_id = PostRepo(db).create(None, "", "").id

    r = api_client.get("/api/posts")
    assert r.status_code == 200, r.text
    assert [rec["post"]["title"] for rec in r.json()["records"]] == [""]

    r = api_client.get(f"/api/posts/{post_id}")
    assert r.status_code == 200, r.text
    assert r.json() == {"post": {"id": post_id, "created_by": None, "title": "", "body": ""}, "tags": []}
