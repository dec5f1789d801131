"""
HTTP tests for the post endpoints.
"""
from datetime import datetime

import pytest

from blog_api.app.services import post_service
from tests.conftest import PNG_BYTES


def _created_at(post):
    return datetime.fromisoformat(post["createdAt"].replace("Z", "+00:00"))


def _create(client, headers, **fields):
    data = {"title": "A", "content": "B", "category": "tech"}
    data.update(fields)
    response = client.post("/api/posts", data=data, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_list_returns_seeded_posts_newest_first(client):
    response = client.get("/api/posts")
    assert response.status_code == 200
    body = response.json()
    assert body["currentPage"] == 1
    assert body["totalPages"] == 1
    assert body["totalPosts"] == 2
    assert [p["id"] for p in body["posts"]] == [1, 2]
    assert body["posts"][0]["title"] == "The Future of Web Development"
    assert body["posts"][0]["commentsEnabled"] is True
    assert body["posts"][0]["coverImage"] is None


def test_public_list_hides_drafts_admin_list_shows_them(client, admin_headers):
    draft = _create(client, admin_headers, title="Draft", published="false")
    assert draft["published"] is False

    public = client.get("/api/posts").json()
    assert draft["id"] not in [p["id"] for p in public["posts"]]
    assert all(p["published"] for p in public["posts"])

    admin = client.get("/api/posts", params={"admin": "1"}).json()
    assert draft["id"] in [p["id"] for p in admin["posts"]]
    assert admin["totalPosts"] == 3


def test_list_is_sorted_by_created_at_descending(client, admin_headers):
    _create(client, admin_headers, title="first")
    _create(client, admin_headers, title="second")
    posts = client.get("/api/posts", params={"admin": "1"}).json()["posts"]
    for newer, older in zip(posts, posts[1:]):
        assert _created_at(newer) >= _created_at(older)
    assert posts[0]["title"] == "second"


def test_get_post(client):
    response = client.get("/api/posts/2")
    assert response.status_code == 200
    assert response.json()["category"] == "travel"


def test_get_missing_post_returns_404(client):
    response = client.get("/api/posts/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}


def test_create_then_update_scenario(client, admin_headers):
    created = _create(client, admin_headers)
    assert created["id"] == 3
    assert created["published"] is True
    assert created["commentsEnabled"] is True
    assert created["tags"] == []
    assert created["views"] == 0
    assert created["comments"] == 0
    assert created["createdAt"] == created["updatedAt"]

    response = client.put("/api/posts/3", data={"title": "A2"}, headers=admin_headers)
    assert response.status_code == 200

    fetched = client.get("/api/posts/3").json()
    assert fetched["title"] == "A2"
    assert fetched["content"] == "B"
    assert fetched["createdAt"] == created["createdAt"]


def test_create_ids_increase(client, admin_headers):
    first = _create(client, admin_headers)
    second = _create(client, admin_headers)
    assert second["id"] > first["id"] > 2


def test_create_normalizes_tags_and_flags(client, admin_headers):
    post = _create(client, admin_headers, tags=" python, web ,, api ", commentsEnabled="false")
    assert post["tags"] == ["python", "web", "api"]
    assert post["commentsEnabled"] is False
    assert post["published"] is True


def test_create_accepts_json(client, admin_headers):
    response = client.post(
        "/api/posts",
        json={"title": "JSON", "content": "body", "tags": ["x", " y "], "published": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    post = response.json()
    assert post["tags"] == ["x", "y"]
    assert post["published"] is False


def test_create_requires_token(client):
    response = client.post("/api/posts", data={"title": "A"})
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}
    assert client.get("/api/posts", params={"admin": "1"}).json()["totalPosts"] == 2


def test_title_only_update_keeps_other_fields(client, admin_headers):
    before = client.get("/api/posts/1").json()
    response = client.put(
        "/api/posts/1",
        data={"title": "Renamed", "content": "", "tags": ""},
        headers=admin_headers,
    )
    assert response.status_code == 200
    after = response.json()
    assert after["title"] == "Renamed"
    assert after["content"] == before["content"]
    assert after["tags"] == before["tags"]
    assert after["coverImage"] == before["coverImage"]
    assert after["createdAt"] == before["createdAt"]
    assert after["updatedAt"] != before["updatedAt"]


def test_update_can_unpublish(client, admin_headers):
    response = client.put("/api/posts/2", data={"published": "false"}, headers=admin_headers)
    assert response.json()["published"] is False
    assert [p["id"] for p in client.get("/api/posts").json()["posts"]] == [1]


def test_update_missing_post_returns_404(client, admin_headers):
    response = client.put("/api/posts/42", data={"title": "x"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}


def test_create_with_cover_image(client, admin_headers, upload_dir):
    response = client.post(
        "/api/posts",
        data={"title": "With image"},
        files={"coverImage": ("cover.png", PNG_BYTES, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 200
    cover = response.json()["coverImage"]
    assert cover.startswith("/uploads/")
    assert cover.endswith("-cover.png")
    stored = upload_dir / cover.rsplit("/", 1)[1]
    assert stored.read_bytes() == PNG_BYTES

    served = client.get(cover)
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_oversized_image_creates_no_post(client, admin_headers, upload_dir):
    big = b"\x00" * (6 * 1024 * 1024)
    response = client.post(
        "/api/posts",
        data={"title": "Too big"},
        files={"coverImage": ("big.png", big, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "File too large"}
    assert client.get("/api/posts", params={"admin": "1"}).json()["totalPosts"] == 2
    assert list(upload_dir.iterdir()) == []


def test_non_image_upload_is_rejected(client, admin_headers):
    response = client.post(
        "/api/posts",
        data={"title": "Text"},
        files={"coverImage": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Only image files are allowed!"}
    assert client.get("/api/posts", params={"admin": "1"}).json()["totalPosts"] == 2


def test_replacing_image_deletes_previous_file(client, admin_headers, upload_dir):
    created = client.post(
        "/api/posts",
        data={"title": "Img"},
        files={"coverImage": ("one.png", PNG_BYTES, "image/png")},
        headers=admin_headers,
    ).json()
    old_file = upload_dir / created["coverImage"].rsplit("/", 1)[1]
    assert old_file.exists()

    updated = client.put(
        f"/api/posts/{created['id']}",
        files={"coverImage": ("two.png", PNG_BYTES, "image/png")},
        headers=admin_headers,
    ).json()
    assert updated["coverImage"] != created["coverImage"]
    assert updated["title"] == "Img"
    assert not old_file.exists()
    assert (upload_dir / updated["coverImage"].rsplit("/", 1)[1]).exists()


def test_delete_post_removes_image(client, admin_headers, upload_dir):
    created = client.post(
        "/api/posts",
        data={"title": "Doomed"},
        files={"coverImage": ("doomed.png", PNG_BYTES, "image/png")},
        headers=admin_headers,
    ).json()
    stored = upload_dir / created["coverImage"].rsplit("/", 1)[1]

    response = client.delete(f"/api/posts/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert not stored.exists()
    assert client.get(f"/api/posts/{created['id']}").status_code == 404


def test_delete_missing_post_returns_404(client, admin_headers):
    response = client.delete("/api/posts/77", headers=admin_headers)
    assert response.status_code == 404


def test_unexpected_failure_returns_500_and_removes_cover(client, admin_headers, upload_dir, monkeypatch):
    def explode(value):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(post_service, "normalize_tags", explode)
    response = client.post(
        "/api/posts",
        data={"title": "Broken"},
        files={"coverImage": ("broken.png", PNG_BYTES, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create post: disk on fire"}
    assert client.get("/api/posts", params={"admin": "1"}).json()["totalPosts"] == 2
    assert list(upload_dir.iterdir()) == []


@pytest.mark.parametrize("path", ["/api/posts/abc", "/api/posts/1.5", "/api/posts/abc/comments"])
def test_non_integer_post_id_is_not_found(client, path):
    response = client.get(path)
    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}


def test_non_integer_post_id_on_admin_routes_is_not_found(client, admin_headers):
    assert client.put("/api/posts/abc", data={"title": "x"}, headers=admin_headers).status_code == 404
    response = client.delete("/api/posts/abc", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}
