"""
HTTP tests for comment submission and moderation.
"""


def _submit(client, post_id=1, author="Jane", content="Nice post"):
    return client.post(f"/api/posts/{post_id}/comments", json={"author": author, "content": content})


def test_submitted_comment_is_hidden_until_approved(client, admin_headers):
    response = _submit(client)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Comment submitted for approval"}
    assert client.get("/api/posts/1/comments").json() == []

    pending = client.get("/api/comments", headers=admin_headers).json()
    assert len(pending) == 1
    assert pending[0]["approved"] is False
    assert pending[0]["postId"] == 1

    approved = client.put(f"/api/comments/{pending[0]['id']}/approve", headers=admin_headers)
    assert approved.status_code == 200
    body = approved.json()
    assert body["success"] is True
    assert body["comment"]["approved"] is True

    visible = client.get("/api/posts/1/comments").json()
    assert [c["content"] for c in visible] == ["Nice post"]
    assert client.get("/api/posts/2/comments").json() == []


def test_comment_requires_author_and_content(client, admin_headers):
    response = _submit(client, author="")
    assert response.status_code == 400
    assert response.json() == {"error": "Author and content are required"}
    assert client.post("/api/posts/1/comments", json={"author": "Jane"}).status_code == 400
    assert client.get("/api/comments", headers=admin_headers).json() == []


def test_comment_on_unknown_post_is_accepted(client, admin_headers):
    assert _submit(client, post_id=999).status_code == 200
    assert client.get("/api/comments", headers=admin_headers).json()[0]["postId"] == 999


def test_moderation_requires_admin(client):
    _submit(client)
    assert client.get("/api/comments").status_code == 401
    assert client.put("/api/comments/1/approve").status_code == 401
    assert client.delete("/api/comments/1").status_code == 401


def test_approve_missing_comment_returns_404(client, admin_headers):
    response = client.put("/api/comments/5/approve", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Comment not found"}


def test_delete_comment(client, admin_headers):
    _submit(client, content="first")
    _submit(client, content="second")
    response = client.delete("/api/comments/1", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.delete("/api/comments/1", headers=admin_headers).status_code == 404

    _submit(client, content="third")
    ids = [c["id"] for c in client.get("/api/comments", headers=admin_headers).json()]
    assert ids == [2, 3]


def test_non_integer_comment_id_is_not_found(client, admin_headers):
    for response in (
        client.put("/api/comments/abc/approve", headers=admin_headers),
        client.delete("/api/comments/abc", headers=admin_headers),
    ):
        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}
