"""
Tests for the in-memory posts API.
"""


def _post(client, headers, **overrides):
    payload = {"title": "Hello", "content": "First post", **overrides}
    resp = client.post("/api/posts", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestPosts:
    def test_create_requires_login(self, client) -> None:
        resp = client.post("/api/posts", json={"title": "x", "content": "y"})
        assert resp.status_code == 401

    def test_create_and_read(self, client, auth_headers) -> None:
        post = _post(client, auth_headers(client))
        assert post["author_id"] == 1
        assert client.get(f"/api/posts/{post['id']}").json()["data"]["title"] == "Hello"
        assert len(client.get("/api/posts").json()["data"]) == 1

    def test_validation(self, client, auth_headers) -> None:
        resp = client.post("/api/posts", json={"title": "only title"}, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid input data: content is required"

    def test_only_author_can_delete(self, client, auth_headers) -> None:
        alice = auth_headers(client)
        bob = auth_headers(client, user_name="bob", email="bob@example.com")
        post = _post(client, alice)

        resp = client.delete(f"/api/posts/{post['id']}", headers=bob)
        assert resp.status_code == 403
        assert resp.json()["status"] == "fail"

        resp = client.delete(f"/api/posts/{post['id']}", headers=alice)
        assert resp.status_code == 200
        assert client.get(f"/api/posts/{post['id']}").status_code == 404

    def test_malformed_id(self, client) -> None:
        resp = client.get("/api/posts/abc")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid id: abc."
