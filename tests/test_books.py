"""
Tests for the books API (SQL-backed).
"""

import datetime as dt

import pytest

BOOK = {"title": "Dune", "author": "Frank Herbert", "published_year": 1965}


def _create(client, headers, **overrides):
    resp = client.post("/api/books", json={**BOOK, **overrides}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestCreate:
    def test_requires_login(self, client) -> None:
        resp = client.post("/api/books", json=BOOK)
        assert resp.status_code == 401

    def test_success(self, client, auth_headers) -> None:
        book = _create(client, auth_headers(client))
        assert book["title"] == "Dune"
        assert book["owner_id"] == 1

    def test_strings_are_trimmed(self, client, auth_headers) -> None:
        book = _create(client, auth_headers(client), title="  Dune  ")
        assert book["title"] == "Dune"

    def test_missing_required_fields(self, client, auth_headers) -> None:
        resp = client.post("/api/books", json={}, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json() == {
            "success": False,
            "status": "fail",
            "message": "Invalid input data: title is required. author is required",
        }

    def test_year_out_of_range(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        resp = client.post("/api/books", json={**BOOK, "published_year": 999}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid input data: published_year must be at least 1000"

        next_year = dt.date.today().year + 1
        resp = client.post("/api/books", json={**BOOK, "published_year": next_year}, headers=headers)
        assert resp.status_code == 400
        assert "must not be later than" in resp.json()["message"]

    def test_wrong_type(self, client, auth_headers) -> None:
        resp = client.post("/api/books", json={**BOOK, "published_year": "soon"}, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("Invalid input data: published_year: ")

    def test_development_shows_detail(self, dev_client, auth_headers) -> None:
        resp = dev_client.post("/api/books", json={}, headers=auth_headers(dev_client))
        body = resp.json()
        assert resp.status_code == 400
        assert body["stack"]
        assert body["error"]["is_operational"] is True


class TestRead:
    def test_list(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        _create(client, headers)
        _create(client, headers, title="Emma", author="Jane Austen", published_year=1815)
        resp = client.get("/api/books")
        assert resp.status_code == 200
        assert [b["title"] for b in resp.json()["data"]] == ["Dune", "Emma"]

    def test_get(self, client, auth_headers) -> None:
        book = _create(client, auth_headers(client))
        resp = client.get(f"/api/books/{book['id']}")
        assert resp.status_code == 200
        assert resp.json()["data"]["author"] == "Frank Herbert"

    @pytest.mark.parametrize(
        "raw, shown",
        [
            ("abc", "abc"),
            ("-1", "-1"),
            ("0", "0"),
            ("1.5", "1.5"),
            ("%C2%B2", "²"),
            ("9" * 25, "9" * 25),
        ],
    )
    def test_malformed_id(self, client, raw, shown) -> None:
        resp = client.get(f"/api/books/{raw}")
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "status": "fail", "message": f"Invalid id: {shown}."}

    def test_largest_id_is_looked_up(self, client) -> None:
        resp = client.get(f"/api/books/{2**63 - 1}")
        assert resp.status_code == 404

    def test_not_found(self, client) -> None:
        resp = client.get("/api/books/999")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Book not found"


class TestUpdateDelete:
    def test_partial_update(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        book = _create(client, headers)
        resp = client.put(f"/api/books/{book['id']}", json={"title": "Dune Messiah"}, headers=headers)
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["title"] == "Dune Messiah"
        assert data["author"] == "Frank Herbert"
        assert data["updated_at"] is not None

    def test_update_with_blank_title(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        book = _create(client, headers)
        resp = client.put(f"/api/books/{book['id']}", json={"title": "   "}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid input data: title is required"

    def test_update_missing(self, client, auth_headers) -> None:
        resp = client.put("/api/books/42", json={"title": "x"}, headers=auth_headers(client))
        assert resp.status_code == 404

    def test_delete(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        book = _create(client, headers)
        resp = client.delete(f"/api/books/{book['id']}", headers=headers)
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "Book deleted successfully"}
        assert client.get(f"/api/books/{book['id']}").status_code == 404

    def test_delete_requires_login(self, client) -> None:
        assert client.delete("/api/books/1").status_code == 401
