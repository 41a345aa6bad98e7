"""
Tests for image upload.
"""

import os

from app.api.deps import get_upload_usecase
from app.application.uploads.usecase import INVALID_TYPE_MESSAGE, UploadUsecase
from app.infra import storage

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestSingleUpload:
    def test_requires_login(self, client) -> None:
        resp = client.post("/api/upload", files={"image": ("a.png", PNG, "image/png")})
        assert resp.status_code == 401

    def test_success(self, client, auth_headers) -> None:
        resp = client.post(
            "/api/upload",
            files={"image": ("cover.png", PNG, "image/png")},
            headers=auth_headers(client),
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["message"] == "File uploaded successfully!"
        data = body["data"]
        assert data["file_name"].endswith("-cover.png")
        assert data["file_size"] == len(PNG)
        assert data["file_mime_type"] == "image/png"
        assert data["file_url"].endswith(f"/uploads/{data['file_name']}")
        assert os.path.exists(data["file_path"])

        served = client.get(f"/uploads/{data['file_name']}")
        assert served.status_code == 200
        assert served.content == PNG

    def test_invalid_type(self, client, auth_headers) -> None:
        resp = client.post(
            "/api/upload",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=auth_headers(client),
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == INVALID_TYPE_MESSAGE

    def test_no_file(self, client, auth_headers) -> None:
        resp = client.post("/api/upload", data={"other": "x"}, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"] == "No File Uploaded"

    def test_too_large(self, client, auth_headers) -> None:
        client.app.dependency_overrides[get_upload_usecase] = lambda: UploadUsecase(max_bytes=10)
        try:
            resp = client.post(
                "/api/upload",
                files={"image": ("big.png", PNG, "image/png")},
                headers=auth_headers(client),
            )
        finally:
            client.app.dependency_overrides.clear()
        assert resp.status_code == 400
        assert resp.json()["message"] == "File size too large. Max 10 bytes allowed."


class TestMultipleUpload:
    def test_success(self, client, auth_headers) -> None:
        files = [
            ("image", ("a.png", PNG, "image/png")),
            ("image", ("b.gif", b"GIF89a", "image/gif")),
        ]
        resp = client.post("/api/upload/multiple", files=files, headers=auth_headers(client))
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["message"] == "2 files uploaded successfully!"
        assert [d["file_mime_type"] for d in body["data"]] == ["image/png", "image/gif"]

    def test_rejects_whole_batch_on_bad_type(self, client, auth_headers) -> None:
        files = [
            ("image", ("a.png", PNG, "image/png")),
            ("image", ("evil.exe", b"MZ", "application/octet-stream")),
        ]
        resp = client.post("/api/upload/multiple", files=files, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"] == INVALID_TYPE_MESSAGE

    def test_no_files(self, client, auth_headers) -> None:
        resp = client.post("/api/upload/multiple", data={"other": "x"}, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"] == "No files uploaded."

    def test_too_many(self, client, auth_headers) -> None:
        files = [("image", (f"{i}.png", PNG, "image/png")) for i in range(6)]
        resp = client.post("/api/upload/multiple", files=files, headers=auth_headers(client))
        assert resp.status_code == 400
        assert resp.json()["message"] == "Too many files. Max 5 allowed."

    def test_oversized_file_leaves_nothing_on_disk(self, client, auth_headers) -> None:
        """A batch failing the size check on a later file writes none of its files."""
        client.app.dependency_overrides[get_upload_usecase] = lambda: UploadUsecase(max_bytes=10)
        try:
            files = [
                ("image", ("batch-small.gif", b"GIF89a", "image/gif")),
                ("image", ("batch-big.png", PNG, "image/png")),
            ]
            resp = client.post("/api/upload/multiple", files=files, headers=auth_headers(client))
        finally:
            client.app.dependency_overrides.clear()
        assert resp.status_code == 400
        assert resp.json()["message"] == "File size too large. Max 10 bytes allowed."
        stored = os.listdir(storage.upload_dir()) if os.path.isdir(storage.upload_dir()) else []
        assert not [name for name in stored if name.endswith("-batch-small.gif")]
