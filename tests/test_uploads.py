import re

import pytest
from fastapi import HTTPException

from gemstore.modules.uploads.service import UploadService, build_upload_path
from gemstore.modules.uploads.storage import SupabaseMediaStorage, get_media_storage

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 200


def upload(client, headers, name="stone.png", content=PNG, content_type="image/png", folder=None):
    data = {"folder": folder} if folder else {}
    return client.post(
        "/api/upload",
        files={"file": (name, content, content_type)},
        data=data,
        headers=headers,
    )


def test_build_upload_path():
    path = build_upload_path("products", "owner@example.com", "png", now_ms=1700000000000)
    assert re.match(r"^products/1700000000000-[a-z0-9]{10}-owner_at_example\.com\.png$", path)


def test_upload_image(client, fake_db, admin_headers):
    response = upload(client, admin_headers, folder="products")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["path"].startswith("products/")
    assert body["url"] == f"https://storage.test/product-images/{body['path']}"
    assert "uploadTime" in body

    stored = fake_db.uploads[0]
    assert stored["options"]["content-type"] == "image/png"
    assert stored["options"]["cache-control"] == "3600"
    assert stored["options"]["upsert"] == "false"


def test_upload_defaults_to_hero_folder(client, admin_headers):
    assert upload(client, admin_headers).json()["path"].startswith("hero/")


def test_upload_requires_admin(client):
    assert upload(client, {}).status_code == 401


def test_upload_rejects_bad_files(client, admin_headers):
    wrong_type = upload(client, admin_headers, name="notes.txt", content_type="text/plain")
    assert wrong_type.status_code == 400
    assert wrong_type.json()["detail"] == "Only JPG, PNG, WebP, GIF images and MP4 videos are allowed"

    wrong_extension = upload(client, admin_headers, name="stone.bmp")
    assert wrong_extension.json()["detail"] == "Invalid file extension"

    tiny = upload(client, admin_headers, content=b"\x89PNG")
    assert tiny.status_code == 400
    assert tiny.json()["detail"] == "File appears to be corrupt or too small"


def test_size_limits():
    service = UploadService(storage=None)
    with pytest.raises(HTTPException) as exc:
        service.validate("big.png", "image/png", 5 * 1024 * 1024 + 1)
    assert exc.value.detail == "File size must be less than 5MB"

    assert service.validate("clip.MP4", "video/mp4", 50 * 1024 * 1024) == "mp4"


def test_storage_size_error_maps_to_413(client, fake_db, admin_headers):
    fake_db.storage_error = Exception("413 Payload too large")
    response = upload(client, admin_headers)
    assert response.status_code == 413
    assert response.json()["detail"] == "File too large for storage"


def test_storage_failure_maps_to_500(client, fake_db, admin_headers):
    fake_db.storage_error = Exception("bucket not found")
    response = upload(client, admin_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Upload failed"


def test_media_storage_defaults_to_supabase(fake_db):
    assert isinstance(get_media_storage(fake_db), SupabaseMediaStorage)


def test_upload_rejects_unsafe_folder(client, fake_db, admin_headers):
    for folder in ("../secrets", "products/nested", "Hero"):
        response = upload(client, admin_headers, folder=folder)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid folder"
    assert fake_db.uploads == []


def test_delete_upload(client, fake_db, admin_headers):
    path = upload(client, admin_headers, folder="products").json()["path"]

    response = client.delete(f"/api/upload?path={path}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "File deleted successfully", "path": path}
    assert fake_db.removed == [f"product-images/{path}"]


def test_delete_upload_validates_path(client, fake_db, admin_headers):
    assert client.delete("/api/upload", headers=admin_headers).status_code == 400
    for path in ("../products/x.png", "products/../../x.png", "/hero/x.png", "x.png"):
        response = client.delete("/api/upload", params={"path": path}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid file path"
    assert fake_db.removed == []


def test_delete_upload_storage_failure(client, fake_db, admin_headers):
    fake_db.storage_error = Exception("bucket not found")
    response = client.delete("/api/upload?path=hero/1-abc.png", headers=admin_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to delete file"


def test_delete_upload_requires_admin(client):
    assert client.delete("/api/upload?path=hero/1-abc.png").status_code == 401
