from __future__ import annotations

from fastapi.testclient import TestClient

from findw.models.user import User


def test_get_creates_defaults(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()

    response = client.get("/settings", headers=headers)

    assert response.status_code == 200
    assert response.json()["search_interval_minutes"] == 60
    assert response.json()["updated_at"]


def test_patch_updates_interval(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()

    patched = client.patch("/settings", json={"search_interval_minutes": 45}, headers=headers)

    assert patched.status_code == 200
    assert patched.json()["search_interval_minutes"] == 45
    assert client.get("/settings", headers=headers).json()["search_interval_minutes"] == 45


def test_patch_validates_interval(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()

    missing = client.patch("/settings", json={}, headers=headers)
    too_low = client.patch("/settings", json={"search_interval_minutes": 29}, headers=headers)

    assert missing.status_code == too_low.status_code == 400
    assert missing.json()["message"] == "search_interval_minutes is required"
    assert too_low.json()["message"] == "search_interval_minutes must be at least 30"


def test_settings_are_per_user(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    alice = auth_headers("alice@x.test")
    bob = auth_headers("bob@x.test")

    client.patch("/settings", json={"search_interval_minutes": 120}, headers=alice)

    assert client.get("/settings", headers=bob).json()["search_interval_minutes"] == 60


def test_settings_reject_token_of_deleted_user(client: TestClient, auth_headers, db) -> None:  # noqa: ANN001
    headers = auth_headers()
    db.query(User).delete()
    db.commit()

    read = client.get("/settings", headers=headers)
    patched = client.patch("/settings", json={"search_interval_minutes": 45}, headers=headers)

    assert read.status_code == patched.status_code == 401
    assert read.json()["error"] == "UNAUTHORIZED"
