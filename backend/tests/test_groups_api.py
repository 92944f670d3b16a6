from __future__ import annotations

from fastapi.testclient import TestClient


def test_save_group_upserts_by_group_id(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()

    first = client.post("/groups", json={"group_id": 10, "group_name": "Old"}, headers=headers)
    second = client.post(
        "/groups",
        json={"group_id": 10, "group_name": "New", "members_count": 5, "screen_name": " club10 "},
        headers=headers,
    )

    assert first.status_code == second.status_code == 201
    groups = client.get("/groups", headers=headers).json()
    assert len(groups) == 1
    assert groups[0]["group_name"] == "New"
    assert groups[0]["members_count"] == 5
    assert groups[0]["screen_name"] == "club10"


def test_groups_are_listed_by_group_id_desc(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()
    for group_id in (5, 20, 12):
        client.post("/groups", json={"group_id": group_id}, headers=headers)

    listed = [item["group_id"] for item in client.get("/groups", headers=headers).json()]

    assert listed == [20, 12, 5]


def test_group_id_must_be_positive(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    headers = auth_headers()

    saved = client.post("/groups", json={"group_id": 0}, headers=headers)
    deleted = client.delete("/groups/-3", headers=headers)

    assert saved.status_code == deleted.status_code == 400
    assert saved.json()["message"] == "group_id must be greater than 0"


def test_delete_group_is_scoped_to_owner(client: TestClient, auth_headers) -> None:  # noqa: ANN001
    alice = auth_headers("alice@x.test")
    bob = auth_headers("bob@x.test")
    client.post("/groups", json={"group_id": 7}, headers=alice)

    assert client.delete("/groups/7", headers=bob).status_code == 404
    assert client.delete("/groups/7", headers=alice).status_code == 204
    assert client.delete("/groups/7", headers=alice).status_code == 404
