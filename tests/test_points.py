from unittest.mock import patch

from tripshare.core.ids import new_object_id
from tripshare.models.sql import Point


def test_add_point(client, database, alice, trip):
    headers, user_id = alice
    response = client.post(
        f"/api/points/{trip['_id']}", json={"coordX": 12.5, "coordY": -3}, headers=headers
    )
    assert response.status_code == 200
    points = response.json()["points"]
    assert len(points) == 1
    assert points[0]["user"] == user_id

    # The reference and the point document are both stored
    stored = client.get(f"/api/trips/{trip['_id']}", headers=headers).json()["points"]
    assert stored == points
    with database.session() as db:
        point = db.get(Point, points[0]["_id"])
        assert (point.coord_x, point.coord_y) == (12.5, -3.0)


def test_add_point_newest_first(client, alice, trip):
    headers, _ = alice
    url = f"/api/points/{trip['_id']}"
    first = client.post(url, json={"coordX": 1, "coordY": 1}, headers=headers).json()["points"][0]
    points = client.post(url, json={"coordX": 2, "coordY": 2}, headers=headers).json()["points"]
    assert len(points) == 2
    assert points[1]["_id"] == first["_id"]


def test_add_point_accepts_zero(client, alice, trip):
    headers, _ = alice
    response = client.post(
        f"/api/points/{trip['_id']}", json={"coordX": 0, "coordY": 0}, headers=headers
    )
    assert response.status_code == 200


def test_add_point_requires_coordinates(client, alice, trip):
    headers, _ = alice
    response = client.post(f"/api/points/{trip['_id']}", json={"coordX": 1}, headers=headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["msg"] == "Coordinate Y is required"


def test_add_point_missing_trip(client, alice):
    headers, _ = alice
    response = client.post(
        f"/api/points/{new_object_id()}", json={"coordX": 1, "coordY": 2}, headers=headers
    )
    assert response.status_code == 404
    assert response.json() == {"msg": "Trip not found"}


def test_add_point_legacy_mode_does_not_persist(client, database, alice, trip):
    headers, _ = alice
    with patch("tripshare.core.config.PERSIST_NEW_POINTS", False):
        response = client.post(
            f"/api/points/{trip['_id']}", json={"coordX": 1, "coordY": 2}, headers=headers
        )

    assert response.status_code == 200
    assert len(response.json()["points"]) == 1
    assert client.get(f"/api/trips/{trip['_id']}", headers=headers).json()["points"] == []
    with database.session() as db:
        assert db.query(Point).count() == 0


def test_remove_point_targets_point_id(client, alice, trip):
    headers, _ = alice
    url = f"/api/points/{trip['_id']}"
    older = client.post(url, json={"coordX": 1, "coordY": 1}, headers=headers).json()["points"][0]
    newer = client.post(url, json={"coordX": 2, "coordY": 2}, headers=headers).json()["points"][0]

    response = client.delete(f"{url}/{older['_id']}", headers=headers)
    assert response.status_code == 200
    assert [p["_id"] for p in response.json()] == [newer["_id"]]


def test_remove_point_missing(client, alice, trip):
    headers, _ = alice
    response = client.delete(f"/api/points/{trip['_id']}/{new_object_id()}", headers=headers)
    assert response.status_code == 404
    assert response.json() == {"msg": "Point doesn't exist"}


def test_remove_point_by_other_user(client, alice, bob, trip):
    url = f"/api/points/{trip['_id']}"
    point = client.post(url, json={"coordX": 1, "coordY": 1}, headers=alice[0]).json()["points"][0]

    response = client.delete(f"{url}/{point['_id']}", headers=bob[0])
    assert response.status_code == 401
    assert response.json() == {"msg": "User not authorized"}
