from tripshare.core.ids import new_object_id


def _add_point(client, headers, trip_id):
    res = client.post(f"/api/points/{trip_id}", json={"coordX": 1, "coordY": 2}, headers=headers)
    return res.json()["points"][0]["_id"]


def test_add_and_list_marks(client, alice, trip):
    headers, user_id = alice
    point_id = _add_point(client, headers, trip["_id"])

    response = client.post(
        f"/api/marks/{point_id}",
        json={"title": "Viewpoint", "description": "Sunset spot"},
        headers=headers,
    )
    assert response.status_code == 200
    mark = response.json()
    assert mark["point"] == point_id
    assert mark["user"] == user_id
    assert mark["photos"] is None

    second = client.post(f"/api/marks/{point_id}", json={"title": "Cafe"}, headers=headers).json()
    marks = client.get(f"/api/marks/{point_id}", headers=headers).json()
    assert [m["_id"] for m in marks] == [second["_id"], mark["_id"]]


def test_add_mark_requires_title(client, alice, trip):
    headers, _ = alice
    point_id = _add_point(client, headers, trip["_id"])
    response = client.post(f"/api/marks/{point_id}", json={}, headers=headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["msg"] == "Title is required"


def test_add_mark_unknown_point(client, alice):
    response = client.post(f"/api/marks/{new_object_id()}", json={"title": "x"}, headers=alice[0])
    assert response.status_code == 404
    assert response.json() == {"msg": "Point not found"}


def test_delete_mark(client, alice, bob, trip):
    headers, _ = alice
    point_id = _add_point(client, headers, trip["_id"])
    mark = client.post(f"/api/marks/{point_id}", json={"title": "x"}, headers=headers).json()

    forbidden = client.delete(f"/api/marks/{mark['_id']}", headers=bob[0])
    assert forbidden.status_code == 401

    response = client.delete(f"/api/marks/{mark['_id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"msg": "Mark removed"}
    assert client.get(f"/api/marks/{point_id}", headers=headers).json() == []

    missing = client.delete(f"/api/marks/{mark['_id']}", headers=headers)
    assert missing.status_code == 404
