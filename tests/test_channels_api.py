from tests.conftest import channel_payload
from tests.test_channel_service import BrokenStore
from tv_api.api.channels import get_channel_service
from tv_api.services.channel_service import ChannelService


def test_channel_lifecycle_scenario(client):
    news = {"id": 1, "name": "News", "url": "http://x/1", "enabled": True, "category": ["news"]}

    res = client.post("/channels", json=news)
    assert res.status_code == 201
    assert res.json() == news

    res = client.post("/channels", json=news)
    assert res.status_code == 400
    assert "already exists" in res.json()["detail"]

    res = client.get("/channels/1")
    assert res.status_code == 200
    assert res.json() == news

    res = client.put("/channels/1", json={"enabled": False})
    assert res.status_code == 200
    assert res.json() == {**news, "enabled": False}

    res = client.get("/channels")
    assert res.status_code == 200
    assert all(c["id"] != 1 for c in res.json())

    res = client.delete("/channels/1")
    assert res.status_code == 200
    assert res.json() == {"message": "Channel deleted successfully"}

    res = client.delete("/channels/1")
    assert res.status_code == 404


def test_list_returns_enabled_channels_only(client):
    client.post("/channels", json=channel_payload(1))
    client.post("/channels", json=channel_payload(2, enabled=False))
    client.post("/channels", json=channel_payload(3, logoUrl="http://x/3.png"))

    res = client.get("/channels")

    assert res.status_code == 200
    body = sorted(res.json(), key=lambda c: c["id"])
    assert [c["id"] for c in body] == [1, 3]
    assert body[1]["logoUrl"] == "http://x/3.png"
    assert "logoUrl" not in body[0]


def test_create_defaults_enabled_and_category(client):
    res = client.post("/channels", json={"id": 9, "name": "Music", "url": "http://x/9"})

    assert res.status_code == 201
    assert res.json() == {"id": 9, "name": "Music", "url": "http://x/9", "enabled": True, "category": []}


def test_create_missing_required_field_is_bad_request(client):
    res = client.post("/channels", json={"id": 1, "url": "http://x/1"})

    assert res.status_code == 400
    assert "name" in res.json()["detail"]


def test_create_wrong_type_is_bad_request(client):
    res = client.post("/channels", json=channel_payload("one"))

    assert res.status_code == 400


def test_get_unknown_channel_is_not_found(client):
    res = client.get("/channels/12345")

    assert res.status_code == 404
    assert res.json() == {"detail": "Channel not found"}


def test_non_numeric_path_id_is_bad_request(client):
    assert client.get("/channels/abc").status_code == 400
    assert client.put("/channels/abc", json={"name": "x"}).status_code == 400
    assert client.delete("/channels/abc").status_code == 400


def test_update_keeps_unspecified_fields(client):
    client.post("/channels", json=channel_payload(4, logoUrl="http://x/4.png", category=["kids", "cartoons"]))

    res = client.put("/channels/4", json={"name": "Kids TV"})

    assert res.status_code == 200
    assert res.json() == {
        "id": 4,
        "name": "Kids TV",
        "url": "http://streams.test/4.m3u8",
        "logoUrl": "http://x/4.png",
        "enabled": True,
        "category": ["kids", "cartoons"],
    }


def test_update_can_clear_logo_and_category(client):
    client.post("/channels", json=channel_payload(4, logoUrl="http://x/4.png"))

    res = client.put("/channels/4", json={"logoUrl": None, "category": []})

    assert res.status_code == 200
    assert "logoUrl" not in res.json()
    assert res.json()["category"] == []


def test_update_changing_id_is_rejected(client):
    client.post("/channels", json=channel_payload(1))

    res = client.put("/channels/1", json={"id": 2})

    assert res.status_code == 400
    assert client.get("/channels/1").status_code == 200
    assert client.get("/channels/2").status_code == 404


def test_update_unknown_channel_is_not_found(client):
    res = client.put("/channels/77", json={"name": "Ghost"})

    assert res.status_code == 404


def test_update_null_name_is_bad_request(client):
    client.post("/channels", json=channel_payload(1))

    res = client.put("/channels/1", json={"name": None})

    assert res.status_code == 400
    assert client.get("/channels/1").json()["name"] == "Channel 1"


def test_store_failure_hides_driver_details(app, client):
    app.dependency_overrides[get_channel_service] = lambda: ChannelService(BrokenStore())
    try:
        res = client.get("/channels")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json() == {"detail": "Service temporarily unavailable"}
    assert "db-secret-host" not in res.text


def test_ids_beyond_bigint_range_are_bad_requests(client):
    too_big = 2 ** 63

    assert client.post("/channels", json=channel_payload(too_big)).status_code == 400
    assert client.get(f"/channels/{too_big}").status_code == 400
    assert client.put(f"/channels/{too_big}", json={"name": "x"}).status_code == 400
    assert client.delete(f"/channels/{too_big}").status_code == 400
    assert client.get(f"/channels/{-too_big - 1}").status_code == 400


def test_update_payload_id_beyond_range_is_bad_request(client):
    client.post("/channels", json=channel_payload(1))

    res = client.put("/channels/1", json={"id": 2 ** 63})

    assert res.status_code == 400
    assert client.get("/channels/1").status_code == 200


def test_largest_bigint_id_round_trips(client):
    biggest = 2 ** 63 - 1

    assert client.post("/channels", json=channel_payload(biggest)).status_code == 201
    assert client.get(f"/channels/{biggest}").json()["id"] == biggest
    assert client.delete(f"/channels/{biggest}").status_code == 200
