def _post_message(client, **overrides):
    payload = {"sender": "guest", "senderName": "Ana", "message": "Is early check-in possible?"}
    payload.update(overrides)
    resp = client.post("/api/messages", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_message_defaults(client):
    message = _post_message(client)
    assert message["isRead"] is False
    assert message["source"] == "direct"


def test_create_message_requires_text_and_sender(client):
    resp = client.post("/api/messages", json={"sender": "robot", "message": ""})
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert fields == {"sender", "message"}


def test_unread_listing(client):
    unread = _post_message(client)
    _post_message(client, sender="host", isRead=True)

    ids = [m["id"] for m in client.get("/api/messages/unread").json()]
    assert ids == [unread["id"]]


def test_mark_read_is_idempotent(client):
    message = _post_message(client)

    first = client.put(f"/api/messages/{message['id']}/read")
    second = client.put(f"/api/messages/{message['id']}/read")

    assert first.status_code == second.status_code == 200
    assert first.json()["isRead"] is True
    assert second.json() == first.json()
    assert client.get("/api/messages/unread").json() == []


def test_mark_read_missing_message_is_404(client):
    resp = client.put("/api/messages/404/read")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Message not found"}


def test_filter_by_booking(client, make_property, make_booking):
    prop = make_property()
    booking = make_booking(prop["id"])
    linked = _post_message(client, bookingId=booking["id"], propertyId=prop["id"])
    _post_message(client, message="Unrelated inquiry")

    by_booking = client.get("/api/messages", params={"bookingId": booking["id"]}).json()
    by_property = client.get("/api/messages", params={"propertyId": prop["id"]}).json()
    assert [m["id"] for m in by_booking] == [linked["id"]]
    assert [m["id"] for m in by_property] == [linked["id"]]
    assert len(client.get("/api/messages").json()) == 2


def test_message_for_unknown_booking_is_404(client):
    resp = client.post("/api/messages", json={"bookingId": 999, "sender": "guest", "message": "Hello?"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Booking not found"}
