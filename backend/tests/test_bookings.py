from conftest import booking_payload


def test_create_booking(client, make_property):
    prop = make_property()
    resp = client.post("/api/bookings", json=booking_payload(prop["id"]))
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "confirmed"
    assert body["source"] == "direct"
    assert body["paymentStatus"] == "pending"
    assert body["totalAmount"] == 450
    assert body["checkInDate"] == "2030-03-10T15:00:00"


def test_timezone_aware_dates_are_stored_as_utc(client, make_property):
    prop = make_property()
    resp = client.post("/api/bookings", json=booking_payload(
        prop["id"], checkInDate="2030-03-10T17:00:00+02:00", checkOutDate="2030-03-12T10:00:00Z",
    ))
    assert resp.status_code == 201
    assert resp.json()["checkInDate"] == "2030-03-10T15:00:00"


def test_check_out_must_follow_check_in(client, make_property):
    prop = make_property()
    resp = client.post("/api/bookings", json=booking_payload(
        prop["id"], checkInDate="2030-03-13T15:00:00", checkOutDate="2030-03-10T11:00:00",
    ))
    assert resp.status_code == 400
    assert "checkOutDate must be after checkInDate" in resp.json()["errors"][0]["message"]


def test_invalid_email_is_rejected(client, make_property):
    prop = make_property()
    resp = client.post("/api/bookings", json=booking_payload(prop["id"], guestEmail="not-an-email"))
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "guestEmail"


def test_booking_for_missing_property_is_404(client):
    resp = client.post("/api/bookings", json=booking_payload(999))
    assert resp.status_code == 404


def test_double_booking_allowed_by_default(client, make_property, make_booking):
    prop = make_property()
    make_booking(prop["id"])
    resp = client.post("/api/bookings", json=booking_payload(prop["id"], guestName="Second Guest"))
    assert resp.status_code == 201


def test_double_booking_rejected_when_configured(client, make_property, make_booking, settings, monkeypatch):
    monkeypatch.setattr(settings, "reject_double_bookings", True)
    prop = make_property()
    make_booking(prop["id"])

    resp = client.post("/api/bookings", json=booking_payload(prop["id"], guestName="Second Guest"))
    assert resp.status_code == 409

    # A cancelled stay does not block the dates
    resp = client.post("/api/bookings", json=booking_payload(prop["id"], status="cancelled"))
    assert resp.status_code == 201

    resp = client.post("/api/bookings", json=booking_payload(
        prop["id"], checkInDate="2030-04-01T15:00:00", checkOutDate="2030-04-03T11:00:00",
    ))
    assert resp.status_code == 201


def test_list_filters_and_order(client, make_property, make_booking):
    a = make_property(name="A")
    b = make_property(name="B")
    first = make_booking(a["id"])
    second = make_booking(b["id"], status="pending")
    third = make_booking(a["id"], status="cancelled")

    ids = [x["id"] for x in client.get("/api/bookings").json()]
    assert ids == [third["id"], second["id"], first["id"]]

    ids = [x["id"] for x in client.get("/api/bookings", params={"propertyId": a["id"]}).json()]
    assert ids == [third["id"], first["id"]]

    ids = [x["id"] for x in client.get("/api/bookings", params={"status": "pending"}).json()]
    assert ids == [second["id"]]


def test_recent_bookings_limit(client, make_property, make_booking):
    prop = make_property()
    created = [make_booking(prop["id"])["id"] for _ in range(3)]

    resp = client.get("/api/bookings/recent", params={"limit": 2})
    assert resp.status_code == 200
    assert [x["id"] for x in resp.json()] == created[::-1][:2]

    assert client.get("/api/bookings/recent", params={"limit": 0}).status_code == 400
    assert client.get("/api/bookings/recent", params={"limit": 101}).status_code == 400


def test_update_booking_status(client, make_property, make_booking):
    prop = make_property()
    booking = make_booking(prop["id"])

    resp = client.patch(f"/api/bookings/{booking['id']}", json={"status": "checked_in"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "checked_in"
    assert resp.json()["guestName"] == "Ana Costa"


def test_update_rejects_inverted_dates(client, make_property, make_booking):
    prop = make_property()
    booking = make_booking(prop["id"])
    resp = client.put(f"/api/bookings/{booking['id']}", json={"checkOutDate": "2030-03-01T11:00:00"})
    assert resp.status_code == 400


def test_booking_payments_and_messages(client, make_property, make_booking):
    prop = make_property()
    booking = make_booking(prop["id"])
    client.post("/api/payments", json={"bookingId": booking["id"], "amount": 450, "status": "completed"})
    client.post("/api/messages", json={"bookingId": booking["id"], "sender": "guest", "message": "Hello"})

    payments = client.get(f"/api/bookings/{booking['id']}/payments").json()
    messages = client.get(f"/api/bookings/{booking['id']}/messages").json()
    assert [p["amount"] for p in payments] == [450]
    assert [m["message"] for m in messages] == ["Hello"]

    assert client.get("/api/bookings/555/payments").status_code == 404


def test_get_missing_booking_is_404(client):
    resp = client.get("/api/bookings/31337")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Booking not found"}


def test_null_on_required_field_is_rejected(client, make_property, make_booking):
    booking = make_booking(make_property()["id"])

    resp = client.patch(f"/api/bookings/{booking['id']}", json={"checkInDate": None})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "checkInDate"

    resp = client.patch(f"/api/bookings/{booking['id']}", json={"specialRequests": None})
    assert resp.status_code == 200
    assert resp.json()["checkInDate"] == booking["checkInDate"]


def test_move_to_unknown_property_is_404(client, make_property, make_booking):
    booking = make_booking(make_property()["id"])
    resp = client.patch(f"/api/bookings/{booking['id']}", json={"propertyId": 999})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Property not found"}
