def _rollup(client, property_id, day, **overrides):
    payload = {"propertyId": property_id, "date": f"{day}T00:00:00", "revenue": 300, "bookingsCount": 1}
    payload.update(overrides)
    resp = client.post("/api/analytics", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_range_is_inclusive_and_newest_first(client, make_property):
    prop = make_property()
    for day in ("2030-03-01", "2030-03-02", "2030-03-03", "2030-03-04"):
        _rollup(client, prop["id"], day, source="daily")

    resp = client.get("/api/analytics", params={
        "propertyId": prop["id"], "startDate": "2030-03-02", "endDate": "2030-03-03",
    })
    assert resp.status_code == 200
    assert [r["date"] for r in resp.json()] == ["2030-03-03T00:00:00", "2030-03-02T00:00:00"]


def test_filter_by_property(client, make_property):
    a = make_property(name="A")
    b = make_property(name="B")
    _rollup(client, a["id"], "2030-03-01")
    _rollup(client, b["id"], "2030-03-01", revenue=125.75)

    rows = client.get("/api/analytics", params={"propertyId": b["id"]}).json()
    assert [r["revenue"] for r in rows] == [125.75]
    assert len(client.get("/api/analytics").json()) == 2


def test_occupancy_rate_bounds(client, make_property):
    resp = client.post("/api/analytics", json={
        "propertyId": make_property()["id"], "date": "2030-03-01T00:00:00", "occupancyRate": 140,
    })
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "occupancyRate"


def test_analytics_for_unknown_property_is_404(client):
    resp = client.post("/api/analytics", json={"propertyId": 999, "date": "2030-03-01T00:00:00", "revenue": 10})
    assert resp.status_code == 404
