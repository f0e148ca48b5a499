def _integration(client, property_id, **overrides):
    payload = {
        "platform": "airbnb",
        "propertyId": property_id,
        "externalPropertyId": "ABNB-8812",
        "credentials": {"apiKey": "secret"},
    }
    payload.update(overrides)
    resp = client.post("/api/integrations/ota", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_credentials_are_never_returned(client, make_property):
    integration = _integration(client, make_property()["id"])
    assert "credentials" not in integration
    assert integration["isActive"] is True
    assert integration["lastSyncAt"] is None


def test_sync_stamps_last_sync_at(client, make_property):
    integration = _integration(client, make_property()["id"])

    resp = client.post(f"/api/integrations/ota/{integration['id']}/sync")
    assert resp.status_code == 200
    assert resp.json()["lastSyncAt"] is not None

    fetched = client.get(f"/api/integrations/ota/{integration['id']}").json()
    assert fetched["lastSyncAt"] == resp.json()["lastSyncAt"]


def test_sync_inactive_integration_is_conflict(client, make_property):
    integration = _integration(client, make_property()["id"], isActive=False)
    resp = client.post(f"/api/integrations/ota/{integration['id']}/sync")
    assert resp.status_code == 409
    assert resp.json() == {"message": "OTA integration is inactive"}


def test_list_filters_and_update(client, make_property):
    prop = make_property()
    airbnb = _integration(client, prop["id"])
    _integration(client, prop["id"], platform="vrbo", externalPropertyId="VR-1")

    listed = client.get("/api/integrations/ota", params={"platform": "airbnb"}).json()
    assert [i["id"] for i in listed] == [airbnb["id"]]

    resp = client.put(f"/api/integrations/ota/{airbnb['id']}", json={"isActive": False})
    assert resp.json()["isActive"] is False
    assert resp.json()["externalPropertyId"] == "ABNB-8812"


def test_unknown_platform_is_rejected(client, make_property):
    resp = client.post("/api/integrations/ota", json={
        "platform": "craigslist", "propertyId": make_property()["id"], "externalPropertyId": "x",
    })
    assert resp.status_code == 400


def test_missing_integration_is_404(client):
    assert client.post("/api/integrations/ota/3/sync").status_code == 404
    assert client.get("/api/integrations/ota/3").json() == {"message": "OTA integration not found"}


def test_integration_for_unknown_property_is_404(client):
    resp = client.post("/api/integrations/ota", json={
        "platform": "airbnb", "propertyId": 999, "externalPropertyId": "ABNB-1",
    })
    assert resp.status_code == 404
    assert resp.json() == {"message": "Property not found"}
