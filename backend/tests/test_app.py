def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": "StayDesk"}


def test_root(client):
    body = client.get("/").json()
    assert body["service"] == "StayDesk"
    assert body["docs"] == "/docs"


def test_unknown_route_uses_message_body(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_cors_preflight_for_dashboard_origin(client):
    resp = client.options(
        "/api/properties",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
