def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Jurnal Digital SMKN 4 Jakarta"
    assert body["version"] == "1.0.0"
    assert body["timestamp"]


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/tidak-ada")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Endpoint tidak ditemukan"}
