"""
test_health_api.py - Liveness probe and fallback error rendering
"""


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0
    assert body["timestamp"].endswith("Z")
    assert body["wallets"] == 0
    assert body["transactions"] == 0


def test_health_reports_ledger_activity(client):
    client.post("/api/trading/order", json={"tokenId": "jup", "side": "buy", "type": "market", "amount": 10})
    client.post("/api/trading/order", json={"tokenId": "jup", "side": "buy", "type": "market", "amount": 5, "userId": "user-2"})

    body = client.get("/api/health").json()
    assert body["wallets"] == 2
    assert body["transactions"] == 2


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == {"code": "NOT_FOUND", "message": "The requested resource was not found"}
