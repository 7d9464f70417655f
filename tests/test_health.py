def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Everything is working fine"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/lorem")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Resource not found"}
