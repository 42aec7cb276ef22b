def test_health_endpoints(client):
    live = client.get("/api/health")
    assert live.status_code == 200
    assert live.json()["status"] == "ok"

    ready = client.get("/api/health/ready")
    assert ready.status_code in {200, 503}
    assert "database" in ready.json()


def test_structure_endpoint(client):
    response = client.get("/api/timetable/structure")
    assert response.status_code == 200
    payload = response.json()
    assert [day["day"] for day in payload["days"]][0] == "Monday"
    monday = payload["days"][0]["periods"]
    assert monday[0] == {"period": None, "time_range": "07:00-07:40", "activity": "Flag ceremony"}
    assert "VII A" in payload["sections"]
