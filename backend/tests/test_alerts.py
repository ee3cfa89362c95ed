async def test_alerts_need_no_credential(client):
    resp = await client.get("/api/hospital/alerts")
    assert resp.status_code == 200
    alerts = resp.json()
    assert [a["severity"] for a in alerts] == ["Urgent", "Informational"]
    assert set(alerts[0]) == {"id", "title", "date", "severity", "content"}


async def test_health_check(client):
    resp = await client.get("/api/health")
    assert resp.json()["status"] == "healthy"


async def test_responses_are_not_cached(client):
    resp = await client.get("/api/hospital/alerts")
    assert "no-store" in resp.headers["Cache-Control"]
