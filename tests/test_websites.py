import requests

from wpauto_backend.services import website_service


def test_create_website_hides_password(client, headers):
    resp = client.post("/api/websites", headers=headers, json={
        "name": "Travel Notes",
        "url": "https://travel.example.com/",
        "wp_username": "admin",
        "wp_password": "xxxx yyyy zzzz",
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["url"] == "https://travel.example.com"
    assert body["health_status"] == "unknown"
    assert "wp_password" not in body


def test_update_and_delete_website(client, headers, website):
    resp = client.put(f"/api/websites/{website.id}", headers=headers, json={"status": "maintenance"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "maintenance"

    resp = client.delete(f"/api/websites/{website.id}", headers=headers)
    assert resp.json() == {"success": True, "id": website.id}
    assert client.get(f"/api/websites/{website.id}", headers=headers).status_code == 404


def test_test_connection_healthy(client, db_session, headers, website, monkeypatch, fake_response):
    requested = []

    def fake_get(url, timeout=None):
        requested.append(url)
        return fake_response(200, payload={"name": "Example Blog", "version": "6.6.2"})

    monkeypatch.setattr(website_service.requests, "get", fake_get)

    resp = client.post(f"/api/websites/{website.id}/test-connection", headers=headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["health_status"] == "healthy"
    assert body["wordpress_version"] == "6.6.2"
    assert requested == ["https://blog.example.com/wp-json/"]

    db_session.refresh(website)
    assert website.health_status == "healthy"
    assert website.last_health_check is not None


def test_test_connection_unreachable(client, db_session, headers, website, monkeypatch):
    def fail(url, timeout=None):
        raise requests.ConnectionError("name resolution failed")

    monkeypatch.setattr(website_service.requests, "get", fail)

    resp = client.post(f"/api/websites/{website.id}/test-connection", headers=headers)

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to connect to WordPress site"
    db_session.refresh(website)
    assert website.health_status == "error"


def test_test_connection_error_status(client, headers, website, monkeypatch, fake_response):
    monkeypatch.setattr(
        website_service.requests, "get",
        lambda url, timeout=None: fake_response(503, payload={"code": "maintenance"})
    )

    resp = client.post(f"/api/websites/{website.id}/test-connection", headers=headers)

    assert resp.status_code == 200
    assert resp.json()["health_status"] == "error"
