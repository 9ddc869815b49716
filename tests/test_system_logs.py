from wpauto_backend.db.base import SystemLog
from wpauto_backend.services.system_log_service import SystemLogService


def test_create_system_log(client, db_session, headers):
    resp = client.post("/api/system-logs", headers=headers, json={
        "level": "warn",
        "message": "Website health degraded",
        "source": "health-monitor",
        "metadata": {"website_id": 3},
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["level"] == "warn"
    assert body["user_id"] == "user-1"
    assert body["metadata"] == {"website_id": 3}
    assert db_session.query(SystemLog).count() == 1


def test_create_system_log_missing_field(client):
    resp = client.post("/api/system-logs", json={"level": "info", "message": "no source"})

    assert resp.status_code == 400


def test_unknown_level_is_recorded_as_info(db_session):
    entry = SystemLogService(db_session).record("verbose", "hello", source="test")

    assert entry.level == "info"
    assert entry.details == {}
