from datetime import datetime, timezone

from wpauto_backend.db.base import Company


def test_stats(client, db_session, headers, website, make_article):
    db_session.add_all([
        Company(name="Acme", slug="acme", owner_id="user-1", status="active"),
        Company(name="Dormant", slug="dormant", owner_id="user-1", status="inactive"),
    ])
    website.health_status = "healthy"
    db_session.commit()
    make_article(status="posted")
    make_article(status="published")
    make_article(status="failed")
    make_article(status="draft")

    resp = client.get("/api/dashboard/stats", headers=headers, params={"time_range": "30d"})

    assert resp.status_code == 200
    stats = resp.json()
    assert stats["total_articles"] == 4
    assert stats["successful_articles"] == 2
    assert stats["success_rate"] == 50
    assert stats["total_websites"] == 1
    assert stats["healthy_websites"] == 1
    assert stats["total_companies"] == 2
    assert stats["active_companies"] == 1
    assert stats["articles_by_website"] == [{"name": "Example Blog", "count": 4}]
    assert {row["name"]: row["count"] for row in stats["articles_by_status"]} == {
        "Posted": 1, "Published": 1, "Failed": 1, "Draft": 1,
    }

    trend = stats["article_trend"]
    assert len(trend) == 30
    assert trend[-1]["date"] == datetime.now(timezone.utc).date().isoformat()
    assert sum(point["count"] for point in trend) == 4


def test_stats_empty_database(client, headers):
    resp = client.get("/api/dashboard/stats", headers=headers)

    stats = resp.json()
    assert stats["total_articles"] == 0
    assert stats["success_rate"] == 0
    assert len(stats["article_trend"]) == 7


def test_unknown_time_range_falls_back_to_90_days(client, headers):
    resp = client.get("/api/dashboard/stats", headers=headers, params={"time_range": "1y"})

    assert len(resp.json()["article_trend"]) == 90


def test_recent_activity(client, headers, website):
    client.post("/api/webhooks", headers=headers, json={"name": "a", "url": "https://n8n.example.com/a"})
    client.post("/api/webhooks", headers=headers, json={"name": "b", "url": "https://n8n.example.com/b"})

    resp = client.get("/api/dashboard/activity", headers=headers, params={"limit": 1})

    assert resp.status_code == 200
    [entry] = resp.json()
    assert entry["action"] == "webhook_created"
    assert entry["metadata"] == {"name": "b"}


def test_recent_activity_is_scoped_to_caller(client, headers):
    client.post("/api/webhooks", headers=headers, json={"name": "private", "url": "https://n8n.example.com/p"})

    resp = client.get("/api/dashboard/activity", headers={"X-User-ID": "user-2"})

    assert resp.status_code == 200
    assert resp.json() == []
    assert len(client.get("/api/dashboard/activity", headers=headers).json()) == 1
