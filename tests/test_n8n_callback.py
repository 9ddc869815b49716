import json

from wpauto_backend.core.config import settings
from wpauto_backend.core.security import create_hmac_signature
from wpauto_backend.db.base import ExecutionLog
from wpauto_backend.services.n8n_service import map_status


def test_map_status():
    assert map_status("started") == "processing"
    assert map_status("progress") == "processing"
    assert map_status("completed") == "posted"
    assert map_status("failed") == "failed"
    assert map_status("something-else") == "processing"


def test_progress_update(client, db_session, make_article):
    article = make_article(status="processing")

    resp = client.post("/api/webhooks/n8n", json={
        "article_id": article.id,
        "status": "progress",
        "progress": 40,
        "message": "Writing sections",
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == f"Article {article.id} updated successfully"
    assert body["data"] == {
        "article_id": article.id,
        "status": "processing",
        "progress": 40,
        "message": "Writing sections",
    }

    db_session.refresh(article)
    assert article.generation_progress == 40
    assert article.generation_message == "Writing sections"

    log = db_session.query(ExecutionLog).filter(ExecutionLog.article_id == article.id).one()
    assert log.trigger_type == "webhook"
    assert log.status == "success"
    assert log.extra_metadata["n8n_status"] == "progress"


def test_progress_is_clamped(client, db_session, make_article):
    article = make_article(status="processing")

    client.post("/api/webhooks/n8n", json={"article_id": article.id, "status": "progress", "progress": 140})

    db_session.refresh(article)
    assert article.generation_progress == 100


def test_completed_applies_result(client, db_session, make_article):
    article = make_article(status="processing")

    resp = client.post("/api/webhooks/n8n", json={
        "article_id": article.id,
        "status": "completed",
        "progress": 100,
        "result": {
            "post_url": "https://blog.example.com/why-static-sites",
            "post_id": "321",
            "word_count": 1043,
            "generation_time": 57.4,
        },
    })

    assert resp.status_code == 200
    db_session.refresh(article)
    assert article.status == "posted"
    assert article.published_at is not None
    assert article.wp_post_url == "https://blog.example.com/why-static-sites"
    assert article.wp_post_id == 321
    assert article.word_count == 1043
    assert article.generation_time_seconds == 57


def test_failed_records_error(client, db_session, make_article):
    article = make_article(status="processing")

    client.post("/api/webhooks/n8n", json={
        "article_id": article.id,
        "status": "failed",
        "error": "OpenAI quota exceeded",
    })

    db_session.refresh(article)
    assert article.status == "failed"
    assert article.error_message == "OpenAI quota exceeded"
    assert article.failed_at is not None
    log = db_session.query(ExecutionLog).filter(ExecutionLog.article_id == article.id).one()
    assert log.status == "failed"


def test_missing_fields(client):
    resp = client.post("/api/webhooks/n8n", json={"status": "progress"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: article_id, status"


def test_unknown_article(client):
    resp = client.post("/api/webhooks/n8n", json={"article_id": 4242, "status": "started"})

    assert resp.status_code == 404


def test_signature_required_when_secret_set(client, db_session, make_article, monkeypatch):
    monkeypatch.setattr(settings, "N8N_WEBHOOK_SECRET", "callback-secret")
    article = make_article(status="processing")
    body = json.dumps({"article_id": article.id, "status": "started"})

    unsigned = client.post("/api/webhooks/n8n", content=body, headers={"Content-Type": "application/json"})
    assert unsigned.status_code == 401

    signed = client.post(
        "/api/webhooks/n8n",
        content=body,
        headers={
            "Content-Type": "application/json",
            "X-Signature": create_hmac_signature(body, "callback-secret"),
        },
    )
    assert signed.status_code == 200


def test_endpoint_status(client):
    resp = client.get("/api/webhooks/n8n")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "n8n webhook endpoint is active"
    assert "timestamp" in body


def test_fractional_progress_is_rounded(client, db_session, make_article):
    article = make_article(status="processing")

    resp = client.post("/api/webhooks/n8n", json={"article_id": article.id, "status": "progress", "progress": 42.5})

    assert resp.status_code == 200
    db_session.refresh(article)
    assert article.generation_progress == 42


def test_body_that_is_not_utf8(client, make_article):
    article = make_article(status="processing")
    body = b'{"article_id": ' + str(article.id).encode() + b', "status": "\xff"}'

    resp = client.post("/api/webhooks/n8n", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_signature_checked_over_raw_bytes(client, make_article, monkeypatch):
    monkeypatch.setattr(settings, "N8N_WEBHOOK_SECRET", "callback-secret")
    article = make_article(status="processing")
    body = json.dumps({"article_id": article.id, "status": "started", "message": "Überblick"}, ensure_ascii=False).encode("utf-8")

    resp = client.post(
        "/api/webhooks/n8n",
        content=body,
        headers={
            "Content-Type": "application/json",
            "X-Signature": create_hmac_signature(body, "callback-secret"),
        },
    )

    assert resp.status_code == 200
