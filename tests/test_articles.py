from wpauto_backend.db.base import Article, UserActivityLog
from wpauto_backend.services.article_service import count_words, slugify


def test_slugify():
    assert slugify("Hello, World!  2024") == "hello-world-2024"
    assert slugify("--Already-sluggy--") == "already-sluggy"
    assert slugify("") == ""


def test_count_words():
    assert count_words(None) == 0
    assert count_words("one two  three\nfour") == 4


def test_create_article(client, db_session, headers, website):
    resp = client.post("/api/articles", headers=headers, json={
        "title": "Caching Strategies for WordPress",
        "website_id": website.id,
        "content": "Use a page cache and an object cache.",
        "tags": ["performance"],
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["slug"] == "caching-strategies-for-wordpress"
    assert body["status"] == "draft"
    assert body["generation_type"] == "manual"
    assert body["word_count"] == 8
    assert body["website"]["name"] == "Example Blog"
    assert db_session.query(UserActivityLog).filter(UserActivityLog.action == "article_created").count() == 1


def test_create_article_for_foreign_website(client, website):
    resp = client.post("/api/articles", headers={"X-User-ID": "intruder"}, json={
        "title": "Nope",
        "website_id": website.id,
    })

    assert resp.status_code == 404


def test_list_articles_filters_and_pages(client, headers, make_article):
    for i in range(3):
        make_article(title=f"Draft {i}", status="draft")
    make_article(title="Pending about caching", status="pending", content="all about caching")
    make_article(title="Other user", user_id="user-2")

    resp = client.get("/api/articles", headers=headers, params={"page": 1, "limit": 2})
    body = resp.json()
    assert resp.status_code == 200
    assert body["total"] == 4
    assert body["total_pages"] == 2
    assert len(body["articles"]) == 2

    resp = client.get("/api/articles", headers=headers, params={"status": "draft"})
    assert resp.json()["total"] == 3

    resp = client.get("/api/articles", headers=headers, params={"status": "all", "search": "caching"})
    assert [a["title"] for a in resp.json()["articles"]] == ["Pending about caching"]


def test_get_update_delete(client, db_session, headers, make_article):
    article = make_article(status="draft")

    resp = client.get(f"/api/articles/{article.id}", headers=headers)
    assert resp.status_code == 200

    resp = client.put(f"/api/articles/{article.id}", headers=headers, json={
        "title": "A New Title",
        "content": "three short words",
    })
    assert resp.status_code == 200
    assert resp.json()["slug"] == "a-new-title"
    assert resp.json()["word_count"] == 3

    resp = client.delete(f"/api/articles/{article.id}", headers=headers)
    assert resp.json() == {"success": True, "id": article.id}
    assert db_session.query(Article).count() == 0

    resp = client.get(f"/api/articles/{article.id}", headers=headers)
    assert resp.status_code == 404


def test_articles_are_scoped_to_caller(client, make_article):
    article = make_article()

    resp = client.get(f"/api/articles/{article.id}", headers={"X-User-ID": "user-2"})

    assert resp.status_code == 404


def test_missing_user_header(client):
    assert client.get("/api/articles").status_code == 422
    assert client.get("/api/articles", headers={"X-User-ID": "  "}).status_code == 401


def test_generate_scheduled_article(client, headers, website, webhook):
    resp = client.post("/api/articles/generate", headers=headers, json={
        "website_id": website.id,
        "webhook_id": webhook.id,
        "topic": "Headless WordPress in 2026",
        "scheduled_datetime": "2030-01-01T09:00:00",
        "generation_type": "scheduled",
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["generation_type"] == "scheduled"
    assert body["webhook_id"] == webhook.id
    assert body["scheduled_at"].startswith("2030-01-01T09:00:00")


def test_generate_manual_article_starts_as_draft(client, headers, website, webhook):
    resp = client.post("/api/articles/generate", headers=headers, json={
        "website_id": website.id,
        "webhook_id": webhook.id,
        "topic": "Plugin audits",
    })

    assert resp.status_code == 201
    assert resp.json()["status"] == "draft"


def test_update_with_null_status_keeps_status(client, db_session, headers, make_article):
    article = make_article(status="draft")

    resp = client.put(f"/api/articles/{article.id}", headers=headers, json={"status": None, "category": "News"})

    assert resp.status_code == 200
    assert resp.json()["status"] == "draft"
    assert resp.json()["category"] == "News"
