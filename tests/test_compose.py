import openai
import pytest

from wpauto_backend.core.config import settings
from wpauto_backend.db.base import AIPrompt
from wpauto_backend.schemas.article import ArticleComposeRequest
from wpauto_backend.services import content_generator
from wpauto_backend.services.content_generator import normalize_result, render_prompt


@pytest.fixture()
def fake_model(monkeypatch):
    sent = []

    async def fake_run_text_structured(messages, context="", **opts):
        sent.append(messages)
        return {
            "article": {
                "Title": "Speeding Up WordPress",
                "excerpt": "A short tour of caching.",
                "content": "<h2>Cache</h2><p>Page caches help a lot.</p>",
            }
        }

    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(content_generator, "run_text_structured", fake_run_text_structured)
    return sent


def test_render_prompt_fills_defaults():
    request = ArticleComposeRequest(website_id=1, topic="Core Web Vitals", target_audience="shop owners")

    prompt = render_prompt(request)

    assert 'informative article about "Core Web Vitals" in English language' in prompt
    assert "Target audience: shop owners." in prompt
    assert '"title": "Article title"' in prompt


def test_render_prompt_keeps_unknown_placeholders():
    request = ArticleComposeRequest(website_id=1, topic="SEO")

    assert render_prompt(request, "{topic} for {unknown}") == "SEO for {unknown}"
    assert render_prompt(request, "broken {") == "broken {"


def test_normalize_result_fallbacks():
    result = normalize_result({"html": "<p>" + "word " * 50 + "</p>"}, "Backups")

    assert result["title"] == "Backups - AI Generated Article"
    assert len(result["excerpt"].split()) == 40

    with pytest.raises(ValueError):
        normalize_result({"title": "No body"}, "Backups")


def test_compose_stores_article(client, headers, website, fake_model):
    resp = client.post("/api/articles/compose", headers=headers, json={
        "website_id": website.id,
        "topic": "WordPress performance",
        "auto_publish": True,
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Speeding Up WordPress"
    assert body["status"] == "published"
    assert body["published_at"] is not None
    assert body["ai_model"] == settings.OPENAI_TEXT_MODEL
    assert body["word_count"] == 6
    assert body["metadata"]["generation_params"]["tone"] == "professional"

    [messages] = fake_model
    assert messages[0]["role"] == "system"
    assert "WordPress performance" in messages[1]["content"]


def test_compose_uses_saved_prompt(client, db_session, headers, website, fake_model):
    prompt = AIPrompt(user_id="user-1", name="Listicle", template="Write a listicle on {topic} in {tone} voice.")
    db_session.add(prompt)
    db_session.commit()

    resp = client.post("/api/articles/compose", headers=headers, json={
        "website_id": website.id,
        "topic": "security plugins",
        "tone": "casual",
        "prompt_id": prompt.id,
    })

    assert resp.status_code == 201
    assert resp.json()["status"] == "draft"
    assert fake_model[0][1]["content"] == "Write a listicle on security plugins in casual voice."


def test_compose_without_api_key(client, headers, website, monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")

    resp = client.post("/api/articles/compose", headers=headers, json={"website_id": website.id, "topic": "x"})

    assert resp.status_code == 503


def test_compose_unusable_output(client, headers, website, monkeypatch):
    async def empty(messages, context="", **opts):
        return {"title": "Only a title"}

    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(content_generator, "run_text_structured", empty)

    resp = client.post("/api/articles/compose", headers=headers, json={"website_id": website.id, "topic": "x"})

    assert resp.status_code == 502


def test_compose_openai_failure(client, headers, website, monkeypatch):
    async def unavailable(messages, context="", **opts):
        raise openai.OpenAIError("The server had an error while processing your request")

    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(content_generator, "run_text_structured", unavailable)

    resp = client.post("/api/articles/compose", headers=headers, json={"website_id": website.id, "topic": "x"})

    assert resp.status_code == 502
    assert "server had an error" in resp.json()["detail"]
