def test_ai_prompt_crud(client, headers):
    resp = client.post("/api/ai-prompts", headers=headers, json={
        "name": "How-to",
        "template": "Write a how-to guide about {topic}.",
    })
    assert resp.status_code == 201
    prompt_id = resp.json()["id"]

    resp = client.put(f"/api/ai-prompts/{prompt_id}", headers=headers, json={"name": "How-to guide"})
    assert resp.json()["name"] == "How-to guide"

    assert client.get(f"/api/ai-prompts/{prompt_id}", headers={"X-User-ID": "user-2"}).status_code == 404

    resp = client.delete(f"/api/ai-prompts/{prompt_id}", headers=headers)
    assert resp.json() == {"success": True, "id": prompt_id}
    assert client.get("/api/ai-prompts", headers=headers).json() == []


def test_workflow_crud(client, headers, website, webhook):
    resp = client.post("/api/workflows", headers=headers, json={
        "name": "Weekly posts",
        "website_id": website.id,
        "webhook_id": webhook.id,
        "schedule_type": "interval",
        "schedule_config": {"days": 7},
    })
    assert resp.status_code == 201
    workflow = resp.json()
    assert workflow["is_active"] is True

    resp = client.put(f"/api/workflows/{workflow['id']}", headers=headers, json={"is_active": False})
    assert resp.json()["is_active"] is False

    resp = client.delete(f"/api/workflows/{workflow['id']}", headers=headers)
    assert resp.status_code == 200


def test_workflow_rejects_foreign_references(client, headers, website):
    resp = client.post("/api/workflows", headers=headers, json={
        "name": "Broken",
        "website_id": website.id,
        "prompt_template_id": 77,
    })

    assert resp.status_code == 404
    assert resp.json()["detail"] == "AI prompt 77 not found"
