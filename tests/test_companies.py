from wpauto_backend.db.base import Website


def test_create_company_derives_unique_slug(client, headers):
    first = client.post("/api/companies", headers=headers, json={"name": "Acme Media"})
    second = client.post("/api/companies", headers=headers, json={"name": "Acme Media"})

    assert first.status_code == 201
    assert first.json()["slug"] == "acme-media"
    assert first.json()["owner_id"] == "user-1"
    assert second.json()["slug"] == "acme-media-2"


def test_list_companies_with_stats(client, db_session, headers, website, make_article):
    company = client.post("/api/companies", headers=headers, json={"name": "Acme Media"}).json()
    website.company_id = company["id"]
    db_session.add(Website(user_id="user-1", name="Second", url="https://two.example.com", company_id=company["id"]))
    db_session.commit()
    make_article()
    make_article()

    resp = client.get("/api/companies", headers=headers)

    assert resp.status_code == 200
    [row] = resp.json()
    assert row["website_count"] == 2
    assert row["article_count"] == 2


def test_update_status(client, headers):
    company = client.post("/api/companies", headers=headers, json={"name": "Acme Media"}).json()

    resp = client.patch(f"/api/companies/{company['id']}/status", headers=headers, json={"status": "suspended"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "suspended"

    resp = client.patch(f"/api/companies/{company['id']}/status", headers=headers, json={"status": "gone"})
    assert resp.status_code == 422


def test_delete_company_keeps_websites(client, db_session, headers, website):
    company = client.post("/api/companies", headers=headers, json={"name": "Acme Media"}).json()
    website.company_id = company["id"]
    db_session.commit()

    resp = client.delete(f"/api/companies/{company['id']}", headers=headers)

    assert resp.status_code == 200
    db_session.refresh(website)
    assert website.company_id is None
    assert client.get(f"/api/companies/{company['id']}", headers=headers).status_code == 404
