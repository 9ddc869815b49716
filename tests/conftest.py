import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["N8N_WEBHOOK_SECRET"] = ""
os.environ["OPENAI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wpauto_backend.db.base import Article, Base, Webhook, Website
from wpauto_backend.db.session import get_db
from wpauto_backend.main import app

USER_ID = "user-1"


class FakeResponse:
    def __init__(self, status_code=200, text="ok", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def headers():
    return {"X-User-ID": USER_ID}


@pytest.fixture()
def website(db_session):
    site = Website(
        user_id=USER_ID,
        name="Example Blog",
        url="https://blog.example.com",
        wp_username="editor",
        wp_password="app-pass",
    )
    db_session.add(site)
    db_session.commit()
    db_session.refresh(site)
    return site


@pytest.fixture()
def webhook(db_session):
    hook = Webhook(user_id=USER_ID, name="n8n article flow", url="https://n8n.example.com/webhook/abc", active=True)
    db_session.add(hook)
    db_session.commit()
    db_session.refresh(hook)
    return hook


@pytest.fixture()
def make_article(db_session, website):
    def _make(**fields):
        values = {
            "user_id": USER_ID,
            "website_id": website.id,
            "title": "Why static sites still matter",
            "status": "pending",
            "generation_type": "manual",
        }
        values.update(fields)
        article = Article(**values)
        db_session.add(article)
        db_session.commit()
        db_session.refresh(article)
        return article

    return _make


@pytest.fixture()
def fake_response():
    return FakeResponse
