from fastapi.testclient import TestClient

from smartnotes.core.config import Settings
from smartnotes.main import create_app

from conftest import StubClassifier


def test_ping(client):
    assert client.get("/ping").json() == {"message": "pong"}


def test_health_reports_collaborators(client):
    body = client.get("/health").json()
    assert body == {
        "ok": True,
        "mongo_connected": True,
        "hf_configured": True,
        "hf_model": "cardiffnlp/tweet-topic-21-multi",
    }


def test_health_without_store_or_key():
    settings = Settings(HF_API_KEY="", ENVIRONMENT="test")
    body = TestClient(create_app(settings, classifier=StubClassifier())).get("/health").json()
    assert body["mongo_connected"] is False
    assert body["hf_configured"] is False


def test_api_prefix_normalized():
    assert Settings(api_prefix="api/").api_prefix_normalized == "/api"
    assert Settings(api_prefix="").api_prefix_normalized == ""


def test_routes_mounted_under_prefix(repo):
    settings = Settings(HF_API_KEY="hf_test", api_prefix="/api")
    client = TestClient(create_app(settings, note_repo=repo, classifier=StubClassifier()))
    assert client.get("/api/notes").status_code == 200
    assert client.get("/notes").status_code == 404
