# tests/api/test_system_api.py
from fastapi.testclient import TestClient

from fifufa.core.config import settings
from fifufa.core.errors import OriginRejectedError
from fifufa.main import app

def test_health(client: TestClient):
    response = client.get(f"{settings.API_PREFIX}/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert settings.PROJECT_NAME in data["message"]
    assert "timestamp" in data
    assert data["stats"]["total_requests"] >= 1
    assert data["stats"]["words_served"] == 0

def test_health_wrong_method(client: TestClient):
    response = client.post(f"{settings.API_PREFIX}/health")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}

def test_index_lists_endpoints(client: TestClient):
    response = client.get(f"{settings.API_PREFIX}/")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == settings.VERSION
    assert set(data["endpoints"]) == {"health", "facts", "randomWords"}

def test_disallowed_origin_is_rejected_before_handlers(client: TestClient, fake_inference_client):
    response = client.post(
        f"{settings.API_PREFIX}/facts",
        json={"topic": "cats"},
        headers={"Origin": "https://evil.example"},
    )
    expected = OriginRejectedError("https://evil.example")
    assert response.status_code == expected.status_code == 403
    assert response.json() == {"error": expected.message}
    assert "access-control-allow-origin" not in response.headers
    assert fake_inference_client.calls == []

def test_disallowed_origin_preflight_is_rejected(client: TestClient):
    response = client.options(f"{settings.API_PREFIX}/random-words", headers={"Origin": "https://evil.example"})
    assert response.status_code == 403
    assert response.json() == {"error": "Origin not allowed"}

def test_allowed_origin_is_reflected(client: TestClient):
    response = client.get(f"{settings.API_PREFIX}/health", headers={"Origin": "http://localhost:3000"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert "Origin" in response.headers["vary"]

def test_allowed_origin_preflight_lists_methods(client: TestClient):
    response = client.options(
        f"{settings.API_PREFIX}/random-words",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-max-age"] == "86400"

def test_preflight_without_origin_is_empty_200(client: TestClient):
    response = client.options(f"{settings.API_PREFIX}/facts")
    assert response.status_code == 200
    assert response.content == b""
    assert "access-control-allow-origin" not in response.headers

def test_missing_origin_passes_without_allow_origin_header(client: TestClient):
    response = client.get(f"{settings.API_PREFIX}/health")
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers

def test_error_responses_carry_cors_headers(client: TestClient):
    response = client.post(
        f"{settings.API_PREFIX}/facts", json={"topic": ""}, headers={"Origin": "http://localhost:3000"}
    )
    assert response.status_code == 400
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

def test_unhandled_error_is_json_500(word_cache, mocker):
    mocker.patch.object(word_cache, "next_word", side_effect=RuntimeError("boom"))
    error_logger = mocker.patch("fifufa.main.logger.error")

    lenient_client = TestClient(app, raise_server_exceptions=False)
    response = lenient_client.get(f"{settings.API_PREFIX}/random-words")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Server error: boom"}
    error_logger.assert_called_once()
