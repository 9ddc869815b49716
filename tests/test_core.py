import pytest

from wpauto_backend.core.openai_client import validate_json_response
from wpauto_backend.core.security import create_hmac_signature, verify_hmac_signature


def test_hmac_roundtrip():
    signature = create_hmac_signature('{"a": 1}', "secret")

    assert verify_hmac_signature('{"a": 1}', signature, "secret")
    assert not verify_hmac_signature('{"a": 2}', signature, "secret")
    assert not verify_hmac_signature('{"a": 1}', None, "secret")


def test_validate_json_response_strips_fences():
    assert validate_json_response('```json\n{"title": "x"}\n```') == {"title": "x"}


def test_validate_json_response_rejects_non_objects():
    with pytest.raises(ValueError):
        validate_json_response("[1, 2]")
    with pytest.raises(ValueError):
        validate_json_response("")


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "WP Auto Backend API"
    assert client.get("/health").json() == {"status": "healthy"}


def test_hmac_accepts_bytes():
    body = '{"message": "Überblick"}'

    assert create_hmac_signature(body.encode("utf-8"), "secret") == create_hmac_signature(body, "secret")
