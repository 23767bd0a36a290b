"""Tests for the HTTP routes – no server process required."""

import json

from fastapi.testclient import TestClient

from app.config import settings
from app.main import app

client = TestClient(app)


def test_health():
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["engine"].startswith("jsonschema ")


def test_example_round_trip():
    """The canned pair validates cleanly when submitted as-is."""
    example = client.get("/api/v1/example").json()
    json.loads(example["schema_text"])

    response = client.post("/api/v1/validate", json=example)
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": []}


def test_invalid_document_is_not_an_http_error():
    example = client.get("/api/v1/example").json()
    response = client.post(
        "/api/v1/validate",
        json={"schema_text": example["schema_text"], "data_text": '{"age": 200}'},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert len(body["errors"]) == 2


def test_parse_error():
    response = client.post(
        "/api/v1/validate", json={"schema_text": "{invalid", "data_text": "{}"}
    )
    assert response.status_code == 200
    errors = response.json()["errors"]
    assert len(errors) == 1
    assert errors[0].startswith("Parse error: ")


def test_missing_field_rejected():
    response = client.post("/api/v1/validate", json={"schema_text": "{}"})
    assert response.status_code == 422


def test_batch():
    response = client.post(
        "/api/v1/validate/batch",
        json={"schema_text": '{"type": "integer"}', "documents": ["1", '"x"', "2"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["pipeline"] == "batch_validation"
    assert body["status"] == "completed"
    assert body["valid_count"] == 2
    assert body["invalid_count"] == 1
    assert body["outcomes"][1]["errors"] == ["/: 'x' is not of type 'integer'"]
    assert set(body["stages"]) == {"parse_schema", "compile_schema", "validate_documents"}


def test_empty_batch_rejected():
    response = client.post(
        "/api/v1/validate/batch", json={"schema_text": "{}", "documents": []}
    )
    assert response.status_code == 422


def test_oversized_batch_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_BATCH_SIZE", 2)
    response = client.post(
        "/api/v1/validate/batch", json={"schema_text": "{}", "documents": ["1", "2", "3"]}
    )
    assert response.status_code == 413


def test_self_referencing_schema_is_not_a_server_error():
    response = client.post(
        "/api/v1/validate", json={"schema_text": '{"$ref": "#"}', "data_text": "{}"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": ["Schema error: recursive reference never terminates"],
    }
