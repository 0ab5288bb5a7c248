"""Tests for resume API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resume_layout.api.dependencies import get_resume_repository
from resume_layout.api.main import app
from resume_layout.api.routes.resumes import GENERIC_EXPORT_FAILURE
from resume_layout.layout.errors import MeasurementError


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def stored_id(client: TestClient, full_record: dict) -> int:
    response = client.post("/api/resumes", json=full_record)
    assert response.status_code == 201
    return response.json()["id"]


class TestStoreResume:
    def test_create_and_get(self, client: TestClient, stored_id: int) -> None:
        response = client.get(f"/api/resumes/{stored_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == stored_id
        assert data["profile"]["full_name"] == "Jane Doe"
        assert [e["company"] for e in data["experience"]] == ["Acme Corp", "Globex"]

    def test_create_requires_full_name(self, client: TestClient) -> None:
        response = client.post("/api/resumes", json={"profile": {"full_name": ""}})
        assert response.status_code == 422

    def test_get_missing(self, client: TestClient) -> None:
        assert client.get("/api/resumes/9999").status_code == 404

    def test_update(self, client: TestClient, stored_id: int, full_record: dict) -> None:
        full_record["profile"]["full_name"] = "Jane Smith"
        full_record["projects"] = []

        response = client.put(f"/api/resumes/{stored_id}", json=full_record)

        assert response.status_code == 200
        stored = client.get(f"/api/resumes/{stored_id}").json()
        assert stored["profile"]["full_name"] == "Jane Smith"
        assert stored["projects"] == []

    def test_update_missing(self, client: TestClient, full_record: dict) -> None:
        assert client.put("/api/resumes/9999", json=full_record).status_code == 404


class TestExportResume:
    def test_export_stored(self, client: TestClient, stored_id: int) -> None:
        response = client.post(f"/api/resumes/{stored_id}/export", json={"template_id": "tech"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="Jane_Doe_tech.pdf"'
        )
        assert response.content.startswith(b"%PDF")

    def test_export_default_template(self, client: TestClient, stored_id: int) -> None:
        response = client.post(f"/api/resumes/{stored_id}/export", json={})
        assert "Jane_Doe_modern.pdf" in response.headers["content-disposition"]

    def test_export_unknown_template(self, client: TestClient, stored_id: int) -> None:
        response = client.post(f"/api/resumes/{stored_id}/export", json={"template_id": "x"})
        assert response.status_code == 404

    def test_export_missing_record(self, client: TestClient) -> None:
        assert client.post("/api/resumes/9999/export", json={}).status_code == 404

    def test_render_unsaved(self, client: TestClient, full_record: dict) -> None:
        response = client.post(
            "/api/resumes/render",
            json={"record": full_record, "template_id": "classic"},
        )

        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")

    def test_render_blank_name_rejected(self, client: TestClient) -> None:
        record = {"profile": {"full_name": " "}}
        response = client.post("/api/resumes/render", json={"record": record})

        assert response.status_code == 422
        assert "full_name" in response.json()["detail"]

    def test_render_failure_is_generic(
        self, client: TestClient, full_record: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken(*args, **kwargs):
            raise MeasurementError("font table exploded")

        monkeypatch.setattr("resume_layout.api.routes.resumes.export_resume", broken)
        response = client.post("/api/resumes/render", json={"record": full_record})

        assert response.status_code == 500
        assert response.json()["detail"] == GENERIC_EXPORT_FAILURE

    def test_invalid_threshold_setting_is_generic(
        self, client: TestClient, full_record: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RESUME_BREAK_BEFORE_EDUCATION", "lots")
        response = client.post("/api/resumes/render", json={"record": full_record})

        assert response.status_code == 500
        assert response.json()["detail"] == GENERIC_EXPORT_FAILURE


class FakeRepository:
    def __init__(self, record: dict) -> None:
        self.record = record

    def get(self, record_id: int):
        return self.record if record_id == 1 else None

    def create(self, record):
        return 1

    def update(self, record_id, record):
        return record_id == 1


def test_repository_dependency_override(client: TestClient, full_record: dict) -> None:
    app.dependency_overrides[get_resume_repository] = lambda: FakeRepository(full_record)
    try:
        response = client.post("/api/resumes/1/export", json={})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")
