"""Tests for CORS handling, health check, and error envelopes."""

import pytest
from fastapi.testclient import TestClient

from maintenance_api.core.config import Settings
from maintenance_api.main import create_app
from maintenance_api.services.vehicle import VehicleService

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


class TestCORS:
    @pytest.mark.parametrize("path", [
        "/vehicles",
        "/vehicle/1",
        "/vehicle/1/viewmaintenance",
        "/vehicle/1/2/viewmaintenancebyvidsid",
        "/vehicle/1/2/addmaintenance",
    ])
    def test_options_short_circuits_without_database(self, offline_client, path):
        resp = offline_client.options(path)
        assert resp.status_code == 200
        assert resp.content == b""
        for name, value in CORS_HEADERS.items():
            assert resp.headers[name] == value

    def test_headers_on_regular_responses(self, client):
        resp = client.get("/vehicles")
        for name, value in CORS_HEADERS.items():
            assert resp.headers[name] == value

    def test_headers_on_error_responses(self, client):
        resp = client.get("/vehicle/999")
        assert resp.status_code == 404
        assert resp.headers["access-control-allow-origin"] == "*"


class TestHealth:
    def test_connected(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "app": "Vehicle Maintenance API", "env": "test", "database": True}

    def test_not_initialized(self, offline_client):
        body = offline_client.get("/health").json()
        assert body["status"] == "degraded"
        assert body["database"] is False


class TestErrors:
    def test_unknown_route_uses_envelope(self, client):
        resp = client.get("/bikes")
        assert resp.status_code == 404
        assert resp.json() == {"error": {"code": "NOT_FOUND", "message": "Resource not found"}}

    def test_wrong_method_uses_envelope(self, client):
        resp = client.post("/vehicles")
        assert resp.status_code == 405
        assert resp.json() == {"error": {"code": "METHOD_NOT_ALLOWED", "message": "Method not allowed"}}
        assert "GET" in resp.headers["allow"]

    def test_unexpected_error_keeps_envelope_and_cors_headers(self, client, monkeypatch):
        async def explode(self):
            raise RuntimeError("driver blew up")

        monkeypatch.setattr(VehicleService, "list_vehicles", explode)
        resp = client.get("/vehicles")
        assert resp.status_code == 500
        assert resp.json() == {"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}}
        for name, value in CORS_HEADERS.items():
            assert resp.headers[name] == value


class TestStartup:
    def test_unreachable_database_aborts_startup(self, tmp_path):
        settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path}/missing/dir/x.db", app_env="test")
        with pytest.raises(Exception):
            with TestClient(create_app(settings)):
                pass

