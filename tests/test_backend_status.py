"""Tests for the UI health fetcher (requests is stubbed)."""

from datetime import timedelta

import requests

import ui.components.backend_status as backend_status
from ui.components.backend_status import HealthSchema, fetch_backend_status, get_status_color


class StubResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.elapsed = timedelta(milliseconds=12)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_status_colors():
    assert get_status_color("OK") == "green"
    assert get_status_color("unconfigured") == "orange"
    assert get_status_color("mystery") == "gray"


def test_schema_color_follows_status():
    assert HealthSchema(status="offline").color() == "red"


def test_healthy_payload_is_validated(monkeypatch):
    payload = {"status": "unconfigured", "supabase_configured": False, "extra": "ignored"}
    monkeypatch.setattr(backend_status.requests, "get", lambda url, timeout: StubResponse(payload=payload))
    result = fetch_backend_status("http://backend.test/")
    assert result["status"] == "unconfigured"
    assert result["supabase_configured"] is False
    assert result["latency_ms"] == 12.0
    assert "extra" not in result


def test_offline_backend(monkeypatch):
    def refuse(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(backend_status.requests, "get", refuse)
    result = fetch_backend_status("http://backend.test")
    assert result["status"] == "offline"
    assert "ConnectionError" in result["message"]


def test_http_error(monkeypatch):
    monkeypatch.setattr(
        backend_status.requests, "get", lambda url, timeout: StubResponse(status_code=502, text="bad gateway")
    )
    result = fetch_backend_status("http://backend.test")
    assert result == {"status": "error", "message": "HTTP 502: bad gateway"}


def test_non_json_body(monkeypatch):
    monkeypatch.setattr(backend_status.requests, "get", lambda url, timeout: StubResponse(payload=None))
    assert fetch_backend_status("http://backend.test")["status"] == "error"
