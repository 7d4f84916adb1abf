"""Tests for the Streamlit launcher's configured / not-configured branch."""

from datetime import timedelta
from pathlib import Path

import pytest
import requests
import streamlit as st
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "ui" / "app.py"


class StubHealthResponse:
    status_code = 200
    text = ""
    elapsed = timedelta(milliseconds=5)

    def json(self):
        return {"status": "ok", "supabase_configured": True}


@pytest.fixture
def stub_backend(monkeypatch):
    calls = []

    def fake_get(url, timeout=None, **kwargs):
        calls.append(url)
        return StubHealthResponse()

    monkeypatch.setattr(requests, "get", fake_get)
    st.cache_data.clear()
    yield calls
    st.cache_data.clear()


def run_app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


class TestLauncher:

    def test_placeholders_render_configuration_notice(self, placeholder_env, stub_backend):
        at = run_app()
        titles = [t.value for t in at.title]
        assert len(titles) == 1
        assert "Configuration Required" in titles[0]
        assert not any("Welcome" in t for t in titles)
        assert len(at.json) == 0
        assert stub_backend == []

    def test_notice_shows_env_template(self, placeholder_env, stub_backend):
        at = run_app()
        code_blocks = [c.value for c in at.code]
        assert any("SUPABASE_URL=YOUR_SUPABASE_URL" in c for c in code_blocks)
        assert any("SUPABASE_ANON_KEY=YOUR_SUPABASE_ANON_KEY" in c for c in code_blocks)

    def test_real_credentials_render_overview(self, real_env, stub_backend):
        at = run_app()
        titles = [t.value for t in at.title]
        assert any("Welcome to ZOGU Solutions" in t for t in titles)
        assert not any("Configuration Required" in t for t in titles)
        assert len(at.json) >= 1
        assert len(stub_backend) == 1
        assert stub_backend[0].endswith("/health")
