"""Shared fixtures: isolate the Supabase singleton and environment per test."""

import pytest

import supabase_client.config as sb_config
from core.ui_config import SENTINEL_KEY, SENTINEL_URL

REAL_URL = "https://abc.supabase.co"
REAL_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJpc3MiOiJzdXBhYmFzZSIsInJlZiI6ImFiYyIsInJvbGUiOiJhbm9uIiwiaWF0IjoxNzAwMDAwMDAwLCJleHAiOjIwMDAwMDAwMDB9"
    ".c2lnbmF0dXJlLWZvci10ZXN0cw"
)


@pytest.fixture(autouse=True)
def fresh_provision(monkeypatch):
    """Every test starts without a provisioned client; the original is restored afterwards."""
    monkeypatch.setattr(sb_config, "_provision", None)


@pytest.fixture
def placeholder_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", SENTINEL_URL)
    monkeypatch.setenv("SUPABASE_ANON_KEY", SENTINEL_KEY)


@pytest.fixture
def real_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", REAL_URL)
    monkeypatch.setenv("SUPABASE_ANON_KEY", REAL_KEY)


@pytest.fixture
def real_pair():
    return REAL_URL, REAL_KEY
