"""Tests for environment loading and log-safe key rendering."""

import pytest

from core.logging_config import mask_key
from core.ui_config import SENTINEL_KEY, SENTINEL_URL, load_supabase_settings


class TestLoadSupabaseSettings:

    def test_unset_values_become_sentinels(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
        assert load_supabase_settings() == (SENTINEL_URL, SENTINEL_KEY)

    @pytest.mark.parametrize("blank", ["", "   ", "\n"])
    def test_blank_values_become_sentinels(self, monkeypatch, blank):
        monkeypatch.setenv("SUPABASE_URL", blank)
        monkeypatch.setenv("SUPABASE_ANON_KEY", blank)
        assert load_supabase_settings() == (SENTINEL_URL, SENTINEL_KEY)

    def test_values_are_stripped(self, monkeypatch, real_pair):
        url, key = real_pair
        monkeypatch.setenv("SUPABASE_URL", f"  {url}\n")
        monkeypatch.setenv("SUPABASE_ANON_KEY", f"{key} ")
        assert load_supabase_settings() == (url, key)

    def test_one_missing_value(self, monkeypatch, real_pair):
        monkeypatch.setenv("SUPABASE_URL", real_pair[0])
        monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
        assert load_supabase_settings() == (real_pair[0], SENTINEL_KEY)


class TestMaskKey:

    def test_empty(self):
        assert mask_key("") == ""
        assert mask_key(None) == ""

    def test_short_keys_fully_hidden(self):
        assert mask_key("abc123") == "***"

    def test_long_keys_keep_edges(self, real_pair):
        key = real_pair[1]
        masked = mask_key(key)
        assert masked.startswith(key[:6])
        assert masked.endswith(key[-4:])
        assert len(masked) < len(key)
