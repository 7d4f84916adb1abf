# ui/components/backend_status.py
"""
Centralized backend health indicator for Streamlit pages.

Features
--------
✅ Environment-aware: Reads BACKEND_URL from core.ui_config.
✅ Type-safe: Uses Pydantic to validate the /health schema.
✅ Caching: Efficient via st.cache_data with configurable TTL.
✅ Graceful fallback: Never crashes UI even if backend is offline.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests
import streamlit as st
from pydantic import BaseModel, Field

from core.ui_config import BACKEND_URL, CACHE_TTL

STATUS_COLORS = {
    "ok": "green",
    "healthy": "green",
    "unconfigured": "orange",
    "degraded": "orange",
    "error": "red",
    "offline": "red",
}


def get_status_color(status: str) -> str:
    """Public helper for coloring elements dynamically by status."""
    return STATUS_COLORS.get(status.lower(), "gray")


# --------------------------------------------------------------------------- #
# Typed Health Schema
# --------------------------------------------------------------------------- #

class HealthSchema(BaseModel):
    """Structured schema for the /health endpoint response."""
    status: str = Field(default="unknown", description="Overall backend status")
    message: Optional[str] = Field(default=None, description="Optional status message")
    version: Optional[str] = Field(default=None, description="Backend version string")
    supabase_configured: Optional[bool] = Field(default=None, description="Supabase Configured flag")
    supabase_url: Optional[str] = Field(default=None, description="Effective Supabase URL")
    cpu_load: Optional[float] = Field(default=None, description="Backend CPU load (optional)")
    memory_usage: Optional[float] = Field(default=None, description="Backend memory usage in MB")
    latency_ms: Optional[float] = Field(default=None, description="Approximate round-trip latency in ms")

    def color(self) -> str:
        return get_status_color(self.status)


# --------------------------------------------------------------------------- #
# Health Fetcher (cached + resilient)
# --------------------------------------------------------------------------- #

def fetch_backend_status(backend_url: str = BACKEND_URL) -> Dict[str, Any]:
    """
    Fetch the backend /health endpoint with structured fallback.

    Returns
    -------
    dict
        Validated health payload or a structured error dict.
    """
    url = f"{backend_url.rstrip('/')}/health"
    try:
        resp = requests.get(url, timeout=5)
    except requests.exceptions.RequestException as e:
        return {
            "status": "offline",
            "message": f"Backend unreachable at {backend_url} ({e.__class__.__name__})",
        }

    if resp.status_code != 200:
        return {
            "status": "error",
            "message": f"HTTP {resp.status_code}: {resp.text[:100]}",
        }

    try:
        data = resp.json()
    except ValueError:
        return {"status": "error", "message": "Backend returned non-JSON health payload."}

    data["latency_ms"] = round(resp.elapsed.total_seconds() * 1000, 2)
    return HealthSchema(**data).model_dump()


@st.cache_data(ttl=CACHE_TTL)
def get_backend_status() -> Dict[str, Any]:
    return fetch_backend_status()


# --------------------------------------------------------------------------- #
# UI Renderer
# --------------------------------------------------------------------------- #

def render_status_bar(expanded: bool = False):
    """
    Render a compact backend health summary in the sidebar.

    Parameters
    ----------
    expanded : bool
        If True, show detailed diagnostics; else compact mode.
    """
    st.sidebar.markdown("---")
    st.sidebar.caption("### 🔍 Backend Status")

    health = get_backend_status()
    status = health.get("status", "unknown")

    st.sidebar.markdown(
        f"<span style='color:{get_status_color(status)}; font-weight:600;'>● {status.upper()}</span>",
        unsafe_allow_html=True,
    )

    msg = health.get("message")
    if msg:
        st.sidebar.caption(f"💬 {msg}")

    if health.get("supabase_configured"):
        st.sidebar.caption("☁️ Supabase: configured")
    else:
        st.sidebar.caption("☁️ Supabase: not configured")

    if expanded:
        with st.sidebar.expander("Advanced diagnostics", expanded=False):
            latency = health.get("latency_ms")
            if latency:
                st.write(f"⏱ Latency: {latency} ms")
            if health.get("cpu_load") is not None:
                st.write(f"🧠 CPU load: {health['cpu_load']}%")
            if health.get("memory_usage") is not None:
                st.write(f"💾 Memory: {health['memory_usage']} MB")
            if health.get("version"):
                st.write(f"🧩 Version: {health['version']}")
            st.json(health)
