"""
ZOGU Streamlit Launcher
------------------------
Main entrypoint for the UI.

Shows the configuration notice while Supabase runs on placeholder
credentials; otherwise renders the overview with the backend status bar.
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

import streamlit as st

from core.logging_config import configure_logging
from core.metadata import __project__, get_metadata
from supabase_client.config import get_provision
from ui.components.backend_status import render_status_bar
from ui.components.configuration_notice import render_configuration_notice

configure_logging()
st.set_page_config(page_title=__project__, layout="wide")

provision = get_provision()

if not provision.configured:
    render_configuration_notice()
    st.stop()

st.title(f"🚀 Welcome to {__project__}")
st.caption(get_metadata()["description"])

col1, col2 = st.columns(2)
with col1:
    st.subheader("☁️ Supabase")
    st.success("Connected project configured ✅")
    st.json(provision.credentials.masked())
with col2:
    st.subheader("🧩 Backend")
    st.caption("Live status is shown in the sidebar.")

render_status_bar(expanded=True)

st.markdown("---")
st.caption(f"© {__project__}")
