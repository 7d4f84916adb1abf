# ui/components/configuration_notice.py
"""
Setup screen shown instead of the application while Supabase credentials are
still placeholders.
"""

from __future__ import annotations

import streamlit as st

from core.metadata import __project__

ENV_TEMPLATE = """\
SUPABASE_URL=YOUR_SUPABASE_URL            # <-- REPLACE THIS
SUPABASE_ANON_KEY=YOUR_SUPABASE_ANON_KEY  # <-- REPLACE THIS
"""


def render_configuration_notice() -> None:
    """Render the "Configuration Required" screen."""
    st.title("⚙️ Configuration Required")
    st.write(
        f"Welcome to {__project__}! To get started, please connect the "
        "application to your Supabase backend."
    )

    with st.container(border=True):
        st.markdown("**1. Create or open the following file in your code editor:**")
        st.code(".env", language=None)

    with st.container(border=True):
        st.markdown(
            "**2. Replace the placeholder values with your Supabase URL and Anon Key.** "
            "You can find these in your Supabase Project Settings under \"API\"."
        )
        st.code(ENV_TEMPLATE, language="bash")

    st.caption(
        "After you save the file, restart the app. If the page does not update, "
        "please refresh it."
    )
