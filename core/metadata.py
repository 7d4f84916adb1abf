"""
ZOGU Core Metadata
------------------
Project identity shared by the backend, the health report and the UI.
"""

__project__ = "ZOGU Solutions"
__version__ = "1.0.0"

CORE_METADATA = {
    "project": __project__,
    "version": __version__,
    "description": (
        "Field-service business backend (customers, quotes, invoices, visits) "
        "running on a Supabase project."
    ),
}

def get_metadata() -> dict:
    """Return current system metadata as a dict."""
    return dict(CORE_METADATA)
