# This project was developed with assistance from AI tools.
"""
Streamlit back-office UI for the insurance brokerage.

Run with: streamlit run frontend/app.py
"""
import logging
import sys
from pathlib import Path

import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import config
from frontend.auth import get_current_user
from frontend.components import render_top_bar
from frontend.state import clear_client_draft, init_session_state, navigate
from frontend.views import (
    render_admin_view,
    render_client_detail_view,
    render_client_form_view,
    render_landing_page,
    render_manager_view,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="Insurance Brokerage Back Office",
    page_icon="briefcase",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 1.8rem;
        font-weight: 600;
        margin-bottom: 0.5rem;
        color: #1f2937;
    }
    .sub-header {
        font-size: 0.9rem;
        color: #6b7280;
        margin-bottom: 1.5rem;
    }
    .stat-card {
        background: #fff7ed;
        border: 1px solid #fed7aa;
        border-radius: 0.5rem;
        padding: 1rem;
        margin-bottom: 1rem;
    }
    .stat-label {
        font-size: 0.8rem;
        color: #9a3412;
        text-transform: uppercase;
    }
    .stat-value {
        font-size: 1.6rem;
        font-weight: 600;
        color: #1f2937;
    }
    .stat-note {
        font-size: 0.75rem;
        color: #6b7280;
    }
    .doc-card {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 0.5rem;
        padding: 0.75rem 1rem;
        margin: 0.75rem 0 0.5rem 0;
    }
    .doc-uploaded {
        border-left: 4px solid #10b981;
    }
    .doc-missing {
        border-left: 4px solid #d1d5db;
        opacity: 0.8;
    }
    .doc-title {
        font-weight: 600;
        font-size: 1rem;
        margin-bottom: 0.25rem;
    }
    .doc-detail {
        font-size: 0.85rem;
        color: #4b5563;
    }
    .doc-path {
        font-size: 0.75rem;
        color: #9ca3af;
        font-family: monospace;
    }
</style>
""", unsafe_allow_html=True)

VIEW_TITLES = {
    "admin": ("Admin Dashboard", "Manage back-office users"),
    "manager": ("Client Dashboard", "Clients, policies, premiums and commissions"),
    "client_form": ("Client", "Create or update a client record"),
    "client_detail": ("Client Details", "Policy, premium, commission and documents"),
}


def render_sidebar():
    """Render the sidebar navigation."""
    user = get_current_user()

    with st.sidebar:
        if user and user.can_manage_users():
            if st.button("User Management", use_container_width=True,
                         type="primary" if st.session_state.view_mode == "admin" else "secondary"):
                navigate("admin")

        if st.button("Clients", use_container_width=True,
                     type="primary" if st.session_state.view_mode == "manager" else "secondary"):
            navigate("manager")

        if user and user.can_manage_clients():
            if st.button("New Client", use_container_width=True):
                clear_client_draft()
                navigate("client_form")

        st.divider()
        st.caption(f"Backend: {config.API_URL}")


def main():
    """Main application entry point."""
    # Validate config first
    try:
        config.validate()
    except ValueError as e:
        st.error(f"Configuration Error: {e}")
        st.info("Please check API_URL in your .env file")
        return

    # Authentication gate
    if not render_landing_page():
        return

    init_session_state()
    render_sidebar()

    view_mode = st.session_state.view_mode
    title, subtitle = VIEW_TITLES.get(view_mode, VIEW_TITLES["manager"])
    render_top_bar(title, subtitle)

    if view_mode == "admin":
        render_admin_view()
    elif view_mode == "client_form":
        render_client_form_view()
    elif view_mode == "client_detail":
        render_client_detail_view()
    else:
        render_manager_view()


if __name__ == "__main__":
    main()
