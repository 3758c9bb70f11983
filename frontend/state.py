# This project was developed with assistance from AI tools.
"""
Session state management for the Streamlit frontend.
"""
import logging

import httpx
import streamlit as st

from frontend.auth import get_current_user
from models import Client
from utils.api_client import ApiError, get_api_client

logger = logging.getLogger(__name__)

# Views reachable through navigate(); the dashboards are role homes
VIEWS = ("admin", "manager", "client_form", "client_detail")


def init_session_state():
    """Initialize session state variables for authenticated users."""
    user = get_current_user()

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = user.home_view if user else "manager"

    # Only administrators may stay on the user management view
    if user and not user.can_manage_users() and st.session_state.view_mode == "admin":
        st.session_state.view_mode = user.home_view

    # Sales users cannot open the create/edit form
    if user and not user.can_manage_clients() and st.session_state.view_mode == "client_form":
        st.session_state.view_mode = user.home_view

    if "selected_client_id" not in st.session_state:
        st.session_state.selected_client_id = None

    if "confirm_delete" not in st.session_state:
        st.session_state.confirm_delete = False

    if "document_previews" not in st.session_state:
        st.session_state.document_previews = {}

    if "document_diagnostics" not in st.session_state:
        st.session_state.document_diagnostics = {}


def navigate(view: str, client_id: str | None = None):
    """Switch to another view and rerun."""
    if view not in VIEWS:
        raise ValueError(f"Unknown view: {view}")

    st.session_state.view_mode = view
    st.session_state.selected_client_id = client_id
    st.session_state.confirm_delete = False
    st.session_state.document_previews = {}
    st.session_state.document_diagnostics = {}
    st.rerun()


def go_home():
    user = get_current_user()
    navigate(user.home_view if user else "manager")


def load_clients(force: bool = False) -> list[Client]:
    """
    Client list for the dashboards, cached for the session.

    Returns an empty list and shows an error if the backend is unreachable.
    """
    if force or "clients" not in st.session_state:
        try:
            st.session_state.clients = get_api_client().get_all_clients()
        except (httpx.HTTPError, ApiError) as e:
            logger.error(f"Failed to load clients: {e}")
            st.error(f"Could not load clients from the backend: {e}")
            return []
    return st.session_state.clients


def invalidate_clients():
    """Forget the cached client list after a create, update or delete."""
    st.session_state.pop("clients", None)


def clear_client_draft():
    """Drop the quick-add prefill and its NIC reminder."""
    st.session_state.pop("client_draft", None)
    st.session_state.pop("client_draft_nic", None)


def load_client(client_id: str) -> Client | None:
    """Fetch one client fresh from the backend."""
    try:
        return get_api_client().get_client_by_id(client_id)
    except (httpx.HTTPError, ApiError) as e:
        logger.error(f"Failed to load client {client_id}: {e}")
        st.error(f"Could not load client {client_id}: {e}")
        return None
