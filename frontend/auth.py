# This project was developed with assistance from AI tools.
"""
Authentication utilities for the Streamlit application.

Provides role-based access control with three personas:
- admin: Manages back-office users and has full client access
- manager: Underwriter; manages clients and repairs document paths
- sales: Sales personnel; read-only access to clients
"""
import logging
from dataclasses import dataclass
from enum import Enum

import streamlit as st
import streamlit_authenticator as stauth

from config import config
from utils.user_store import get_user_store, load_auth_config

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """User roles with their permissions."""
    ADMIN = "admin"
    MANAGER = "manager"
    SALES = "sales"

    @property
    def display_name(self) -> str:
        return config.USER_ROLES[self.value]


@dataclass
class User:
    """Authenticated user information."""
    username: str
    name: str
    role: Role
    email: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER

    def can_manage_users(self) -> bool:
        """Check if user can create and deactivate accounts."""
        return self.is_admin

    def can_manage_clients(self) -> bool:
        """Check if user can create and edit client records."""
        return self.role in (Role.ADMIN, Role.MANAGER)

    def can_delete_clients(self) -> bool:
        return self.role in (Role.ADMIN, Role.MANAGER)

    def can_repair_documents(self) -> bool:
        """Check if user can trigger the backend document path repair."""
        return self.role in (Role.ADMIN, Role.MANAGER)

    def can_view_clients(self) -> bool:
        return True

    @property
    def home_view(self) -> str:
        """View shown right after login."""
        return "admin" if self.is_admin else "manager"


def user_from_credentials(username: str, name: str | None, credentials: dict) -> User | None:
    """
    Build a User from the streamlit-authenticator credential mapping.

    Unknown roles fall back to the least privileged one.
    """
    user_config = credentials.get("usernames", {}).get(username)
    if user_config is None:
        return None

    role_str = user_config.get("role", Role.SALES.value)
    try:
        role = Role(role_str)
    except ValueError:
        logger.warning(f"Unknown role {role_str!r} for {username}, treating as sales")
        role = Role.SALES

    return User(
        username=username,
        name=name or user_config.get("name", username),
        role=role,
        email=user_config.get("email", ""),
    )


def get_authenticator() -> stauth.Authenticate:
    """
    Get or create the authenticator instance.

    Returns:
        Configured Authenticate instance
    """
    if "authenticator" not in st.session_state:
        auth_config = load_auth_config()
        st.session_state.authenticator = stauth.Authenticate(
            credentials=get_user_store().credentials(),
            cookie_name=auth_config["cookie"]["name"],
            cookie_key=auth_config["cookie"]["key"],
            cookie_expiry_days=auth_config["cookie"]["expiry_days"],
        )
    return st.session_state.authenticator


def reset_authenticator():
    """Drop the cached authenticator so newly created accounts can log in."""
    st.session_state.pop("authenticator", None)


def get_current_user() -> User | None:
    """
    Get the currently authenticated user.

    Returns:
        User object if authenticated, None otherwise
    """
    if not st.session_state.get("authentication_status"):
        return None

    username = st.session_state.get("username")
    if not username:
        return None

    return user_from_credentials(
        username,
        st.session_state.get("name"),
        get_user_store().credentials(),
    )


def require_role(*allowed: Role):
    """
    Decorator to restrict a view to the given roles.

    Usage:
        @require_role(Role.ADMIN)
        def admin_only_view():
            ...
    """
    def decorator(func):
        def wrapper(*args, **kwargs):
            user = get_current_user()
            if not user:
                st.warning("Please log in to access this feature.")
                return None
            if user.role not in allowed:
                st.error("You don't have permission to access this feature.")
                return None
            return func(*args, **kwargs)
        return wrapper
    return decorator


def render_login() -> bool:
    """
    Render the login form.

    Returns:
        True if user is authenticated, False otherwise
    """
    authenticator = get_authenticator()

    authenticator.login(location="main")

    if st.session_state.get("authentication_status"):
        return True
    elif st.session_state.get("authentication_status") is False:
        st.error("Username or password is incorrect")

    return False

