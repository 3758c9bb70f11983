# This project was developed with assistance from AI tools.
"""Tests for frontend.auth: roles, permissions and the view guard."""
from unittest.mock import MagicMock, patch

from frontend.auth import Role, User, require_role, user_from_credentials
from frontend.views.admin import filter_users
from models import UserAccount

CREDENTIALS = {
    "usernames": {
        "admin": {"name": "Admin User", "email": "admin@brokerage.local", "role": "admin"},
        "jane@x.lk": {"name": "Jane", "email": "jane@x.lk", "role": "manager"},
        "odd": {"name": "Odd", "role": "owner"},
    },
}


# ---------------------------------------------------------------------------
# Users and permissions
# ---------------------------------------------------------------------------

class TestUserFromCredentials:
    """Building the session user from the credential mapping."""

    def test_known_user(self):
        user = user_from_credentials("jane@x.lk", None, CREDENTIALS)
        assert user.role == Role.MANAGER
        assert user.name == "Jane"
        assert user.email == "jane@x.lk"

    def test_session_name_preferred(self):
        assert user_from_credentials("admin", "Boss", CREDENTIALS).name == "Boss"

    def test_unknown_role_is_sales(self):
        assert user_from_credentials("odd", None, CREDENTIALS).role == Role.SALES

    def test_unknown_user(self):
        assert user_from_credentials("ghost", None, CREDENTIALS) is None


class TestPermissions:
    """Role capabilities."""

    def test_admin(self):
        user = User("admin", "Admin", Role.ADMIN)
        assert user.can_manage_users()
        assert user.can_manage_clients()
        assert user.can_repair_documents()
        assert user.home_view == "admin"

    def test_manager(self):
        user = User("jane", "Jane", Role.MANAGER)
        assert not user.can_manage_users()
        assert user.can_manage_clients()
        assert user.can_delete_clients()
        assert user.home_view == "manager"

    def test_sales_read_only(self):
        user = User("mike", "Mike", Role.SALES)
        assert user.can_view_clients()
        assert not user.can_manage_clients()
        assert not user.can_delete_clients()
        assert not user.can_repair_documents()
        assert user.home_view == "manager"

    def test_display_names(self):
        assert Role.MANAGER.display_name == "Underwriter"
        assert Role.SALES.display_name == "Sales Personnel"


# ---------------------------------------------------------------------------
# View guard
# ---------------------------------------------------------------------------

class TestRequireRole:
    """require_role decorator."""

    @staticmethod
    def _guarded():
        @require_role(Role.ADMIN, Role.MANAGER)
        def view(value):
            return f"rendered {value}"
        return view

    def test_allowed(self):
        with patch("frontend.auth.get_current_user", return_value=User("jane", "Jane", Role.MANAGER)):
            assert self._guarded()("clients") == "rendered clients"

    def test_denied(self):
        st = MagicMock()
        with patch("frontend.auth.get_current_user", return_value=User("mike", "Mike", Role.SALES)), \
             patch("frontend.auth.st", st):
            assert self._guarded()("clients") is None
        st.error.assert_called_once()

    def test_logged_out(self):
        st = MagicMock()
        with patch("frontend.auth.get_current_user", return_value=None), \
             patch("frontend.auth.st", st):
            assert self._guarded()("clients") is None
        st.warning.assert_called_once()


class TestFilterUsers:
    """Admin dashboard user search."""

    USERS = [
        UserAccount(name="Jane Smith", email="jane@x.lk", role="manager"),
        UserAccount(name="Mike Johnson", email="mike@x.lk", role="sales"),
        UserAccount(name="Admin User", email="admin@brokerage.local", role="admin"),
    ]

    def test_search_name_and_email(self):
        assert [u.name for u in filter_users(self.USERS, "JOHN")] == ["Mike Johnson"]
        assert [u.name for u in filter_users(self.USERS, "brokerage")] == ["Admin User"]

    def test_role(self):
        assert [u.name for u in filter_users(self.USERS, role="manager")] == ["Jane Smith"]
        assert filter_users(self.USERS, "jane", role="sales") == []

    def test_no_filters(self):
        assert len(filter_users(self.USERS)) == 3
