# This project was developed with assistance from AI tools.
"""
Admin dashboard view - back-office user management.
"""
import streamlit as st

from config import config
from frontend.auth import Role, require_role, reset_authenticator
from frontend.components import render_stat_card
from frontend.state import navigate
from models import UserAccount
from utils.formatting import format_date
from utils.user_store import DuplicateUserError, get_user_store
from utils.validation import validate_user_form


def filter_users(users: list[UserAccount], search_term: str = "", role: str = "all") -> list[UserAccount]:
    """Case-insensitive name/email search plus role dropdown."""
    term = search_term.strip().lower()
    return [
        user for user in users
        if (not term or term in user.name.lower() or term in user.email.lower())
        and (role == "all" or user.role == role)
    ]


def render_user_stats(users: list[UserAccount]):
    cols = st.columns(4)
    with cols[0]:
        render_stat_card("Total Users", str(len(users)))
    with cols[1]:
        render_stat_card("Active", str(sum(1 for u in users if u.status == "active")))
    for col, role in zip(cols[2:], ("manager", "sales")):
        with col:
            render_stat_card(config.USER_ROLES[role], str(sum(1 for u in users if u.role == role)))


def render_create_user_form():
    """Render the create-user form and save valid submissions."""
    with st.form("create_user", clear_on_submit=True):
        st.markdown("### Add User")
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Full Name")
            email = st.text_input("Email")
        with col2:
            role = st.selectbox(
                "Role",
                options=list(config.USER_ROLES),
                format_func=lambda key: config.USER_ROLES[key],
            )
            password = st.text_input("Password", type="password")

        submitted = st.form_submit_button("Create User", type="primary")

    if not submitted:
        return

    data = {"name": name, "email": email, "role": role, "password": password}
    errors = validate_user_form(data)
    if errors:
        for message in errors.values():
            st.error(message)
        return

    try:
        account = get_user_store().create_user(name, email, role, password)
    except DuplicateUserError as e:
        st.error(str(e))
        return

    # New accounts must be visible to the login widget
    reset_authenticator()
    st.success(f"Created {config.USER_ROLES[account.role]} account for {account.email}")


def render_user_table(users: list[UserAccount]):
    """Render the user list with activate/deactivate controls."""
    if not users:
        st.info("No users match the current filters.")
        return

    header = st.columns([3, 3, 2, 1, 2, 2])
    for col, label in zip(header, ("Name", "Email", "Role", "Status", "Created", "")):
        col.markdown(f"**{label}**")

    store = get_user_store()
    for user in users:
        cols = st.columns([3, 3, 2, 1, 2, 2])
        cols[0].write(user.name)
        cols[1].write(user.email)
        cols[2].write(config.USER_ROLES[user.role])
        cols[3].write("Active" if user.status == "active" else "Inactive")
        cols[4].write(format_date(user.created_at) if user.id is not None else "-")

        if user.id is None:
            cols[5].caption("Built-in")
            continue

        target = "inactive" if user.status == "active" else "active"
        label = "Deactivate" if target == "inactive" else "Activate"
        if cols[5].button(label, key=f"status_{user.email}", use_container_width=True):
            store.set_status(user.email, target)
            reset_authenticator()
            st.rerun()


@require_role(Role.ADMIN)
def render_admin_view():
    """Render the admin dashboard."""
    store = get_user_store()
    users = store.static_accounts() + store.list_users()

    render_user_stats(users)
    st.markdown("")

    tab_users, tab_create = st.tabs(["Users", "Add User"])

    with tab_users:
        col1, col2, col3 = st.columns([3, 2, 2])
        with col1:
            search_term = st.text_input("Search users", placeholder="Name or email")
        with col2:
            role = st.selectbox(
                "Role",
                options=["all", *config.USER_ROLES],
                format_func=lambda key: "All roles" if key == "all" else config.USER_ROLES[key],
            )
        with col3:
            st.markdown("")
            if st.button("Open Client Dashboard", use_container_width=True):
                navigate("manager")

        render_user_table(filter_users(users, search_term, role))

    with tab_create:
        render_create_user_form()
