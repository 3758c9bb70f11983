# This project was developed with assistance from AI tools.
"""
Landing page view - sign-in for back-office staff.
"""
import streamlit as st

from frontend.auth import render_login

DEMO_CREDENTIALS = [
    ("Administrator", "admin", "admin123"),
    ("Underwriter", "manager", "manager123"),
    ("Sales Personnel", "sales", "sales123"),
]


def render_landing_page() -> bool:
    """
    Render the public landing page with the login form.

    The login widget also restores sessions from the cookie, so it runs on
    every page load; the heading is only filled in for signed-out visitors.

    Returns:
        True once the user is authenticated
    """
    header = st.container()

    _, center, _ = st.columns([1, 2, 1])
    with center:
        if render_login():
            return True

        if st.session_state.get("authentication_status") is None:
            st.markdown("---")
            st.caption("**Demo Credentials**")
            for role, username, password in DEMO_CREDENTIALS:
                st.code(f"{username} / {password}  ({role})", language=None)

    with header:
        st.markdown('<div class="main-header">Insurance Brokerage Back Office</div>', unsafe_allow_html=True)
        st.markdown(
            '<div class="sub-header">Clients, policies, premiums, commissions and proof documents</div>',
            unsafe_allow_html=True
        )

    return False
