# This project was developed with assistance from AI tools.
"""
Shared UI components for the Streamlit frontend.
"""
from html import escape

import streamlit as st

from frontend.auth import get_authenticator, get_current_user
from models import DocumentItem
from utils.formatting import truncate_path


def render_top_bar(title: str, subtitle: str = ""):
    """Render the top bar with page title on left, user info and logout on right."""
    user = get_current_user()
    if not user:
        return

    col1, col2, col3 = st.columns([6, 2, 1])

    with col1:
        st.markdown(f'<div class="main-header">{title}</div>', unsafe_allow_html=True)
        if subtitle:
            st.markdown(f'<div class="sub-header">{subtitle}</div>', unsafe_allow_html=True)

    with col2:
        st.markdown(
            f"<div style='text-align: right; padding-top: 0.25rem; color: #9ca3af; font-size: 0.9rem;'>"
            f"<strong>{escape(user.name)}</strong> ({user.role.display_name})"
            f"</div>",
            unsafe_allow_html=True
        )

    with col3:
        authenticator = get_authenticator()
        authenticator.logout(button_name="Logout", location="main")


def render_stat_card(label: str, value: str, note: str = ""):
    """Render one headline figure on the dashboard."""
    st.markdown(f"""
    <div class="stat-card">
        <div class="stat-label">{label}</div>
        <div class="stat-value">{value}</div>
        <div class="stat-note">{note}</div>
    </div>
    """, unsafe_allow_html=True)


def render_field_grid(rows: list[tuple[str, str]], columns: int = 3):
    """Render label/value pairs in a grid of columns."""
    cols = st.columns(columns)
    for index, (label, value) in enumerate(rows):
        with cols[index % columns]:
            st.caption(label)
            st.markdown(f"**{escape(value)}**")


def render_document_card(doc: DocumentItem):
    """Render the header of a document slot: label, file name and stored path."""
    status = "doc-uploaded" if doc.uploaded else "doc-missing"
    file_line = escape(doc.file_name) if doc.uploaded else "Not uploaded"
    st.markdown(f"""
    <div class="doc-card {status}">
        <div class="doc-title">{escape(doc.label)}</div>
        <div class="doc-detail">{file_line}</div>
        <div class="doc-path" title="{escape(doc.url or '')}">{escape(truncate_path(doc.url))}</div>
    </div>
    """, unsafe_allow_html=True)
