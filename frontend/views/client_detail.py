# This project was developed with assistance from AI tools.
"""
Client details view - every field group, edit/delete and summary export.
"""
import logging

import httpx
import streamlit as st

from frontend.auth import get_current_user
from frontend.components import render_field_grid
from frontend.state import go_home, invalidate_clients, load_client, navigate
from frontend.views.documents import render_documents_panel
from models import Client
from utils.api_client import ApiError, get_api_client
from utils.formatting import display, format_address, format_currency, format_date
from utils.portfolio import commission_total
from utils.report_generator import render_client_summary, summary_filename

logger = logging.getLogger(__name__)


def client_sections(client: Client) -> list[tuple[str, list[tuple[str, str]]]]:
    """Display rows for each field group of a client."""
    return [
        ("Basic Information", [
            ("Client Name", display(client.client_name)),
            ("Customer Type", display(client.customer_type)),
            ("Introducer Code", display(client.introducer_code)),
            ("Product", display(client.product)),
            ("Insurance Provider", display(client.insurance_provider)),
            ("Branch", display(client.branch)),
        ]),
        ("Contact", [
            ("Mobile", display(client.mobile_no)),
            ("Telephone", display(client.telephone)),
            ("Email", display(client.email)),
            ("Contact Person", display(client.contact_person)),
            ("Social Media", display(client.social_media)),
            ("Address", format_address(client)),
        ]),
        ("Policy", [
            ("Policy Type", display(client.policy_type)),
            ("Policy No", display(client.policy_no)),
            ("Period From", format_date(client.policy_period_from)),
            ("Period To", format_date(client.policy_period_to)),
            ("Coverage", display(client.coverage)),
            ("Sum Insured", format_currency(client.sum_insured)),
        ]),
        ("Premium", [
            ("Basic Premium", format_currency(client.basic_premium)),
            ("SRCC Premium", format_currency(client.srcc_premium)),
            ("TC Premium", format_currency(client.tc_premium)),
            ("Net Premium", format_currency(client.net_premium)),
            ("Stamp Duty", format_currency(client.stamp_duty)),
            ("Admin Fees", format_currency(client.admin_fees)),
            ("Road Safety Fee", format_currency(client.road_safety_fee)),
            ("Policy Fee", format_currency(client.policy_fee)),
            ("VAT", format_currency(client.vat_fee)),
            ("Total Invoice", format_currency(client.total_invoice)),
        ]),
        ("Commission", [
            ("Commission Type", display(client.commission_type)),
            ("Basic", format_currency(client.commission_basic)),
            ("SRCC", format_currency(client.commission_srcc)),
            ("TC", format_currency(client.commission_tc)),
            ("Total", format_currency(commission_total(client))),
        ]),
    ]


def render_delete_confirmation(client: Client):
    st.warning(f"Delete {client.client_name}? This cannot be undone.")
    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        confirmed = st.button("Delete", type="primary", key="confirm_delete_yes", use_container_width=True)
    with col2:
        if st.button("Cancel", key="confirm_delete_no", use_container_width=True):
            st.session_state.confirm_delete = False
            st.rerun()

    if not confirmed:
        return

    try:
        get_api_client().delete_client(client.id)
    except (httpx.HTTPError, ApiError) as e:
        logger.error(f"Failed to delete client {client.id}: {e}")
        st.error(f"Failed to delete client: {e}")
        st.session_state.confirm_delete = False
        return

    invalidate_clients()
    go_home()


def render_client_detail_view():
    """Render the details page for the selected client."""
    client_id = st.session_state.get("selected_client_id")
    if not client_id:
        st.info("No client selected.")
        return

    client = load_client(client_id)

    if st.button("Back to Clients"):
        go_home()

    if client is None:
        return

    user = get_current_user()
    st.markdown(f"## {client.client_name}")

    cols = st.columns([1, 1, 2, 3])
    if user and user.can_manage_clients():
        with cols[0]:
            if st.button("Edit", use_container_width=True):
                navigate("client_form", client.id)
    if user and user.can_delete_clients():
        with cols[1]:
            if st.button("Delete", use_container_width=True):
                st.session_state.confirm_delete = True
    with cols[2]:
        st.download_button(
            "Download Summary PDF",
            data=render_client_summary(client),
            file_name=summary_filename(client),
            mime="application/pdf",
            use_container_width=True,
        )

    if st.session_state.get("confirm_delete"):
        render_delete_confirmation(client)

    for title, rows in client_sections(client):
        st.markdown(f"### {title}")
        render_field_grid(rows)

    st.divider()
    render_documents_panel(client)
