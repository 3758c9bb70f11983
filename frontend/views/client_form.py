# This project was developed with assistance from AI tools.
"""
Client form view - create or edit a client with optional document uploads.
"""
import logging

import httpx
import streamlit as st
from pydantic import ValidationError

from config import config
from frontend.auth import Role, require_role
from frontend.state import clear_client_draft, go_home, invalidate_clients, load_client, navigate
from models import Client
from utils.api_client import ApiError, get_api_client
from utils.documents import DOCUMENT_CATEGORIES
from utils.validation import (
    clean_client_data,
    compute_totals,
    parse_date,
    validate_client_form,
    validate_upload,
)

logger = logging.getLogger(__name__)

PREMIUM_INPUTS = [
    ("sum_insured", "Sum Insured"),
    ("basic_premium", "Basic Premium"),
    ("srcc_premium", "SRCC Premium"),
    ("tc_premium", "TC Premium"),
    ("net_premium", "Net Premium (blank = calculate)"),
    ("stamp_duty", "Stamp Duty"),
    ("admin_fees", "Admin Fees"),
    ("road_safety_fee", "Road Safety Fee"),
    ("policy_fee", "Policy Fee"),
    ("vat_fee", "VAT"),
    ("total_invoice", "Total Invoice (blank = calculate)"),
]

COMMISSION_INPUTS = [
    ("commission_basic", "Commission Basic"),
    ("commission_srcc", "Commission SRCC"),
    ("commission_tc", "Commission TC"),
]


def _text(existing: dict, key: str) -> str:
    value = existing.get(key)
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _select(label: str, options: list[str], current: str | None, key: str) -> str:
    """Selectbox that keeps a stored value even if it is not in the option list."""
    choices = list(options)
    if current and current not in choices:
        choices.append(current)
    index = choices.index(current) if current in choices else 0
    return st.selectbox(label, options=choices, index=index, key=key)


def _render_fields(existing: dict) -> dict:
    """Render every field group and return the raw values."""
    data = {}

    st.markdown("#### Client")
    col1, col2, col3 = st.columns(3)
    with col1:
        data["client_name"] = st.text_input("Client Name *", value=_text(existing, "client_name"))
        data["customer_type"] = _select("Customer Type *", config.CUSTOMER_TYPES,
                                        existing.get("customer_type"), "customer_type")
        data["introducer_code"] = st.text_input("Introducer Code", value=_text(existing, "introducer_code"))
    with col2:
        data["product"] = _select("Product *", config.PRODUCTS, existing.get("product"), "product")
        data["insurance_provider"] = _select("Insurance Provider *", config.INSURANCE_PROVIDERS,
                                             existing.get("insurance_provider"), "insurance_provider")
        data["policy_"] = st.text_input("Policy", value=_text(existing, "policy_"))
    with col3:
        data["branch"] = st.text_input("Branch", value=_text(existing, "branch"))
        data["business_registration"] = st.text_input(
            "Business Registration No", value=_text(existing, "business_registration")
        )

    st.markdown("#### Address")
    col1, col2, col3 = st.columns(3)
    with col1:
        data["street1"] = st.text_input("Street 1", value=_text(existing, "street1"))
        data["street2"] = st.text_input("Street 2", value=_text(existing, "street2"))
    with col2:
        data["city"] = st.text_input("City", value=_text(existing, "city"))
        data["district"] = st.text_input("District", value=_text(existing, "district"))
    with col3:
        data["province"] = st.text_input("Province", value=_text(existing, "province"))

    st.markdown("#### Contact")
    col1, col2, col3 = st.columns(3)
    with col1:
        data["mobile_no"] = st.text_input("Mobile No *", value=_text(existing, "mobile_no"))
        data["telephone"] = st.text_input("Telephone", value=_text(existing, "telephone"))
    with col2:
        data["email"] = st.text_input("Email", value=_text(existing, "email"))
        data["contact_person"] = st.text_input("Contact Person", value=_text(existing, "contact_person"))
    with col3:
        data["social_media"] = st.text_input("Social Media", value=_text(existing, "social_media"))

    st.markdown("#### Policy")
    col1, col2, col3 = st.columns(3)
    with col1:
        data["policy_type"] = st.text_input("Policy Type", value=_text(existing, "policy_type"))
        data["policy_no"] = st.text_input("Policy No", value=_text(existing, "policy_no"))
    with col2:
        data["policy_period_from"] = st.date_input(
            "Period From", value=parse_date(existing.get("policy_period_from")), format="YYYY-MM-DD"
        )
        data["policy_period_to"] = st.date_input(
            "Period To", value=parse_date(existing.get("policy_period_to")), format="YYYY-MM-DD"
        )
    with col3:
        data["coverage"] = st.text_input("Coverage", value=_text(existing, "coverage"))
        data["debit_note"] = st.text_input("Debit Note", value=_text(existing, "debit_note"))

    st.markdown(f"#### Premium ({config.CURRENCY})")
    cols = st.columns(4)
    for index, (key, label) in enumerate(PREMIUM_INPUTS):
        with cols[index % 4]:
            data[key] = st.text_input(label, value=_text(existing, key), key=f"amount_{key}")

    st.markdown("#### Commission")
    cols = st.columns(4)
    with cols[0]:
        data["commission_type"] = _select("Commission Type", config.COMMISSION_TYPES,
                                          existing.get("commission_type"), "commission_type")
    for col, (key, label) in zip(cols[1:], COMMISSION_INPUTS):
        with col:
            data[key] = st.text_input(label, value=_text(existing, key), key=f"amount_{key}")

    return data


def _render_uploads(existing: dict) -> dict:
    """File uploaders for every document slot; returns field -> uploaded file."""
    st.markdown("#### Documents")
    st.caption(
        f"Allowed: {', '.join(config.ALLOWED_DOCUMENT_TYPES)}; up to {config.UPLOAD_MAX_MB} MB each. "
        "Uploading replaces the stored file."
    )

    uploads = {}
    for category, documents in DOCUMENT_CATEGORIES:
        with st.expander(category, expanded=False):
            cols = st.columns(2)
            for index, (label, field_name) in enumerate(documents):
                with cols[index % 2]:
                    help_text = f"On file: {existing[field_name]}" if existing.get(field_name) else None
                    uploaded = st.file_uploader(
                        label,
                        type=config.ALLOWED_DOCUMENT_TYPES,
                        key=f"upload_{field_name}",
                        help=help_text,
                    )
                    if uploaded is not None:
                        uploads[field_name] = uploaded
    return uploads


def _collect_files(uploads: dict) -> tuple[dict[str, tuple[str, bytes]], list[str]]:
    files, errors = {}, []
    for field_name, uploaded in uploads.items():
        error = validate_upload(uploaded.name, uploaded.size)
        if error:
            errors.append(error)
        else:
            files[field_name] = (uploaded.name, uploaded.getvalue())
    return files, errors


def save_client(client_id: str | None, raw: dict, files: dict[str, tuple[str, bytes]]) -> str:
    """
    Create or update a client through the backend.

    Returns:
        The client id
    """
    cleaned = clean_client_data(compute_totals(raw))
    client = Client(**cleaned)
    api = get_api_client()

    if client_id:
        # Fields emptied on the form go out as None so the backend clears them
        changes = {
            key: cleaned.get(key)
            for key in raw
            if key in Client.model_fields and key != "id"
        }
        if files:
            api.update_client_with_documents(client_id, changes, files)
        else:
            api.update_client(client_id, changes)
        return client_id

    if files:
        return api.create_client_with_documents(client, files)
    return api.create_client(client)


@require_role(Role.ADMIN, Role.MANAGER)
def render_client_form_view():
    """Render the create / edit client form."""
    client_id = st.session_state.get("selected_client_id")

    existing: dict = {}
    if client_id:
        client = load_client(client_id)
        if client is None:
            if st.button("Back"):
                go_home()
            return
        existing = client.model_dump()
        st.markdown(f"### Edit {client.client_name}")
    else:
        existing = dict(st.session_state.get("client_draft") or {})
        st.markdown("### New Client")
        nic = st.session_state.get("client_draft_nic")
        if nic:
            st.info(f"NIC/Passport {nic}: attach the NIC proof under Identity Documents.")

    with st.form("client_form"):
        raw = _render_fields(existing)
        uploads = _render_uploads(existing)

        col1, col2, _ = st.columns([1, 1, 4])
        with col1:
            submitted = st.form_submit_button("Save", type="primary", use_container_width=True)
        with col2:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        if client_id:
            navigate("client_detail", client_id)
        else:
            go_home()

    if not submitted:
        return

    raw = compute_totals(raw)
    errors = validate_client_form(raw)
    files, upload_errors = _collect_files(uploads)
    if errors or upload_errors:
        for field_name, message in errors.items():
            st.error(f"{field_name.replace('_', ' ').title()}: {message}")
        for message in upload_errors:
            st.error(message)
        return

    with st.spinner("Saving client..."):
        try:
            saved_id = save_client(client_id, raw, files)
        except (httpx.HTTPError, ApiError, ValidationError) as e:
            logger.error(f"Saving client failed: {e}")
            st.error(f"Failed to save client: {e}")
            return

    invalidate_clients()
    clear_client_draft()
    st.success("Client saved")
    navigate("client_detail", saved_id)
