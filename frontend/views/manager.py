# This project was developed with assistance from AI tools.
"""
Manager dashboard view - client portfolio for underwriters and sales staff.
"""
import streamlit as st

from config import config
from frontend.auth import get_current_user
from frontend.components import render_stat_card
from frontend.state import clear_client_draft, load_clients, navigate
from models import Client
from utils.formatting import format_currency, format_date
from utils.portfolio import (
    commission_total,
    expiring_policies,
    filter_clients,
    group_by,
    portfolio_stats,
)
from utils.validation import validate_quick_client


def _compact(amount: float) -> str:
    """Short currency figure for stat cards (e.g. LKR 1.2M)."""
    if amount >= 1_000_000:
        return f"{config.CURRENCY} {amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"{config.CURRENCY} {amount / 1_000:.1f}K"
    return format_currency(amount)


def render_overview(clients: list[Client]):
    """Headline cards plus policies ending soon."""
    stats = portfolio_stats(clients)

    row1 = st.columns(3)
    with row1[0]:
        render_stat_card("Total Clients", str(stats["total_clients"]))
    with row1[1]:
        render_stat_card("Total Policies", str(stats["total_policies"]))
    with row1[2]:
        render_stat_card("Sum Insured", _compact(stats["total_sum_insured"]))

    row2 = st.columns(3)
    with row2[0]:
        render_stat_card("Premium Written", _compact(stats["total_premium"]))
    with row2[1]:
        render_stat_card("Commission Earned", _compact(stats["total_commission"]))
    with row2[2]:
        render_stat_card("Documents on File", str(stats["documents_on_file"]))

    st.markdown("### Expiring in the next 30 days")
    expiring = expiring_policies(clients, within_days=30)
    if not expiring:
        st.caption("No policies expire in the next 30 days.")
    for row in expiring[:5]:
        st.markdown(
            f"- **{row['client'].client_name}** ({row['policy_no'] or 'no policy no'}) "
            f"ends {format_date(row['ends_on'])}, {row['days_left']} day(s) left"
        )


def render_quick_add():
    """Short intake form that pre-fills the full client form."""
    with st.expander("Quick Add Client", expanded=False):
        with st.form("quick_add_client"):
            col1, col2 = st.columns(2)
            with col1:
                name = st.text_input("Name")
                contact = st.text_input("Contact Number")
            with col2:
                nic = st.text_input("NIC/Passport", placeholder="901234567V")
                address = st.text_input("Address")
            submitted = st.form_submit_button("Continue")

        if not submitted:
            return

        data = {"name": name, "contact": contact, "nic": nic, "address": address}
        errors = validate_quick_client(data)
        if errors:
            for message in errors.values():
                st.error(message)
            return

        st.session_state.client_draft = {
            "client_name": name.strip(),
            "mobile_no": contact.strip(),
            "street1": address.strip(),
        }
        st.session_state.client_draft_nic = nic.strip().upper()
        navigate("client_form")


def render_client_list(clients: list[Client]):
    """Searchable, filterable client table with links to details."""
    user = get_current_user()

    col1, col2, col3 = st.columns([3, 2, 2])
    with col1:
        search_term = st.text_input("Search clients", placeholder="Name, policy no, email or phone")
    with col2:
        provider = st.selectbox("Provider", options=["all", *config.INSURANCE_PROVIDERS],
                                format_func=lambda p: "All providers" if p == "all" else p)
    with col3:
        product = st.selectbox("Product", options=["all", *config.PRODUCTS],
                               format_func=lambda p: "All products" if p == "all" else p)

    if user and user.can_manage_clients():
        action_col, _ = st.columns([1, 3])
        with action_col:
            if st.button("Add Client", type="primary", use_container_width=True):
                clear_client_draft()
                navigate("client_form")
        render_quick_add()

    matches = filter_clients(clients, search_term, provider, product)
    st.caption(f"{len(matches)} of {len(clients)} client(s)")

    if not matches:
        st.info("No clients match the current filters.")
        return

    header = st.columns([3, 2, 2, 2, 2, 1])
    for col, label in zip(header, ("Client", "Product", "Provider", "Policy No", "Premium", "")):
        col.markdown(f"**{label}**")

    for client in matches:
        cols = st.columns([3, 2, 2, 2, 2, 1])
        cols[0].write(client.client_name)
        cols[1].write(client.product)
        cols[2].write(client.insurance_provider)
        cols[3].write(client.policy_no or "-")
        cols[4].write(format_currency(client.total_invoice or client.net_premium))
        if cols[5].button("Open", key=f"open_{client.id}"):
            navigate("client_detail", client.id)


def _render_group_table(rows: list[dict], title: str, label: str):
    st.markdown(f"### {title}")
    if not rows:
        st.caption("No data")
        return
    st.dataframe(
        [
            {
                label: row["name"],
                "Clients": row["clients"],
                "Policies": row["policies"],
                "Premium": format_currency(row["premium"]),
                "Commission": format_currency(row["commission"]),
            }
            for row in rows
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_performance(clients: list[Client]):
    """Premium and commission per provider and per product."""
    _render_group_table(group_by(clients, "insurance_provider"), "By Provider", "Provider")
    _render_group_table(group_by(clients, "product"), "By Product", "Product")

    top = sorted(clients, key=commission_total, reverse=True)[:5]
    if top:
        st.markdown("### Top Clients by Commission")
        for client in top:
            st.markdown(f"- **{client.client_name}**: {format_currency(commission_total(client))}")


def render_policies(clients: list[Client]):
    """Policies ending soon, with a configurable window."""
    within_days = st.slider("Show policies ending within (days)", min_value=7, max_value=365, value=60, step=7)
    expiring = expiring_policies(clients, within_days=within_days)

    if not expiring:
        st.info(f"No policies end in the next {within_days} days.")
        return

    st.dataframe(
        [
            {
                "Client": row["client"].client_name,
                "Policy No": row["policy_no"] or "-",
                "Provider": row["client"].insurance_provider,
                "Ends": format_date(row["ends_on"]),
                "Days Left": row["days_left"],
            }
            for row in expiring
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_manager_view():
    """Render the manager dashboard."""
    top_col, refresh_col = st.columns([5, 1])
    with refresh_col:
        refresh = st.button("Refresh", use_container_width=True)
    clients = load_clients(force=refresh)

    user = get_current_user()
    if user and user.can_manage_users():
        with top_col:
            if st.button("User Management"):
                navigate("admin")

    tab_overview, tab_clients, tab_performance, tab_policies = st.tabs(
        ["Overview", "All Clients", "Performance", "Policies"]
    )

    with tab_overview:
        render_overview(clients)
    with tab_clients:
        render_client_list(clients)
    with tab_performance:
        render_performance(clients)
    with tab_policies:
        render_policies(clients)
