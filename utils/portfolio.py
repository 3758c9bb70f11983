# This project was developed with assistance from AI tools.
"""
Client list filtering and portfolio figures for the manager dashboard.

Everything here works on the in-memory client list fetched from the backend.
"""
from datetime import date, timedelta

from models import Client
from utils.documents import build_document_categories, count_documents
from utils.validation import parse_date


def commission_total(client: Client) -> float:
    """Basic + SRCC + TC commission for one client."""
    return sum(
        value or 0.0
        for value in (client.commission_basic, client.commission_srcc, client.commission_tc)
    )


def policy_count(client: Client) -> int:
    """Policies held by a client: the explicit count, else 1 if a policy number is on file."""
    if client.policies is not None:
        return client.policies
    return 1 if client.policy_no else 0


def matches_search(client: Client, search_term: str) -> bool:
    """Case-insensitive match on name, business registration, policy number, email and introducer; substring on phones."""
    term = (search_term or "").strip().lower()
    if not term:
        return True

    text_fields = (
        client.client_name,
        client.business_registration,
        client.policy_no,
        client.email,
        client.introducer_code,
        client.contact_person,
    )
    if any(term in (value or "").lower() for value in text_fields):
        return True

    return any(term in (value or "") for value in (client.mobile_no, client.telephone))


def filter_clients(
    clients: list[Client],
    search_term: str = "",
    provider: str = "all",
    product: str = "all",
) -> list[Client]:
    """Apply the dashboard search box and the provider / product dropdowns."""
    return [
        client for client in clients
        if matches_search(client, search_term)
        and (provider == "all" or client.insurance_provider == provider)
        and (product == "all" or client.product == product)
    ]


def portfolio_stats(clients: list[Client]) -> dict:
    """Headline figures for the overview cards."""
    return {
        "total_clients": len(clients),
        "total_policies": sum(policy_count(c) for c in clients),
        "total_sum_insured": sum(c.sum_insured or 0.0 for c in clients),
        "total_premium": sum(c.total_invoice or c.net_premium or 0.0 for c in clients),
        "total_commission": sum(commission_total(c) for c in clients),
        "documents_on_file": sum(count_documents(build_document_categories(c)) for c in clients),
    }


def group_by(clients: list[Client], field: str) -> list[dict]:
    """
    Aggregate clients by a field such as insurance_provider or product.

    Returns:
        One row per value with client count, premium and commission,
        highest premium first
    """
    groups: dict[str, dict] = {}
    for client in clients:
        key = getattr(client, field, None) or "Unspecified"
        row = groups.setdefault(key, {"name": key, "clients": 0, "policies": 0, "premium": 0.0, "commission": 0.0})
        row["clients"] += 1
        row["policies"] += policy_count(client)
        row["premium"] += client.total_invoice or client.net_premium or 0.0
        row["commission"] += commission_total(client)

    return sorted(groups.values(), key=lambda r: (-r["premium"], r["name"]))


def expiring_policies(clients: list[Client], within_days: int = 30, today: date | None = None) -> list[dict]:
    """Policies whose period ends within the window (already-expired ones excluded), soonest first."""
    today = today or date.today()
    horizon = today + timedelta(days=within_days)

    expiring = []
    for client in clients:
        end = parse_date(client.policy_period_to)
        if end and today <= end <= horizon:
            expiring.append({
                "client": client,
                "policy_no": client.policy_no,
                "ends_on": end,
                "days_left": (end - today).days,
            })

    expiring.sort(key=lambda row: row["ends_on"])
    return expiring
