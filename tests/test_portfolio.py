# This project was developed with assistance from AI tools.
"""Tests for utils.portfolio: dashboard filtering and figures."""
from datetime import date

import pytest

from models import Client
from utils.portfolio import (
    commission_total,
    expiring_policies,
    filter_clients,
    group_by,
    matches_search,
    policy_count,
    portfolio_stats,
)
from utils.sample_data import sample_clients


@pytest.fixture
def clients() -> list[Client]:
    return [client.model_copy(update={"id": str(i)}) for i, client in enumerate(sample_clients(), start=1)]


class TestSearch:
    """Search box matching."""

    def test_blank_matches_everything(self, clients):
        assert all(matches_search(c, "  ") for c in clients)

    def test_name_case_insensitive(self, clients):
        assert [c.client_name for c in filter_clients(clients, "FERNANDO")] == ["John Fernando"]

    def test_policy_number_and_email(self, clients):
        assert [c.client_name for c in filter_clients(clients, "pol-fi")] == ["ABC Enterprises"]
        assert [c.client_name for c in filter_clients(clients, "yahoo")] == ["Priya Gunasekara"]

    def test_phone_substring(self, clients):
        assert [c.client_name for c in filter_clients(clients, "0778765")] == ["XYZ Holdings"]

    def test_business_registration(self, clients):
        clients[1].business_registration = "PV-12345"
        assert [c.client_name for c in filter_clients(clients, "pv-123")] == ["ABC Enterprises"]

    def test_no_match(self, clients):
        assert filter_clients(clients, "nobody") == []


class TestDropdownFilters:
    """Provider and product filters combine with the search term."""

    def test_provider(self, clients):
        names = [c.client_name for c in filter_clients(clients, provider="AIA Insurance")]
        assert names == ["John Fernando", "Lakshmi Silva"]

    def test_product(self, clients):
        assert [c.client_name for c in filter_clients(clients, product="Fire Insurance")] == ["ABC Enterprises"]

    def test_combined(self, clients):
        assert filter_clients(clients, "silva", provider="AIA Insurance", product="Motor Insurance") == []


class TestFigures:
    """Headline stats and groupings."""

    def test_commission_total(self, clients):
        assert commission_total(clients[0]) == 6360

    def test_policy_count(self, clients):
        assert policy_count(clients[0]) == 1
        assert policy_count(clients[0].model_copy(update={"policies": 3})) == 3
        assert policy_count(clients[0].model_copy(update={"policy_no": None})) == 0

    def test_portfolio_stats(self, clients):
        stats = portfolio_stats(clients)
        assert stats["total_clients"] == 5
        assert stats["total_policies"] == 5
        assert stats["total_sum_insured"] == 44_500_000
        assert stats["total_premium"] == 655_950
        assert stats["total_commission"] == 66_410
        assert stats["documents_on_file"] == 0

    def test_stats_empty(self):
        stats = portfolio_stats([])
        assert stats["total_clients"] == 0
        assert stats["total_premium"] == 0

    def test_group_by_provider(self, clients):
        rows = group_by(clients, "insurance_provider")
        assert [r["name"] for r in rows] == [
            "Allianz Insurance", "Ceylinco Insurance", "AIA Insurance", "Union Assurance",
        ]
        aia = rows[2]
        assert aia["clients"] == 2
        assert aia["premium"] == 163_370
        assert aia["commission"] == 6360 + 8750

    def test_group_by_missing_value(self, clients):
        clients[0].branch = None
        rows = group_by(clients[:1], "branch")
        assert rows[0]["name"] == "Unspecified"


class TestExpiringPolicies:
    """Renewal window."""

    def test_within_window(self, clients):
        rows = expiring_policies(clients, within_days=30, today=date(2024, 1, 1))
        assert [r["client"].client_name for r in rows] == ["John Fernando"]
        assert rows[0]["days_left"] == 13

    def test_expired_excluded(self, clients):
        rows = expiring_policies(clients, within_days=30, today=date(2024, 1, 20))
        assert [r["client"].client_name for r in rows] == ["ABC Enterprises"]

    def test_sorted_soonest_first(self, clients):
        rows = expiring_policies(clients, within_days=90, today=date(2024, 1, 1))
        assert [r["policy_no"] for r in rows] == [
            "POL-MT-2023-001", "POL-FI-2023-012", "POL-HI-2023-036",
        ]

    def test_window_edges_inclusive(self, sample_client):
        today = date(2024, 3, 1)
        ending = {
            "today": sample_client.model_copy(update={"policy_no": "today", "policy_period_to": "2024-03-01"}),
            "horizon": sample_client.model_copy(update={"policy_no": "horizon", "policy_period_to": "2024-03-31"}),
            "after": sample_client.model_copy(update={"policy_no": "after", "policy_period_to": "2024-04-01"}),
            "before": sample_client.model_copy(update={"policy_no": "before", "policy_period_to": "2024-02-29"}),
        }

        rows = expiring_policies(list(ending.values()), within_days=30, today=today)

        assert [(r["policy_no"], r["days_left"]) for r in rows] == [("today", 0), ("horizon", 30)]
