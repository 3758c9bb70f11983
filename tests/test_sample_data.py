# This project was developed with assistance from AI tools.
"""Tests for utils.sample_data: the seed records must be valid clients."""
import pytest

from config import config
from utils.sample_data import SAMPLE_CLIENTS, sample_clients
from utils.validation import PREMIUM_FIELDS, compute_totals, validate_client_form


class TestSampleClients:

    def test_one_per_product_line(self):
        assert [c.product for c in sample_clients()] == [
            "Motor Insurance", "Fire Insurance", "Health Insurance",
            "Liability Insurance", "Life Insurance",
        ]

    def test_reference_values_known(self):
        for client in sample_clients():
            assert client.product in config.PRODUCTS
            assert client.insurance_provider in config.INSURANCE_PROVIDERS
            assert client.customer_type in config.CUSTOMER_TYPES

    @pytest.mark.parametrize("record", SAMPLE_CLIENTS, ids=lambda r: r["client_name"])
    def test_records_validate(self, record):
        assert validate_client_form(record) == {}

    @pytest.mark.parametrize("record", SAMPLE_CLIENTS, ids=lambda r: r["client_name"])
    def test_totals_consistent(self, record):
        recomputed = compute_totals({k: v for k, v in record.items() if k not in ("net_premium", "total_invoice")})
        assert recomputed["net_premium"] == sum(record[k] for k in PREMIUM_FIELDS) == record["net_premium"]
        assert recomputed["total_invoice"] == record["total_invoice"]

    def test_fresh_objects(self):
        first, second = sample_clients(), sample_clients()
        first[0].client_name = "Changed"
        assert second[0].client_name == "John Fernando"
