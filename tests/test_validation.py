# This project was developed with assistance from AI tools.
"""Tests for utils.validation: form validators, totals and clean-up."""
from datetime import date
from unittest.mock import patch

from utils import validation
from utils.sample_data import SAMPLE_CLIENTS
from utils.validation import (
    clean_client_data,
    compute_totals,
    parse_date,
    validate_client_form,
    validate_quick_client,
    validate_upload,
    validate_user_form,
)


# ---------------------------------------------------------------------------
# Client form
# ---------------------------------------------------------------------------

class TestValidateClientForm:
    """Full create/edit client form."""

    def test_sample_client_is_valid(self):
        assert validate_client_form(SAMPLE_CLIENTS[0]) == {}

    def test_required_fields(self):
        errors = validate_client_form({})
        assert set(errors) == {"client_name", "mobile_no", "customer_type", "product", "insurance_provider"}
        assert errors["client_name"] == "Client name is required"

    def test_whitespace_only_name_is_missing(self):
        errors = validate_client_form({**SAMPLE_CLIENTS[0], "client_name": "   "})
        assert "client_name" in errors

    def test_phone_formats(self):
        ok = {**SAMPLE_CLIENTS[0], "mobile_no": "+94 77 123-4567"}
        assert validate_client_form(ok) == {}

        bad = {**SAMPLE_CLIENTS[0], "mobile_no": "12345", "telephone": "abc"}
        errors = validate_client_form(bad)
        assert errors["mobile_no"] == "Invalid contact number"
        assert errors["telephone"] == "Invalid contact number"

    def test_email_optional_but_checked(self):
        assert "email" not in validate_client_form({**SAMPLE_CLIENTS[0], "email": ""})
        assert validate_client_form({**SAMPLE_CLIENTS[0], "email": "not-an-email"})["email"] == "Invalid email address"

    def test_period_order(self):
        errors = validate_client_form({
            **SAMPLE_CLIENTS[0],
            "policy_period_from": "2024-05-01",
            "policy_period_to": "2024-04-30",
        })
        assert errors["policy_period_to"] == "Policy end date cannot be before the start date"

    def test_invalid_dates(self):
        errors = validate_client_form({**SAMPLE_CLIENTS[0], "policy_period_from": "next week"})
        assert errors["policy_period_from"] == "Invalid date"

    def test_date_objects_accepted(self):
        data = {**SAMPLE_CLIENTS[0], "policy_period_from": date(2024, 1, 1), "policy_period_to": date(2025, 1, 1)}
        assert validate_client_form(data) == {}

    def test_money_fields(self):
        errors = validate_client_form({**SAMPLE_CLIENTS[0], "sum_insured": "-1", "vat_fee": "lots", "stamp_duty": ""})
        assert errors["sum_insured"] == "Amount cannot be negative"
        assert errors["vat_fee"] == "Must be a number"
        assert "stamp_duty" not in errors


# ---------------------------------------------------------------------------
# Quick add and user forms
# ---------------------------------------------------------------------------

class TestValidateQuickClient:
    """Quick-add form on the manager dashboard."""

    def test_valid(self):
        data = {"name": "Nimal Perera", "contact": "0771234567", "nic": "901234567V", "address": "12 Lake Road"}
        assert validate_quick_client(data) == {}

    def test_lowercase_v_accepted(self):
        data = {"name": "N", "contact": "0771234567", "nic": "901234567v", "address": "x"}
        assert validate_quick_client(data) == {}

    def test_errors(self):
        errors = validate_quick_client({"name": "", "contact": "077", "nic": "12345", "address": ""})
        assert errors == {
            "name": "Name is required",
            "contact": "Invalid contact number",
            "nic": "Invalid NIC format (e.g., 901234567V)",
            "address": "Address is required",
        }

    def test_missing_nic(self):
        assert validate_quick_client({})["nic"] == "NIC/Passport is required"


class TestValidateUserForm:
    """Admin create-user form."""

    def test_valid(self):
        data = {"name": "Jane", "email": "jane@brokerage.lk", "password": "secret1", "role": "manager"}
        assert validate_user_form(data) == {}

    def test_short_password(self):
        data = {"name": "Jane", "email": "jane@brokerage.lk", "password": "abc", "role": "sales"}
        assert validate_user_form(data)["password"] == "Password must be at least 6 characters"

    def test_unknown_role(self):
        data = {"name": "Jane", "email": "jane@brokerage.lk", "password": "secret1", "role": "owner"}
        assert validate_user_form(data)["role"] == "Select a valid role"

    def test_missing_everything(self):
        assert set(validate_user_form({})) == {"name", "email", "password", "role"}


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

class TestValidateUpload:
    """Document upload type and size checks."""

    def test_allowed(self):
        assert validate_upload("nic.PDF", 1024) is None
        assert validate_upload("photo.jpeg", 1024) is None

    def test_unsupported_type(self):
        assert "unsupported file type" in validate_upload("notes.docx", 10)
        assert "unsupported file type" in validate_upload("README", 10)

    def test_too_large(self):
        with patch.object(validation.config, "UPLOAD_MAX_MB", 1):
            assert validate_upload("scan.pdf", 2 * 1024 * 1024) == "scan.pdf: file exceeds 1 MB"
            assert validate_upload("scan.pdf", 1024 * 1024) is None


# ---------------------------------------------------------------------------
# Totals and clean-up
# ---------------------------------------------------------------------------

class TestComputeTotals:
    """Net premium and invoice totals."""

    def test_fills_missing_totals(self):
        data = {
            "basic_premium": "45000", "srcc_premium": 5000, "tc_premium": 3000,
            "stamp_duty": 250, "admin_fees": 1500, "road_safety_fee": 500,
            "policy_fee": 1000, "vat_fee": 6600,
        }
        result = compute_totals(data)
        assert result["net_premium"] == 53000
        assert result["total_invoice"] == 62850

    def test_entered_values_kept(self):
        result = compute_totals({"basic_premium": 100, "net_premium": 90, "total_invoice": 95})
        assert result["net_premium"] == 90
        assert result["total_invoice"] == 95

    def test_nothing_to_compute(self):
        assert compute_totals({"client_name": "X"}) == {"client_name": "X"}

    def test_input_not_mutated(self):
        data = {"basic_premium": 10}
        compute_totals(data)
        assert data == {"basic_premium": 10}


class TestCleanClientData:
    """Normalising raw form values."""

    def test_strips_and_drops_blanks(self):
        cleaned = clean_client_data({"client_name": "  John  ", "street2": "  ", "email": None})
        assert cleaned == {"client_name": "John"}

    def test_dates_and_money(self):
        cleaned = clean_client_data({
            "policy_period_from": date(2024, 1, 15),
            "sum_insured": "5000000",
            "vat_fee": 0,
        })
        assert cleaned == {"policy_period_from": "2024-01-15", "sum_insured": 5000000.0, "vat_fee": 0.0}


class TestParseDate:
    def test_values(self):
        assert parse_date("2024-01-14") == date(2024, 1, 14)
        assert parse_date("2024-01-14T00:00:00.000Z") == date(2024, 1, 14)
        assert parse_date(date(2024, 1, 14)) == date(2024, 1, 14)
        assert parse_date("") is None
        assert parse_date("soon") is None
