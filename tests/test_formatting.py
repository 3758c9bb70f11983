# This project was developed with assistance from AI tools.
"""Tests for utils.formatting."""
from datetime import date, datetime

from utils.formatting import display, format_address, format_currency, format_date, truncate_path
from utils.sample_data import sample_clients


class TestFormatting:

    def test_display(self):
        assert display(None) == "-"
        assert display("") == "-"
        assert display(0) == "0"
        assert display("Colombo") == "Colombo"

    def test_currency(self):
        assert format_currency(62850) == "LKR 62,850.00"
        assert format_currency("1500.5", currency="USD") == "USD 1,500.50"
        assert format_currency(None) == "-"
        assert format_currency("n/a") == "-"

    def test_dates(self):
        assert format_date("2024-01-14") == "2024-01-14"
        assert format_date("2024-01-14T10:30:00Z") == "2024-01-14"
        assert format_date(date(2024, 1, 14)) == "2024-01-14"
        assert format_date(datetime(2024, 1, 14, 8, 0)) == "2024-01-14"
        assert format_date(None) == "-"
        assert format_date("someday") == "-"

    def test_address_skips_blanks(self):
        john, _, priya = sample_clients()[:3]
        assert format_address(john) == "45 Galle Road, Apt 3B, Colombo, Colombo, Western"
        assert format_address(priya) == "23 Temple Road, Kandy, Kandy, Central"

    def test_truncate_path(self):
        assert truncate_path(None) == "No URL"
        assert truncate_path("/uploads/a.pdf") == "/uploads/a.pdf"
        assert truncate_path("x" * 50, limit=10) == "xxxxxxxxxx..."
