# This project was developed with assistance from AI tools.
"""Tests for utils.report_generator: client summary PDFs."""
from pathlib import Path

from models import Client
from utils.report_generator import generate_client_summary, render_client_summary, summary_filename
from utils.sample_data import SAMPLE_CLIENTS


class TestClientSummary:

    def test_render_in_memory(self, sample_client):
        content = render_client_summary(sample_client)
        assert content.startswith(b"%PDF")
        assert len(content) > 1000

    def test_render_sparse_client(self):
        client = Client(
            client_name="Walk-in <Customer> & Co",
            customer_type="Individual",
            product="Motor Insurance",
            insurance_provider="AIA Insurance",
            mobile_no="0771234567",
        )
        assert render_client_summary(client).startswith(b"%PDF")

    def test_generate_writes_file(self, sample_client, tmp_path):
        path = generate_client_summary(sample_client, tmp_path / "reports")

        assert Path(path) == tmp_path / "reports" / "client_12_john_fernando.pdf"
        assert Path(path).read_bytes().startswith(b"%PDF")

    def test_summary_filename(self):
        assert summary_filename(Client(id=3, **SAMPLE_CLIENTS[1])) == "client_3_abc_enterprises.pdf"
        assert summary_filename(Client(**SAMPLE_CLIENTS[2])) == "client_new_priya_gunasekara.pdf"
