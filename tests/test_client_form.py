# This project was developed with assistance from AI tools.
"""Tests for the client form save path and quick-add draft handling."""
import json
from unittest.mock import patch

import httpx

from frontend.state import clear_client_draft
from frontend.views.client_form import save_client
from utils.sample_data import SAMPLE_CLIENTS


def _capture(captured: dict, data=None):
    def handler(request):
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "data": data})
    return handler


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------

class TestSaveClient:
    """Create and edit through the backend client."""

    def test_edit_sends_cleared_fields_as_null(self, make_api_client):
        captured = {}
        api = make_api_client(_capture(captured))
        raw = {**SAMPLE_CLIENTS[0], "email": "", "street2": "  "}

        with patch("frontend.views.client_form.get_api_client", return_value=api):
            assert save_client("12", raw, {}) == "12"

        assert captured["method"] == "PUT"
        assert captured["path"] == "/api/clients/12"
        assert captured["body"]["email"] is None
        assert captured["body"]["street2"] is None
        assert captured["body"]["client_name"] == "John Fernando"
        assert "id" not in captured["body"]

    def test_create_omits_blank_fields(self, make_api_client):
        captured = {}
        api = make_api_client(_capture(captured, data={"id": 77}))
        raw = {**SAMPLE_CLIENTS[0], "email": ""}

        with patch("frontend.views.client_form.get_api_client", return_value=api):
            assert save_client(None, raw, {}) == "77"

        assert captured["method"] == "POST"
        assert captured["path"] == "/api/clients"
        assert "email" not in captured["body"]
        assert "id" not in captured["body"]


# ---------------------------------------------------------------------------
# Quick-add draft
# ---------------------------------------------------------------------------

class TestClearClientDraft:
    def test_drops_draft_and_nic_reminder(self):
        with patch("frontend.state.st") as mock_st:
            mock_st.session_state = {
                "client_draft": {"client_name": "Nimal Perera"},
                "client_draft_nic": "901234567V",
                "page": "client_form",
            }

            clear_client_draft()

            assert mock_st.session_state == {"page": "client_form"}

    def test_nothing_to_clear(self):
        with patch("frontend.state.st") as mock_st:
            mock_st.session_state = {}

            clear_client_draft()

            assert mock_st.session_state == {}
