# This project was developed with assistance from AI tools.
"""
Frontend views for the Streamlit application.

Each view module handles rendering for a specific section of the app.
"""
from .admin import render_admin_view
from .client_detail import render_client_detail_view
from .client_form import render_client_form_view
from .landing import render_landing_page
from .manager import render_manager_view

__all__ = [
    "render_admin_view",
    "render_client_detail_view",
    "render_client_form_view",
    "render_landing_page",
    "render_manager_view",
]
