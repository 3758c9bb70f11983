# This project was developed with assistance from AI tools.
"""
Client documents view - per-category document slots with view, download,
diagnostics and path repair.
"""
import base64
import logging

import httpx
import streamlit as st

from config import config
from frontend.auth import get_current_user
from frontend.components import render_document_card
from frontend.state import invalidate_clients
from models import AccessResult, Client, DocumentItem, DownloadedDocument
from utils.api_client import ApiError
from utils.documents import (
    build_document_categories,
    count_documents,
    document_kind,
    get_direct_url,
    get_document_resolver,
    get_view_url,
    needs_diagnostics,
)

logger = logging.getLogger(__name__)


def pdf_iframe(document: DownloadedDocument, height: int = 600) -> str:
    """Inline PDF viewer markup for a downloaded document."""
    base64_pdf = base64.b64encode(document.content).decode('utf-8')
    return (
        f'<iframe src="data:application/pdf;base64,{base64_pdf}" width="100%" height="{height}" '
        f'type="application/pdf" style="border: 1px solid #e5e7eb; border-radius: 0.5rem;"></iframe>'
    )


def _fetch(doc: DocumentItem, client_id: str | None) -> DownloadedDocument | None:
    """Download a document into the session, showing errors instead of raising."""
    previews = st.session_state.document_previews
    if doc.field_name in previews:
        return previews[doc.field_name]

    try:
        with st.spinner(f"Fetching {doc.file_name}..."):
            document = get_document_resolver().download(doc.url, client_id, doc.file_name)
    except ApiError as e:
        st.error(str(e))
        return None
    except httpx.HTTPError as e:
        logger.error(f"Download failed for {doc.url}: {e}")
        st.error(f"Failed to download {doc.file_name}: {e}")
        return None

    previews[doc.field_name] = document
    return document


def render_preview(doc: DocumentItem, document: DownloadedDocument):
    """Show a fetched document inline, or offer it for download."""
    if document.suspicious:
        st.warning(
            f"The file is only {len(document.content)} bytes and may be empty or corrupted. "
            "Try the direct link or run Fix Access Issues."
        )

    kind = document_kind(doc.url)
    if kind == "pdf":
        st.markdown(pdf_iframe(document), unsafe_allow_html=True)
    elif kind == "image":
        st.image(document.content, caption=doc.file_name)
    else:
        st.info("Preview is not available for this file type.")

    st.download_button(
        label=f"Download {document.filename}",
        data=document.content,
        file_name=document.filename,
        mime=document.content_type,
        key=f"download_{doc.field_name}",
    )


def render_access_result(result: AccessResult):
    if result.success:
        st.caption(f"Reachable via {result.method}: {result.url}")
        return

    st.error("The document could not be reached by any access method.")
    for attempt in result.attempts:
        status = attempt.status_code if attempt.status_code is not None else attempt.error
        st.caption(f"{attempt.method}: {attempt.url} ({status})")


def render_document_actions(doc: DocumentItem, client: Client):
    """Buttons and panels for one uploaded document."""
    api = get_document_resolver().api
    key = doc.field_name

    cols = st.columns(5)
    with cols[0]:
        view = st.button("View", key=f"view_{key}", use_container_width=True)
    with cols[1]:
        download = st.button("Download", key=f"fetch_{key}", use_container_width=True)
    with cols[2]:
        st.link_button("Open Direct", get_direct_url(doc.url, api.file_server_url), use_container_width=True)
    with cols[3]:
        st.link_button(
            "Open via API",
            get_view_url(doc.url, client.id, api.token, api.file_server_url),
            use_container_width=True,
        )
    with cols[4]:
        diagnose = st.button("Diagnose", key=f"diagnose_{key}", use_container_width=True)

    if needs_diagnostics(doc.url):
        st.caption("Stored path is missing the /uploads prefix; run Diagnose if it does not open.")

    if view or download:
        result = get_document_resolver().try_access(doc.url, client.id)
        render_access_result(result)
        if result.success or download:
            document = _fetch(doc, client.id)
            if document is not None:
                render_preview(doc, document)
    elif key in st.session_state.document_previews:
        render_preview(doc, st.session_state.document_previews[key])

    if diagnose:
        diagnostics = get_document_resolver().diagnose(doc.url, client.id)
        st.session_state.document_diagnostics[key] = diagnostics

    diagnostics = st.session_state.document_diagnostics.get(key)
    if diagnostics is not None:
        with st.expander("Diagnostics", expanded=True):
            st.json(diagnostics.model_dump(mode="json"))


def render_repair_button():
    """Ask the backend to repair stored document paths for all clients."""
    if not st.button("Fix Access Issues", help="Repair stored document paths for every client"):
        return

    with st.spinner("Repairing document paths..."):
        result = get_document_resolver().repair_all()

    if result.success:
        st.success(
            f"Fixed {result.fixed_paths} path(s), created {result.created_directories} "
            f"director(ies) across {result.clients_processed} client(s)."
        )
        st.session_state.document_previews = {}
        st.session_state.document_diagnostics = {}
        invalidate_clients()
    else:
        st.error(f"Failed to repair documents: {result.error}")


def render_documents_panel(client: Client):
    """Render the documents section of the client details page."""
    categories = build_document_categories(client)
    total = sum(len(category.documents) for category in categories)

    header_col, action_col = st.columns([4, 1])
    with header_col:
        st.markdown("### Documents")
        st.caption(f"{count_documents(categories)} of {total} documents uploaded")
    user = get_current_user()
    if user and user.can_repair_documents():
        with action_col:
            render_repair_button()

    for index, category in enumerate(categories):
        label = f"{category.name} ({category.uploaded}/{len(category.documents)})"
        with st.expander(label, expanded=index == 0):
            for doc in category.documents:
                render_document_card(doc)
                if doc.uploaded:
                    render_document_actions(doc, client)

    st.caption(f"Files are served from {config.FILE_SERVER_URL}")
