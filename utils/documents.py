# This project was developed with assistance from AI tools.
"""
Client document resolution.

A client record stores each proof document as a path or URL written by the
backend at upload time. Those references come in several shapes
(``/uploads/documents/<id>/<file>``, ``/documents/<id>/<file>``,
``temp-<uuid>`` upload directories, bare filenames, absolute URLs), so this
module maps a stored reference to a URL that actually serves the file by
trying a fixed sequence of access strategies against the file server.
"""
import logging
import re

import httpx

from config import config
from models import (
    AccessAttempt,
    AccessResult,
    Client,
    DocumentCategory,
    DocumentDiagnostics,
    DocumentItem,
    DocumentLocation,
    DownloadedDocument,
    RepairResult,
)
from utils.api_client import ApiError, BrokerageClient, get_api_client

logger = logging.getLogger(__name__)


# =============================================================================
# Document slots
# =============================================================================

# field name -> alternate field holding the same document on older records
DOCUMENT_FIELDS: dict[str, str | None] = {
    "coverage_proof": None,
    "sum_insured_proof": None,
    "policy_fee_invoice": None,
    "vat_debit_note": None,
    "payment_receipt": None,
    "nic_proof": None,
    "dob_proof": None,
    "business_registration_proof": "business_registration",
    "svat_proof": None,
    "vat_proof": None,
}

DOCUMENT_CATEGORIES: list[tuple[str, list[tuple[str, str]]]] = [
    ("Policy Documents", [
        ("Coverage Proof", "coverage_proof"),
        ("Sum Insured Proof", "sum_insured_proof"),
        ("Policy Fee Invoice", "policy_fee_invoice"),
        ("VAT Debit Note", "vat_debit_note"),
        ("Payment Receipt", "payment_receipt"),
    ]),
    ("Identity Documents", [
        ("NIC Proof", "nic_proof"),
        ("DOB Proof", "dob_proof"),
    ]),
    ("Business Documents", [
        ("Business Registration", "business_registration_proof"),
        ("SVAT Proof", "svat_proof"),
        ("VAT Proof", "vat_proof"),
    ]),
]

DEFAULT_CATEGORY = "Policy Documents"

DOCUMENT_LABELS: dict[str, str] = {
    field_name: label
    for _, documents in DOCUMENT_CATEGORIES
    for label, field_name in documents
}

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif")

# Below this size a downloaded body is probably an error page
SUSPICIOUS_SIZE_BYTES = 100

_TEMP_PATH = re.compile(r"/uploads/documents/(temp-[a-f0-9-]+)/([^/]+)$", re.IGNORECASE)
_STANDARD_PATH = re.compile(r"/uploads/documents/([^/]+)/([^/]+)$")
_DIRECT_PATH = re.compile(r"/documents/([^/]+)/([^/]+)$")
_ROOT_PATH = re.compile(r"/uploads/documents/([^/]+)$")


def resolve_document_fields(client: Client | dict) -> dict[str, str | None]:
    """
    Collect the stored reference for every document slot.

    The primary field wins; the alternate field is only consulted when the
    primary one is empty.
    """
    data = client.model_dump() if isinstance(client, Client) else client
    fields = {}
    for field_name, alt_name in DOCUMENT_FIELDS.items():
        value = data.get(field_name) or (data.get(alt_name) if alt_name else None)
        fields[field_name] = value or None
    return fields


def build_document_categories(client: Client | dict) -> list[DocumentCategory]:
    """Group a client's document slots into their display categories."""
    fields = resolve_document_fields(client)
    categories = []
    for name, documents in DOCUMENT_CATEGORIES:
        items = []
        for label, field_name in documents:
            url = fields.get(field_name)
            items.append(DocumentItem(
                label=label,
                field_name=field_name,
                category=name,
                url=url,
                file_name=extract_file_name(url) if url else None,
            ))
        categories.append(DocumentCategory(name=name, documents=items))
    return categories


def count_documents(categories: list[DocumentCategory]) -> int:
    return sum(category.uploaded for category in categories)


def has_documents(categories: list[DocumentCategory]) -> bool:
    return count_documents(categories) > 0


def extract_file_name(url: str) -> str:
    """Last path segment of a document reference."""
    try:
        return url.split("/")[-1]
    except AttributeError:
        logger.error(f"Cannot extract filename from {url!r}")
        return "unknown-file"


def document_kind(url: str | None) -> str | None:
    """Classify a reference as 'pdf', 'image' or 'file' by extension."""
    if not url:
        return None
    extension = url.rsplit(".", 1)[-1].lower() if "." in url else ""
    if extension == "pdf":
        return "pdf"
    if extension in IMAGE_EXTENSIONS:
        return "image"
    return "file"


# =============================================================================
# Reference parsing and URL building
# =============================================================================

def parse_document_url(url: str, client_id: str | None = None) -> DocumentLocation | None:
    """
    Recover the client directory and filename from a stored reference.

    Args:
        url: Stored document path or URL
        client_id: Id of the record the reference belongs to, used when the
            path itself carries no client directory

    Returns:
        DocumentLocation, or None if nothing usable can be recovered
    """
    if not url:
        return None

    normalized = url
    if url.startswith("/documents/") and not url.startswith("/uploads/documents/"):
        normalized = f"/uploads{url}"

    # Files are frequently left under the temp id they were uploaded with
    match = _TEMP_PATH.search(normalized)
    if match:
        return DocumentLocation(client_id=match.group(1), filename=match.group(2), is_temporary=True)

    match = _STANDARD_PATH.search(normalized)
    if match:
        return DocumentLocation(client_id=match.group(1), filename=match.group(2))

    match = _DIRECT_PATH.search(normalized)
    if match:
        return DocumentLocation(client_id=match.group(1), filename=match.group(2))

    if not client_id:
        logger.warning(f"Failed to parse document URL without a client id: {url}")
        return None

    match = _ROOT_PATH.search(normalized)
    if match:
        return DocumentLocation(client_id=str(client_id), filename=match.group(1))

    if "/" in normalized:
        return DocumentLocation(client_id=str(client_id), filename=normalized[normalized.rfind("/") + 1:])

    filename = extract_file_name(normalized)
    if filename:
        return DocumentLocation(client_id=str(client_id), filename=filename)

    logger.warning(f"Failed to parse document URL: {url}")
    return None


def with_uploads_prefix(url: str) -> str:
    """Reference with an /uploads prefix, as the static server expects."""
    if url.startswith("/uploads/"):
        return url
    return f"/uploads{url if url.startswith('/') else '/' + url}"


def get_direct_url(url: str, file_server_url: str | None = None) -> str:
    """Static file server URL for a stored reference."""
    if not url:
        return ""

    base_url = (file_server_url or config.FILE_SERVER_URL).rstrip("/")

    if url.startswith("/uploads/"):
        return f"{base_url}{url}"

    if url.startswith(("http://", "https://")):
        return url

    # Older records dropped the /uploads prefix
    if url.startswith("/documents/"):
        return f"{base_url}/uploads{url}"

    formatted = url if url.startswith("/") else f"/{url}"
    if "/uploads/" not in formatted and ("/documents/" in formatted or "temp-" in formatted):
        formatted = f"/uploads{formatted}"
    return f"{base_url}{formatted}"


def get_api_url(location: DocumentLocation, file_server_url: str | None = None) -> str:
    """API-proxied URL for a parsed document location."""
    base_url = (file_server_url or config.FILE_SERVER_URL).rstrip("/")
    return f"{base_url}/api/clients/{location.client_id}/documents/{location.filename}"


def _with_token(url: str, token: str | None) -> str:
    if not token:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}token={token}"


def get_view_url(
    url: str,
    client_id: str | None = None,
    token: str | None = None,
    file_server_url: str | None = None,
) -> str:
    """URL to open a document for viewing, preferring static access."""
    if not url:
        return ""

    base_url = (file_server_url or config.FILE_SERVER_URL).rstrip("/")

    if url.startswith("/uploads/"):
        return f"{base_url}{url}"

    location = parse_document_url(url, client_id)
    if location is None:
        return f"{base_url}{'' if url.startswith('/') else '/'}{url}"

    return _with_token(get_api_url(location, base_url), token)


def get_download_url(
    url: str,
    client_id: str | None = None,
    token: str | None = None,
    file_server_url: str | None = None,
) -> str | None:
    """API download URL for a stored reference, or None if it cannot be parsed."""
    location = parse_document_url(url, client_id)
    if location is None:
        logger.error(f"Could not parse document URL for download: {url}")
        return None
    return _with_token(f"{get_api_url(location, file_server_url)}/download", token)


def needs_diagnostics(url: str | None) -> bool:
    """True for references that point at /documents/ without the /uploads prefix."""
    return bool(url) and "/documents/" in url and "/uploads/documents/" not in url


# =============================================================================
# Resolver
# =============================================================================

class DocumentResolver:
    """Probes the file server to find a URL that serves a stored document."""

    def __init__(self, api_client: BrokerageClient | None = None, timeout: float | None = None):
        """
        Initialize the resolver.

        Args:
            api_client: Backend client (defaults to the shared singleton)
            timeout: Timeout for each individual probe
        """
        self.api = api_client or get_api_client()
        self.file_server_url = self.api.file_server_url
        self.timeout = timeout or config.DOCUMENT_PROBE_TIMEOUT

    def _probe(self, method: str, url: str) -> AccessAttempt:
        """HEAD a candidate URL; network failures become a failed attempt."""
        try:
            response = self.api.http.head(url, headers=self.api.auth_headers(), timeout=self.timeout)
            attempt = AccessAttempt(method=method, url=url, ok=response.is_success, status_code=response.status_code)
        except httpx.RequestError as e:
            attempt = AccessAttempt(method=method, url=url, error=str(e))

        logger.debug(f"{method} access {'succeeded' if attempt.ok else 'failed'}: {url}")
        return attempt

    def candidate_urls(self, url: str, client_id: str | None = None) -> list[tuple[str, str]]:
        """
        Ordered (method, url) pairs to HEAD for a stored reference.

        Duplicate URLs are dropped so each address is probed once.
        """
        candidates = [("direct", get_direct_url(url, self.file_server_url))]

        location = parse_document_url(url, client_id)
        if location is not None:
            candidates.append(("api", get_api_url(location, self.file_server_url)))

            # Uploads made before the record existed may have been moved to its own directory
            if location.is_temporary and client_id:
                candidates.append((
                    "temp-directory",
                    f"{self.file_server_url}/uploads/documents/{client_id}/{location.filename}",
                ))

            candidates.append((
                "filename-only",
                f"{self.file_server_url}/uploads/documents/{location.filename}",
            ))

        seen = set()
        unique = []
        for method, candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                unique.append((method, candidate))
        return unique

    def try_access(self, url: str, client_id: str | None = None) -> AccessResult:
        """
        Find a working URL for a stored document reference.

        Strategies, first success wins: direct static path, API-proxied path,
        the record's own directory for temp uploads, the filename at the
        upload root, then the backend's file-access check.

        Args:
            url: Stored document path or URL
            client_id: Id of the record the reference belongs to

        Returns:
            AccessResult with the working URL and the strategy that found it
        """
        if not url:
            return AccessResult(success=False, url="", method="none")

        attempts = []
        for method, candidate in self.candidate_urls(url, client_id):
            attempt = self._probe(method, candidate)
            attempts.append(attempt)
            if attempt.ok:
                return AccessResult(success=True, url=candidate, method=method, attempts=attempts)

        direct_url = get_direct_url(url, self.file_server_url)
        try:
            check = self.api.test_file_access(url)
            verified = isinstance(check, dict) and bool(check.get("success"))
            attempts.append(AccessAttempt(method="test-api-verified", url=direct_url, ok=verified))
            if verified:
                return AccessResult(success=True, url=direct_url, method="test-api-verified", attempts=attempts)
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"File access check failed for {url}: {e}")
            attempts.append(AccessAttempt(method="test-api-verified", url=direct_url, error=str(e)))

        logger.warning(f"All access methods failed for document {url}")
        return AccessResult(success=False, url=url, method="all-failed", attempts=attempts)

    def diagnose(self, url: str, client_id: str | None = None) -> DocumentDiagnostics:
        """Collect every derived form of a reference plus the backend's file check."""
        location = parse_document_url(url, client_id)
        diagnostics = DocumentDiagnostics(
            original_url=url,
            with_uploads_prefix=with_uploads_prefix(url),
            direct_url=get_direct_url(url, self.file_server_url),
            parsed=location,
            api_url=get_api_url(location, self.file_server_url) if location else None,
        )

        try:
            check = self.api.test_file_access(url)
        except (httpx.HTTPError, ValueError) as e:
            diagnostics.file_check_error = str(e)
        else:
            if isinstance(check, dict):
                diagnostics.file_check = check
            else:
                diagnostics.file_check_error = f"Unexpected file check response: {check!r}"

        logger.info(f"Diagnostics for {url}: parsed={location}, file_check={diagnostics.file_check}")
        return diagnostics

    def download(
        self,
        url: str,
        client_id: str | None = None,
        file_name: str | None = None,
    ) -> DownloadedDocument:
        """
        Fetch the bytes of a stored document.

        Raises:
            ApiError: If the server answers with a JSON error instead of a file
            httpx.HTTPError: If the file cannot be fetched at all
        """
        access = self.try_access(url, client_id)
        source_url = access.url if access.success else get_direct_url(url, self.file_server_url)

        # Only the API routes accept the bearer token
        headers = self.api.auth_headers() if "/api/" in source_url else {}

        response = self.api.http.get(source_url, headers=headers)
        if response.status_code == 401 and headers:
            raise ApiError("Authentication error - please try logging in again", 401)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "application/octet-stream")
        if "application/json" in content_type:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(f"Server error: {message}" if message else "Server returned an error response")

        content = response.content
        suspicious = len(content) < SUSPICIOUS_SIZE_BYTES
        if suspicious:
            logger.warning(f"Downloaded file is suspiciously small: {len(content)} bytes from {source_url}")

        return DownloadedDocument(
            filename=file_name or extract_file_name(url) or "document",
            content=content,
            content_type=content_type.split(";")[0].strip(),
            source_url=source_url,
            suspicious=suspicious,
        )

    def repair_all(self) -> RepairResult:
        """Ask the backend to repair document paths for every client."""
        return self.api.repair_all_documents()


# Singleton instance
_resolver: DocumentResolver | None = None


def get_document_resolver() -> DocumentResolver:
    """Get or create the singleton document resolver."""
    global _resolver
    if _resolver is None:
        _resolver = DocumentResolver()
    return _resolver
