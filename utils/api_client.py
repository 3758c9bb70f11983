# This project was developed with assistance from AI tools.
"""
REST client for the brokerage backend.

Wraps the client CRUD endpoints, multipart document uploads, and the
file-server maintenance endpoints (file access check, path repair).

Every JSON endpoint answers with the envelope ``{"success", "data", "message"}``.
"""
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from config import config
from models import Client, RepairResult

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Backend answered, but reported a failure in its response envelope."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# =============================================================================
# API Client
# =============================================================================

class BrokerageClient:
    """Client for the brokerage REST backend."""

    def __init__(
        self,
        api_url: str | None = None,
        token: str | None = None,
        file_server_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the backend client.

        Args:
            api_url: REST base URL including /api (defaults to config)
            token: Bearer token for the Authorization header (defaults to config)
            file_server_url: Static file server root (defaults to config)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the backend)
        """
        self.api_url = (api_url or config.API_URL).rstrip("/")
        self.file_server_url = (file_server_url or config.FILE_SERVER_URL).rstrip("/")
        self.token = token if token is not None else config.API_TOKEN

        self._client = httpx.Client(
            base_url=self.api_url,
            headers={"Accept": "application/json"},
            timeout=timeout or config.API_TIMEOUT,
            transport=transport,
        )

    @property
    def http(self) -> httpx.Client:
        """Underlying httpx client, shared with the document resolver."""
        return self._client

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token used for subsequent requests."""
        self.token = token or ""

    def auth_headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Make an API request and unwrap the response envelope."""
        headers = {**self.auth_headers(), **kwargs.pop("headers", {})}
        try:
            response = self._client.request(method, endpoint, headers=headers, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Backend error on {method} {endpoint}: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Backend request {method} {endpoint} failed: {e}")
            raise

        if not response.content:
            return None

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Backend returned a non-JSON body for {method} {endpoint}: {e}")
            raise ApiError("Backend returned an invalid response", response.status_code) from e

        if isinstance(body, dict) and body.get("success") is False:
            message = body.get("message") or "Request failed"
            logger.error(f"Backend rejected {method} {endpoint}: {message}")
            raise ApiError(message, response.status_code)

        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    @staticmethod
    def _parse_clients(rows: list[dict] | None) -> list[Client]:
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise ApiError("Backend returned an invalid client list")

        clients = []
        for row in rows:
            try:
                clients.append(Client.model_validate(row))
            except ValidationError as e:
                record_id = row.get("id") if isinstance(row, dict) else None
                logger.warning(f"Skipping malformed client record {record_id}: {e.error_count()} error(s)")
        return clients

    @staticmethod
    def _field(data: Any, key: str, what: str) -> Any:
        """Required value from a response's data object."""
        if not isinstance(data, dict) or data.get(key) in (None, ""):
            raise ApiError(f"Backend response is missing the {what}")
        return data[key]

    @staticmethod
    def _form_fields(client: Client | dict) -> dict[str, str]:
        """
        Flatten client fields into multipart form values.

        A dict may carry None for fields cleared on edit; those are sent as
        empty strings so the backend blanks them.
        """
        if isinstance(client, Client):
            return {key: str(value) for key, value in client.payload().items()}
        return {
            key: "" if value is None else str(value)
            for key, value in client.items()
            if key != "id"
        }

    @staticmethod
    def _form_files(files: dict[str, tuple[str, bytes]] | None) -> dict[str, tuple]:
        """Map document field name -> (filename, content) to httpx file tuples."""
        return {
            field_name: (filename, content)
            for field_name, (filename, content) in (files or {}).items()
        }

    # -------------------------------------------------------------------------
    # Client CRUD
    # -------------------------------------------------------------------------

    def get_all_clients(self) -> list[Client]:
        """Fetch every client record."""
        return self._parse_clients(self._request("GET", "/clients"))

    def get_client_by_id(self, client_id: str) -> Client:
        """Fetch a single client record."""
        data = self._request("GET", f"/clients/{client_id}")
        if not isinstance(data, dict):
            raise ApiError(f"Client {client_id} not found")
        try:
            return Client.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed client record {client_id}: {e}")
            raise ApiError(f"Client {client_id} has an invalid record") from e

    def create_client(self, client: Client | dict) -> str:
        """
        Create a client record.

        Returns:
            The id assigned by the backend
        """
        payload = client.payload() if isinstance(client, Client) else dict(client)
        # Never send an empty id
        if not payload.get("id"):
            payload.pop("id", None)

        data = self._request("POST", "/clients", json=payload)
        client_id = str(self._field(data, "id", "new client id"))
        logger.info(f"Created client {client_id}")
        return client_id

    def update_client(self, client_id: str, changes: Client | dict) -> None:
        """Update a client; the id travels in the URL, never in the body."""
        payload = changes.payload() if isinstance(changes, Client) else dict(changes)
        payload.pop("id", None)
        self._request("PUT", f"/clients/{client_id}", json=payload)
        logger.info(f"Updated client {client_id}")

    def delete_client(self, client_id: str) -> None:
        self._request("DELETE", f"/clients/{client_id}")
        logger.info(f"Deleted client {client_id}")

    def search_clients(self, criteria: dict) -> list[Client]:
        """Server-side search by any subset of client fields."""
        return self._parse_clients(self._request("POST", "/clients/search", json=criteria))

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def create_client_with_documents(
        self,
        client: Client | dict,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> str:
        """
        Create a client and upload its documents in one multipart request.

        Args:
            client: Client fields
            files: Document field name -> (filename, content)

        Returns:
            The id assigned by the backend
        """
        data = self._request(
            "POST",
            "/clients/with-documents",
            data=self._form_fields(client),
            files=self._form_files(files),
        )
        client_id = str(self._field(data, "id", "new client id"))
        logger.info(f"Created client {client_id} with {len(files or {})} document(s)")
        return client_id

    def update_client_with_documents(
        self,
        client_id: str,
        client: Client | dict,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> None:
        self._request(
            "PUT",
            f"/clients/{client_id}/with-documents",
            data=self._form_fields(client),
            files=self._form_files(files),
        )
        logger.info(f"Updated client {client_id} with {len(files or {})} document(s)")

    def upload_document(self, client_id: str, document_type: str, filename: str, content: bytes) -> str:
        """
        Upload one document for a client.

        Returns:
            The stored document URL
        """
        data = self._request(
            "POST",
            f"/clients/{client_id}/documents",
            data={"documentType": document_type},
            files={"document": (filename, content)},
        )
        return self._field(data, "documentUrl", "document URL")

    def delete_document(self, client_id: str, document_type: str) -> None:
        self._request("DELETE", f"/clients/{client_id}/documents/{document_type}")
        logger.info(f"Deleted {document_type} for client {client_id}")

    # -------------------------------------------------------------------------
    # File server maintenance
    # -------------------------------------------------------------------------

    def test_file_access(self, path: str) -> dict:
        """
        Ask the backend whether a stored document path exists on disk.

        Returns:
            The raw JSON answer (always has a ``success`` key)
        """
        response = self._client.get(
            f"{self.file_server_url}/api/test-file-access",
            params={"path": path},
            headers=self.auth_headers(),
        )
        return response.json()

    def repair_all_documents(self) -> RepairResult:
        """Run the backend job that rewrites broken document paths."""
        try:
            response = self._client.get(
                f"{self.file_server_url}/api/repair-all-documents",
                headers=self.auth_headers(),
            )
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Document repair failed: {e}")
            return RepairResult(success=False, error=str(e))

        if not isinstance(body, dict):
            logger.error(f"Document repair returned an unexpected body: {body!r}")
            return RepairResult(success=False, error="Backend returned an invalid repair response")

        if not body.get("success"):
            return RepairResult(success=False, error=body.get("message") or body.get("error") or "Unknown error occurred")

        result = RepairResult(
            success=True,
            fixed_paths=body.get("fixedPaths", 0),
            created_directories=body.get("createdDirectories", 0),
            clients_processed=body.get("clientsProcessed", 0),
        )
        logger.info(
            f"Repaired {result.fixed_paths} document paths, created {result.created_directories} "
            f"directories across {result.clients_processed} clients"
        )
        return result

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


# =============================================================================
# Module-level functions
# =============================================================================

# Singleton instance
_client: BrokerageClient | None = None


def get_api_client(token: str | None = None) -> BrokerageClient:
    """Get or create the singleton backend client, optionally replacing its token."""
    global _client
    if _client is None:
        _client = BrokerageClient()
    if token is not None:
        _client.set_token(token)
    return _client
