# This project was developed with assistance from AI tools.
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


MONEY_FIELDS = (
    "sum_insured",
    "basic_premium",
    "srcc_premium",
    "tc_premium",
    "net_premium",
    "stamp_duty",
    "admin_fees",
    "road_safety_fee",
    "policy_fee",
    "vat_fee",
    "total_invoice",
    "commission_basic",
    "commission_srcc",
    "commission_tc",
)


class Client(BaseModel):
    """A brokerage client record as stored by the REST backend."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    introducer_code: str | None = None
    customer_type: str = Field(description="Individual or Corporate")
    product: str
    policy_: str | None = None
    insurance_provider: str
    branch: str | None = None
    client_name: str
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    district: str | None = None
    province: str | None = None
    telephone: str | None = None
    mobile_no: str
    contact_person: str | None = None
    email: str | None = None
    social_media: str | None = None

    # Document references (paths or URLs on the file server)
    nic_proof: str | None = None
    dob_proof: str | None = None
    business_registration: str | None = None
    business_registration_proof: str | None = None
    svat_proof: str | None = None
    vat_proof: str | None = None
    coverage_proof: str | None = None
    sum_insured_proof: str | None = None
    policy_fee_invoice: str | None = None
    vat_debit_note: str | None = None
    payment_receipt: str | None = None

    # Policy
    policy_type: str | None = None
    policy_no: str | None = None
    policy_period_from: str | None = None
    policy_period_to: str | None = None
    coverage: str | None = None
    sum_insured: float | None = None
    basic_premium: float | None = None
    srcc_premium: float | None = None
    tc_premium: float | None = None
    net_premium: float | None = None
    stamp_duty: float | None = None
    admin_fees: float | None = None
    road_safety_fee: float | None = None
    policy_fee: float | None = None
    vat_fee: float | None = None
    total_invoice: float | None = None
    debit_note: str | None = None

    # Commission
    commission_type: str | None = None
    commission_basic: float | None = None
    commission_srcc: float | None = None
    commission_tc: float | None = None
    policies: int | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        if value is None or value == "":
            return None
        return str(value)

    @field_validator(*MONEY_FIELDS, "policies", mode="before")
    @classmethod
    def _blank_number_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def payload(self) -> dict:
        """Fields to send to the backend: everything set, minus the id."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class DocumentItem(BaseModel):
    """A single document slot on a client record."""

    label: str
    field_name: str
    category: str
    url: str | None = None
    file_name: str | None = None

    @property
    def uploaded(self) -> bool:
        return self.url is not None


class DocumentCategory(BaseModel):
    """A named group of document slots."""

    name: str
    documents: list[DocumentItem] = Field(default_factory=list)

    @property
    def uploaded(self) -> int:
        return sum(1 for doc in self.documents if doc.uploaded)


class DocumentLocation(BaseModel):
    """Client directory and filename recovered from a stored document reference."""

    client_id: str
    filename: str
    is_temporary: bool = Field(default=False, description="Stored under a temp-<uuid> upload directory")


class AccessAttempt(BaseModel):
    """Outcome of one probe against the file server."""

    method: str
    url: str
    ok: bool = False
    status_code: int | None = None
    error: str | None = None


class AccessResult(BaseModel):
    """Result of trying every access strategy for a document."""

    success: bool
    url: str
    method: str
    attempts: list[AccessAttempt] = Field(default_factory=list)


class DocumentDiagnostics(BaseModel):
    """Everything known about how a document reference resolves."""

    original_url: str
    with_uploads_prefix: str
    direct_url: str
    parsed: DocumentLocation | None = None
    api_url: str | None = None
    file_check: dict | None = None
    file_check_error: str | None = None


class RepairResult(BaseModel):
    """Summary returned by the backend's document path repair job."""

    success: bool
    fixed_paths: int = 0
    created_directories: int = 0
    clients_processed: int = 0
    error: str | None = None


class DownloadedDocument(BaseModel):
    """File bytes fetched from the file server."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
    source_url: str = ""
    suspicious: bool = Field(default=False, description="Body too small to be a real document")


class UserAccount(BaseModel):
    """A back-office user created by an administrator."""

    id: int | None = None
    name: str
    email: str
    role: Literal["admin", "manager", "sales"]
    status: Literal["active", "inactive"] = "active"
    created_at: datetime = Field(default_factory=datetime.now)
