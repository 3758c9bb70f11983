# This project was developed with assistance from AI tools.
"""
Form validation for client and user forms.

Each validator returns a mapping of field name -> error message; an empty
mapping means the form is valid.
"""
import re
from datetime import date

from config import config
from models import MONEY_FIELDS

PHONE_PATTERN = re.compile(r"^\+?[\d\s-]{10,}$")
NIC_PATTERN = re.compile(r"^[0-9]{9}[Vv]$")
EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)

PASSWORD_MIN_LENGTH = 6

PREMIUM_FIELDS = ("basic_premium", "srcc_premium", "tc_premium")
INVOICE_FIELDS = ("stamp_duty", "admin_fees", "road_safety_fee", "policy_fee", "vat_fee")


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return str(value).strip() if value is not None else ""


def parse_date(value) -> date | None:
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def validate_client_form(data: dict) -> dict[str, str]:
    """Validate the full client create/edit form."""
    errors = {}

    if not _text(data, "client_name"):
        errors["client_name"] = "Client name is required"

    mobile = _text(data, "mobile_no")
    if not mobile:
        errors["mobile_no"] = "Mobile number is required"
    elif not PHONE_PATTERN.match(mobile):
        errors["mobile_no"] = "Invalid contact number"

    telephone = _text(data, "telephone")
    if telephone and not PHONE_PATTERN.match(telephone):
        errors["telephone"] = "Invalid contact number"

    for key, label in (
        ("customer_type", "Customer type"),
        ("product", "Product"),
        ("insurance_provider", "Insurance provider"),
    ):
        if not _text(data, key):
            errors[key] = f"{label} is required"

    email = _text(data, "email")
    if email and not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"

    period_from = parse_date(data.get("policy_period_from"))
    period_to = parse_date(data.get("policy_period_to"))
    if data.get("policy_period_from") and period_from is None:
        errors["policy_period_from"] = "Invalid date"
    if data.get("policy_period_to") and period_to is None:
        errors["policy_period_to"] = "Invalid date"
    if period_from and period_to and period_to < period_from:
        errors["policy_period_to"] = "Policy end date cannot be before the start date"

    for key in MONEY_FIELDS:
        value = data.get(key)
        if value in (None, ""):
            continue
        try:
            if float(value) < 0:
                errors[key] = "Amount cannot be negative"
        except (TypeError, ValueError):
            errors[key] = "Must be a number"

    return errors


def validate_quick_client(data: dict) -> dict[str, str]:
    """Validate the quick-add client form on the manager dashboard."""
    errors = {}

    if not _text(data, "name"):
        errors["name"] = "Name is required"

    contact = _text(data, "contact")
    if not contact:
        errors["contact"] = "Contact number is required"
    elif not PHONE_PATTERN.match(contact):
        errors["contact"] = "Invalid contact number"

    nic = _text(data, "nic")
    if not nic:
        errors["nic"] = "NIC/Passport is required"
    elif not NIC_PATTERN.match(nic):
        errors["nic"] = "Invalid NIC format (e.g., 901234567V)"

    if not _text(data, "address"):
        errors["address"] = "Address is required"

    return errors


def validate_user_form(data: dict) -> dict[str, str]:
    """Validate the admin create-user form."""
    errors = {}

    if not _text(data, "name"):
        errors["name"] = "Name is required"

    email = _text(data, "email")
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"

    password = data.get("password") or ""
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors["password"] = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"

    if data.get("role") not in config.USER_ROLES:
        errors["role"] = "Select a valid role"

    return errors


def validate_upload(filename: str, size_bytes: int) -> str | None:
    """
    Check a document upload against the allowed types and size limit.

    Returns:
        Error message, or None if the upload is acceptable
    """
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if extension not in config.ALLOWED_DOCUMENT_TYPES:
        allowed = ", ".join(config.ALLOWED_DOCUMENT_TYPES)
        return f"{filename}: unsupported file type (allowed: {allowed})"

    if size_bytes > config.UPLOAD_MAX_MB * 1024 * 1024:
        return f"{filename}: file exceeds {config.UPLOAD_MAX_MB} MB"

    return None


def compute_totals(data: dict) -> dict:
    """
    Fill in net premium and total invoice when they were left empty.

    Net premium is basic + SRCC + TC; the invoice adds stamp duty, admin
    fees, road safety fee, policy fee and VAT on top of it. Values the user
    entered are never overwritten.
    """
    result = dict(data)

    def amount(key: str) -> float:
        try:
            return float(result.get(key) or 0)
        except (TypeError, ValueError):
            return 0.0

    if result.get("net_premium") in (None, "") and any(result.get(k) not in (None, "") for k in PREMIUM_FIELDS):
        result["net_premium"] = sum(amount(k) for k in PREMIUM_FIELDS)

    if result.get("total_invoice") in (None, "") and result.get("net_premium") not in (None, ""):
        result["total_invoice"] = amount("net_premium") + sum(amount(k) for k in INVOICE_FIELDS)

    return result


def clean_client_data(data: dict) -> dict:
    """
    Normalise raw form values for the Client model.

    Strings are stripped and blanks dropped, dates become ISO strings, and
    money fields become floats. Call after validate_client_form.
    """
    cleaned = {}
    for key, value in data.items():
        if isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, str):
            value = value.strip()
        if value in (None, ""):
            continue
        if key in MONEY_FIELDS:
            value = float(value)
        cleaned[key] = value
    return cleaned
