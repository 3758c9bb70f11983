# This project was developed with assistance from AI tools.
"""Display helpers shared by the views, the CLI and the PDF summary."""
from datetime import date, datetime

from config import config


def display(value) -> str:
    """Value as text, or '-' when empty."""
    if value is None or value == "":
        return "-"
    return str(value)


def format_date(value) -> str:
    """ISO date or timestamp as YYYY-MM-DD."""
    if not value:
        return "-"
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    text = str(value).replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).strftime("%Y-%m-%d")
    except ValueError:
        try:
            return date.fromisoformat(text[:10]).strftime("%Y-%m-%d")
        except ValueError:
            return "-"


def format_currency(amount, currency: str | None = None) -> str:
    if amount is None or amount == "":
        return "-"
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "-"
    return f"{currency or config.CURRENCY} {value:,.2f}"


def format_address(client) -> str:
    """Single-line postal address from the street/city/district/province fields."""
    parts = [
        getattr(client, name, None)
        for name in ("street1", "street2", "city", "district", "province")
    ]
    return ", ".join(p.strip() for p in parts if p and p.strip()) or "-"


def truncate_path(path: str | None, limit: int = 40) -> str:
    if not path:
        return "No URL"
    return path[:limit] + ("..." if len(path) > limit else "")
