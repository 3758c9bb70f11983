# This project was developed with assistance from AI tools.
import os
import re
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _resolve_db_path(env_var: str, default: str, base_dir: Path) -> str:
    """Resolve database path, making relative paths absolute from base_dir."""
    path = os.getenv(env_var, default)
    if os.path.isabs(path):
        return path
    return str(base_dir / path)


def _file_server_url(api_url: str) -> str:
    """Strip the trailing /api segment to get the static file server root."""
    return re.sub(r"/api/?$", "", api_url.strip())


class Config:
    """Application configuration."""

    # ==========================================================================
    # Brokerage REST Backend
    # ==========================================================================
    API_URL: str = os.getenv("API_URL", "http://localhost:5000/api")
    # Bearer token sent with every backend request (optional)
    API_TOKEN: str = os.getenv("API_TOKEN", "")

    # Uploaded documents are served from the backend root, not under /api
    FILE_SERVER_URL: str = os.getenv("FILE_SERVER_URL") or _file_server_url(API_URL)

    API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "30"))
    DOCUMENT_PROBE_TIMEOUT: float = float(os.getenv("DOCUMENT_PROBE_TIMEOUT", "10"))

    # ==========================================================================
    # Uploads
    # ==========================================================================
    UPLOAD_MAX_MB: int = int(os.getenv("UPLOAD_MAX_MB", "10"))
    ALLOWED_DOCUMENT_TYPES: list[str] = ["pdf", "jpg", "jpeg", "png", "gif"]

    # ==========================================================================
    # Directory Paths and Storage
    # ==========================================================================
    BASE_DIR: Path = Path(__file__).parent
    OUTPUT_REPORT_DIR: Path = Path(os.getenv("OUTPUT_REPORT_DIR", "./output_reports"))
    AUTH_CONFIG_PATH: Path = BASE_DIR / "config" / "users.yaml"

    # Local user accounts (relative paths resolved from BASE_DIR)
    APP_DATA_DB_PATH: str = _resolve_db_path("APP_DATA_DB_PATH", ".app_data.db", BASE_DIR)

    # ==========================================================================
    # Display / Logging
    # ==========================================================================
    CURRENCY: str = os.getenv("CURRENCY", "LKR")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ==========================================================================
    # Brokerage Reference Data
    # ==========================================================================
    CUSTOMER_TYPES: list[str] = ["Individual", "Corporate"]

    PRODUCTS: list[str] = [
        "Motor Insurance",
        "Fire Insurance",
        "Health Insurance",
        "Life Insurance",
        "Marine Insurance",
        "Travel Insurance",
        "Engineering Insurance",
        "Liability Insurance",
        "Miscellaneous",
    ]

    INSURANCE_PROVIDERS: list[str] = [
        "AIA Insurance",
        "Ceylinco Insurance",
        "Union Assurance",
        "Sri Lanka Insurance",
        "Allianz Insurance",
        "HNB Assurance",
        "Fairfirst Insurance",
        "LOLC General Insurance",
    ]

    COMMISSION_TYPES: list[str] = ["Percentage", "Fixed"]

    # Role key -> display name
    USER_ROLES: dict[str, str] = {
        "admin": "Administrator",
        "manager": "Underwriter",
        "sales": "Sales Personnel",
    }

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.API_URL.startswith(("http://", "https://")):
            raise ValueError(f"API_URL must be an http(s) URL, got: {cls.API_URL!r}")

        Path(cls.APP_DATA_DB_PATH).parent.mkdir(parents=True, exist_ok=True)
        cls.OUTPUT_REPORT_DIR.mkdir(parents=True, exist_ok=True)


config = Config()
