# This project was developed with assistance from AI tools.
"""
Back-office user accounts created from the admin dashboard.

Accounts live in SQLite next to the static demo users in config/users.yaml;
both are merged into the credential mapping streamlit-authenticator logs
users in against.
"""
import logging
import sqlite3
from datetime import datetime
from pathlib import Path

import streamlit_authenticator as stauth
import yaml

from config import config
from models import UserAccount

logger = logging.getLogger(__name__)


class DuplicateUserError(ValueError):
    """An account with this email already exists."""


class UserStore:
    """SQLite-backed storage for back-office user accounts."""

    def __init__(self, db_path: str | None = None, auth_config_path: Path | None = None):
        """Initialize the user store."""
        self.db_path = db_path or config.APP_DATA_DB_PATH
        self.auth_config_path = auth_config_path
        self._init_db()

    def _init_db(self):
        """Initialize the database schema."""
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL UNIQUE,
                    role TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'active',
                    password_hash TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_users_role
                ON users(role)
            """)
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_account(row) -> UserAccount:
        return UserAccount(
            id=row[0],
            name=row[1],
            email=row[2],
            role=row[3],
            status=row[4],
            created_at=datetime.fromisoformat(row[5]),
        )

    def create_user(self, name: str, email: str, role: str, password: str) -> UserAccount:
        """
        Create a user account.

        Raises:
            DuplicateUserError: If the email is already registered
        """
        email = email.strip().lower()
        if self.get_user(email) or email in self._builtin_logins():
            raise DuplicateUserError(f"A user with email {email} already exists")

        account = UserAccount(name=name.strip(), email=email, role=role)
        password_hash = stauth.Hasher.hash(password)

        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute("""
                INSERT INTO users (name, email, role, status, password_hash, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (account.name, account.email, account.role, account.status,
                  password_hash, account.created_at.isoformat()))
            conn.commit()
            account.id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise DuplicateUserError(f"A user with email {email} already exists") from e
        finally:
            conn.close()

        logger.info(f"Created {role} account for {email}")
        return account

    def get_user(self, email: str) -> UserAccount | None:
        """Get an account by email."""
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute("""
                SELECT id, name, email, role, status, created_at
                FROM users
                WHERE email = ?
            """, (email.strip().lower(),))
            row = cursor.fetchone()
            return self._row_to_account(row) if row else None
        finally:
            conn.close()

    def list_users(self, role: str | None = None, status: str | None = None) -> list[UserAccount]:
        """
        List accounts, newest first.

        Args:
            role: Only accounts with this role
            status: Only 'active' or 'inactive' accounts
        """
        query = "SELECT id, name, email, role, status, created_at FROM users"
        clauses, params = [], []
        if role:
            clauses.append("role = ?")
            params.append(role)
        if status:
            clauses.append("status = ?")
            params.append(status)
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY created_at DESC, id DESC"

        conn = sqlite3.connect(self.db_path)
        try:
            return [self._row_to_account(row) for row in conn.execute(query, params).fetchall()]
        finally:
            conn.close()

    def set_status(self, email: str, status: str) -> bool:
        """Activate or deactivate an account. Returns False if it does not exist."""
        if status not in ("active", "inactive"):
            raise ValueError(f"Unknown status: {status}")

        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute(
                "UPDATE users SET status = ? WHERE email = ?",
                (status, email.strip().lower()),
            )
            conn.commit()
            updated = cursor.rowcount > 0
        finally:
            conn.close()

        if updated:
            logger.info(f"Set {email} to {status}")
        return updated

    def delete_user(self, email: str) -> bool:
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM users WHERE email = ?", (email.strip().lower(),))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def static_accounts(self, auth_config_path: Path | None = None) -> list[UserAccount]:
        """Built-in users from the YAML file; these cannot be edited from the UI."""
        auth_config = load_auth_config(auth_config_path or self.auth_config_path)
        accounts = []
        for username, entry in auth_config.get("credentials", {}).get("usernames", {}).items():
            accounts.append(UserAccount(
                name=entry.get("name", username),
                email=entry.get("email") or username,
                role=entry.get("role", "sales"),
            ))
        return accounts

    def _builtin_logins(self) -> set[str]:
        """Usernames and emails taken by the YAML users."""
        auth_config = load_auth_config(self.auth_config_path)
        logins = set()
        for username, entry in auth_config.get("credentials", {}).get("usernames", {}).items():
            logins.add(username.lower())
            if entry.get("email"):
                logins.add(entry["email"].strip().lower())
        return logins

    def credentials(self, auth_config_path: Path | None = None) -> dict:
        """
        Credential mapping for streamlit-authenticator.

        Static users from the YAML file come first; active store accounts are
        added under their email as username. Inactive accounts cannot log in.
        """
        auth_config = load_auth_config(auth_config_path or self.auth_config_path)
        usernames = dict(auth_config.get("credentials", {}).get("usernames", {}))

        conn = sqlite3.connect(self.db_path)
        try:
            rows = conn.execute("""
                SELECT name, email, role, password_hash
                FROM users
                WHERE status = 'active'
            """).fetchall()
        finally:
            conn.close()

        for name, email, role, password_hash in rows:
            usernames.setdefault(email, {
                "name": name,
                "email": email,
                "password": password_hash,
                "role": role,
                "roles": [role],
            })

        return {"usernames": usernames}


def load_auth_config(path: Path | None = None) -> dict:
    """Load authentication configuration from YAML file."""
    config_path = Path(path or config.AUTH_CONFIG_PATH)

    if not config_path.exists():
        raise FileNotFoundError(
            f"Authentication config not found: {config_path}\n"
            "Create config/users.yaml with user credentials."
        )

    with open(config_path) as f:
        return yaml.safe_load(f)


# Singleton instance
_user_store: UserStore | None = None


def get_user_store() -> UserStore:
    """Get or create the singleton user store instance."""
    global _user_store
    if _user_store is None:
        _user_store = UserStore()
    return _user_store
