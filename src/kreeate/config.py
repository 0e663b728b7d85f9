"""Environment-driven configuration for Kreeate."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_DB_PATH = "kreeate.db"
DEFAULT_HTTP_TIMEOUT = 30.0


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        db_path: SQLite database path (":memory:" for tests).
        graphql_url: GitHub GraphQL endpoint.
        http_timeout: Timeout in seconds for upstream calls.
        admin_emails: Lower-cased emails allowed to read analytics.
        environment: Deployment environment name, e.g. "development".
    """

    db_path: str = DEFAULT_DB_PATH
    graphql_url: str = DEFAULT_GRAPHQL_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    admin_emails: tuple[str, ...] = field(default_factory=tuple)
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def is_admin_email(self, email: str | None) -> bool:
        """Check an email against the admin allowlist.

        With no admins configured every signed-in user is treated as an
        admin outside production, and nobody is inside production.
        """
        if not email:
            return False
        if not self.admin_emails:
            return not self.is_production
        return email.lower() in self.admin_emails

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from KREEATE_* environment variables.

        Raises:
            ConfigError: If a numeric value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("KREEATE_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"KREEATE_HTTP_TIMEOUT must be a number, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError("KREEATE_HTTP_TIMEOUT must be positive")

        admins = tuple(
            value.strip().lower()
            for value in env.get("KREEATE_ADMIN_EMAILS", "").split(",")
            if value.strip()
        )

        return cls(
            db_path=env.get("KREEATE_DB_PATH", DEFAULT_DB_PATH),
            graphql_url=env.get("KREEATE_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
            http_timeout=timeout,
            admin_emails=admins,
            environment=env.get("KREEATE_ENV", "development"),
        )
