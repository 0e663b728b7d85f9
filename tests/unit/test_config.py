"""Unit tests for Settings."""

import pytest

from kreeate.config import DEFAULT_GRAPHQL_URL, ConfigError, Settings


@pytest.mark.unit
class TestFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})

        assert settings.db_path == "kreeate.db"
        assert settings.graphql_url == DEFAULT_GRAPHQL_URL
        assert settings.http_timeout == 30.0
        assert settings.admin_emails == ()
        assert settings.environment == "development"

    def test_reads_values(self) -> None:
        settings = Settings.from_env(
            {
                "KREEATE_DB_PATH": "/tmp/k.db",
                "KREEATE_GRAPHQL_URL": "https://ghe.example.com/api/graphql",
                "KREEATE_HTTP_TIMEOUT": "5",
                "KREEATE_ADMIN_EMAILS": " Admin@Example.com, ,owner@example.com ",
                "KREEATE_ENV": "production",
            }
        )

        assert settings.db_path == "/tmp/k.db"
        assert settings.graphql_url == "https://ghe.example.com/api/graphql"
        assert settings.http_timeout == 5.0
        assert settings.admin_emails == ("admin@example.com", "owner@example.com")
        assert settings.is_production

    def test_invalid_timeout(self) -> None:
        with pytest.raises(ConfigError, match="KREEATE_HTTP_TIMEOUT"):
            Settings.from_env({"KREEATE_HTTP_TIMEOUT": "soon"})

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(ConfigError):
            Settings.from_env({"KREEATE_HTTP_TIMEOUT": "0"})


@pytest.mark.unit
class TestIsAdminEmail:
    """Tests for the admin allowlist."""

    def test_allows_configured_admin(self) -> None:
        settings = Settings(admin_emails=("admin@example.com", "owner@example.com"))
        assert settings.is_admin_email("Owner@Example.com")

    def test_denies_non_admin_when_allowlist_set(self) -> None:
        settings = Settings(admin_emails=("admin@example.com",), environment="production")
        assert not settings.is_admin_email("user@example.com")

    def test_allows_anyone_outside_production_without_allowlist(self) -> None:
        assert Settings(environment="development").is_admin_email("anyone@example.com")

    def test_denies_in_production_without_allowlist(self) -> None:
        assert not Settings(environment="production").is_admin_email("admin@example.com")

    def test_denies_missing_email(self) -> None:
        assert not Settings().is_admin_email(None)
        assert not Settings().is_admin_email("")
