from __future__ import annotations

import pytest

from leadform.shared.config import (
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    MailConfig,
    SecurityConfig,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SMTP_HOST", "SMTP_PORT", "SMTP_TIMEOUT", "TOKEN_TTL_SECONDS", "DATABASE_POOL_SIZE"):
        monkeypatch.delenv(name, raising=False)

    mail = MailConfig()
    auth = AuthConfig()
    database = DatabaseConfig()

    assert (mail.smtp_host, mail.smtp_port, mail.smtp_timeout) == ("smtp.gmail.com", 465, None)
    assert auth.token_ttl_seconds == 3600
    assert (database.pool_size, database.max_overflow, database.pool_timeout) == (10, 0, None)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_EMAIL", "owner@example.com")
    monkeypatch.setenv("SMTP_TIMEOUT", "12.5")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ENABLE_HSTS", "yes")

    mail = MailConfig()
    security = SecurityConfig()

    assert mail.admin_email == "owner@example.com"
    assert mail.smtp_timeout == 12.5
    assert security.allowed_origins == ["https://a.example", "https://b.example"]
    assert security.enable_hsts is True


def test_database_url_wins_over_parts() -> None:
    config = DatabaseConfig(DATABASE_URL="sqlite:///leads.db", MYSQL_HOST="ignored")

    assert config.sqlalchemy_url() == "sqlite:///leads.db"


def test_production_rejects_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(
            APP_ENV="production",
            auth=AuthConfig(JWT_SECRET="dev", ADMIN_PASSWORD_HASH="scrypt:x$y$z"),
        )


def test_production_requires_password_hash() -> None:
    with pytest.raises(SystemExit):
        AppConfig(
            APP_ENV="production",
            auth=AuthConfig(JWT_SECRET="a-long-random-secret", ADMIN_PASSWORD_HASH=None),
        )


def test_production_accepts_secure_settings() -> None:
    config = AppConfig(
        APP_ENV="production",
        auth=AuthConfig(JWT_SECRET="a-long-random-secret", ADMIN_PASSWORD_HASH="scrypt:x$y$z"),
    )

    assert config.is_production()


def test_listen_address_ignores_database_host_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOST", "db.internal")
    monkeypatch.setenv("LISTEN_HOST", "127.0.0.1")
    monkeypatch.delenv("MYSQL_HOST", raising=False)

    config = AppConfig(APP_ENV="test")

    assert config.host == "127.0.0.1"
    assert config.database.host == "localhost"


def test_listen_address_defaults_to_all_interfaces(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOST", "db.internal")
    monkeypatch.delenv("LISTEN_HOST", raising=False)

    assert AppConfig(APP_ENV="test").host == "0.0.0.0"
