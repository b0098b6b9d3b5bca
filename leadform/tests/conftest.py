from __future__ import annotations

from collections.abc import Callable

import pytest
from flask import Flask

from leadform.app import create_app
from leadform.domain.submissions import NotificationPort
from leadform.infrastructure.auth import SerializerTokenSigner
from leadform.infrastructure.container import Container
from leadform.shared.config import AppConfig, AuthConfig, ObservabilityConfig
from leadform.tests.fakes import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    TEST_SECRET,
    DeterministicHasher,
    FakeClock,
    InMemorySubmissionRepository,
    RecordingNotifier,
)


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repository() -> InMemorySubmissionRepository:
    return InMemorySubmissionRepository()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def token_signer(clock: FakeClock) -> SerializerTokenSigner:
    return SerializerTokenSigner(TEST_SECRET, ttl_seconds=3600, clock=clock)


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        auth=AuthConfig(
            JWT_SECRET=TEST_SECRET,
            ADMIN_USERNAME=ADMIN_USERNAME,
            ADMIN_PASSWORD_HASH=f"hashed:{ADMIN_PASSWORD}",
        ),
        observability=ObservabilityConfig(METRICS_ENABLED=True),
    )


@pytest.fixture()
def make_app(
    app_config: AppConfig,
    repository: InMemorySubmissionRepository,
    token_signer: SerializerTokenSigner,
) -> Callable[..., Flask]:
    def _make(notifier: NotificationPort | None = None) -> Flask:
        container = Container(
            app_config,
            submission_repository=repository,
            notifier=notifier or RecordingNotifier(),
            token_signer=token_signer,
            password_hasher=DeterministicHasher(),
        )
        return create_app(app_config, container=container)

    return _make


@pytest.fixture()
def app(make_app: Callable[..., Flask], notifier: RecordingNotifier) -> Flask:
    return make_app(notifier)


