# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from leadform.domain.admin import AdminCredential
from leadform.domain.admin.repositories import CredentialStore
from leadform.shared.config import AuthConfig


class ConfiguredCredentialStore(CredentialStore):
    """The single admin credential, read from configuration."""

    def __init__(self, username: str, password_hash: str | None) -> None:
        self._credential = AdminCredential(username=username, password_hash=password_hash)

    @classmethod
    def from_config(cls, config: AuthConfig) -> ConfiguredCredentialStore:
        return cls(config.admin_username, config.admin_password_hash)

    def get(self) -> AdminCredential:
        return self._credential
