# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import AdminClaims, AdminCredential, IssuedToken


class CredentialStore(Protocol):
    def get(self) -> AdminCredential: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenSigner(Protocol):
    def issue(self, username: str) -> IssuedToken: ...
    def verify(self, token: str) -> AdminClaims: ...
