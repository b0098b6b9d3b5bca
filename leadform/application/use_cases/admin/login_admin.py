# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac

from leadform.domain.admin import InvalidCredentialsError, IssuedToken
from leadform.domain.admin.repositories import CredentialStore, PasswordHasher, TokenSigner

# Verified against when no admin hash is configured so a failed login costs
# the same either way.
_UNUSABLE_HASH = "scrypt:32768:8:1$unusable$" + "0" * 128


class LoginAdminUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        password_hasher: PasswordHasher,
        tokens: TokenSigner,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str, password: str) -> IssuedToken:
        credential = self._credentials.get()

        username_valid = hmac.compare_digest(
            username.encode("utf-8", "surrogatepass"),
            credential.username.encode("utf-8", "surrogatepass"),
        )
        password_valid = self._password_hasher.verify(
            password, credential.password_hash or _UNUSABLE_HASH
        )

        if not (username_valid and password_valid and credential.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(credential.username)
