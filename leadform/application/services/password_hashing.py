# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from leadform.domain.admin.repositories import PasswordHasher
from leadform.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Hashes in werkzeug's ``method$salt$hash`` format (scrypt by default)."""

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return check_password_hash(hashed, password)
        except ValueError:
            # Malformed stored hash or a password that is not encodable: fail closed.
            logger.error("auth.password: hash check could not run")
            return False
