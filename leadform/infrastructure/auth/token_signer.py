# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless admin tokens.

A token is the username signed together with its issue time. Verification
checks the signature and rejects tokens older than the configured TTL; there
is no server-side record, so tokens cannot be revoked before they expire.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from itsdangerous import BadSignature, SignatureExpired, TimestampSigner, URLSafeTimedSerializer

from leadform.domain.admin import AdminClaims, IssuedToken
from leadform.domain.admin.repositories import TokenSigner
from leadform.shared.errors import AuthError
from leadform.shared.logging import logger

TOKEN_SALT = "leadform.admin-token"


def _clocked_signer(clock: Callable[[], float]) -> type[TimestampSigner]:
    class _ClockedTimestampSigner(TimestampSigner):
        def get_timestamp(self) -> int:
            return int(clock())

    return _ClockedTimestampSigner


class SerializerTokenSigner(TokenSigner):
    def __init__(
        self,
        secret: str,
        *,
        ttl_seconds: int = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._serializer = URLSafeTimedSerializer(
            secret,
            salt=TOKEN_SALT,
            signer=_clocked_signer(clock),
        )

    def issue(self, username: str) -> IssuedToken:
        token = self._serializer.dumps({"username": username})
        expires_at = datetime.fromtimestamp(self._clock(), UTC) + timedelta(seconds=self._ttl)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> AdminClaims:
        try:
            payload, issued_at = self._serializer.loads(
                token, max_age=self._ttl, return_timestamp=True
            )
        except SignatureExpired as exc:
            logger.debug("auth.token: expired")
            raise AuthError() from exc
        except BadSignature as exc:
            logger.debug("auth.token: bad signature")
            raise AuthError() from exc

        username = payload.get("username") if isinstance(payload, dict) else None
        if not isinstance(username, str) or not username:
            raise AuthError()

        if issued_at.tzinfo is None:
            issued_at = issued_at.replace(tzinfo=UTC)
        return AdminClaims(username=username, issued_at=issued_at)


__all__ = ["SerializerTokenSigner", "TOKEN_SALT"]
