# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import request

from leadform.domain.admin import AdminClaims
from leadform.domain.admin.repositories import TokenSigner
from leadform.shared.errors import AuthError
from leadform.shared.logging import logger


def extract_bearer_token(header: str | None) -> str:
    if not header:
        raise AuthError()
    scheme, _, token = header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise AuthError()
    return token


class AuthGuard:
    def __init__(self, tokens: TokenSigner, *, debug_mode: bool = False) -> None:
        self._tokens = tokens
        self._debug_mode = debug_mode

    def authenticate(self, header: str | None) -> AdminClaims:
        return self._tokens.verify(extract_bearer_token(header))

    def protect(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Reject the request with 401 unless it carries a valid admin token.

        The verified claims are handed to the view as the claims keyword.
        """

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                claims = self.authenticate(request.headers.get("Authorization"))
            except AuthError:
                if self._debug_mode:
                    logger.warning(
                        f"Admin access denied on {request.method} {request.path}"
                    )
                raise

            if self._debug_mode:
                logger.debug(
                    f"Admin access granted: {claims.username} on {request.method} {request.path}"
                )
            return func(*args, claims=claims, **kwargs)

        return wrapper


__all__ = ["AuthGuard", "extract_bearer_token"]
