# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""One log line when a request arrives and one when it leaves.

The ``X-Request-ID`` header, or a generated id, becomes the correlation id for
everything logged while the request is handled, and is echoed back on the
response.
"""

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, g, request

from leadform.shared.logging import clear_correlation_id, get_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint_secrets(headers: Mapping[str, str]) -> dict[str, str]:
    # Headers that carry credentials are logged as a short digest so repeated
    # use of one token is still visible.
    return {
        key: (
            f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
            if key.lower() in _SECRET_HEADERS
            else value
        )
        for key, value in headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6))
        g.request_started_at = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.path} from {client_ip()} "
                f"headers={_fingerprint_secrets(request.headers)} "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"-> {request.method} {request.path} from {client_ip()}")

    @app.after_request
    def _finish(response):
        started = getattr(g, "request_started_at", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        logger.info(
            f"<- {request.method} {request.path} {response.status_code} in {elapsed_ms:.1f} ms"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request failed: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
