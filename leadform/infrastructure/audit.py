# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Audit trail for admin actions and new leads.

Entries go to the application log only; there is no audit table.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from leadform.shared.logging import logger, sanitize_message

_REDACTED_KEYS = ("password", "token", "secret", "contact", "email", "phone")


class AuditAction(str, Enum):
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    SUBMISSION_CREATED = "submission_created"
    NOTIFICATION_RESENT = "notification_resent"


def redact_details(details: Mapping[str, Any]) -> dict[str, Any]:
    redacted: dict[str, Any] = {}
    for key, value in details.items():
        if any(marker in key.lower() for marker in _REDACTED_KEYS):
            redacted[key] = "***REDACTED***"
        elif isinstance(value, str):
            redacted[key] = sanitize_message(value)
        else:
            redacted[key] = value
    return redacted


def audit_log(
    action: AuditAction,
    admin: str | None = None,
    ip_address: str | None = None,
    details: Mapping[str, Any] | None = None,
    success: bool = True,
) -> None:
    parts = [f"AUDIT: {action.value}", f"success={success}"]
    if admin is not None:
        parts.append(f"admin={admin!r}")
    if ip_address is not None:
        parts.append(f"ip={ip_address!r}")
    if details:
        parts.append(f"details={redact_details(details)}")

    line = " | ".join(parts)
    if success:
        logger.info(line)
    else:
        logger.warning(line)


__all__ = ["AuditAction", "audit_log", "redact_details"]
