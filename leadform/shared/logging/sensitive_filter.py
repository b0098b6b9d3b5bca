# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction of credentials and visitor contact data in log messages."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Signing keys and passwords in key=value or key: value form.
    (
        re.compile(r"((?:jwt[_-]?secret|email[_-]?pass|password)\s*[:=]\s*['\"]?)([^\s'\"]{4,})", re.I),
        rf"\1{_MASK}",
    ),
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"\n]{10,})", re.I), rf"\1{_MASK}"),
    (re.compile(r"(bearer\s+)([\w\-.]{16,})", re.I), rf"\1{_MASK}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)([\w\-.]{16,})"), rf"\1{_MASK}"),
    # Credentials embedded in a database URL.
    (re.compile(r"(mysql|postgres(?:ql)?|sqlite)(\+\w+)?://([^:/@\s]+):([^@\s]+)@"), rf"\1\2://\3:{_MASK}@"),
    # Visitor contact data.
    (re.compile(r"([\w.%+-]+)@([\w-]+(?:\.[\w-]+)*\.[a-z]{2,})", re.I), r"***@\2"),
    (re.compile(r"(contact[_-]?number\s*[:=]\s*['\"]?)(\+?[\d\s\-().]{7,20})", re.I), r"\1+***"),
    (re.compile(r"\+?\d{1,3}[- ]?\(?\d{3}\)?[- ]?\d{3}[- ]?\d{4}"), "+***"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter; always keeps the record, only rewrites its message."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
