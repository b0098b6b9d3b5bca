# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class AdminCredential:

    username: str
    password_hash: str | None


@dataclass(slots=True, frozen=True)
class AdminClaims:
    """Decoded contents of a verified admin token."""

    username: str
    issued_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    expires_at: datetime
