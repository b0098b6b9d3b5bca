# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class NewSubmission:
    """Form fields as entered by the visitor, before they are stored."""

    name: str
    contact_number: str
    service: str
    description: str


@dataclass(slots=True, frozen=True)
class Submission:

    id: int
    name: str
    contact_number: str
    service: str
    description: str
    created_at: datetime
