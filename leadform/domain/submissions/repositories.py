# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import NewSubmission, Submission


class SubmissionRepository(Protocol):
    def add(self, submission: NewSubmission) -> Submission: ...
    def list_recent(self) -> list[Submission]: ...
    def find_by_id(self, submission_id: int) -> Submission | None: ...


class NotificationPort(Protocol):
    def notify(self, submission: Submission) -> None: ...
