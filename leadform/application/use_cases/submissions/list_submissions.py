# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from leadform.domain.submissions import Submission, SubmissionRepository


class ListSubmissionsUseCase:
    def __init__(self, *, submissions: SubmissionRepository) -> None:
        self._submissions = submissions

    def execute(self) -> list[Submission]:
        return self._submissions.list_recent()
