# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from leadform.shared.errors.base import DomainError


class SubmissionNotFoundError(DomainError):
    default_code = "submission_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "Submission not found"

    def __init__(self, submission_id: int | str) -> None:
        super().__init__(context={"id": submission_id})
        self.submission_id = submission_id
