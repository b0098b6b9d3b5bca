# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from leadform.domain.submissions import (
    NotificationPort,
    Submission,
    SubmissionNotFoundError,
    SubmissionRepository,
)
from leadform.infrastructure.audit import AuditAction, audit_log
from leadform.infrastructure.observability import NOTIFICATION_COUNTER
from leadform.shared.errors import NotificationError


class ResendNotificationUseCase:
    def __init__(
        self,
        *,
        submissions: SubmissionRepository,
        notifier: NotificationPort,
    ) -> None:
        self._submissions = submissions
        self._notifier = notifier

    def execute(self, submission_id: int, *, requested_by: str | None = None) -> Submission:
        submission = self._submissions.find_by_id(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)

        try:
            self._notifier.notify(submission)
        except NotificationError:
            NOTIFICATION_COUNTER.labels(outcome="failed").inc()
            audit_log(
                AuditAction.NOTIFICATION_RESENT,
                admin=requested_by,
                details={"submission_id": submission_id},
                success=False,
            )
            raise

        NOTIFICATION_COUNTER.labels(outcome="sent").inc()
        audit_log(
            AuditAction.NOTIFICATION_RESENT,
            admin=requested_by,
            details={"submission_id": submission_id},
        )
        return submission
