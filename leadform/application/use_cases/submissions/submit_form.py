# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from leadform.domain.submissions import (
    NewSubmission,
    NotificationPort,
    Submission,
    SubmissionRepository,
)
from leadform.infrastructure.audit import AuditAction, audit_log
from leadform.infrastructure.observability import NOTIFICATION_COUNTER, SUBMISSION_COUNTER
from leadform.shared.logging import logger


class SubmitFormUseCase:
    """Store a submission, then tell the admin about it.

    The email is best effort: a failing relay is logged and never turns a
    stored lead into an error response.
    """

    def __init__(
        self,
        *,
        submissions: SubmissionRepository,
        notifier: NotificationPort,
    ) -> None:
        self._submissions = submissions
        self._notifier = notifier

    def execute(self, submission: NewSubmission) -> Submission:
        stored = self._submissions.add(submission)
        SUBMISSION_COUNTER.inc()
        audit_log(AuditAction.SUBMISSION_CREATED, details={"submission_id": stored.id})

        try:
            self._notifier.notify(stored)
        except Exception as exc:
            NOTIFICATION_COUNTER.labels(outcome="failed").inc()
            logger.opt(exception=exc).warning(
                f"forms.submit: notification failed for submission_id={stored.id}"
            )
        else:
            NOTIFICATION_COUNTER.labels(outcome="sent").inc()
            logger.info(f"forms.submit: notification sent for submission_id={stored.id}")

        return stored
