# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import NewSubmission, Submission
from .exceptions import SubmissionNotFoundError
from .repositories import NotificationPort, SubmissionRepository

__all__ = [
    "NewSubmission",
    "NotificationPort",
    "Submission",
    "SubmissionNotFoundError",
    "SubmissionRepository",
]
