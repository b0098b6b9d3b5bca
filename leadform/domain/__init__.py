# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .admin import AdminClaims, AdminCredential, InvalidCredentialsError, IssuedToken
from .submissions import (
    NewSubmission,
    NotificationPort,
    Submission,
    SubmissionNotFoundError,
    SubmissionRepository,
)

__all__ = [
    "AdminClaims",
    "AdminCredential",
    "InvalidCredentialsError",
    "IssuedToken",
    "NewSubmission",
    "NotificationPort",
    "Submission",
    "SubmissionNotFoundError",
    "SubmissionRepository",
]
