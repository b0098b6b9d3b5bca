# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .list_submissions import ListSubmissionsUseCase
from .resend_notification import ResendNotificationUseCase
from .submit_form import SubmitFormUseCase

__all__ = [
    "ListSubmissionsUseCase",
    "ResendNotificationUseCase",
    "SubmitFormUseCase",
]
