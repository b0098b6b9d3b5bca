# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.admin.login_admin import LoginAdminUseCase
from .use_cases.submissions import (
    ListSubmissionsUseCase,
    ResendNotificationUseCase,
    SubmitFormUseCase,
)

__all__ = [
    "ListSubmissionsUseCase",
    "LoginAdminUseCase",
    "ResendNotificationUseCase",
    "SubmitFormUseCase",
]
