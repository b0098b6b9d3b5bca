# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    AuthError,
    DomainError,
    InfrastructureError,
    NotificationError,
    StoreError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "DomainError",
    "InfrastructureError",
    "NotificationError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
