# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error taxonomy.

Every error the API reports is an ``AppError``; the Flask handler renders it
as ``{"error": code, "message": ..., "context": ...}`` with ``status``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _DefaultedError(AppError):
    """An AppError whose code, status and message come from class attributes."""

    default_code: ClassVar[str] = "internal_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: ClassVar[str | None] = None

    def __init__(
        self,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        cls = type(self)
        super().__init__(
            code=cls.default_code,
            status=cls.default_status,
            message=message or cls.default_message,
            context=context,
        )


class DomainError(_DefaultedError):
    default_code = "domain_error"
    default_status = HTTPStatus.BAD_REQUEST


class InfrastructureError(_DefaultedError):
    default_code = "infrastructure_error"


class ValidationError(_DefaultedError):
    default_code = "validation_error"
    default_status = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request body"


class StoreError(InfrastructureError):
    default_code = "store_error"
    default_message = "Database operation failed"


class NotificationError(InfrastructureError):
    default_code = "notification_failed"
    default_message = "Failed to send email"


class AuthError(_DefaultedError):
    """Bearer token missing, malformed, mis-signed or expired.

    The cause is never exposed to the client.
    """

    default_code = "authentication_failed"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Authentication failed!"

    def __init__(self) -> None:
        super().__init__()
