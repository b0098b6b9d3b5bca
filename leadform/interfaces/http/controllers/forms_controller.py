# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from leadform.application.use_cases.submissions import (
    ListSubmissionsUseCase,
    ResendNotificationUseCase,
    SubmitFormUseCase,
)
from leadform.domain.admin import AdminClaims
from leadform.domain.submissions import SubmissionNotFoundError
from leadform.interfaces.http.auth_guard import AuthGuard
from leadform.interfaces.http.dto.forms import (
    FormSubmissionRequestDTO,
    MessageDTO,
    SubmissionDTO,
)
from leadform.shared.errors import NotificationError, StoreError
from leadform.shared.errors.validation import raise_validation_error
from leadform.shared.logging import logger

SUBMIT_OK = "Form submitted successfully!"
SUBMIT_FAILED = "Error submitting form. Please try again."
LIST_FAILED = "Failed to fetch submissions"
RESEND_OK = "Email resent successfully!"
RESEND_FAILED = "Failed to resend email"

# Largest id a BIGINT primary key can hold.
_MAX_ID = 2**63 - 1


def _parse_submission_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()) or len(raw) > 19 or int(raw) > _MAX_ID:
        raise SubmissionNotFoundError(raw)
    return int(raw)


class FormsController:
    def __init__(
        self,
        *,
        submit_form: SubmitFormUseCase,
        list_submissions: ListSubmissionsUseCase,
        resend_notification: ResendNotificationUseCase,
        guard: AuthGuard,
    ) -> None:
        self._submit_form = submit_form
        self._list_submissions = list_submissions
        self._resend_notification = resend_notification
        self._guard = guard

    def submit(self) -> tuple[Response, int]:
        try:
            dto = FormSubmissionRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Invalid form submission")

        try:
            stored = self._submit_form.execute(dto.to_domain())
        except StoreError as exc:
            raise StoreError(SUBMIT_FAILED) from exc

        logger.info(f"forms.submit: ok submission_id={stored.id}")
        return jsonify(MessageDTO(message=SUBMIT_OK).model_dump()), 200

    def list_forms(self, *, claims: AdminClaims) -> tuple[Response, int]:
        try:
            submissions = self._list_submissions.execute()
        except StoreError as exc:
            raise StoreError(LIST_FAILED) from exc

        payload = [
            SubmissionDTO.model_validate(item).model_dump(mode="json") for item in submissions
        ]
        logger.info(f"forms.list: {len(payload)} submissions for {claims.username}")
        return jsonify(payload), 200

    def resend(self, submission_id: str, *, claims: AdminClaims) -> tuple[Response, int]:
        # The id is parsed after the guard so a bad token is always a 401.
        parsed_id = _parse_submission_id(submission_id)
        try:
            self._resend_notification.execute(parsed_id, requested_by=claims.username)
        except NotificationError as exc:
            raise NotificationError(RESEND_FAILED) from exc
        except StoreError as exc:
            raise StoreError(RESEND_FAILED) from exc

        logger.info(f"forms.resend: ok submission_id={parsed_id}")
        return jsonify(MessageDTO(message=RESEND_OK).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("forms", __name__, url_prefix="/api")
        bp.add_url_rule("/form", view_func=self.submit, methods=["POST"])
        bp.add_url_rule(
            "/forms",
            endpoint="list_forms",
            view_func=self._guard.protect(self.list_forms),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/forms/<submission_id>/resend",
            endpoint="resend",
            view_func=self._guard.protect(self.resend),
            methods=["POST"],
        )
        return bp
