# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from leadform.application.use_cases.admin.login_admin import LoginAdminUseCase
from leadform.domain.admin import InvalidCredentialsError
from leadform.infrastructure.audit import AuditAction, audit_log
from leadform.infrastructure.observability import LOGIN_COUNTER
from leadform.interfaces.http.dto.admin import LoginRequestDTO, TokenDTO
from leadform.shared.logging import logger
from leadform.shared.middleware.request_logger import client_ip


class AdminController:
    def __init__(self, *, login_use_case: LoginAdminUseCase) -> None:
        self._login_use_case = login_use_case

    def login(self) -> tuple[Response, int]:
        ip_address = client_ip()

        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            LOGIN_COUNTER.labels(outcome="rejected").inc()
            audit_log(AuditAction.LOGIN_FAILED, ip_address=ip_address, success=False)
            raise InvalidCredentialsError() from exc

        try:
            issued = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            LOGIN_COUNTER.labels(outcome="rejected").inc()
            audit_log(
                AuditAction.LOGIN_FAILED,
                admin=dto.username,
                ip_address=ip_address,
                success=False,
            )
            raise

        LOGIN_COUNTER.labels(outcome="accepted").inc()
        audit_log(AuditAction.LOGIN_SUCCESS, admin=dto.username, ip_address=ip_address)
        logger.info(f"admin.login: ok username={dto.username!r} expires_at={issued.expires_at:%H:%M:%S}")
        return jsonify(TokenDTO(token=issued.token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/api/admin")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
