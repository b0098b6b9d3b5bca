# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from leadform.application.services.password_hashing import WerkzeugPasswordHasher
from leadform.application.use_cases.admin.login_admin import LoginAdminUseCase
from leadform.application.use_cases.submissions import (
    ListSubmissionsUseCase,
    ResendNotificationUseCase,
    SubmitFormUseCase,
)
from leadform.domain.admin.repositories import CredentialStore, PasswordHasher, TokenSigner
from leadform.domain.submissions import NotificationPort, SubmissionRepository
from leadform.infrastructure.auth import ConfiguredCredentialStore, SerializerTokenSigner
from leadform.infrastructure.db import Database
from leadform.infrastructure.notifications import SmtpNotifier
from leadform.infrastructure.repositories import SqlAlchemySubmissionRepository
from leadform.interfaces.http.auth_guard import AuthGuard
from leadform.interfaces.http.controllers.admin_controller import AdminController
from leadform.interfaces.http.controllers.forms_controller import FormsController
from leadform.interfaces.http.controllers.misc_controller import MiscController
from leadform.shared.config import AppConfig


class Container:
    """Builds the object graph once per application.

    Any collaborator can be passed in explicitly; tests use this to swap the
    store, the mail transport or the token clock.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        database: Database | None = None,
        submission_repository: SubmissionRepository | None = None,
        notifier: NotificationPort | None = None,
        token_signer: TokenSigner | None = None,
        credential_store: CredentialStore | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        self._database = database
        self._submission_repository = submission_repository
        self._notifier = notifier
        self._token_signer = token_signer
        self._credential_store = credential_store
        self._password_hasher = password_hasher

    @cached_property
    def database(self) -> Database | None:
        if self._database is not None:
            return self._database
        if self._submission_repository is not None:
            return None
        return Database.from_config(self.config.database)

    @cached_property
    def submission_repository(self) -> SubmissionRepository:
        if self._submission_repository is not None:
            return self._submission_repository
        if self.database is None:
            raise RuntimeError("No database configured for the submission repository")
        return SqlAlchemySubmissionRepository(self.database)

    @cached_property
    def notifier(self) -> NotificationPort:
        return self._notifier or SmtpNotifier.from_config(self.config.mail)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or WerkzeugPasswordHasher()

    @cached_property
    def token_signer(self) -> TokenSigner:
        return self._token_signer or SerializerTokenSigner(
            self.config.auth.jwt_secret,
            ttl_seconds=self.config.auth.token_ttl_seconds,
        )

    @cached_property
    def credential_store(self) -> CredentialStore:
        return self._credential_store or ConfiguredCredentialStore.from_config(self.config.auth)

    @cached_property
    def auth_guard(self) -> AuthGuard:
        return AuthGuard(self.token_signer, debug_mode=self.config.debug_logging)

    # Use cases

    @cached_property
    def submit_form_use_case(self) -> SubmitFormUseCase:
        return SubmitFormUseCase(submissions=self.submission_repository, notifier=self.notifier)

    @cached_property
    def list_submissions_use_case(self) -> ListSubmissionsUseCase:
        return ListSubmissionsUseCase(submissions=self.submission_repository)

    @cached_property
    def resend_notification_use_case(self) -> ResendNotificationUseCase:
        return ResendNotificationUseCase(
            submissions=self.submission_repository, notifier=self.notifier
        )

    @cached_property
    def login_admin_use_case(self) -> LoginAdminUseCase:
        return LoginAdminUseCase(
            credentials=self.credential_store,
            password_hasher=self.password_hasher,
            tokens=self.token_signer,
        )

    # Controllers

    @cached_property
    def forms_controller(self) -> FormsController:
        return FormsController(
            submit_form=self.submit_form_use_case,
            list_submissions=self.list_submissions_use_case,
            resend_notification=self.resend_notification_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(login_use_case=self.login_admin_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
