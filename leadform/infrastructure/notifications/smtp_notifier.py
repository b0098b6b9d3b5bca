# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Admin notification emails over SMTP with implicit TLS."""

from __future__ import annotations

import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr

from leadform.domain.submissions import NotificationPort, Submission
from leadform.shared.config import MailConfig
from leadform.shared.errors import NotificationError
from leadform.shared.logging import logger

from .templates import render_html, render_subject, render_text


class SmtpNotifier(NotificationPort):
    """Sends one email per call to the configured admin address.

    There is no retry and no timeout unless ``SMTP_TIMEOUT`` is set, so a
    stalled relay holds the calling request until the connection drops.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        recipient: str | None,
        sender_name: str = "New Submission",
        timeout: float | None = None,
        ssl_context: ssl.SSLContext | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._recipient = recipient
        self._sender_name = sender_name
        self._timeout = timeout
        self._ssl_context = ssl_context

    @classmethod
    def from_config(cls, config: MailConfig) -> SmtpNotifier:
        return cls(
            host=config.smtp_host,
            port=config.smtp_port,
            username=config.username,
            password=config.password,
            recipient=config.admin_email,
            sender_name=config.sender_name,
            timeout=config.smtp_timeout,
        )

    def build_message(self, submission: Submission) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = render_subject(submission)
        message["From"] = formataddr((self._sender_name, self._username or ""))
        message["To"] = self._recipient or ""
        message.set_content(render_text(submission))
        message.add_alternative(render_html(submission), subtype="html")
        return message

    def notify(self, submission: Submission) -> None:
        if not self._recipient or not self._username:
            raise NotificationError(
                "Mail transport is not configured",
                context={"submission_id": submission.id},
            )

        message = self.build_message(submission)
        context = self._ssl_context or ssl.create_default_context()
        kwargs: dict[str, object] = {"context": context}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            with smtplib.SMTP_SSL(self._host, self._port, **kwargs) as server:
                if self._password:
                    server.login(self._username, self._password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(
                f"mail.notify: send failed submission_id={submission.id} "
                f"relay={self._host}:{self._port} error={type(exc).__name__}"
            )
            raise NotificationError(context={"submission_id": submission.id}) from exc

        logger.info(f"mail.notify: sent submission_id={submission.id}")


__all__ = ["SmtpNotifier"]
