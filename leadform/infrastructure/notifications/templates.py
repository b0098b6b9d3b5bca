# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from html import escape

from leadform.domain.submissions import Submission

DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

_HTML = """\
<h2>New Contact Form Submission</h2>
<p><strong>Name:</strong> {name}</p>
<p><strong>Contact Number:</strong> {contact_number}</p>
<p><strong>Service:</strong> {service}</p>
<p><strong>Description:</strong> {description}</p>
<p><strong>Submission Date:</strong> {created_at}</p>
"""

_TEXT = """\
New Contact Form Submission

Name: {name}
Contact Number: {contact_number}
Service: {service}
Description: {description}
Submission Date: {created_at}
"""


def _fields(submission: Submission) -> dict[str, str]:
    return {
        "name": submission.name,
        "contact_number": submission.contact_number,
        "service": submission.service,
        "description": submission.description,
        "created_at": submission.created_at.strftime(DATE_FORMAT).strip(),
    }


def render_subject(submission: Submission) -> str:
    # Subjects must stay on one line.
    service = " ".join(submission.service.split())
    return f"New Form Submission: {service}"


def render_html(submission: Submission) -> str:
    return _HTML.format(**{key: escape(value) for key, value in _fields(submission).items()})


def render_text(submission: Submission) -> str:
    return _TEXT.format(**_fields(submission))
