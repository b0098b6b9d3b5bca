# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from leadform.domain.submissions import NewSubmission, Submission, SubmissionRepository
from leadform.infrastructure.db import Database
from leadform.infrastructure.db.models import SubmissionRow
from leadform.shared.errors import StoreError
from leadform.shared.logging import logger


def _to_domain(row: SubmissionRow) -> Submission:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return Submission(
        id=row.id,
        name=row.name,
        contact_number=row.contact_number,
        service=row.service,
        description=row.description,
        created_at=created_at,
    )


class SqlAlchemySubmissionRepository(SubmissionRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def add(self, submission: NewSubmission) -> Submission:
        try:
            with self._database.session_scope() as session:
                row = SubmissionRow(
                    name=submission.name,
                    contact_number=submission.contact_number,
                    service=submission.service,
                    description=submission.description,
                )
                session.add(row)
                session.flush()
                stored = _to_domain(row)
        except SQLAlchemyError as exc:
            logger.error(f"submissions.add: {type(exc).__name__}: {exc}")
            raise StoreError(context={"operation": "insert"}) from exc

        logger.info(f"submissions.add: stored submission_id={stored.id}")
        return stored

    def list_recent(self) -> list[Submission]:
        stmt = select(SubmissionRow).order_by(
            SubmissionRow.created_at.desc(), SubmissionRow.id.desc()
        )
        try:
            with self._database.session_scope() as session:
                return [_to_domain(row) for row in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            logger.error(f"submissions.list: {type(exc).__name__}: {exc}")
            raise StoreError(context={"operation": "list"}) from exc

    def find_by_id(self, submission_id: int) -> Submission | None:
        try:
            with self._database.session_scope() as session:
                row = session.get(SubmissionRow, submission_id)
                return _to_domain(row) if row is not None else None
        except SQLAlchemyError as exc:
            logger.error(f"submissions.get: {type(exc).__name__}: {exc}")
            raise StoreError(context={"operation": "get"}) from exc
