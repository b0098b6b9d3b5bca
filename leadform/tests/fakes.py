from __future__ import annotations

from datetime import UTC, datetime, timedelta

from leadform.domain.admin.repositories import PasswordHasher
from leadform.domain.submissions import (
    NewSubmission,
    NotificationPort,
    Submission,
    SubmissionRepository,
)
from leadform.shared.errors import NotificationError, StoreError

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"
TEST_SECRET = "test-signing-secret"


class InMemorySubmissionRepository(SubmissionRepository):
    def __init__(self, start: datetime | None = None) -> None:
        self._rows: dict[int, Submission] = {}
        self._seq = 1
        self._now = start or datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        self.fail_with: Exception | None = None

    def add(self, submission: NewSubmission) -> Submission:
        if self.fail_with is not None:
            raise self.fail_with
        stored = Submission(
            id=self._seq,
            name=submission.name,
            contact_number=submission.contact_number,
            service=submission.service,
            description=submission.description,
            created_at=self._now,
        )
        self._rows[stored.id] = stored
        self._seq += 1
        self._now += timedelta(minutes=1)
        return stored

    def list_recent(self) -> list[Submission]:
        if self.fail_with is not None:
            raise self.fail_with
        return sorted(self._rows.values(), key=lambda s: (s.created_at, s.id), reverse=True)

    def find_by_id(self, submission_id: int) -> Submission | None:
        if self.fail_with is not None:
            raise self.fail_with
        return self._rows.get(submission_id)


class RecordingNotifier(NotificationPort):
    def __init__(self) -> None:
        self.sent: list[Submission] = []

    def notify(self, submission: Submission) -> None:
        self.sent.append(submission)


class FailingNotifier(NotificationPort):
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or NotificationError(context={"relay": "down"})
        self.attempts = 0

    def notify(self, submission: Submission) -> None:
        self.attempts += 1
        raise self.error


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FakeClock:
    def __init__(self, now: float = 1_714_564_800.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def sample_submission(**overrides: str) -> NewSubmission:
    fields = {
        "name": "Ada Lovelace",
        "contact_number": "+44 20 7946 0000",
        "service": "Web Development",
        "description": "Landing page for a new product",
    }
    fields.update(overrides)
    return NewSubmission(**fields)


def store_failure() -> StoreError:
    return StoreError(context={"operation": "test"})
