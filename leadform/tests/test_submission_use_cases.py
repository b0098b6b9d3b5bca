from __future__ import annotations

import pytest

from leadform.application.use_cases.submissions import (
    ListSubmissionsUseCase,
    ResendNotificationUseCase,
    SubmitFormUseCase,
)
from leadform.domain.submissions import SubmissionNotFoundError
from leadform.shared.errors import NotificationError, StoreError
from leadform.tests.fakes import (
    FailingNotifier,
    InMemorySubmissionRepository,
    RecordingNotifier,
    sample_submission,
    store_failure,
)


def test_submit_stores_then_notifies(
    repository: InMemorySubmissionRepository, notifier: RecordingNotifier
) -> None:
    use_case = SubmitFormUseCase(submissions=repository, notifier=notifier)

    stored = use_case.execute(sample_submission())

    assert stored.id == 1
    assert repository.find_by_id(1) == stored
    assert notifier.sent == [stored]


@pytest.mark.parametrize(
    "error",
    [NotificationError(), ConnectionRefusedError("relay down"), RuntimeError("boom")],
)
def test_submit_survives_any_notification_failure(
    repository: InMemorySubmissionRepository, error: Exception
) -> None:
    failing = FailingNotifier(error)
    use_case = SubmitFormUseCase(submissions=repository, notifier=failing)

    stored = use_case.execute(sample_submission())

    assert failing.attempts == 1
    assert repository.list_recent() == [stored]


def test_submit_store_failure_skips_email(
    repository: InMemorySubmissionRepository, notifier: RecordingNotifier
) -> None:
    repository.fail_with = store_failure()
    use_case = SubmitFormUseCase(submissions=repository, notifier=notifier)

    with pytest.raises(StoreError):
        use_case.execute(sample_submission())

    assert notifier.sent == []


def test_list_returns_newest_first(repository: InMemorySubmissionRepository) -> None:
    a = repository.add(sample_submission(name="A"))
    b = repository.add(sample_submission(name="B"))
    c = repository.add(sample_submission(name="C"))

    result = ListSubmissionsUseCase(submissions=repository).execute()

    assert result == [c, b, a]


def test_list_empty_store(repository: InMemorySubmissionRepository) -> None:
    assert ListSubmissionsUseCase(submissions=repository).execute() == []


def test_resend_sends_existing_submission(
    repository: InMemorySubmissionRepository, notifier: RecordingNotifier
) -> None:
    stored = repository.add(sample_submission())
    use_case = ResendNotificationUseCase(submissions=repository, notifier=notifier)

    result = use_case.execute(stored.id, requested_by="admin")

    assert result == stored
    assert notifier.sent == [stored]


def test_resend_unknown_id_sends_nothing(
    repository: InMemorySubmissionRepository, notifier: RecordingNotifier
) -> None:
    use_case = ResendNotificationUseCase(submissions=repository, notifier=notifier)

    with pytest.raises(SubmissionNotFoundError) as excinfo:
        use_case.execute(42)

    assert excinfo.value.submission_id == 42
    assert notifier.sent == []


def test_resend_propagates_relay_failure(repository: InMemorySubmissionRepository) -> None:
    stored = repository.add(sample_submission())
    failing = FailingNotifier()
    use_case = ResendNotificationUseCase(submissions=repository, notifier=failing)

    with pytest.raises(NotificationError):
        use_case.execute(stored.id)

    assert failing.attempts == 1
    assert repository.find_by_id(stored.id) == stored


def test_resend_twice_sends_twice(
    repository: InMemorySubmissionRepository, notifier: RecordingNotifier
) -> None:
    stored = repository.add(sample_submission())
    use_case = ResendNotificationUseCase(submissions=repository, notifier=notifier)

    use_case.execute(stored.id)
    use_case.execute(stored.id)

    assert notifier.sent == [stored, stored]
