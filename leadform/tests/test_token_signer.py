from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from leadform.infrastructure.auth import SerializerTokenSigner
from leadform.shared.errors import AuthError
from leadform.tests.fakes import TEST_SECRET, FakeClock


def test_issue_and_verify(token_signer: SerializerTokenSigner, clock: FakeClock) -> None:
    issued = token_signer.issue("admin")

    claims = token_signer.verify(issued.token)

    assert claims.username == "admin"
    assert claims.issued_at == datetime.fromtimestamp(int(clock.now), UTC)
    assert issued.expires_at == datetime.fromtimestamp(clock.now, UTC) + timedelta(hours=1)


def test_token_valid_until_ttl_then_expired(
    token_signer: SerializerTokenSigner, clock: FakeClock
) -> None:
    issued = token_signer.issue("admin")

    clock.advance(3600)
    assert token_signer.verify(issued.token).username == "admin"

    clock.advance(1)
    with pytest.raises(AuthError):
        token_signer.verify(issued.token)


def test_tampered_token_rejected(token_signer: SerializerTokenSigner) -> None:
    token = token_signer.issue("admin").token
    tampered = token[:-2] + ("AA" if token[-2:] != "AA" else "BB")

    with pytest.raises(AuthError):
        token_signer.verify(tampered)


def test_token_from_other_secret_rejected(clock: FakeClock) -> None:
    other = SerializerTokenSigner("another-secret", clock=clock)
    ours = SerializerTokenSigner(TEST_SECRET, clock=clock)

    with pytest.raises(AuthError):
        ours.verify(other.issue("admin").token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_garbage_rejected(token_signer: SerializerTokenSigner, token: str) -> None:
    with pytest.raises(AuthError):
        token_signer.verify(token)
