from __future__ import annotations

import pytest

from leadform.application.services.password_hashing import WerkzeugPasswordHasher
from leadform.application.use_cases.admin.login_admin import LoginAdminUseCase
from leadform.domain.admin import InvalidCredentialsError
from leadform.infrastructure.auth import ConfiguredCredentialStore, SerializerTokenSigner
from leadform.tests.fakes import ADMIN_PASSWORD, ADMIN_USERNAME, DeterministicHasher


def _use_case(
    token_signer: SerializerTokenSigner,
    password_hash: str | None = f"hashed:{ADMIN_PASSWORD}",
) -> LoginAdminUseCase:
    return LoginAdminUseCase(
        credentials=ConfiguredCredentialStore(ADMIN_USERNAME, password_hash),
        password_hasher=DeterministicHasher(),
        tokens=token_signer,
    )


def test_login_issues_verifiable_token(token_signer: SerializerTokenSigner) -> None:
    issued = _use_case(token_signer).execute(ADMIN_USERNAME, ADMIN_PASSWORD)

    claims = token_signer.verify(issued.token)
    assert claims.username == ADMIN_USERNAME


@pytest.mark.parametrize(
    ("username", "password"),
    [
        (ADMIN_USERNAME, "wrong"),
        ("root", ADMIN_PASSWORD),
        ("", ""),
        (ADMIN_USERNAME.upper(), ADMIN_PASSWORD),
    ],
)
def test_login_rejects_bad_credentials(
    token_signer: SerializerTokenSigner, username: str, password: str
) -> None:
    with pytest.raises(InvalidCredentialsError):
        _use_case(token_signer).execute(username, password)


def test_login_rejects_everything_without_configured_hash(
    token_signer: SerializerTokenSigner,
) -> None:
    use_case = LoginAdminUseCase(
        credentials=ConfiguredCredentialStore(ADMIN_USERNAME, None),
        password_hasher=WerkzeugPasswordHasher(),
        tokens=token_signer,
    )

    with pytest.raises(InvalidCredentialsError):
        use_case.execute(ADMIN_USERNAME, "")


def test_login_with_werkzeug_hash(token_signer: SerializerTokenSigner) -> None:
    hasher = WerkzeugPasswordHasher()
    use_case = LoginAdminUseCase(
        credentials=ConfiguredCredentialStore(ADMIN_USERNAME, hasher.hash(ADMIN_PASSWORD)),
        password_hasher=hasher,
        tokens=token_signer,
    )

    issued = use_case.execute(ADMIN_USERNAME, ADMIN_PASSWORD)

    assert issued.token
    with pytest.raises(InvalidCredentialsError):
        use_case.execute(ADMIN_USERNAME, ADMIN_PASSWORD + "x")


def test_login_with_unencodable_username_is_rejected(token_signer: SerializerTokenSigner) -> None:
    with pytest.raises(InvalidCredentialsError):
        _use_case(token_signer).execute("adm\ud800in", ADMIN_PASSWORD)


def test_werkzeug_verify_fails_closed_on_unencodable_password() -> None:
    hasher = WerkzeugPasswordHasher()

    assert hasher.verify("\ud800", hasher.hash(ADMIN_PASSWORD)) is False
