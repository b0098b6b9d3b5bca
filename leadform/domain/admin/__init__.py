# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AdminClaims, AdminCredential, IssuedToken
from .exceptions import InvalidCredentialsError
from .repositories import CredentialStore, PasswordHasher, TokenSigner

__all__ = [
    "AdminClaims",
    "AdminCredential",
    "CredentialStore",
    "InvalidCredentialsError",
    "IssuedToken",
    "PasswordHasher",
    "TokenSigner",
]
