# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credentials import ConfiguredCredentialStore
from .token_signer import SerializerTokenSigner

__all__ = ["ConfiguredCredentialStore", "SerializerTokenSigner"]
