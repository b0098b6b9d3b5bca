# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class LoginRequestDTO(BaseModel):
    username: str = Field("", max_length=128)
    password: str = Field("", max_length=1024)

    @field_validator("username", "password")
    @classmethod
    def _encodable(cls, value: str) -> str:
        # JSON allows lone surrogates, which cannot be hashed or compared as UTF-8.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("must be valid unicode text") from exc
        return value


class TokenDTO(BaseModel):
    token: str


__all__ = ["LoginRequestDTO", "TokenDTO"]
