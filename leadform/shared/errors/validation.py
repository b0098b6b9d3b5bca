# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Field paths and error types only; input values are never echoed back."""
    problems = [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "type": error["type"],
        }
        for error in exc.errors(include_url=False, include_input=False)
    ]
    return {
        "fields": sorted({problem["field"] for problem in problems}),
        "errors": problems,
    }


def raise_validation_error(exc: PydanticValidationError, message: str | None = None) -> NoReturn:
    raise ValidationError(message, context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
