# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from leadform.domain.submissions import NewSubmission


class FormSubmissionRequestDTO(BaseModel):
    full_name: str = Field(alias="fullName", min_length=1, max_length=255)
    contact_number: str = Field(alias="contactNumber", min_length=1, max_length=64)
    service_type: str = Field(alias="serviceType", min_length=1, max_length=255)
    project_description: str = Field(alias="projectDescription", max_length=10_000)

    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    def to_domain(self) -> NewSubmission:
        return NewSubmission(
            name=self.full_name,
            contact_number=self.contact_number,
            service=self.service_type,
            description=self.project_description,
        )


class SubmissionDTO(BaseModel):
    id: int
    name: str
    contact_number: str
    service: str
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageDTO(BaseModel):
    message: str


__all__ = [
    "FormSubmissionRequestDTO",
    "MessageDTO",
    "SubmissionDTO",
]
