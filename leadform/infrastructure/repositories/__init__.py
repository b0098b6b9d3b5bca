# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_submission_repository import SqlAlchemySubmissionRepository

__all__ = ["SqlAlchemySubmissionRepository"]
