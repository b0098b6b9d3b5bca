# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .smtp_notifier import SmtpNotifier

__all__ = ["SmtpNotifier"]
