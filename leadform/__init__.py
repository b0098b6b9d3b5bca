# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Contact form backend: lead capture, admin notification and admin API."""

__version__ = "0.1.0"
