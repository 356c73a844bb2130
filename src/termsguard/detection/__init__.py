# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terms detection engine exports."""

from .engine import TermsDetectionEngine
from .registry import STRATEGIES

__all__ = ["STRATEGIES", "TermsDetectionEngine"]
