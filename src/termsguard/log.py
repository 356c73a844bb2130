# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for TermsGuard."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("TERMSGUARD_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO, which would echo the API endpoint on each analysis.
    if numeric_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["setup_logging"]
