# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Prompt building, backend access and response parsing."""

from .gemini import GeminiBackend
from .orchestrator import AnalysisOrchestrator, PageAnalysis
from .parser import parse_response
from .prompt import build_prompt

__all__ = ["AnalysisOrchestrator", "GeminiBackend", "PageAnalysis", "build_prompt", "parse_response"]
