# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection strategy registry, in evaluation order."""

from .strategies import EmbeddedContentStrategy, ModalStrategy, PageStrategy

STRATEGIES = sorted(
    [
        ModalStrategy(),
        PageStrategy(),
        EmbeddedContentStrategy(),
    ],
    key=lambda strategy: strategy.priority,
)

__all__ = ["STRATEGIES"]
