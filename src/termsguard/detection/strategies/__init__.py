# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection strategy exports."""

from .embedded import EmbeddedContentStrategy
from .modal import ModalStrategy
from .page import PageStrategy

__all__ = ["EmbeddedContentStrategy", "ModalStrategy", "PageStrategy"]
