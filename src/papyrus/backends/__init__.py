# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Transport backends
"""
Backend implementations of the papyrus transport boundary.
"""

from .httpx import HTTPXTransport

__all__ = [
    "HTTPXTransport",
]
