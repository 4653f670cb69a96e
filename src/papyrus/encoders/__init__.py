# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Request body encoders.

Each encoder turns the ordered fields of a request into body bytes plus the
``Content-Type`` and ``Content-Length`` headers describing them.
"""

from .base import RequestEncoder
from .form import URLEncodedFormEncoder
from .json_encoder import JSONEncoder
from .multipart import MultipartEncoder

__all__ = [
    "RequestEncoder",
    "JSONEncoder",
    "URLEncodedFormEncoder",
    "MultipartEncoder",
]
