# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from papyrus.models import Request, Response


class PapyrusError(Exception):
    """Base exception for every error raised by papyrus."""

    def __init__(
        self,
        message: str,
        *,
        request: "Optional[Request]" = None,
        response: "Optional[Response]" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.request = request
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"request={self.request!r}, response={self.response!r})"
        )


class URLError(PapyrusError):
    """Raised when a base URL and a path cannot form a valid URL"""


class EncodingError(PapyrusError):
    """Raised when request fields cannot be serialized by the active encoder"""


class DecodeError(PapyrusError):
    """Raised when a response body cannot be decoded into the requested type"""

    def __init__(
        self,
        message: str,
        *,
        request: "Optional[Request]" = None,
        response: "Optional[Response]" = None,
        underlying: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, request=request, response=response)
        self.underlying = underlying


class ValidationError(PapyrusError):
    """Raised when a response carries an unsuccessful status code"""


class TransportError(PapyrusError):
    """Raised by a transport backend when the request could not be delivered"""


class TransportTimeoutError(TransportError):
    """Raised by a transport backend when the request timed out"""


__all__ = [
    "PapyrusError",
    "URLError",
    "EncodingError",
    "DecodeError",
    "ValidationError",
    "TransportError",
    "TransportTimeoutError",
]
