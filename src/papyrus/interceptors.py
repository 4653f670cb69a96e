# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from enum import Enum
from typing import Awaitable, Callable, Optional, Protocol

from papyrus.curl_format import curl
from papyrus.models import Request, Response

logger = logging.getLogger(__name__)

Next = Callable[[Request], Awaitable[Response]]


class Interceptor(Protocol):
    """Wraps the call that sends a request to the transport."""

    async def intercept(self, request: Request, next: Next) -> Response: ...


class CurlTrigger(str, Enum):
    ALWAYS = "always"
    ON_ERROR = "on_error"


def _log_curl(command: str) -> None:
    logger.info("%s", command)


class CurlLogger(Interceptor):
    """
    Emits a curl reproduction of each request.

    With ``CurlTrigger.ALWAYS`` the command is emitted once before the request
    is sent. With ``CurlTrigger.ON_ERROR`` it is emitted only when the
    downstream call raises, and the exception is then re-raised untouched.
    """

    def __init__(
        self,
        when: CurlTrigger = CurlTrigger.ALWAYS,
        emit: Optional[Callable[[str], None]] = None,
        sorted_headers: bool = True,
    ) -> None:
        self.when = when
        self.emit = emit or _log_curl
        self.sorted_headers = sorted_headers

    async def intercept(self, request: Request, next: Next) -> Response:
        if self.when is CurlTrigger.ALWAYS:
            self.emit(curl(request, sorted_headers=self.sorted_headers))
            return await next(request)

        try:
            return await next(request)
        except Exception:
            self.emit(curl(request, sorted_headers=self.sorted_headers))
            raise


__all__ = ["Interceptor", "Next", "CurlTrigger", "CurlLogger"]
