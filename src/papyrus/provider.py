# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from functools import partial
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from papyrus.builder import Authorization, RequestBuilder
from papyrus.encoders.base import RequestEncoder
from papyrus.interceptors import CurlLogger, CurlTrigger, Interceptor, Next
from papyrus.keys import KeyMapping
from papyrus.models import Request, Response

if TYPE_CHECKING:
    from papyrus.config import PapyrusSettings

logger = logging.getLogger(__name__)


class HttpTransport(Protocol):

    async def request(self, request: Request) -> Response: ...


class RequestModifier(Protocol):

    def modify(self, builder: RequestBuilder) -> None: ...


class AuthenticationModifier(RequestModifier):
    """Base class for modifiers that authenticate outgoing requests"""

    def modify(self, builder: RequestBuilder) -> None:
        self.add_auth(builder)

    def add_auth(self, builder: RequestBuilder) -> None:
        raise NotImplementedError


class BearerTokenAuth(AuthenticationModifier):

    def __init__(self, token: str):
        self.token = token

    def add_auth(self, builder: RequestBuilder) -> None:
        builder.add_authorization(Authorization.bearer(self.token))


class BasicAuth(AuthenticationModifier):

    def __init__(self, username: str, password: str):
        self.authorization = Authorization.basic(username, password)

    def add_auth(self, builder: RequestBuilder) -> None:
        builder.add_authorization(self.authorization)


class ApiKeyAuth(AuthenticationModifier):

    def __init__(self, api_key: str, header_name: str = "X-API-Key"):
        self.api_key = api_key
        self.header_name = header_name

    def add_auth(self, builder: RequestBuilder) -> None:
        builder.add_header(self.header_name, self.api_key)


class StaticHeaders(RequestModifier):
    """Adds the same headers to every request"""

    def __init__(self, headers: dict[str, str]):
        self.headers = headers

    def modify(self, builder: RequestBuilder) -> None:
        builder.add_headers(self.headers)


class Provider:
    """
    Entry point shared by every endpoint of a client.

    It creates request builders for its base URL, lets modifiers adjust them,
    and hands the built request to the transport through the interceptors.
    The first interceptor is the outermost one.
    """

    def __init__(
        self,
        base_url: str,
        transport: HttpTransport,
        interceptors: Sequence[Interceptor] = (),
        modifiers: Sequence[RequestModifier] = (),
    ) -> None:
        self.base_url = base_url
        self.transport = transport
        self.interceptors = list(interceptors)
        self.modifiers = list(modifiers)

    @classmethod
    def from_settings(
        cls,
        settings: "PapyrusSettings",
        transport: Optional[HttpTransport] = None,
        interceptors: Sequence[Interceptor] = (),
        modifiers: Sequence[RequestModifier] = (),
    ) -> "Provider":
        if transport is None:
            from papyrus.backends.httpx import HTTPXTransport

            transport = HTTPXTransport(default_timeout=settings.timeout)

        all_interceptors = list(interceptors)
        if settings.curl_log is not None:
            all_interceptors.insert(0, CurlLogger(when=CurlTrigger(settings.curl_log)))

        all_modifiers = list(modifiers)
        if settings.default_headers:
            all_modifiers.insert(0, StaticHeaders(settings.default_headers))

        return cls(
            base_url=settings.base_url,
            transport=transport,
            interceptors=all_interceptors,
            modifiers=all_modifiers,
        )

    def new_builder(
        self,
        method: str,
        path: str,
        encoder: Optional[RequestEncoder] = None,
        key_mapping: Optional[KeyMapping] = None,
    ) -> RequestBuilder:
        return RequestBuilder(
            base_url=self.base_url,
            method=method,
            path=path,
            encoder=encoder,
            key_mapping=key_mapping,
        )

    def add_interceptor(self, interceptor: Interceptor) -> None:
        self.interceptors.append(interceptor)

    def add_modifier(self, modifier: RequestModifier) -> None:
        self.modifiers.append(modifier)

    async def request(self, builder: RequestBuilder) -> Response:
        for modifier in self.modifiers:
            modifier.modify(builder)

        request = builder.build()

        call: Next = self._send
        for interceptor in reversed(self.interceptors):
            call = partial(interceptor.intercept, next=call)

        logger.debug("Sending request: %s %s", request.method, request.url)
        response = await call(request)
        logger.debug("Received response: status=%s", response.status_code)
        return response

    async def _send(self, request: Request) -> Response:
        return await self.transport.request(request)


__all__ = [
    "HttpTransport",
    "RequestModifier",
    "AuthenticationModifier",
    "BearerTokenAuth",
    "BasicAuth",
    "ApiKeyAuth",
    "StaticHeaders",
    "Provider",
]
