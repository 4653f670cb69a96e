import logging
from typing import Optional

import httpx

from papyrus.errors import TransportError, TransportTimeoutError
from papyrus.models import Request, Response
from papyrus.provider import HttpTransport

logger = logging.getLogger(__name__)


class HTTPXTransport(HttpTransport):

    def __init__(
        self,
        default_timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.default_timeout = default_timeout
        self.client = client

    async def request(self, request: Request) -> Response:
        if self.client is not None:
            return await self._send(self.client, request)

        async with httpx.AsyncClient(timeout=self.default_timeout) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: Request) -> Response:
        # A caller supplied client keeps its own timeout configuration.
        try:
            response = await client.request(
                method=request.method,
                url=request.url,
                headers=list(request.headers),
                content=request.body,
            )
        except httpx.TimeoutException as err:
            logger.error("Request timed out: %s %s", request.method, request.url)
            raise TransportTimeoutError(
                f"Request timed out: {err}", request=request
            ) from err
        except httpx.TransportError as err:
            logger.error(
                "Network error on %s %s: %s", request.method, request.url, err
            )
            raise TransportError(f"Network error: {err}", request=request) from err

        return Response(
            request=request,
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )


__all__ = ["HTTPXTransport"]
