"""
Pytest configuration and fixtures for papyrus tests.
"""

from typing import Callable, Optional

import pytest

from papyrus.models import Request, Response

MOCK_BOUNDARY = "00000000-0000-0000-0000-000000000000"


class StubTransport:
    """Transport that records requests and answers with a canned response."""

    def __init__(
        self,
        body: Optional[bytes] = None,
        status_code: int = 200,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        self.headers = headers
        self.requests: list[Request] = []

    async def request(self, request: Request) -> Response:
        self.requests.append(request)
        return Response(
            request=request,
            status_code=self.status_code,
            headers=self.headers,
            body=self.body,
        )


@pytest.fixture
def mock_boundary() -> str:
    return MOCK_BOUNDARY


@pytest.fixture
def stub_transport() -> Callable[..., StubTransport]:
    """Factory for transports answering with the given body and status."""

    def factory(
        body: Optional[bytes] = None,
        status_code: int = 200,
        headers: Optional[dict[str, str]] = None,
    ) -> StubTransport:
        return StubTransport(body=body, status_code=status_code, headers=headers)

    return factory
