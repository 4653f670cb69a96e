# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import base64
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from papyrus.encoders.base import RequestEncoder, content_headers
from papyrus.encoders.form import encode_query
from papyrus.encoders.json_encoder import JSONEncoder
from papyrus.errors import EncodingError, URLError
from papyrus.keys import KeyMapping
from papyrus.models import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authorization:
    header_value: str

    @classmethod
    def basic(cls, username: str, password: str) -> "Authorization":
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
        return cls(f"Basic {credentials}")

    @classmethod
    def bearer(cls, token: str) -> "Authorization":
        return cls(f"Bearer {token}")


class RequestBuilder:
    """
    Mutable accumulator for everything that goes into a :class:`Request`.

    Reading methods (``full_url``, ``body_and_headers`` and ``build``) never
    change the builder, so one builder may produce several identical requests.
    """

    def __init__(
        self,
        base_url: str,
        method: str,
        path: str,
        encoder: Optional[RequestEncoder] = None,
        key_mapping: Optional[KeyMapping] = None,
    ) -> None:
        self.base_url = base_url
        self.method = method
        self.path = path
        self.encoder: RequestEncoder = encoder if encoder is not None else JSONEncoder()
        self.key_mapping = key_mapping
        self.parameters: dict[str, str] = {}
        self.queries: list[tuple[str, Any]] = []
        self.headers: list[tuple[str, str]] = []
        self.fields: dict[str, Any] = {}
        self.body: Any = None

    def add_parameter(self, key: str, value: Any) -> None:
        if value is None:
            raise URLError(f"Path parameter `{key}` cannot be None.")
        self.parameters[key] = str(value)

    def add_query(self, key: str, value: Any) -> None:
        self.queries.append((key, value))

    def add_header(self, key: str, value: str) -> None:
        self.headers.append((key, value))

    def add_headers(self, headers: Mapping[str, str]) -> None:
        for key, value in headers.items():
            self.add_header(key, value)

    def add_authorization(self, authorization: Authorization) -> None:
        self.headers = [
            (key, value)
            for key, value in self.headers
            if key.lower() != "authorization"
        ]
        self.add_header("Authorization", authorization.header_value)

    def add_field(self, key: str, value: Any) -> None:
        self.fields[key] = value

    def set_body(self, value: Any) -> None:
        self.body = value

    def resolved_path(self) -> str:
        path = self.path
        for key, value in self.parameters.items():
            encoded = quote(value, safe="")
            path = path.replace(f"{{{key}}}", encoded)
            path = re.sub(rf":{re.escape(key)}(?![\w-])", lambda _: encoded, path)
        return path

    def full_url(self) -> str:
        path = self.resolved_path()
        if not self.base_url:
            url = path
        elif not path:
            url = self.base_url
        else:
            url = self.base_url.removesuffix("/") + "/" + path.removeprefix("/")

        if self.queries:
            queries = self.queries
            if self.key_mapping is not None:
                queries = [
                    (self.key_mapping.encode_key(key), value) for key, value in queries
                ]
            query = encode_query(queries)
            if query:
                url += ("&" if "?" in url else "?") + query

        try:
            httpx.URL(url)
        except httpx.InvalidURL as err:
            raise URLError(
                f"Unable to build a valid URL from base `{self.base_url}` and path `{self.path}`: {err}"
            ) from err

        return url

    def body_and_headers(self) -> tuple[Optional[bytes], list[tuple[str, str]]]:
        encoder = self.encoder
        if self.key_mapping is not None:
            encoder = encoder.with_key_mapping(self.key_mapping)

        if self.body is not None and self.fields:
            raise EncodingError(
                "A request can either have a body or fields, not both."
            )

        content: Optional[bytes]
        forced: dict[str, str]
        fields: Mapping[str, Any] = self.fields

        if isinstance(self.body, bytes):
            content = self.body
            forced = content_headers("application/octet-stream", content)
        elif isinstance(self.body, str):
            content = self.body.encode()
            forced = content_headers("text/plain; charset=utf-8", content)
        elif isinstance(self.body, (list, tuple)) and isinstance(encoder, JSONEncoder):
            content, forced = encoder.encode_value(list(self.body))
        else:
            if isinstance(self.body, BaseModel):
                fields = self.body.model_dump(by_alias=True)
            elif isinstance(self.body, Mapping):
                fields = dict(self.body)
            elif self.body is not None:
                raise EncodingError(
                    f"Unsupported body type: {type(self.body).__name__}"
                )

            if fields:
                content, forced = encoder.encode(fields)
            else:
                content = None
                forced = {"Content-Type": encoder.content_type, "Content-Length": "0"}

        overridden = {key.lower() for key in forced}
        headers = [
            (key, value) for key, value in self.headers if key.lower() not in overridden
        ]
        headers.extend(forced.items())

        return content, headers

    def build(self) -> Request:
        url = self.full_url()
        body, headers = self.body_and_headers()

        request = Request(
            method=self.method,
            url=url,
            headers=tuple(headers),
            body=body,
        )

        logger.debug(
            "Prepared request: %s %s\nHeaders: %s\nBody: %s",
            request.method,
            request.url,
            request.headers,
            request.body,
        )
        return request


__all__ = ["Authorization", "RequestBuilder"]
