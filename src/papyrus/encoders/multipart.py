# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import uuid
from typing import Any, Mapping, Optional

from papyrus.encoders.base import content_headers
from papyrus.errors import EncodingError
from papyrus.keys import KeyMapping
from papyrus.models import Part

logger = logging.getLogger(__name__)

CRLF = b"\r\n"


class MultipartEncoder:
    """
    Encodes parts as a ``multipart/form-data`` body.

    A fixed boundary makes the output byte-for-byte reproducible. When no
    boundary is given a random UUID is used.
    """

    def __init__(
        self,
        boundary: Optional[str] = None,
        key_mapping: Optional[KeyMapping] = None,
    ) -> None:
        self.boundary = boundary if boundary is not None else str(uuid.uuid4())
        self.key_mapping = key_mapping

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def with_key_mapping(self, key_mapping: Optional[KeyMapping]) -> "MultipartEncoder":
        return MultipartEncoder(boundary=self.boundary, key_mapping=key_mapping)

    def encode(self, fields: Mapping[str, Any]) -> tuple[bytes, dict[str, str]]:
        parts: dict[str, Part] = {}
        for key, value in fields.items():
            if value is None:
                continue
            name =self.key_mapping.encode_key(key) if self.key_mapping else key
            parts[name] = self._as_part(key, value)

        body = self.encode_parts(parts)
        return body, content_headers(self.content_type, body)

    def encode_parts(self, parts: Mapping[str, Part]) -> bytes:
        delimiter = f"--{self.boundary}".encode()
        chunks: list[bytes] = []

        for key, part in parts.items():
            disposition = f'Content-Disposition: form-data; name="{part.name or key}"'
            if part.file_name is not None:
                disposition += f'; filename="{part.file_name}"'

            chunks.append(delimiter + CRLF)
            chunks.append(disposition.encode() + CRLF)
            if part.mime_type is not None:
                chunks.append(f"Content-Type: {part.mime_type}".encode() + CRLF)
            chunks.append(CRLF)
            chunks.append(part.data + CRLF)

        chunks.append(delimiter + b"--" + CRLF)

        body = b"".join(chunks)
        logger.debug(
            "Encoded %s multipart parts with boundary %s", len(parts), self.boundary
        )
        return body

    @staticmethod
    def _as_part(key: str, value: Any) -> Part:
        if isinstance(value, Part):
            return value
        if isinstance(value, bytes):
            return Part(data=value)
        if isinstance(value, bool):
            return Part(data=b"true" if value else b"false")
        if isinstance(value, (str, int, float)):
            return Part(data=str(value).encode())
        raise EncodingError(
            f"Field `{key}` of type {type(value).__name__} cannot be encoded as a multipart part."
        )


__all__ = ["MultipartEncoder"]
