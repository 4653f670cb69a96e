# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Mapping, Optional, Protocol, Self

from papyrus.errors import EncodingError
from papyrus.keys import KeyMapping
from papyrus.models import Part


class RequestEncoder(Protocol):
    """Serializes the ordered fields of a request into a body and its headers."""

    @property
    def content_type(self) -> str: ...

    def encode(self, fields: Mapping[str, Any]) -> tuple[bytes, dict[str, str]]: ...

    def with_key_mapping(self, key_mapping: Optional[KeyMapping]) -> Self: ...


def content_headers(content_type: str, body: bytes) -> dict[str, str]:
    return {
        "Content-Type": content_type,
        "Content-Length": str(len(body)),
    }


def reject_parts(fields: Mapping[str, Any], encoder_name: str) -> None:
    for key, value in fields.items():
        if isinstance(value, Part):
            raise EncodingError(
                f"Field `{key}` is a multipart `Part`, which {encoder_name} cannot encode."
            )


__all__ = ["RequestEncoder", "content_headers", "reject_parts"]
