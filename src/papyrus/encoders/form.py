# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import dataclasses
import logging
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import urlencode

from pydantic_core import PydanticSerializationError, to_jsonable_python

from papyrus.encoders.base import content_headers, reject_parts
from papyrus.errors import EncodingError
from papyrus.keys import KeyMapping

logger = logging.getLogger(__name__)


def form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def flatten_form_fields(
    fields: Iterable[tuple[str, Any]],
) -> list[tuple[str, str]]:
    """
    Flatten nested values into ``key[sub]`` / ``key[]`` pairs, keeping order.

    ``None`` values are dropped.
    """
    pairs: list[tuple[str, str]] = []

    def visit(key: str, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                visit(f"{key}[{sub_key}]", sub_value)
        elif isinstance(value, (list, tuple)):
            for item in value:
                visit(f"{key}[]", item)
        else:
            pairs.append((key, form_value(value)))

    for key, value in fields:
        visit(key, value)

    return pairs


def encode_query(params: Iterable[tuple[str, Any]]) -> str:
    """Form-encode query parameters; lists become repeated keys."""
    pairs: list[tuple[str, str]] = []
    for key, value in params:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, form_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, form_value(value)))
    return urlencode(pairs)


@dataclasses.dataclass(frozen=True)
class URLEncodedFormEncoder:
    key_mapping: Optional[KeyMapping] = None

    content_type = "application/x-www-form-urlencoded"

    def with_key_mapping(
        self, key_mapping: Optional[KeyMapping]
    ) -> "URLEncodedFormEncoder":
        return dataclasses.replace(self, key_mapping=key_mapping)

    def encode(self, fields: Mapping[str, Any]) -> tuple[bytes, dict[str, str]]:
        reject_parts(fields, "the URL form encoder")

        try:
            payload = to_jsonable_python(dict(fields), by_alias=True)
        except PydanticSerializationError as err:
            raise EncodingError(f"Unable to encode fields as a form: {err}") from err

        if self.key_mapping is not None:
            payload = self.key_mapping.encode(payload)

        body = urlencode(flatten_form_fields(payload.items())).encode()

        logger.debug("Encoded %s form fields into %s bytes", len(fields), len(body))
        return body, content_headers(self.content_type, body)


__all__ = ["URLEncodedFormEncoder", "encode_query", "flatten_form_fields"]
