# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import dataclasses
import json
import logging
from typing import Any, Mapping, Optional

from pydantic_core import PydanticSerializationError, to_jsonable_python

from papyrus.encoders.base import content_headers, reject_parts
from papyrus.errors import EncodingError
from papyrus.keys import KeyMapping

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class JSONEncoder:
    """
    Encodes fields as a single JSON object.

    The formatting options are handed to :func:`json.dumps` untouched, so
    ``JSONEncoder(sort_keys=True, indent=2)`` pretty prints with sorted keys.
    """

    sort_keys: bool = False
    indent: Optional[int] = None
    separators: Optional[tuple[str, str]] = None
    ensure_ascii: bool = False
    key_mapping: Optional[KeyMapping] = None

    content_type = "application/json"

    def with_key_mapping(self, key_mapping: Optional[KeyMapping]) -> "JSONEncoder":
        return dataclasses.replace(self, key_mapping=key_mapping)

    def encode(self, fields: Mapping[str, Any]) -> tuple[bytes, dict[str, str]]:
        reject_parts(fields, "the JSON encoder")

        body = self._dump(dict(fields))
        logger.debug("Encoded %s JSON fields into %s bytes", len(fields), len(body))
        return body, content_headers(self.content_type, body)

    def encode_value(self, value: Any) -> tuple[bytes, dict[str, str]]:
        """Encodes any JSON document, such as a top level array."""
        body = self._dump(value)
        logger.debug("Encoded a JSON %s into %s bytes", type(value).__name__, len(body))
        return body, content_headers(self.content_type, body)

    def _dump(self, value: Any) -> bytes:
        try:
            payload = to_jsonable_python(value, by_alias=True)
        except PydanticSerializationError as err:
            raise EncodingError(f"Unable to encode fields as JSON: {err}") from err

        if self.key_mapping is not None:
            payload = self.key_mapping.encode(payload)

        separators = self.separators
        if separators is None and self.indent is None:
            separators = (",", ":")

        try:
            return json.dumps(
                payload,
                sort_keys=self.sort_keys,
                indent=self.indent,
                separators=separators,
                ensure_ascii=self.ensure_ascii,
            ).encode()
        except (TypeError, ValueError) as err:
            raise EncodingError(f"Unable to encode fields as JSON: {err}") from err


__all__ = ["JSONEncoder"]
