# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import dataclasses
import json
import logging
import types
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional, Union, get_args, get_origin

from pydantic import TypeAdapter

from papyrus.errors import DecodeError
from papyrus.keys import KeyMapping

if TYPE_CHECKING:
    from papyrus.models import Response

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ResponseDecoder:
    """
    Decoding options handed through to pydantic.

    ``key_mapping`` rewrites payload keys before validation, ``strict``
    disables pydantic's lax type coercion.
    """

    key_mapping: Optional[KeyMapping] = None
    strict: Optional[bool] = None

    def with_key_mapping(self, key_mapping: Optional[KeyMapping]) -> "ResponseDecoder":
        return dataclasses.replace(self, key_mapping=key_mapping)

    def decode(self, body: bytes, target: Any) -> Any:
        adapter = _type_adapter(target)
        if self.key_mapping is None:
            return adapter.validate_json(body, strict=self.strict)
        payload = self.key_mapping.decode(json.loads(body))
        return adapter.validate_python(payload, strict=self.strict)


@lru_cache(maxsize=256)
def _type_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def is_optional(target: Any) -> bool:
    if target is None or target is type(None):
        return True
    if get_origin(target) in (Union, types.UnionType):
        return type(None) in get_args(target)
    return False


def type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def decode_response(
    response: "Response",
    target: Any,
    decoder: Optional[ResponseDecoder] = None,
    optional: bool = False,
) -> Any:
    decoder = decoder or ResponseDecoder()
    optional = optional or is_optional(target)

    if response.error is not None:
        raise DecodeError(
            f"Unable to decode `{type_name(target)}` from a `Response`; "
            f"the response carries a transport error: {response.error!r}",
            request=response.request,
            response=response,
            underlying=response.error,
        ) from response.error

    if not response.body:
        if optional:
            logger.debug("Empty body decoded as None for %s", type_name(target))
            return None
        raise DecodeError(
            f"Unable to decode `{type_name(target)}` from a `Response`; body was empty.",
            request=response.request,
            response=response,
        )

    try:
        return decoder.decode(response.body, target)
    except ValueError as err:
        raise DecodeError(
            f"Unable to decode `{type_name(target)}` from a `Response`: {err}",
            request=response.request,
            response=response,
            underlying=err,
        ) from err


__all__ = ["ResponseDecoder", "decode_response", "is_optional"]
