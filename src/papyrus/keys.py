# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from typing import Any, Callable

from pydantic.alias_generators import to_camel, to_pascal, to_snake


def _identity(key: str) -> str:
    return key


@dataclass(frozen=True)
class KeyMapping:
    """
    Translates between python attribute names and the key casing used on the wire.

    ``encode_key`` is applied to outgoing field and JSON keys, ``decode_key``
    to keys of incoming payloads before they are validated.
    """

    encode_key: Callable[[str], str] = _identity
    decode_key: Callable[[str], str] = _identity

    @classmethod
    def snake_case(cls) -> "KeyMapping":
        return cls(encode_key=to_snake, decode_key=to_snake)

    @classmethod
    def camel_case(cls) -> "KeyMapping":
        return cls(encode_key=to_camel, decode_key=to_snake)

    @classmethod
    def pascal_case(cls) -> "KeyMapping":
        return cls(encode_key=to_pascal, decode_key=to_snake)

    @classmethod
    def custom(
        cls, encode: Callable[[str], str], decode: Callable[[str], str] = _identity
    ) -> "KeyMapping":
        return cls(encode_key=encode, decode_key=decode)

    def encode(self, value: Any) -> Any:
        return _map_keys(value, self.encode_key)

    def decode(self, value: Any) -> Any:
        return _map_keys(value, self.decode_key)


def _map_keys(value: Any, mapper: Callable[[str], str]) -> Any:
    if isinstance(value, dict):
        return {
            mapper(key) if isinstance(key, str) else key: _map_keys(item, mapper)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_map_keys(item, mapper) for item in value]
    return value


__all__ = ["KeyMapping"]
