# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Self, TypeVar

from papyrus.decoding import decode_response
from papyrus.validation import validate_response

if TYPE_CHECKING:
    from papyrus.decoding import ResponseDecoder

T = TypeVar("T")


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    def header(self, name: str) -> Optional[str]:
        """Return the last value of a header, matching its name case-insensitively."""
        found: Optional[str] = None
        for key, value in self.headers:
            if key.lower() == name.lower():
                found = value
        return found

    @property
    def headers_dict(self) -> Dict[str, str]:
        return {key: value for key, value in self.headers}


@dataclass
class Response:
    request: Optional[Request] = None
    status_code: Optional[int] = None
    headers: Optional[Dict[str, str]] = None
    body: Optional[bytes] = None
    error: Optional[BaseException] = field(default=None, compare=False)

    @classmethod
    def from_error(
        cls, error: BaseException, request: Optional[Request] = None
    ) -> "Response":
        return cls(request=request, error=error)

    @property
    def text(self) -> Optional[str]:
        if self.body is None:
            return None
        return self.body.decode("utf-8", errors="replace")

    def validate(self) -> Self:
        validate_response(self)
        return self

    def decode(self, target: Any, decoder: "Optional[ResponseDecoder]" = None) -> Any:
        """
        Decode the body into ``target``.

        ``target`` may be any type pydantic can validate. When it is optional
        (``Optional[Model]`` or ``Model | None``) an absent or empty body
        decodes to ``None`` instead of failing.
        """
        return decode_response(self, target, decoder)

    def decode_optional(
        self, target: type[T], decoder: "Optional[ResponseDecoder]" = None
    ) -> Optional[T]:
        return decode_response(self, target, decoder, optional=True)  # type: ignore[no-any-return]


@dataclass
class Part:
    """A single named section of a multipart/form-data body."""

    data: bytes
    name: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None


__all__ = ["Request", "Response", "Part"]
