# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import inspect
import logging
import re
import typing
from typing import Any, Awaitable, Callable, Literal, Optional, TypeVar, cast

from papyrus.builder import RequestBuilder
from papyrus.decoding import ResponseDecoder
from papyrus.encoders.base import RequestEncoder
from papyrus.encoders.form import URLEncodedFormEncoder
from papyrus.encoders.json_encoder import JSONEncoder
from papyrus.encoders.multipart import MultipartEncoder
from papyrus.keys import KeyMapping
from papyrus.models import Response
from papyrus.provider import Provider
from papyrus.reflect.decorators import StackableDecorator

logger = logging.getLogger(__name__)

T = TypeVar("T")

PATH_PLACEHOLDER = re.compile(r"\{(\w+)\}|:(\w+)")

BODYLESS_METHODS = {"GET", "HEAD", "DELETE", "OPTIONS"}


class HttpMapping(StackableDecorator):

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path

    @classmethod
    def decorator_key(cls) -> Any:
        return HttpMapping


class Get(HttpMapping):

    def __init__(self, path: str):
        super().__init__("GET", path)


class Post(HttpMapping):

    def __init__(self, path: str):
        super().__init__("POST", path)


class Put(HttpMapping):

    def __init__(self, path: str):
        super().__init__("PUT", path)


class Patch(HttpMapping):

    def __init__(self, path: str):
        super().__init__("PATCH", path)


class Delete(HttpMapping):

    def __init__(self, path: str):
        super().__init__("DELETE", path)


class Head(HttpMapping):

    def __init__(self, path: str):
        super().__init__("HEAD", path)


class Options(HttpMapping):

    def __init__(self, path: str):
        super().__init__("OPTIONS", path)


class Http(HttpMapping):
    """Mapping for any other HTTP method"""

    def __init__(self, method: str, path: str):
        super().__init__(method.upper(), path)


class RequestAttribute(StackableDecorator):

    def __init__(
        self,
        attribute_type: Literal["query", "header", "body", "path", "field"],
        name: str,
        key: Optional[str] = None,
    ):
        self.attribute_type = attribute_type
        self.name = name
        self.key = key or name

    @classmethod
    def decorator_key(cls) -> Any:
        return RequestAttribute


class Query(RequestAttribute):

    def __init__(self, name: str, key: Optional[str] = None):
        super().__init__("query", name, key)


class Header(RequestAttribute):

    def __init__(self, name: str, key: Optional[str] = None):
        super().__init__("header", name, key)


class Path(RequestAttribute):

    def __init__(self, name: str, key: Optional[str] = None):
        super().__init__("path", name, key)


class Field(RequestAttribute):
    """A named field of the request body; ``Part`` values need ``@Multipart``"""

    def __init__(self, name: str, key: Optional[str] = None):
        super().__init__("field", name, key)


class Body(RequestAttribute):
    """The whole request body"""

    def __init__(self, name: str):
        super().__init__("body", name)


class Headers(StackableDecorator):
    """Static headers, on a client class or on a single endpoint"""

    def __init__(self, headers: dict[str, str]):
        self.headers = headers


class Encoding(StackableDecorator):

    def __init__(self, encoder: RequestEncoder):
        self.encoder = encoder

    @classmethod
    def decorator_key(cls) -> Any:
        return Encoding


class JSON(Encoding):

    def __init__(
        self,
        sort_keys: bool = False,
        indent: Optional[int] = None,
        separators: Optional[tuple[str, str]] = None,
    ):
        super().__init__(
            JSONEncoder(sort_keys=sort_keys, indent=indent, separators=separators)
        )


class URLForm(Encoding):

    def __init__(self) -> None:
        super().__init__(URLEncodedFormEncoder())


class Multipart(Encoding):

    def __init__(self, boundary: Optional[str] = None):
        super().__init__(MultipartEncoder(boundary=boundary))


class UseKeyMapping(StackableDecorator):

    def __init__(self, key_mapping: KeyMapping):
        self.key_mapping = key_mapping


class RestClient(StackableDecorator):

    def __init__(self, base_path: str = "") -> None:
        self.base_path = base_path


def join_path(base_path: str, path: str) -> str:
    if not base_path:
        return path
    if not path:
        return base_path
    return base_path.removesuffix("/") + "/" + path.removeprefix("/")


def _return_type(method_call: Callable[..., Any]) -> Any:
    try:
        hints = typing.get_type_hints(method_call)
    except (NameError, TypeError):
        return inspect.signature(method_call).return_annotation
    return hints.get("return", inspect.Signature.empty)


class ApiClientBuilder:
    """
    Builds a working client out of a ``@RestClient`` decorated class.

    Every method carrying an HTTP mapping becomes a coroutine that builds the
    request, sends it through the provider, validates the response and
    decodes it into the method's return annotation.
    """

    def __init__(
        self,
        provider: Provider,
        decoder: Optional[ResponseDecoder] = None,
    ):
        self._provider = provider
        self._decoder = decoder or ResponseDecoder()

    def build(self, cls: type[T]) -> T:
        rest_client = RestClient.get_bound_from_type(cls)

        if rest_client is None:
            raise ValueError("Class is not a rest client")

        class_encoding = Encoding.get_bound_from_type(cls)
        class_key_mapping = UseKeyMapping.get_bound_from_type(cls)
        class_headers = Headers.get_all_from_type(cls)

        def create_method(
            mapping: HttpMapping,
            method_call: Callable[..., Any],
        ) -> Callable[..., Awaitable[Any]]:

            call_signature = inspect.signature(method_call)
            call_parameters = [*call_signature.parameters.keys()][1:]
            attributes = {
                attr.name: attr for attr in RequestAttribute.get(method_call)
            }
            placeholders = {
                first or second
                for first, second in PATH_PLACEHOLDER.findall(mapping.path)
            }

            encoding = Encoding.get_last(method_call) or class_encoding
            key_mapping = UseKeyMapping.get_last(method_call) or class_key_mapping
            headers = [*class_headers, *Headers.get(method_call)]
            return_type = _return_type(method_call)
            path = join_path(rest_client.base_path, mapping.path)

            def resolve_attribute(name: str) -> RequestAttribute:
                if name in attributes:
                    return attributes[name]
                if name in placeholders:
                    return Path(name)
                if mapping.method in BODYLESS_METHODS:
                    return Query(name)
                return Field(name)

            async def api_method(*args: Any, **kwargs: Any) -> Any:
                logger.debug(
                    "Calling API method %s with args=%s kwargs=%s",
                    method_call.__name__,
                    args,
                    kwargs,
                )

                bound = call_signature.bind(None, *args, **kwargs)
                bound.apply_defaults()

                builder: RequestBuilder = self._provider.new_builder(
                    method=mapping.method,
                    path=path,
                    encoder=encoding.encoder if encoding else None,
                    key_mapping=key_mapping.key_mapping if key_mapping else None,
                )

                for static_headers in headers:
                    builder.add_headers(static_headers.headers)

                for name in call_parameters:
                    value = bound.arguments[name]
                    attr = resolve_attribute(name)
                    if attr.attribute_type == "header":
                        if value is not None:
                            builder.add_header(attr.key, str(value))
                    elif attr.attribute_type == "query":
                        builder.add_query(attr.key, value)
                    elif attr.attribute_type == "path":
                        builder.add_parameter(attr.key, value)
                    elif attr.attribute_type == "body":
                        builder.set_body(value)
                    elif attr.attribute_type == "field":
                        builder.add_field(attr.key, value)

                response = await self._provider.request(builder)

                if return_type is Response:
                    return response

                response.validate()

                if return_type is inspect.Signature.empty:
                    return response
                if return_type is None or return_type is type(None):
                    return None
                if return_type is bytes:
                    return response.body
                if return_type is str:
                    return response.text

                return response.decode(return_type, self._decoder)

            api_method.__name__ = method_call.__name__
            api_method.__doc__ = method_call.__doc__
            return api_method

        class Client: ...

        client = Client()

        for attr_name, method_call in inspect.getmembers(
            cls, predicate=inspect.isfunction
        ):
            if (mapping := HttpMapping.get_last(method_call)) is not None:
                setattr(
                    client,
                    attr_name,
                    create_method(mapping=mapping, method_call=method_call),
                )

        return cast(T, client)


__all__ = [
    "HttpMapping",
    "Get",
    "Post",
    "Put",
    "Patch",
    "Delete",
    "Head",
    "Options",
    "Http",
    "RequestAttribute",
    "Query",
    "Header",
    "Path",
    "Field",
    "Body",
    "Headers",
    "Encoding",
    "JSON",
    "URLForm",
    "Multipart",
    "UseKeyMapping",
    "RestClient",
    "ApiClientBuilder",
]
