from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papyrus.api.decorators import (
        JSON,
        ApiClientBuilder,
        Body,
        Delete,
        Field,
        Get,
        Head,
        Header,
        Headers,
        Http,
        Multipart,
        Options,
        Patch,
        Path,
        Post,
        Put,
        Query,
        RestClient,
        URLForm,
        UseKeyMapping,
    )
    from papyrus.backends.httpx import HTTPXTransport
    from papyrus.backends.otel import TracingModifier
    from papyrus.builder import Authorization, RequestBuilder
    from papyrus.config import PapyrusSettings
    from papyrus.curl_format import curl
    from papyrus.decoding import ResponseDecoder, decode_response
    from papyrus.encoders.base import RequestEncoder
    from papyrus.encoders.form import URLEncodedFormEncoder
    from papyrus.encoders.json_encoder import JSONEncoder
    from papyrus.encoders.multipart import MultipartEncoder
    from papyrus.errors import (
        DecodeError,
        EncodingError,
        PapyrusError,
        TransportError,
        TransportTimeoutError,
        URLError,
        ValidationError,
    )
    from papyrus.interceptors import CurlLogger, CurlTrigger, Interceptor
    from papyrus.keys import KeyMapping
    from papyrus.models import Part, Request, Response
    from papyrus.provider import (
        ApiKeyAuth,
        BasicAuth,
        BearerTokenAuth,
        HttpTransport,
        Provider,
        RequestModifier,
    )
    from papyrus.validation import validate_response

    __all__ = [
        # Data model
        "Request",
        "Response",
        "Part",
        # Errors
        "PapyrusError",
        "URLError",
        "EncodingError",
        "DecodeError",
        "ValidationError",
        "TransportError",
        "TransportTimeoutError",
        # Request building and encoding
        "RequestBuilder",
        "Authorization",
        "KeyMapping",
        "RequestEncoder",
        "JSONEncoder",
        "URLEncodedFormEncoder",
        "MultipartEncoder",
        # Response handling
        "ResponseDecoder",
        "decode_response",
        "validate_response",
        # Logging
        "curl",
        "CurlLogger",
        "CurlTrigger",
        "Interceptor",
        # Provider and transport
        "Provider",
        "HttpTransport",
        "RequestModifier",
        "BearerTokenAuth",
        "BasicAuth",
        "ApiKeyAuth",
        "HTTPXTransport",
        "TracingModifier",
        "PapyrusSettings",
        # Declarative API
        "RestClient",
        "ApiClientBuilder",
        "Get",
        "Post",
        "Put",
        "Patch",
        "Delete",
        "Head",
        "Options",
        "Http",
        "Query",
        "Header",
        "Path",
        "Field",
        "Body",
        "Headers",
        "JSON",
        "URLForm",
        "Multipart",
        "UseKeyMapping",
    ]

__SPEC_PARENT__: str = __spec__.parent  # type: ignore
# A mapping of {<member name>: (package, <module name>)} defining dynamic imports
_dynamic_imports: "dict[str, tuple[str, str, str | None]]" = {
    "Request": (__SPEC_PARENT__, "models", None),
    "Response": (__SPEC_PARENT__, "models", None),
    "Part": (__SPEC_PARENT__, "models", None),
    "PapyrusError": (__SPEC_PARENT__, "errors", None),
    "URLError": (__SPEC_PARENT__, "errors", None),
    "EncodingError": (__SPEC_PARENT__, "errors", None),
    "DecodeError": (__SPEC_PARENT__, "errors", None),
    "ValidationError": (__SPEC_PARENT__, "errors", None),
    "TransportError": (__SPEC_PARENT__, "errors", None),
    "TransportTimeoutError": (__SPEC_PARENT__, "errors", None),
    "RequestBuilder": (__SPEC_PARENT__, "builder", None),
    "Authorization": (__SPEC_PARENT__, "builder", None),
    "KeyMapping": (__SPEC_PARENT__, "keys", None),
    "RequestEncoder": (__SPEC_PARENT__, "encoders.base", None),
    "JSONEncoder": (__SPEC_PARENT__, "encoders.json_encoder", None),
    "URLEncodedFormEncoder": (__SPEC_PARENT__, "encoders.form", None),
    "MultipartEncoder": (__SPEC_PARENT__, "encoders.multipart", None),
    "ResponseDecoder": (__SPEC_PARENT__, "decoding", None),
    "decode_response": (__SPEC_PARENT__, "decoding", None),
    "validate_response": (__SPEC_PARENT__, "validation", None),
    "curl": (__SPEC_PARENT__, "curl_format", None),
    "CurlLogger": (__SPEC_PARENT__, "interceptors", None),
    "CurlTrigger": (__SPEC_PARENT__, "interceptors", None),
    "Interceptor": (__SPEC_PARENT__, "interceptors", None),
    "Provider": (__SPEC_PARENT__, "provider", None),
    "HttpTransport": (__SPEC_PARENT__, "provider", None),
    "RequestModifier": (__SPEC_PARENT__, "provider", None),
    "BearerTokenAuth": (__SPEC_PARENT__, "provider", None),
    "BasicAuth": (__SPEC_PARENT__, "provider", None),
    "ApiKeyAuth": (__SPEC_PARENT__, "provider", None),
    "HTTPXTransport": (__SPEC_PARENT__, "backends.httpx", None),
    "TracingModifier": (__SPEC_PARENT__, "backends.otel", None),
    "PapyrusSettings": (__SPEC_PARENT__, "config", None),
    "RestClient": (__SPEC_PARENT__, "api.decorators", None),
    "ApiClientBuilder": (__SPEC_PARENT__, "api.decorators", None),
    "Get": (__SPEC_PARENT__, "api.decorators", None),
    "Post": (__SPEC_PARENT__, "api.decorators", None),
    "Put": (__SPEC_PARENT__, "api.decorators", None),
    "Patch": (__SPEC_PARENT__, "api.decorators", None),
    "Delete": (__SPEC_PARENT__, "api.decorators", None),
    "Head": (__SPEC_PARENT__, "api.decorators", None),
    "Options": (__SPEC_PARENT__, "api.decorators", None),
    "Http": (__SPEC_PARENT__, "api.decorators", None),
    "Query": (__SPEC_PARENT__, "api.decorators", None),
    "Header": (__SPEC_PARENT__, "api.decorators", None),
    "Path": (__SPEC_PARENT__, "api.decorators", None),
    "Field": (__SPEC_PARENT__, "api.decorators", None),
    "Body": (__SPEC_PARENT__, "api.decorators", None),
    "Headers": (__SPEC_PARENT__, "api.decorators", None),
    "JSON": (__SPEC_PARENT__, "api.decorators", None),
    "URLForm": (__SPEC_PARENT__, "api.decorators", None),
    "Multipart": (__SPEC_PARENT__, "api.decorators", None),
    "UseKeyMapping": (__SPEC_PARENT__, "api.decorators", None),
}


def __getattr__(attr_name: str) -> object:

    dynamic_attr = _dynamic_imports.get(attr_name)
    if dynamic_attr is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr_name!r}")

    package, module_name, realname = dynamic_attr

    module = import_module(f"{package}.{module_name}", package=package)
    result = getattr(module, attr_name if realname is None else realname)
    g = globals()
    g[attr_name] = result
    for name, (_, other_module, other_realname) in _dynamic_imports.items():
        if other_module == module_name:
            g[name] = getattr(module, name if other_realname is None else other_realname)
    return result


def __dir__() -> "list[str]":
    return list(_dynamic_imports)
