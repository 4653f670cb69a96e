# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Declarative API clients
"""
Declare an HTTP API as a decorated class and let ``ApiClientBuilder`` turn it
into a working client:
- HTTP method decorators (@Get, @Post, @Put, @Patch, @Delete, @Head, @Options, @Http)
- Request parameter decorators (@Query, @Header, @Path, @Field, @Body)
- Encoding decorators (@JSON, @URLForm, @Multipart) and @UseKeyMapping
- Static @Headers on the class or on a single endpoint
"""

from .decorators import (
    JSON,
    ApiClientBuilder,
    Body,
    Delete,
    Encoding,
    Field,
    Get,
    Head,
    Header,
    Headers,
    Http,
    HttpMapping,
    Multipart,
    Options,
    Patch,
    Path,
    Post,
    Put,
    Query,
    RequestAttribute,
    RestClient,
    URLForm,
    UseKeyMapping,
)

__all__ = [
    # HTTP Method decorators
    "Get",
    "Post",
    "Put",
    "Patch",
    "Delete",
    "Head",
    "Options",
    "Http",
    # Request parameter decorators
    "Query",
    "Header",
    "Path",
    "Field",
    "Body",
    # Configuration decorators
    "Headers",
    "Encoding",
    "JSON",
    "URLForm",
    "Multipart",
    "UseKeyMapping",
    # Client builder and core classes
    "RestClient",
    "ApiClientBuilder",
    "HttpMapping",
    "RequestAttribute",
]
