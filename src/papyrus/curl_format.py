# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from papyrus.models import Request


def curl(request: Request, sorted_headers: bool = False) -> str:
    """
    Render a curl command reproducing ``request``.

    Values are wrapped in single quotes without any escaping, so the output is
    meant for reading in logs rather than for pasting into an untrusted shell.
    """
    lines = [f"curl '{request.url}'", f"-X {request.method}"]

    headers = list(request.headers)
    if sorted_headers:
        headers.sort(key=lambda header: header[0])
    lines.extend(f"-H '{key}: {value}'" for key, value in headers)

    if request.body is not None:
        lines.append(f"-d '{request.body.decode('utf-8', errors='replace')}'")

    return " \\\n".join(lines)


__all__ = ["curl"]
