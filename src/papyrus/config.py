# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Optional

from papyrus.utils.env_parse_utils import (
    get_env_choice,
    get_env_dict,
    get_env_float,
    get_env_str,
)

CURL_LOG_CHOICES = ("always", "on_error")


@dataclass(frozen=True)
class PapyrusSettings:
    """
    Client defaults read from the environment.

    - ``PAPYRUS_BASE_URL``: base URL of the provider
    - ``PAPYRUS_TIMEOUT``: transport timeout in seconds
    - ``PAPYRUS_CURL_LOG``: ``always`` or ``on_error`` to install a curl logger
    - ``PAPYRUS_DEFAULT_HEADERS``: ``key=value`` pairs separated by commas
    """

    base_url: str = ""
    timeout: float = 30.0
    curl_log: Optional[str] = None
    default_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "PapyrusSettings":
        curl_log = get_env_choice("PAPYRUS_CURL_LOG", CURL_LOG_CHOICES)
        if curl_log is False:
            raise ValueError(
                f"PAPYRUS_CURL_LOG must be one of {', '.join(CURL_LOG_CHOICES)}"
            )

        return cls(
            base_url=get_env_str("PAPYRUS_BASE_URL", ""),
            timeout=get_env_float("PAPYRUS_TIMEOUT", 30.0),
            curl_log=curl_log,
            default_headers=get_env_dict("PAPYRUS_DEFAULT_HEADERS"),
        )


__all__ = ["PapyrusSettings"]
