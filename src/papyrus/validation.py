# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from typing import TYPE_CHECKING

from papyrus.errors import ValidationError

if TYPE_CHECKING:
    from papyrus.models import Response

logger = logging.getLogger(__name__)


def validate_response(response: "Response") -> "Response":
    """
    Raise if the response represents a failure, otherwise return it unchanged.

    A transport error carried by the response is re-raised as is and takes
    precedence over the status code.
    """
    if response.error is not None:
        raise response.error

    if response.status_code is not None and not 200 <= response.status_code <= 299:
        logger.warning("Unsuccessful status code: %s", response.status_code)
        raise ValidationError(
            f"Unsuccessful status code: {response.status_code}.",
            request=response.request,
            response=response,
        )

    return response


__all__ = ["validate_response"]
