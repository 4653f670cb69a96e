# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from typing import Literal, Optional, TypeVar, overload

DF_FLOAT_T = TypeVar("DF_FLOAT_T", bound="float | None")


@overload
def get_env_float(var_name: str, default: None = None) -> float | None: ...


@overload
def get_env_float(var_name: str, default: DF_FLOAT_T) -> DF_FLOAT_T | float: ...


def get_env_float(
    var_name: str, default: DF_FLOAT_T | None = None
) -> DF_FLOAT_T | float | None:
    """Read a float, raising ``ValueError`` naming the variable when it is malformed."""
    value = os.getenv(var_name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as err:
        raise ValueError(f"{var_name} must be a number, got {value!r}") from err


DF_STR_T = TypeVar("DF_STR_T", bound="Optional[str]")


@overload
def get_env_str(var_name: str, default: None = None) -> str | None: ...


@overload
def get_env_str(var_name: str, default: DF_STR_T) -> DF_STR_T | str: ...


def get_env_str(var_name: str, default: DF_STR_T = None) -> DF_STR_T | str:  # type: ignore[assignment]
    value = os.getenv(var_name)
    if value is None:
        return default
    return value


def get_env_choice(
    var_name: str, choices: tuple[str, ...]
) -> str | None | Literal[False]:
    """
    Read a lower-cased value restricted to ``choices``.

    Returns ``None`` when unset or blank and ``False`` when the value is not
    one of the choices.
    """
    value = os.getenv(var_name, "").strip().lower()
    if not value:
        return None
    if value not in choices:
        return False
    return value


def get_env_dict(
    var_name: str, item_separator: str = ",", key_value_separator: str = "="
) -> dict[str, str]:
    value = os.getenv(var_name, "")
    result: dict[str, str] = {}
    if not value:
        return result
    for item in value.split(item_separator):
        if key_value_separator not in item:
            continue
        key, val = item.split(key_value_separator, 1)
        if key.strip():
            result[key.strip()] = val.strip()
    return result
