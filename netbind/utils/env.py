"""Environment variable helpers with type coercion and access logging.

Usage:
    from netbind.utils.env import get_env

    skip = get_env("NETBIND_SKIP_INTERFACES", default=("tap",), as_type=tuple)
    hostname = get_env("NETBIND_SERVER_HOSTNAME", log=True)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Args:
        name: Variable name (for error messages).
        value: String value to convert.
        as_type: Target type.

    Returns:
        Converted value.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")

        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value

        # Comma-separated sequences; blank items are dropped
        origin = getattr(as_type, "__origin__", None)
        if as_type in (list, tuple) or origin in (list, tuple):
            items = [item.strip() for item in value.split(",") if item.strip()]
            if as_type is tuple or origin is tuple:
                return tuple(items)
            return items

        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None, masked: bool = False) -> None:
    """Log environment variable access if logger is configured."""
    from netbind.utils.logger import Logger

    if not Logger.is_configured():
        return

    display_value = "***" if masked else value
    Logger.get("env").debug(f"ENV GET {name}={display_value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
    mask_in_log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: Type to convert the value to. Supports:
            - bool: "false", "0", "", "no", "off" → False, else True
            - int, float, str: Direct conversion
            - list, tuple: Comma-separated string → sequence of strings
        log: If True, log the access (uses Logger if configured).
        mask_in_log: If True, mask the value in logs.

    Returns:
        The environment variable value, converted to as_type if specified,
        or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("NETBIND_SKIP_INTERFACES", default=(), as_type=tuple)
        ()
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value, masked=mask_in_log)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set (not empty)."""
    value = os.environ.get(name)
    return value is not None and value.strip() != ""
