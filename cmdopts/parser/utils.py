# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for cmdopts typed accessors.

Option values are always stored as text. This module converts that text to the
small, closed set of types the accessors support.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_value: Convert a string to `str`, `int`, `float` or `bool`.
"""
from typing import Any

SUPPORTED_TYPES: tuple[type, ...] = (str, int, float, bool)

TRUE_VALUES = {"true", "t", "1", "yes", "y", "on"}
FALSE_VALUES = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the text is not a recognised boolean word.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    elif normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_value(value: str, target_type: type) -> Any:
    """
    Attempt to convert a string to the given target type.

    Integers are parsed from the whole trimmed text in base 10, so `"6.3"` is
    rejected by `int` rather than truncated.

    Args:
        value (str): The input string to convert.
        target_type (type): One of `str`, `int`, `float`, `bool`.

    Returns:
        Any: The coerced value.

    Raises:
        TypeError: If the target type is not supported.
        ValueError: If conversion fails.
    """
    if target_type not in SUPPORTED_TYPES:
        supported = ", ".join(supported_type.__name__ for supported_type in SUPPORTED_TYPES)
        raise TypeError(
            f"Unsupported value type: {target_type!r}. Expected one of {supported}"
        )

    if target_type is str:
        return value

    if target_type is bool:
        return coerce_bool(value)

    return target_type(value.strip())
