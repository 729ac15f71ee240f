# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdopts.

Structural parse problems (missing arguments, duplicate or unknown options) are
never raised; they are recorded in the parser's error list. Exceptions are kept
for failures that belong to a single call site, such as converting a stored
value to a number, or for problems loading a declaration file.

All exceptions inherit from `CmdOptsError`, the base exception for the package.

Exception Hierarchy:
- CmdOptsError
    ├── ValueConversionError (also a ValueError)
    ├── OptionNotFoundError (also a KeyError)
    └── ConfigError
"""
from typing import Any

from cmdopts.errors import ErrorKind


class CmdOptsError(Exception):
    """Base exception for cmdopts."""


class ValueConversionError(CmdOptsError, ValueError):
    """Exception raised when an option value cannot be converted to the requested type."""

    kind = ErrorKind.VALUE_CONVERSION

    def __init__(self, option_name: str, value: str, value_type: Any) -> None:
        self.option_name = option_name
        self.value = value
        self.value_type = value_type
        type_name = getattr(value_type, "__name__", str(value_type))
        super().__init__(
            f"Cannot convert value '{value}' of option '{option_name}' to {type_name}"
        )


class OptionNotFoundError(CmdOptsError, KeyError):
    """Exception raised when a value is requested for an option that was never declared."""

    def __init__(self, option_name: str) -> None:
        self.option_name = option_name
        super().__init__(f"Option not found: {option_name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigError(CmdOptsError):
    """Exception raised when an option declaration file is invalid."""
