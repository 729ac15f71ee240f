# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Error records accumulated by `CmdParse` while declaring options and parsing.

Structural errors are collected rather than raised. Each entry keeps its
`ErrorKind` so callers can branch on the category, while `str(error)` gives the
human-readable message returned by `CmdParse.get_errors()`.
"""
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Categories of errors reported by the parser."""

    NO_ARGUMENTS = "no_arguments"
    DUPLICATE_OPTION = "duplicate_option"
    UNKNOWN_OPTION = "unknown_option"
    # Raised as ValueConversionError at the accessor call site, never recorded.
    VALUE_CONVERSION = "value_conversion"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionError:
    """A single recorded error."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message
