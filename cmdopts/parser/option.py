# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionRegistry` and `CmdParse` to represent
one declared command-line switch.

Each `Option` holds a long name, a short alias, a default value and the value
captured from the argument list. All values are kept as text and converted on
demand by the typed accessors.

Key Attributes:
- `long_name`: Canonical identifier, matched case-insensitively (e.g. `BufferSize`)
- `default_value`: Text used when the option is never given on the command line
- `short_name`: Alias (e.g. `b`); falls back to `long_name` when blank
- `param_value`: Text captured while parsing, empty until matched
- `present`: Whether the option appeared on the command line at all
- `help`: Optional description for rich help rendering

Example:
    option = Option("BufferSize", "1000", "b")
    option.get_value(int)  # 1000 until the parser assigns a value

    # Activated on the command line with any of:
    #   --BufferSize=23  --BufferSize:23  --BufferSize 23  -b 23
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from cmdopts.exceptions import ValueConversionError
from cmdopts.parser.utils import coerce_value
from cmdopts.string_utils import is_blank, make_lower


@dataclass(frozen=True)
class ConversionResult:
    """Value-or-error outcome of `Option.try_get_value`."""

    value: Any = None
    error: ValueConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(eq=False)
class Option:
    """
    Represents a declared command-line option.

    Two options are equal when their long names match case-insensitively, and
    options sort alphabetically by that case-folded name.

    Attributes:
        long_name (str): Full option name, used with `--`.
        default_value (str): Text used when no value was captured.
        short_name (str): Alias used with `-`. Defaults to `long_name`.
        param_value (str): Text captured from the command line.
        present (bool): True once the option was matched on the command line.
        help (str): Help text for the option.
    """

    long_name: str = ""
    default_value: str = ""
    short_name: str = ""
    param_value: str = ""
    present: bool = False
    help: str = ""

    def __post_init__(self) -> None:
        if is_blank(self.short_name):
            self.short_name = self.long_name

    @property
    def key(self) -> str:
        """Case-folded long name used as the registry key."""
        return make_lower(self.long_name)

    def has_value(self) -> bool:
        """Return True if a non-blank value was captured from the command line."""
        return not is_blank(self.param_value)

    def value_as_text(self) -> str:
        """Return the captured value, or the default when none was captured."""
        if self.has_value():
            return self.param_value
        return self.default_value

    def get_value(self, value_type: type = str) -> Any:
        """
        Return the option value converted to `value_type`.

        Flag-only options (matched without a value) and options never matched
        convert their default value.

        Raises:
            ValueConversionError: If the text cannot be converted.
        """
        text = self.value_as_text()
        try:
            return coerce_value(text, value_type)
        except ValueError as error:
            raise ValueConversionError(self.long_name, text, value_type) from error

    def try_get_value(self, value_type: type = str) -> ConversionResult:
        """Return a `ConversionResult` instead of raising on a failed conversion."""
        try:
            return ConversionResult(value=self.get_value(value_type))
        except ValueConversionError as error:
            return ConversionResult(error=error)

    def copy(self) -> Option:
        return replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return False
        return self.key == other.key

    def __lt__(self, other: Option) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)
