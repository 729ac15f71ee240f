# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CmdParse`, a small option parser for command-line
applications that need `--name=value` style switches without a heavyweight
framework.

The caller declares the supported options, then hands the raw argument list to
`init()` once. The parser walks the arguments segment by segment (see
`cmdopts.parser.tokenizer`), resolves short aliases, matches long names without
regard to case and writes the captured values into its `OptionRegistry`.

Key Features:
- `--name=value`, `--name:value`, `--name value` and `--name` long forms
- `-n=value`, `-n:value`, `-n value` and `-n` short forms
- Values split across argv elements are joined back together
- One surrounding pair of double quotes is stripped from values
- Typed accessors for `str`, `int`, `float` and `bool`
- Plain-text and Rich-rendered help

Errors:
Structural problems are never raised. They are recorded in an error list and
signalled through a `False` return value:
- "No arguments given to application" when `init()` gets no arguments
- "Option already exists: <name>" when a long name is declared twice
- "Option not found: <name>" when the argument list names an unknown option

Parsing stops at the first unknown option. Options matched earlier in the same
call keep their values.

Example Usage:
    cmd = CmdParse()
    cmd.add_param_option(Option("BufferSize", "1000", "b"))
    cmd.add_param_option(Option("OutputFile", "output.txt", "o"))

    if not cmd.init(len(sys.argv), sys.argv):
        for error in cmd.get_errors():
            print(error)

    buffer_size = cmd.get_value("BufferSize", int)
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from cmdopts.console import console
from cmdopts.errors import ErrorKind, OptionError
from cmdopts.exceptions import OptionNotFoundError
from cmdopts.logger import logger
from cmdopts.parser.option import Option
from cmdopts.parser.registry import OptionRegistry
from cmdopts.parser.tokenizer import tokenize
from cmdopts.string_utils import trim


class CmdParse:
    """
    Command-line option handler.

    Declare options with `add_param_option()` (or pass them to the constructor),
    then call `init()` with the argument count and the argument list, where the
    first element is the program name.

    Example:
        cmd = CmdParse([Option("optionA", "10", "a"), Option("backColour", "#FFFFFF", "b")])
        cmd.init(3, ["app", "-a:16", "--backColour=#000000"])
    """

    def __init__(self, options: Iterable[Option] | None = None) -> None:
        self.console: Console = console
        self.executable_name: str = ""
        self._arguments: list[str] = []
        self._errors: list[OptionError] = []
        self._registry: OptionRegistry = OptionRegistry(error_handler=self._log_error)
        for option in options or []:
            self.add_param_option(option)

    def _log_error(self, kind: ErrorKind, message: str) -> None:
        self._errors.append(OptionError(kind=kind, message=message))

    def _fail(self, kind: ErrorKind, message: str) -> bool:
        logger.warning(message)
        self._log_error(kind, message)
        return False

    def init(self, argc: int, argv: Sequence[str]) -> bool:
        """
        Initialize the handler with the arguments given to the application.

        Declare every supported option before calling this.

        Args:
            argc (int): Number of entries of `argv` to use.
            argv (Sequence[str]): Program name followed by its arguments.

        Returns:
            bool: True if every option in the arguments was recognised.
        """
        if argc <= 0 or not argv:
            return self._fail(ErrorKind.NO_ARGUMENTS, "No arguments given to application")

        argc = min(argc, len(argv))
        self.executable_name = argv[0]
        self._arguments = [trim(argument) for argument in argv[1:argc]]
        self._registry.reset_values()
        logger.debug(
            "Parsing %d argument(s) for '%s'", len(self._arguments), self.executable_name
        )
        return self._parse_options()

    def init_from_sys(self) -> bool:
        """Initialize from `sys.argv`."""
        return self.init(len(sys.argv), sys.argv)

    def _parse_options(self) -> bool:
        for token in tokenize(self._arguments):
            logger.debug("Segment '%s' -> %s", token.raw, token)
            name = token.name
            if not token.long_form:
                name = self._registry.resolve_short_to_long(token.name)
                if not name:
                    return self._fail(
                        ErrorKind.UNKNOWN_OPTION, f"Option not found: {token.name}"
                    )

            if not self._registry.update_value(name, token.value):
                return self._fail(ErrorKind.UNKNOWN_OPTION, f"Option not found: {name}")
        return True

    def get_arguments(self) -> list[str]:
        """Return the arguments supplied to the application, without the program name."""
        return list(self._arguments)

    def add_param_option(self, option: Option) -> bool:
        """
        Add a command-line option that the application will support.

        Returns:
            bool: False if the long name is already declared. Check `get_errors()`.
        """
        return self._registry.add(option)

    def get_param_option_count(self) -> int:
        return self._registry.count()

    def has_param_option(self, option_name: str) -> bool:
        """Check whether an option with this long name is declared, ignoring case."""
        return self._registry.contains(option_name)

    def get_param_option(self, option_name: str) -> Option:
        """
        Return a copy of the option with the given **long** name.

        An empty `Option` is returned when the name is not declared.
        """
        return self._registry.get(option_name)

    def get_param_options(self) -> list[Option]:
        """Return copies of all declared options in alphabetical order."""
        return self._registry.options()

    def get_value(self, option_name: str, value_type: type = str) -> Any:
        """
        Return the value of an option converted to `value_type`.

        Raises:
            OptionNotFoundError: If the option is not declared.
            ValueConversionError: If the value cannot be converted.
        """
        if not self._registry.contains(option_name):
            raise OptionNotFoundError(option_name)
        return self._registry.get(option_name).get_value(value_type)

    def to_dict(self) -> dict[str, str]:
        """Return `{long_name: value}` for every option, in alphabetical order."""
        return {option.long_name: option.value_as_text() for option in self._registry}

    def get_helpstring(self) -> str:
        """
        Return a short overview of the options.

        For options `BufferSize`/`b` and `OutputFile`/`o`:

            MyApplication.exe [options]
            where options are:
                -b, --BufferSize
                -o, --OutputFile
        """
        return self._registry.help_text(self.executable_name)

    def render_help(self) -> None:
        """Print formatted help for the declared options using Rich output."""
        program = self.executable_name or "program"
        usage = escape(f"usage: {program} [options]")
        self.console.print(f"[bold]{usage}[/bold]\n", highlight=False)
        self.console.print("[bold]options:[/bold]")
        for option in self._registry:
            flags = f"-{option.short_name}, --{option.long_name}"
            arg_line = f"  {flags:<30} "
            help_text = option.help or ""
            if option.default_value:
                help_text = f"{help_text} (default: {option.default_value})".strip()
            if help_text and len(flags) > 30:
                help_text = f"\n{'':<33}{help_text}"
            self.console.print(
                f"{escape(arg_line)}{escape(help_text)}", highlight=False
            )

    def has_errors(self) -> bool:
        return bool(self._errors)

    def clear_errors(self) -> None:
        """Clear the list of accumulated errors."""
        self._errors.clear()

    def get_errors(self) -> list[str]:
        """
        Return the accumulated error messages.

        Clear the errors after reading them.
        """
        return [error.message for error in self._errors]

    def get_error_records(self) -> list[OptionError]:
        """Return the accumulated errors with their `ErrorKind`."""
        return list(self._errors)

    def __str__(self) -> str:
        return (
            f"CmdParse(options={self._registry.count()}, "
            f"arguments={len(self._arguments)}, errors={len(self._errors)})"
        )

    def __repr__(self) -> str:
        return str(self)
