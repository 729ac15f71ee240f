# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the collection of options declared for one parser.

Options are keyed by their case-folded long name, so `BufferSize`, `buffersize`
and `BUFFERSIZE` all address the same entry. Iteration is always alphabetical by
that key, which keeps the help listing stable regardless of declaration order.

The registry hands out copies of its options. Mutating an `Option` returned by
`get()` or `options()` never changes the stored entry; values are only written
through `update_value()`.

Errors (duplicate declarations) are not raised. They are passed to the
`error_handler` callback supplied by the owner, which is how `CmdParse` keeps a
single error list for the whole parser.
"""
from __future__ import annotations

from typing import Callable, Iterator

from cmdopts.errors import ErrorKind
from cmdopts.logger import logger
from cmdopts.parser.option import Option
from cmdopts.string_utils import make_lower
from cmdopts.version import __version__

ErrorHandler = Callable[[ErrorKind, str], None]


class OptionRegistry:
    """
    Stores declared options keyed by case-insensitive long name.

    Example:
        registry = OptionRegistry()
        registry.add(Option("BufferSize", "1000", "b"))
        registry.contains("buffersize")          # True
        registry.resolve_short_to_long("b")      # "BufferSize"
        registry.update_value("BUFFERSIZE", "23")
        registry.get("BufferSize").get_value(int)  # 23
    """

    def __init__(self, error_handler: ErrorHandler | None = None) -> None:
        self._options: dict[str, Option] = {}
        self._error_handler: ErrorHandler | None = error_handler

    def _report(self, kind: ErrorKind, message: str) -> None:
        logger.warning(message)
        if self._error_handler:
            self._error_handler(kind, message)

    def add(self, option: Option) -> bool:
        """
        Declare a new option.

        Returns:
            bool: False if an option with the same case-insensitive long name is
            already declared. The existing declaration is kept.
        """
        if option.key in self._options:
            self._report(
                ErrorKind.DUPLICATE_OPTION, f"Option already exists: {option.long_name}"
            )
            return False
        self._options[option.key] = option.copy()
        logger.debug(
            "Declared option '%s' (short='%s', default='%s')",
            option.long_name,
            option.short_name,
            option.default_value,
        )
        return True

    def count(self) -> int:
        return len(self._options)

    def contains(self, name: str) -> bool:
        """Check whether a long name is declared, ignoring case."""
        return make_lower(name) in self._options

    def get(self, name: str) -> Option:
        """
        Return a copy of the option with the given long name.

        An empty `Option` is returned when the name is not declared. Use
        `contains()` first to tell the two apart.
        """
        option = self._options.get(make_lower(name))
        if option is None:
            return Option()
        return option.copy()

    def resolve_short_to_long(self, short_name: str) -> str:
        """
        Return the long name of the option whose short name matches exactly.

        Short names are compared case-sensitively. Returns an empty string when
        no option uses the short name.
        """
        for option in self._sorted():
            if option.short_name == short_name:
                return option.long_name
        return ""

    def update_value(self, long_name: str, value: str) -> bool:
        """Store a parsed value on the option and mark it as present."""
        option = self._options.get(make_lower(long_name))
        if option is None:
            return False
        option.param_value = value
        option.present = True
        logger.debug("Set option '%s' to '%s'", option.long_name, value)
        return True

    def reset_values(self) -> None:
        """Forget all parsed values, keeping the declarations."""
        for option in self._options.values():
            option.param_value = ""
            option.present = False

    def options(self) -> list[Option]:
        """Return copies of all options in alphabetical order."""
        return list(self)

    def help_text(self, executable_name: str) -> str:
        """
        Return a short plain-text overview of the declared options.

        For `BufferSize`/`b` and `OutputFile`/`o`:

            MyApplication.exe [options]
            where options are:
                -b, --BufferSize
                -o, --OutputFile

            (version 1.0.0)
        """
        lines = [f"{executable_name} [options]\n", "where options are:\n"]
        for option in self._sorted():
            lines.append(f"    -{option.short_name}, --{option.long_name}\n")
        lines.append(f"\n(version {__version__})")
        return "".join(lines)

    def _sorted(self) -> Iterator[Option]:
        for key in sorted(self._options):
            yield self._options[key]

    def __iter__(self) -> Iterator[Option]:
        for option in self._sorted():
            yield option.copy()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __str__(self) -> str:
        return f"OptionRegistry(options={self.count()})"

    def __repr__(self) -> str:
        return str(self)
