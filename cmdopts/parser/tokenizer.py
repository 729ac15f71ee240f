# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw argument list into option tokens for `CmdParse`.

The argument list is walked in segments. A segment starts at a token beginning
with `-` and runs up to, but not including, the next such token:

    ["--firstOption", "=1234", "-s", "--secondOp"]
      ^-------------------^     ^^    ^^^^^^^^^^
            segment          segment    segment

The tokens of a segment are joined back into one string. This reassembles
options that a shell or test harness split across elements, for example
`--OutputFile=` followed by `"C://Temp//"`. Tokens before the first option
prefix are skipped.

Each joined segment is then split into a name and a value on the first space,
`:` or `=`, giving an `OptionToken`:

    --BufferSize:23        -> OptionToken(name="BufferSize", value="23", long_form=True)
    -b 6.3                 -> OptionToken(name="b", value="6.3", long_form=False)
    --OutputFile="C://T//" -> OptionToken(name="OutputFile", value="C://T//", long_form=True)
    --Verbose              -> OptionToken(name="Verbose", value="", long_form=True)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from cmdopts.string_utils import ltrim, strip_quotes, trim

OPTION_PREFIX = "-"
LONG_PREFIX = "--"
DELIMITERS = (" ", ":", "=")


@dataclass(frozen=True)
class OptionToken:
    """One option specification extracted from a segment."""

    name: str
    value: str
    long_form: bool
    raw: str = ""


def is_option_prefix(token: str) -> bool:
    """Return True if the token starts a new segment."""
    return token.startswith(OPTION_PREFIX)


def find_delimiter(text: str) -> int:
    """Return the index of the first name/value delimiter, or -1."""
    for index, char in enumerate(text):
        if char in DELIMITERS:
            return index
    return -1


def find_segments(arguments: Sequence[str]) -> Iterator[tuple[int, int]]:
    """Yield `(start, end)` index pairs of each segment, `end` exclusive."""
    cursor = 0
    count = len(arguments)
    while cursor < count:
        start = next(
            (index for index in range(cursor, count) if is_option_prefix(arguments[index])),
            count,
        )
        if start == count:
            return
        end = next(
            (
                index
                for index in range(start + 1, count)
                if is_option_prefix(arguments[index])
            ),
            count,
        )
        yield start, end
        cursor = end


def join_segment(tokens: Sequence[str]) -> str:
    """
    Join the tokens of a segment into one option string.

    Tokens are concatenated without a separator. While the text gathered so far
    has no name/value delimiter, a single space is inserted instead so that
    `["--BufferSize", "23"]` reads as `--BufferSize 23`. No space is added
    when the next token itself starts with a delimiter, so
    `["--firstOption", "=1234"]` reads as `--firstOption=1234`.
    """
    joined = ""
    for token in tokens:
        if (
            joined
            and token
            and token[0] not in DELIMITERS
            and find_delimiter(joined) == -1
        ):
            joined += " "
        joined += token
    return joined


def tokenize_segment(segment: str) -> OptionToken:
    """Classify a joined segment and split it into name and value."""
    long_form = segment.startswith(LONG_PREFIX)
    stripped = ltrim(segment, OPTION_PREFIX)
    delimiter = find_delimiter(stripped)
    if delimiter == -1:
        name, value = stripped, ""
    else:
        name, value = stripped[:delimiter], stripped[delimiter + 1 :]
    return OptionToken(
        name=trim(name),
        value=strip_quotes(trim(value)),
        long_form=long_form,
        raw=segment,
    )


def tokenize(arguments: Sequence[str]) -> Iterator[OptionToken]:
    """Yield an `OptionToken` for every segment in the argument list."""
    for start, end in find_segments(arguments):
        yield tokenize_segment(join_segment(arguments[start:end]))
