# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stateless text helpers used by the option registry and the tokenizer.

Every function takes and returns plain `str` values; nothing here keeps
process-wide state, so each helper can be tested on its own.

Functions:
- is_blank: True for empty or whitespace-only text.
- make_lower / make_upper: Case conversion.
- ltrim / rtrim / trim: Strip whitespace, or a given set of characters, from one
  or both ends.
- strip_quotes: Remove one surrounding pair of quote characters.
"""


def is_blank(text: str) -> bool:
    """Return True if the text is empty or only whitespace."""
    return not text or text.isspace()


def make_lower(text: str) -> str:
    return text.lower()


def make_upper(text: str) -> str:
    return text.upper()


def ltrim(text: str, chars: str | None = None) -> str:
    """Strip leading whitespace, or the given characters, from the text."""
    return text.lstrip(chars)


def rtrim(text: str, chars: str | None = None) -> str:
    """Strip trailing whitespace, or the given characters, from the text."""
    return text.rstrip(chars)


def trim(text: str, chars: str | None = None) -> str:
    """Strip whitespace, or the given characters, from both ends of the text."""
    return rtrim(ltrim(text, chars), chars)


def strip_quotes(text: str, quote: str = '"') -> str:
    """
    Remove a single surrounding pair of quote characters.

    Only one layer is removed, and only when the text both starts and ends with
    the quote character:

        strip_quotes('"C://Temp//"')   -> 'C://Temp//'
        strip_quotes('""nested""')     -> '"nested"'
        strip_quotes('"unbalanced')    -> '"unbalanced'
    """
    if len(text) >= 2 and text.startswith(quote) and text.endswith(quote):
        return text[1:-1]
    return text
