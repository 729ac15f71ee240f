import pytest

from cmdopts.string_utils import (
    is_blank,
    ltrim,
    make_lower,
    make_upper,
    rtrim,
    strip_quotes,
    trim,
)


@pytest.mark.parametrize(
    "text, expected", [("", True), ("   ", True), ("\t\n", True), (" a ", False)]
)
def test_is_blank(text, expected):
    assert is_blank(text) is expected


def test_case_conversion():
    assert make_lower("BufferSIZE") == "buffersize"
    assert make_upper("BufferSize") == "BUFFERSIZE"


def test_trim_whitespace():
    assert ltrim("  a  ") == "a  "
    assert rtrim("  a  ") == "  a"
    assert trim("\t a \n") == "a"


def test_trim_characters():
    assert ltrim("--name-", "-") == "name-"
    assert rtrim("--name-", "-") == "--name"
    assert trim('""value""', '"') == "value"


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"C://Temp//"', "C://Temp//"),
        ('""nested""', '"nested"'),
        ('"unbalanced', '"unbalanced'),
        ('unbalanced"', 'unbalanced"'),
        ('"', '"'),
        ('""', ""),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_strip_quotes(text, expected):
    assert strip_quotes(text) == expected
