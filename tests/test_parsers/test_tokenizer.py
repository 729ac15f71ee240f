import pytest

from cmdopts.parser.tokenizer import (
    OptionToken,
    find_delimiter,
    find_segments,
    is_option_prefix,
    join_segment,
    tokenize,
    tokenize_segment,
)


@pytest.mark.parametrize(
    "token, expected",
    [("--name", True), ("-n", True), ("-", True), ("name", False), ("", False)],
)
def test_is_option_prefix(token, expected):
    assert is_option_prefix(token) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("a=b", 1), ("ab:c=d", 2), ("ab c", 2), ("abc", -1), ("", -1), ("-x=1", 2)],
)
def test_find_delimiter(text, expected):
    assert find_delimiter(text) == expected


def test_find_segments():
    arguments = ["stray", "--firstOption", "=1234", "-s", "--secondOp"]
    assert list(find_segments(arguments)) == [(1, 3), (3, 4), (4, 5)]


def test_find_segments_without_options():
    assert list(find_segments(["a", "b"])) == []
    assert list(find_segments([])) == []


def test_find_segments_trailing_values_belong_to_last_segment():
    assert list(find_segments(["-a", "1", "2"])) == [(0, 3)]


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["--OutputFile=", '"C://Temp//"'], '--OutputFile="C://Temp//"'),
        (["--BufferSize", "23"], "--BufferSize 23"),
        (["--BufferSize:2", "3"], "--BufferSize:23"),
        (["-a", "b", "c"], "-a bc"),
        (["--name", ""], "--name"),
        (["--name"], "--name"),
        (["--firstOption", "=1234"], "--firstOption=1234"),
        (["-b", ":7"], "-b:7"),
        (["--name", " value"], "--name value"),
    ],
)
def test_join_segment(tokens, expected):
    assert join_segment(tokens) == expected


@pytest.mark.parametrize(
    "segment, name, value, long_form",
    [
        ("--BufferSize:23", "BufferSize", "23", True),
        ("--BufferSize=23", "BufferSize", "23", True),
        ("--BufferSize 23", "BufferSize", "23", True),
        ("--Verbose", "Verbose", "", True),
        ("-b 6.3", "b", "6.3", False),
        ("-a:16", "a", "16", False),
        ("-v", "v", "", False),
        ('--OutputFile="C://Temp//"', "OutputFile", "C://Temp//", True),
        ("--OutputFile=C:/out.txt", "OutputFile", "C:/out.txt", True),
        ("--name =  spaced  ", "name", "=  spaced", True),
        ("--Level=-3", "Level", "-3", True),
        ("---triple=1", "triple", "1", True),
        ("-", "", "", False),
    ],
)
def test_tokenize_segment(segment, name, value, long_form):
    token = tokenize_segment(segment)
    assert token.name == name
    assert token.value == value
    assert token.long_form is long_form
    assert token.raw == segment


def test_tokenize_segment_strips_one_quote_layer():
    assert tokenize_segment('--msg=""hi""').value == '"hi"'


def test_tokenize():
    tokens = list(tokenize(["--BufferSize:23", "-o", "out.txt", "--Verbose"]))
    assert [(token.name, token.value, token.long_form) for token in tokens] == [
        ("BufferSize", "23", True),
        ("o", "out.txt", False),
        ("Verbose", "", True),
    ]


def test_tokenize_is_lazy():
    tokens = tokenize(["-a:1", "-b:2"])
    assert next(tokens) == OptionToken(name="a", value="1", long_form=False, raw="-a:1")
