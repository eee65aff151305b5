import pytest

from twostack.helpers import is_integer, parse_integer, split_fields, split_sequence


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a,b", ["a", "b"]),
        (" a , b ", ["a", "b"]),
        ("a,,b", ["a", "", "b"]),
        ("", [""]),
    ],
)
def test_split_fields(text: str, expected):
    assert split_fields(text) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("0", True),
        ("42", True),
        ("-3", True),
        ("+3", True),
        (" 7 ", True),
        ("", False),
        ("1.0", False),
        ("1_000", False),
        ("x", False),
    ],
)
def test_is_integer(token: str, expected: bool):
    assert is_integer(token) is expected


def test_parse_integer():
    assert parse_integer(" -12 ") == -12
    with pytest.raises(ValueError, match="'q' is not an integer"):
        parse_integer("q")


@pytest.mark.parametrize(
    "spec,expected",
    [
        ("E", []),
        ("a", ["a"]),
        ("a;b;c", ["a", "b", "c"]),
        ("#", ["#"]),
    ],
)
def test_split_sequence(spec: str, expected):
    assert split_sequence(spec) == expected
