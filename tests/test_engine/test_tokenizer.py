"""Tests for the path tokenizer."""

import pytest

from clippath.engine.errors import TokenizeError
from clippath.engine.tokenizer import TokenKind, tokenize
from tests.conftest import COMPACT_SQUARE_PATH, HOME_PATH


def _values(text: str) -> list:
    return [t.value for t in tokenize(text)]


def test_compact_square():
    assert _values(COMPACT_SQUARE_PATH) == ["M", 10, 10, "L", 90, 10, "L", 90, 90, "L", 10, 90, "Z"]


def test_token_kinds():
    tokens = tokenize("M1 2")
    assert [t.kind for t in tokens] == [TokenKind.COMMAND, TokenKind.NUMBER, TokenKind.NUMBER]
    assert tokens[0].is_command
    assert tokens[1].is_number


def test_sign_separates_numbers():
    assert _values("M10-10") == ["M", 10, -10]
    assert _values("-10-5") == [-10, -5]


def test_comma_and_whitespace_are_interchangeable():
    assert _values("L10,20") == ["L", 10, 20]
    assert _values("L 10\t20\n30\r\n40 ,50") == ["L", 10, 20, 30, 40, 50]


def test_second_dot_starts_new_number():
    assert _values("1.5.5") == [1.5, 0.5]


def test_dot_not_allowed_after_exponent():
    assert _values("1e5.5") == [100000.0, 0.5]


def test_exponent_forms():
    assert _values("-.5e-3") == [-0.0005]
    assert _values("2E+2 3e2") == [200.0, 300.0]


def test_trailing_dot_accepted():
    assert _values("1.") == [1.0]


def test_token_index_is_source_offset():
    tokens = tokenize("M 10,-2.5")
    assert [t.index for t in tokens] == [0, 2, 5]


@pytest.mark.parametrize("literal", [".", "-", "+", "-.", "+.", "1e", "1e+", "-e5"])
def test_invalid_literals(literal):
    with pytest.raises(TokenizeError) as exc:
        tokenize(f"M {literal}")
    assert exc.value.reason == "number"
    assert exc.value.text == literal
    assert exc.value.index == 2


def test_unexpected_character():
    with pytest.raises(TokenizeError) as exc:
        tokenize("M 10 X 20")
    assert exc.value.text == "X"
    assert exc.value.index == 5
    assert str(exc.value) == 'Unexpected character "X" at position 5'


def test_bare_exponent_marker_is_not_a_number():
    with pytest.raises(TokenizeError) as exc:
        tokenize("e5")
    assert exc.value.reason == "character"
    assert exc.value.text == "e"


def test_empty_input():
    assert tokenize("") == []
    assert tokenize(" ,\t") == []


def test_real_icon_path():
    tokens = tokenize(HOME_PATH)
    commands = [t.value for t in tokens if t.is_command]
    assert commands == ["M", "a", "l", "a", "l", "A", "v", "a", "H", "a", "z"]
    assert tokens[9].value == 0.709
    assert tokens[10].value == -1.528


@pytest.mark.parametrize("literal", ["1e400", "-1e999", "+.5e309"])
def test_out_of_range_literals(literal):
    with pytest.raises(TokenizeError) as exc:
        tokenize(f"M0 0 L{literal} 0")
    assert exc.value.reason == "number"
    assert exc.value.text == literal
    assert exc.value.index == 6


def test_largest_finite_literal_accepted():
    assert _values("1.7976931348623157e308") == [1.7976931348623157e308]
