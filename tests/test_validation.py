import pytest

from keysmith.errors import ValidationError
from keysmith.generator import CharacterClass
from keysmith.validation import (
    LENGTH_FIELD,
    MSG_NOT_A_NUMBER,
    MSG_REQUIRED,
    MSG_TOO_LONG,
    MSG_TOO_SHORT,
    build_request,
    validate_length,
)


def _message(raw):
    with pytest.raises(ValidationError) as exc:
        validate_length(raw)
    assert exc.value.field == LENGTH_FIELD
    return exc.value.message


def test_bounds_inclusive():
    assert validate_length("4") == 4
    assert validate_length("16") == 16
    assert validate_length(10) == 10
    assert validate_length(" 8 ") == 8


def test_required():
    assert _message(None) == MSG_REQUIRED
    assert _message("") == MSG_REQUIRED
    assert _message("   ") == MSG_REQUIRED


def test_out_of_range():
    assert _message("3") == MSG_TOO_SHORT == "Should be of min 4 characters"
    assert _message(17) == MSG_TOO_LONG == "Should be of max 16 characters"
    assert _message("-5") == MSG_TOO_SHORT


def test_not_a_number():
    assert _message("abc") == MSG_NOT_A_NUMBER
    assert _message("8.5") == MSG_NOT_A_NUMBER
    assert _message(True) == MSG_NOT_A_NUMBER
    assert _message("1_0") == MSG_NOT_A_NUMBER
    assert _message("\uff11\uff16") == MSG_NOT_A_NUMBER
    assert validate_length("+8") == 8


def test_build_request():
    req = build_request("12", has_upper_case=True, has_symbol=True)
    assert req.length == 12
    assert req.enabled_classes == {CharacterClass.UPPERCASE, CharacterClass.SYMBOL}
