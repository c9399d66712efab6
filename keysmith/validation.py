"""
keysmith.validation
Form-level checks run before the generator is called.

The generator itself accepts any non-negative length; the 4..16 range and the
messages below are what the password form shows to the user.
"""

from typing import Any

from .errors import ValidationError
from .generator import GenerationRequest

MIN_LENGTH = 4
MAX_LENGTH = 16

LENGTH_FIELD = "passwordLength"

MSG_REQUIRED = "Password Length is required."
MSG_NOT_A_NUMBER = "Password Length must be a number."
MSG_TOO_SHORT = f"Should be of min {MIN_LENGTH} characters"
MSG_TOO_LONG = f"Should be of max {MAX_LENGTH} characters"


def validate_length(raw: Any) -> int:
    """Turn the raw length field (str or int) into a bounded int."""
    if raw is None:
        raise ValidationError(LENGTH_FIELD, MSG_REQUIRED)
    if isinstance(raw, bool):
        raise ValidationError(LENGTH_FIELD, MSG_NOT_A_NUMBER)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            raise ValidationError(LENGTH_FIELD, MSG_REQUIRED)
        # int() alone would also take "1_0" and non-ASCII digits
        if not (text.isascii() and text.lstrip("+-").isdigit()):
            raise ValidationError(LENGTH_FIELD, MSG_NOT_A_NUMBER)
        try:
            value = int(text, 10)
        except ValueError:
            raise ValidationError(LENGTH_FIELD, MSG_NOT_A_NUMBER) from None

    if value < MIN_LENGTH:
        raise ValidationError(LENGTH_FIELD, MSG_TOO_SHORT)
    if value > MAX_LENGTH:
        raise ValidationError(LENGTH_FIELD, MSG_TOO_LONG)
    return value


def build_request(
    raw_length: Any,
    has_lower_case: bool = False,
    has_upper_case: bool = False,
    has_digit: bool = False,
    has_symbol: bool = False,
) -> GenerationRequest:
    length = validate_length(raw_length)
    return GenerationRequest.from_flags(length, has_lower_case, has_upper_case, has_digit, has_symbol)
