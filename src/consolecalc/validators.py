"""Validation of names and conversion of console tokens."""

import math
import re

from consolecalc.config import NOT_A_NUMBER_MESSAGE
from consolecalc.exceptions import ConfigurationError, InvalidInputError, OutOfRangeError

# Spellings a C++ input stream accepts; Python's own extras such as "1_0",
# "inf" or "nan" are rejected.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def validate_non_empty(value: str, what: str) -> str:
    """
    Validate that a name or symbol is a non-empty string.

    Args:
        value: The string to validate
        what: Human readable name of the field, used in the error message

    Returns:
        The validated value

    Raises:
        ConfigurationError: If value is empty or not a string
    """
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Invalid {what}!")

    return value


def parse_number(token: str) -> float:
    """
    Convert a console token to a finite float.

    Raises:
        InvalidInputError: If the token is not a decimal number, or is too
            large to be represented
    """
    if not NUMBER_PATTERN.fullmatch(token):
        raise InvalidInputError(token, NOT_A_NUMBER_MESSAGE)

    number = float(token)
    if math.isinf(number):
        raise InvalidInputError(token, NOT_A_NUMBER_MESSAGE)
    return number


def parse_integer(token: str) -> int:
    """Convert a console token made of an optional sign and digits to an int."""
    if not INTEGER_PATTERN.fullmatch(token):
        raise InvalidInputError(token, NOT_A_NUMBER_MESSAGE)
    return int(token)


def parse_count(token: str, maximum: int) -> int:
    """
    Convert a console token to a count between 0 and maximum.

    Raises:
        InvalidInputError: If the token is not a non-negative integer
        OutOfRangeError: If the count is larger than maximum
    """
    count = parse_integer(token)
    if count < 0:
        raise InvalidInputError(token, NOT_A_NUMBER_MESSAGE)
    if count > maximum:
        raise OutOfRangeError(
            count, 0, maximum, reason=f"Exceeded operator capacity of {maximum}!"
        )
    return count
