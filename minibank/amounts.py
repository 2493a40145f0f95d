"""
Amount Handling Module

Coerces caller-supplied amounts to Decimal. NEVER does arithmetic on float:
a float is converted through its repr, so 0.1 becomes Decimal('0.1').
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .exceptions import InvalidArgumentError

AmountLike = Union[Decimal, int, float, str]

ZERO = Decimal('0')


def decimal_from_string(value: str) -> Decimal:
    """
    Convert a numeric string to Decimal

    Args:
        value: String representation of a number, surrounding whitespace allowed

    Returns:
        Decimal value, keeping the exponent written by the caller ("1.50" stays "1.50")

    Raises:
        InvalidArgumentError: If the string is empty or not a number
    """
    clean_value = value.strip()
    if not clean_value:
        raise InvalidArgumentError("Value must be a non-empty string")

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise InvalidArgumentError(f"Cannot convert '{value}' to Decimal") from None


def to_amount(value: Optional[AmountLike]) -> Optional[Decimal]:
    """
    Normalize an amount to Decimal, passing None through

    Raises:
        InvalidArgumentError: For unsupported types (bool included) and unparsable strings
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    # bool is an int subclass
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Unsupported amount type: {type(value).__name__}")
    if isinstance(value, (int, float)):
        return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    if isinstance(value, str):
        return decimal_from_string(value)
    raise InvalidArgumentError(f"Unsupported amount type: {type(value).__name__}")


def is_valid_amount(amount: Decimal) -> bool:
    """Check the amount is a finite number (not NaN or Infinity)"""
    return amount.is_finite()
