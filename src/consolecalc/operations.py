"""
Arithmetic operations and the Operation variants that wrap them.

Arithmetic follows IEEE double semantics: overflow gives ``inf`` and
undefined real results give ``nan``. Only the documented cases (division
by zero, ``0 ** 0`` and the two negative-radicand roots) raise.
"""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod

from consolecalc.exceptions import DivisionByZeroError, DomainError, UnknownOperationError
from consolecalc.validators import validate_non_empty


def add(a: float, b: float) -> float:
    """Sum of a and b; ``inf`` when the sum overflows."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Difference a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Product of a and b; ``inf`` when the product overflows."""
    return a * b


def divide(a: float, b: float) -> float:
    """
    Quotient a / b.

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


def c_pow(base: float, exponent: float) -> float:
    """
    ``math.pow`` with C ``pow`` results where Python raises instead.

    Overflow gives a signed infinity, a zero base with a negative exponent
    gives a (signed) infinity and a negative base with a non-integer
    exponent gives ``nan``.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Raises:
        DomainError: For 0 ** 0
    """
    if base == 0 and exponent == 0:
        raise DomainError("Cannot raise 0 to the power of 0!", base, exponent)
    return c_pow(base, exponent)


def root(radicand: float, degree: float) -> float:
    """
    The degree-th root of radicand, computed as radicand ** (1 / degree).

    A zero degree takes the root with an infinite exponent and a negative
    radicand with an integer degree other than 1 gives ``nan``, as C ``pow``
    does.

    Raises:
        DomainError: If radicand is negative and degree is negative or
            not an integer
    """
    if radicand < 0 and degree < 0:
        raise DomainError("Cannot take negative root of negative number!", radicand, degree)

    if radicand < 0 and not float(degree).is_integer():
        raise DomainError("Cannot take fractional root of negative number", radicand, degree)

    exponent = math.copysign(math.inf, degree) if degree == 0 else 1 / degree
    return c_pow(radicand, exponent)


class Operation(ABC):
    """
    A named binary arithmetic operator, selected on the console by its symbol.

    Both name and symbol must be non-empty; assigning an empty value raises
    ConfigurationError.
    """

    def __init__(self, name: str, symbol: str) -> None:
        self.name = name
        self.symbol = symbol

    @property
    def name(self) -> str:
        """Display name, e.g. ``Divide``."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_non_empty(value, "operation name")

    @property
    def symbol(self) -> str:
        """Token the user types to select the operation, e.g. ``/``."""
        return self._symbol

    @symbol.setter
    def symbol(self, value: str) -> None:
        self._symbol = validate_non_empty(value, "operation symbol")

    @abstractmethod
    def execute(self, a: float, b: float) -> float:
        """Apply the operation to a and b."""

    def clone(self) -> Operation:
        """Create an independent copy carrying the same name and symbol."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, symbol={self._symbol!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return (type(self), self._name, self._symbol) == (
            type(other),
            other._name,
            other._symbol,
        )


class AddOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Add", "+")

    def execute(self, a: float, b: float) -> float:
        return add(a, b)


class SubtractOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Subtract", "-")

    def execute(self, a: float, b: float) -> float:
        return subtract(a, b)


class MultiplyOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Multiply", "*")

    def execute(self, a: float, b: float) -> float:
        return multiply(a, b)


class DivideOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Divide", "/")

    def execute(self, a: float, b: float) -> float:
        return divide(a, b)


class PowerOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Power", "**")

    def execute(self, a: float, b: float) -> float:
        return power(a, b)


class RootOperation(Operation):
    def __init__(self) -> None:
        super().__init__("Root", "V")

    def execute(self, a: float, b: float) -> float:
        return root(a, b)


# Symbol -> variant, in the order the console legend lists them
OPERATION_TYPES: dict[str, type[Operation]] = {
    "+": AddOperation,
    "-": SubtractOperation,
    "*": MultiplyOperation,
    "/": DivideOperation,
    "**": PowerOperation,
    "V": RootOperation,
}

SUPPORTED_SYMBOLS = tuple(OPERATION_TYPES)


def create_operation(symbol: str) -> Operation:
    """
    Create the operation registered for a symbol.

    Raises:
        UnknownOperationError: If no operation uses the symbol
    """
    try:
        operation_type = OPERATION_TYPES[symbol]
    except KeyError:
        raise UnknownOperationError(symbol) from None

    return operation_type()
