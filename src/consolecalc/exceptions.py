"""Custom exceptions for the console calculator."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class ConfigurationError(CalculatorError):
    """Raised when a calculator or operation is set up with invalid values."""


class UnknownOperationError(ConfigurationError):
    """Raised when no operation is registered for a symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__("Invalid operator!", symbol)
        self.symbol = symbol


class CapacityExceededError(ConfigurationError):
    """Raised when a calculator has no free operation slot left."""

    def __init__(self, capacity: int) -> None:
        super().__init__("Capacity for operations exceeded!")
        self.capacity = capacity


class DomainError(CalculatorError):
    """Raised when operands fall outside an operation's domain."""

    def __init__(self, message: str, *operands: float) -> None:
        super().__init__(message)
        self.operands = operands


class DivisionByZeroError(DomainError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Cannot divide by zero!", numerator, 0)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """Raised when console input is not what the prompt expects."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason

    def __str__(self) -> str:
        # Shown to the console user as-is, so the offending token is left out.
        return self.reason


class OutOfRangeError(InvalidInputError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self,
        value: float,
        min_val: float | None = None,
        max_val: float | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(value, reason or f"Value out of range [{min_val}, {max_val}]")
        self.min_val = min_val
        self.max_val = max_val


class EndOfInputError(CalculatorError):
    """Raised when the input stream runs out while a token is expected."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")
