"""Calculator class holding a bounded set of operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from consolecalc.config import END_TOKEN, INPUT_FORMAT, MAX_OPERATIONS
from consolecalc.exceptions import CapacityExceededError, ConfigurationError
from consolecalc.validators import validate_non_empty

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from consolecalc.operations import Operation
    from consolecalc.tokens import TokenReader

logger = logging.getLogger(__name__)


def format_result(value: float) -> str:
    """Render a result the way C stream output does by default (``%g``)."""
    return f"{value:g}"


class CalculationCounter:
    """Number of completed calculations, shared by every calculator it is handed to."""

    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def increment(self) -> int:
        self._count += 1
        return self._count

    def __repr__(self) -> str:
        return f"CalculationCounter(count={self._count})"


class Calculator:
    """
    A named calculator supporting the operations it was built with.

    Expressions are folded strictly left to right; there is no precedence.
    Operations are stored as owned copies in insertion order, duplicates
    allowed, up to ``capacity`` entries.

    Example:
        >>> import io
        >>> from consolecalc.operations import AddOperation, SubtractOperation
        >>> from consolecalc.tokens import TokenReader
        >>> calc = Calculator("demo", [AddOperation(), SubtractOperation()])
        >>> calc.start_calculation(TokenReader(io.StringIO("10 + 5 - 3 =")))
        12
        12.0
    """

    def __init__(
        self,
        name: str,
        operations: Iterable[Operation] = (),
        counter: CalculationCounter | None = None,
        capacity: int = MAX_OPERATIONS,
    ) -> None:
        """
        Initialize a calculator.

        Args:
            name: Non-empty calculator name
            operations: Operations to support; each is cloned
            counter: Success counter to report into (a private one by default)
            capacity: Maximum number of operations

        Raises:
            ConfigurationError: If name is empty or capacity is not positive
            CapacityExceededError: If more than capacity operations are given
        """
        self._name = validate_non_empty(name, "calculator name")
        if capacity <= 0:
            raise ConfigurationError("Capacity for operations cannot be zero!", capacity)
        self._capacity = capacity
        self._counter = counter if counter is not None else CalculationCounter()
        self._operations: list[Operation] = []
        for operation in operations:
            self.add_operation(operation)

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def counter(self) -> CalculationCounter:
        return self._counter

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Supported operations in insertion order."""
        return tuple(self._operations)

    def add_operation(self, operation: Operation) -> None:
        """
        Add a copy of an operation.

        Raises:
            CapacityExceededError: If the calculator is already full
        """
        if len(self._operations) >= self._capacity:
            raise CapacityExceededError(self._capacity)
        self._operations.append(operation.clone())
        logger.debug("%s: registered %r", self._name, operation)

    def find_operation(self, symbol: str) -> Operation | None:
        """Return the first operation using symbol, or None."""
        for operation in self._operations:
            if operation.symbol == symbol:
                return operation
        return None

    def calculate(self, a: float, b: float, symbol: str) -> float:
        """
        Apply the operation registered for symbol to a and b.

        An unregistered symbol yields 0 instead of an error.
        """
        operation = self.find_operation(symbol)
        if operation is None:
            logger.debug("%s: no operation for %r, step result is 0", self._name, symbol)
            return 0.0
        result = operation.execute(a, b)
        logger.debug("%s: %s %s %s = %s", self._name, a, symbol, b, result)
        return result

    def list_supported_operations(self, out: TextIO | None = None) -> None:
        """Print ``<symbol> - <name>`` for every operation."""
        for operation in self._operations:
            click.echo(f"{operation.symbol} - {operation.name}", file=out)

    def list_input_format(self, out: TextIO | None = None) -> None:
        """Print the expected expression format."""
        for line in INPUT_FORMAT:
            click.echo(line, file=out)

    def start_calculation(self, tokens: TokenReader, out: TextIO | None = None) -> float:
        """
        Read and evaluate one expression, then print its result.

        Reads ``n1 op n2 op n3 ... =`` from tokens, folding left to right.
        The success counter is only incremented once ``=`` has been read.

        Args:
            tokens: Source of the expression tokens
            out: Stream the result is printed to (stdout by default)

        Returns:
            The result of the expression

        Raises:
            InvalidInputError: If an operand is not a number
            DomainError: If a step is outside its operation's domain
            EndOfInputError: If the input ends before ``=``
        """
        result = tokens.next_number()
        while True:
            symbol = tokens.next_token()
            if symbol == END_TOKEN:
                break
            operand = tokens.next_number()
            result = self.calculate(result, operand, symbol)

        total = self._counter.increment()
        logger.info("%s: calculation #%d finished with %s", self._name, total, result)
        click.echo(format_result(result), file=out)
        return result

    def get_number_of_successful_calculations(self) -> int:
        """Completed calculations across every calculator sharing this counter."""
        return self._counter.count

    def copy(self) -> Calculator:
        """Create an independent copy that reports into the same counter."""
        return Calculator(self._name, self._operations, self._counter, self._capacity)

    def __repr__(self) -> str:
        symbols = " ".join(operation.symbol for operation in self._operations)
        return f"Calculator(name={self._name!r}, operations=[{symbols}])"
