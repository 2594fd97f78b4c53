"""Interactive console session: set up a calculator, then serve the menu."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from consolecalc.config import (
    COUNT_PROMPT,
    INVALID_OPTION_MESSAGE,
    MAX_OPERATIONS,
    MENU,
    NAME_MAX_LENGTH,
    NAME_PROMPT,
    OPERATION_LEGEND,
    OPERATIONS_PROMPT,
)
from consolecalc.core import CalculationCounter, Calculator
from consolecalc.exceptions import EndOfInputError, InvalidInputError, UnknownOperationError
from consolecalc.operations import SUPPORTED_SYMBOLS, create_operation
from consolecalc.tokens import TokenReader
from consolecalc.validators import parse_count, parse_integer

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger = logging.getLogger(__name__)

LIST_OPERATIONS, LIST_FORMAT, START_CALCULATION, EXIT = 1, 2, 3, 4


class ConsoleSession:
    """
    One run of the console calculator over a pair of text streams.

    Bad input (counts, operator symbols, menu options, operands) is reported
    and the rest of the offending line is discarded before asking again.
    Configuration and arithmetic domain errors are not handled here; they
    propagate to the caller and end the session.

    Example:
        >>> import io
        >>> session = ConsoleSession(io.StringIO("demo\\n1\\n+\\n3\\n2 + 2 =\\n4\\n"))
        >>> session.run()  # doctest: +ELLIPSIS
        Enter calculator's name: ...
        0
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO | None = None,
        counter: CalculationCounter | None = None,
    ) -> None:
        self.tokens = TokenReader(stdin)
        self.counter = counter if counter is not None else CalculationCounter()
        self._out = stdout

    def _echo(self, message: str, nl: bool = True) -> None:
        click.echo(message, file=self._out, nl=nl)

    def _reject(self, error: InvalidInputError) -> None:
        logger.info("Rejected input %r: %s", error.value, error.reason)
        self._echo(str(error))
        self.tokens.discard_line()

    def read_name(self) -> str:
        """Prompt for the calculator name (one line, at most 255 characters)."""
        self._echo(NAME_PROMPT, nl=False)
        return self.tokens.read_line(NAME_MAX_LENGTH)

    def read_operation_count(self) -> int:
        """Prompt until a count between 0 and MAX_OPERATIONS is entered."""
        while True:
            self._echo(COUNT_PROMPT, nl=False)
            try:
                return parse_count(self.tokens.next_token(), MAX_OPERATIONS)
            except InvalidInputError as e:
                self._reject(e)

    def read_operation_symbols(self, count: int) -> list[str]:
        """
        Show the operation legend and read count operator symbols.

        If any symbol is unknown the whole batch is read again.
        """
        self._echo(OPERATIONS_PROMPT)
        for line in OPERATION_LEGEND:
            self._echo(line)

        while True:
            symbols: list[str] = []
            try:
                for _ in range(count):
                    symbol = self.tokens.next_token()
                    if symbol not in SUPPORTED_SYMBOLS:
                        raise UnknownOperationError(symbol)
                    symbols.append(symbol)
            except UnknownOperationError as e:
                logger.info("Rejected operator %r", e.symbol)
                self._echo(e.message)
                continue
            finally:
                self.tokens.discard_line()
            return symbols

    def build_calculator(self, name: str, symbols: Sequence[str]) -> Calculator:
        """Create the calculator, reporting into this session's counter."""
        operations = [create_operation(symbol) for symbol in symbols]
        calculator = Calculator(name, operations, counter=self.counter)
        logger.info("Built %r", calculator)
        return calculator

    def setup(self) -> Calculator:
        """Run the interactive setup and return the configured calculator."""
        name = self.read_name()
        count = self.read_operation_count()
        symbols = self.read_operation_symbols(count)
        return self.build_calculator(name, symbols)

    def menu_loop(self, calculator: Calculator) -> None:
        """Serve the menu until the exit option is chosen."""
        while True:
            for line in MENU:
                self._echo(line)

            token = self.tokens.next_token()
            try:
                option = parse_integer(token)
            except InvalidInputError:
                option = None
            logger.debug("Menu selection %r", token)

            if option == LIST_OPERATIONS:
                calculator.list_supported_operations(self._out)
            elif option == LIST_FORMAT:
                calculator.list_input_format(self._out)
            elif option == START_CALCULATION:
                try:
                    calculator.start_calculation(self.tokens, self._out)
                except InvalidInputError as e:
                    self._reject(e)
            elif option == EXIT:
                return
            else:
                self._echo(INVALID_OPTION_MESSAGE)
                self.tokens.discard_line()

    def run(self) -> int:
        """
        Run setup and the menu loop.

        Returns:
            Exit status, 0 when the user exits or the input runs out

        Raises:
            ConfigurationError: If the calculator cannot be built
            DomainError: If a calculation step is outside its domain (e.g. 8 / 0)
        """
        try:
            calculator = self.setup()
            self.menu_loop(calculator)
        except EndOfInputError:
            logger.info("Input exhausted, ending session")
        return 0
