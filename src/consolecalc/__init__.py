"""
Console calculator with a bounded, user selected set of operations.

Expressions of the form ``n1 op n2 op n3 ... =`` are evaluated strictly
left to right using whichever operations the calculator was built with.
"""

from consolecalc.core import CalculationCounter, Calculator
from consolecalc.exceptions import (
    CalculatorError,
    CapacityExceededError,
    ConfigurationError,
    DivisionByZeroError,
    DomainError,
    EndOfInputError,
    InvalidInputError,
    OutOfRangeError,
    UnknownOperationError,
)
from consolecalc.operations import (
    OPERATION_TYPES,
    SUPPORTED_SYMBOLS,
    AddOperation,
    DivideOperation,
    MultiplyOperation,
    Operation,
    PowerOperation,
    RootOperation,
    SubtractOperation,
    add,
    c_pow,
    create_operation,
    divide,
    multiply,
    power,
    root,
    subtract,
)
from consolecalc.tokens import TokenReader
from consolecalc.validators import (
    parse_count,
    parse_integer,
    parse_number,
    validate_non_empty,
)

__all__ = [
    "OPERATION_TYPES",
    "SUPPORTED_SYMBOLS",
    "AddOperation",
    "CalculationCounter",
    "Calculator",
    "CalculatorError",
    "CapacityExceededError",
    "ConfigurationError",
    "DivideOperation",
    "DivisionByZeroError",
    "DomainError",
    "EndOfInputError",
    "InvalidInputError",
    "MultiplyOperation",
    "Operation",
    "OutOfRangeError",
    "PowerOperation",
    "RootOperation",
    "SubtractOperation",
    "TokenReader",
    "UnknownOperationError",
    "add",
    "c_pow",
    "create_operation",
    "divide",
    "multiply",
    "parse_count",
    "parse_integer",
    "parse_number",
    "power",
    "root",
    "subtract",
    "validate_non_empty",
]

__version__ = "0.1.0"
