"""
Property-based tests for arithmetic operations using Hypothesis.

These tests verify mathematical properties that should hold for all inputs,
not just specific examples.
"""

import math

import pytest
from hypothesis import assume, example, given
from hypothesis import strategies as st

from consolecalc import (
    SUPPORTED_SYMBOLS,
    DivisionByZeroError,
    DomainError,
    add,
    create_operation,
    divide,
    multiply,
    power,
    root,
    subtract,
)

# Custom strategies for safe numbers
safe_floats = st.floats(
    min_value=-1e100,
    max_value=1e100,
    allow_nan=False,
    allow_infinity=False,
)

small_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

positive_floats = st.floats(
    min_value=1e-10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

non_zero_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
).filter(lambda x: abs(x) > 1e-10)


@pytest.mark.property
class TestAddProperties:
    """Property-based tests for addition."""

    @given(a=safe_floats, b=safe_floats)
    def test_commutativity(self, a: float, b: float):
        """add(a, b) == add(b, a)"""
        assert add(a, b) == add(b, a)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """add(a, 0) == a"""
        assert add(a, 0) == a

    @given(a=safe_floats, b=safe_floats)
    @example(a=0.1, b=0.2)  # Classic floating point case
    def test_result_finite(self, a: float, b: float):
        """Sums of moderate values stay finite."""
        assert math.isfinite(add(a, b))


@pytest.mark.property
class TestSubtractProperties:
    """Property-based tests for subtraction."""

    @given(a=safe_floats)
    def test_self_inverse(self, a: float):
        """subtract(a, a) == 0"""
        assert subtract(a, a) == 0

    @given(a=safe_floats, b=safe_floats)
    def test_relationship_to_add(self, a: float, b: float):
        """subtract(a, b) == add(a, -b)"""
        assert subtract(a, b) == add(a, -b)


@pytest.mark.property
class TestMultiplyProperties:
    """Property-based tests for multiplication."""

    @given(a=small_floats, b=small_floats)
    def test_commutativity(self, a: float, b: float):
        """multiply(a, b) == multiply(b, a)"""
        assert multiply(a, b) == multiply(b, a)

    @given(a=safe_floats)
    def test_zero_absorbing(self, a: float):
        """multiply(a, 0) == 0"""
        assert multiply(a, 0) == 0


@pytest.mark.property
class TestDivideProperties:
    """Property-based tests for division."""

    @given(a=small_floats, b=non_zero_floats)
    def test_inverse_of_multiply(self, a: float, b: float):
        """divide(multiply(a, b), b) ≈ a"""
        result = divide(multiply(a, b), b)
        assert abs(result - a) < 1e-6 * max(abs(a), 1)

    @given(a=safe_floats)
    def test_division_by_zero_raises(self, a: float):
        """Division by zero always raises."""
        with pytest.raises(DivisionByZeroError):
            divide(a, 0)


@pytest.mark.property
class TestPowerProperties:
    """Property-based tests for exponentiation."""

    @given(a=positive_floats)
    def test_zero_exponent(self, a: float):
        """power(a, 0) == 1"""
        assert power(a, 0) == 1

    @given(n=st.integers(min_value=1, max_value=10))
    def test_one_base(self, n: int):
        """power(1, n) == 1"""
        assert power(1, n) == 1

    @given(
        a=st.floats(min_value=-10, max_value=10, allow_nan=False),
        n=st.integers(min_value=0, max_value=6),
    )
    def test_integer_exponent_matches_repeated_multiplication(self, a: float, n: int):
        """power(a, n) ≈ a * a * ... * a"""
        assume(not (a == 0 and n == 0))
        expected = 1.0
        for _ in range(n):
            expected *= a
        assert abs(power(a, n) - expected) < 1e-9 * max(abs(expected), 1)


@pytest.mark.property
class TestRootProperties:
    """Property-based tests for roots."""

    @given(a=st.floats(min_value=1e-3, max_value=1e6), n=st.integers(min_value=1, max_value=8))
    def test_inverse_of_power(self, a: float, n: int):
        """root(power(a, n), n) ≈ a"""
        assert abs(root(power(a, n), n) - a) < 1e-9 * max(a, 1)

    @given(a=st.floats(min_value=1e-3, max_value=1e6), n=st.integers(min_value=2, max_value=9))
    def test_integer_root_of_negative_is_nan(self, a: float, n: int):
        """root(-a, n) is NaN for n > 1, like pow(-a, 1.0 / n)"""
        assert math.isnan(root(-a, n))

    @given(
        a=st.floats(min_value=-1e6, max_value=-1e-3),
        b=st.floats(min_value=-1e6, max_value=-1e-3),
    )
    def test_negative_root_of_negative_raises(self, a: float, b: float):
        with pytest.raises(DomainError):
            root(a, b)


@pytest.mark.property
class TestOperationDispatch:
    """Each variant delegates to its arithmetic function."""

    @given(symbol=st.sampled_from(SUPPORTED_SYMBOLS), a=positive_floats, b=positive_floats)
    def test_execute_matches_function(self, symbol: str, a: float, b: float):
        functions = {"+": add, "-": subtract, "*": multiply, "/": divide, "**": power, "V": root}
        operation = create_operation(symbol)
        assert operation.execute(a, b) == functions[symbol](a, b)
