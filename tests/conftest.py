"""Pytest configuration and shared fixtures."""

import io
import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a calculator supporting +, - and *."""
    from consolecalc import AddOperation, Calculator, MultiplyOperation, SubtractOperation

    return Calculator("basic", [AddOperation(), SubtractOperation(), MultiplyOperation()])


@pytest.fixture
def full_calculator():
    """Provide a calculator supporting every operation."""
    from consolecalc import SUPPORTED_SYMBOLS, Calculator, create_operation

    return Calculator("full", [create_operation(symbol) for symbol in SUPPORTED_SYMBOLS])


@pytest.fixture
def tokens():
    """Build a TokenReader over the given text."""
    from consolecalc import TokenReader

    def make(text: str) -> TokenReader:
        return TokenReader(io.StringIO(text))

    return make
