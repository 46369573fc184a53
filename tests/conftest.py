"""
Pytest configuration and shared fixtures for precheck tests.
"""
import pytest


class CallCounter:
    """Zero-argument predicate that records how often it is called."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.result


class CustomError(Exception):
    """Caller-defined exception unrelated to the precheck hierarchy."""


# Includes non-ASCII white-space accepted by str.isspace()
BLANK_TEXTS = ["", " ", "   ", "\t", "\n", "\r\n", " \t\n ", "\u00a0", "\u2003"]
NON_BLANK_TEXTS = ["a", " a ", "\tx\n", "0", "None", "title"]


@pytest.fixture
def custom_error():
    """A caller-supplied exception instance."""
    return CustomError("caller-supplied failure")


@pytest.fixture
def passing_predicate():
    """Predicate reporting a satisfied precondition."""
    return CallCounter(False)


@pytest.fixture
def failing_predicate():
    """Predicate reporting a violated precondition."""
    return CallCounter(True)
