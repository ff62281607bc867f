"""Pytest configuration and shared fixtures for result-fut tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from result_fut import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from result_fut import Err

    return Err(ValueError("test error"))

