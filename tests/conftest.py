"""Pytest configuration and shared fixtures."""

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
    """Provide a fresh Calculator instance."""
    from longcalc import Calculator

    return Calculator()


@pytest.fixture
def small_limit_calculator():
    """Provide a Calculator with tiny exponent limits."""
    from longcalc import Calculator

    return Calculator(max_exponent=50, warn_threshold=10)


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers as digit text."""
    return [
        "0",
        "1",
        "9",
        "10",
        "99",
        "100",
        "999",
        "1000",
        "123456789",
        "9" * 40,
        "1" + "0" * 40,
    ]
