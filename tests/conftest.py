"""Pytest configuration and shared fixtures for the delta2html test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def sample_delta():
    """A delta touching every group kind."""
    return {
        "ops": [
            {"insert": "Title"},
            {"insert": "\n", "attributes": {"header": 1}},
            {"insert": "Hello "},
            {"insert": "world", "attributes": {"bold": True}},
            {"insert": "\n"},
            {"insert": "one"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "two"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
            {"insert": "a1"},
            {"insert": "\n", "attributes": {"table": "row-1"}},
            {"insert": "b1"},
            {"insert": "\n", "attributes": {"table": "row-1"}},
            {"insert": {"video": "https://example.com/v.mp4"}},
            {"insert": "x = 1"},
            {"insert": "\n", "attributes": {"code-block": "python"}},
            {"insert": "y = 2"},
            {"insert": "\n", "attributes": {"code-block": "python"}},
        ]
    }
