"""
Token Estimator Test Configuration
==================================

This file contains common fixtures and configuration for the test suite.

Test Verification Strategy
-------------------------
1. Unit Tests:
   - Test the heuristics, the encoding cache and the estimator in isolation
   - Replace tiktoken table loading with a fake encoding so no download happens

2. Command Tests:
   - Drive the click commands through CliRunner
   - Verify output format and error handling

The fake encoding counts whitespace-separated words as tokens and, like
tiktoken, rejects text containing the <|endoftext|> special token.
"""

import pytest
from unittest.mock import patch
from tenacity import wait_none

from token_estimator.estimation import encodings


class FakeEncoding:
    """Stand-in for tiktoken.Encoding: one token per word."""

    def __init__(self, name):
        self.name = name

    def encode(self, text):
        if '<|endoftext|>' in text:
            raise ValueError("Encountered text corresponding to disallowed special token '<|endoftext|>'.")
        return list(range(len(text.split())))


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def fake_get_encoding():
    """Patch tiktoken table loading with FakeEncoding."""
    with patch('tiktoken.get_encoding', side_effect=FakeEncoding) as mock:
        yield mock


@pytest.fixture(autouse=True)
def isolated_estimator(monkeypatch, fake_get_encoding):
    """Start every test with an empty cache, default settings and no retry delay."""
    for var in ('TOKEN_ESTIMATOR_MODEL', 'TOKEN_ESTIMATOR_REPEAT_THRESHOLD', 'TOKEN_ESTIMATOR_LOAD_ATTEMPTS'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(encodings, '_LOAD_WAIT', wait_none())
    encodings.clear_cache()
    yield
    encodings.clear_cache()


@pytest.fixture
def fake_encoding():
    """Return the FakeEncoding class for tests that build their own side effects."""
    return FakeEncoding
