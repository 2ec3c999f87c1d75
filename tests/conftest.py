"""Root conftest for all tests.

Keeps FILELOGGER_* variables from the developer's shell out of the tests.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_filelogger_env(monkeypatch):
    """Remove FILELOGGER_* environment variables for the duration of each test."""
    for name in list(os.environ):
        if name.upper().startswith("FILELOGGER_"):
            monkeypatch.delenv(name)
    yield
