"""Pytest configuration to make the project root importable and isolate shared state.

``import core`` and similar absolute imports work when tests are run from the
repository root or other locations.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.config import Settings  # noqa: E402
from core.login import LoginGate, get_login_gate  # noqa: E402


@pytest.fixture(autouse=True)
def reset_global_login_gate():
    get_login_gate().reset()
    yield
    get_login_gate().reset()


@pytest.fixture
def gate() -> LoginGate:
    return LoginGate()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        server_endpoint="api.example.test",
        server_endpoint_ssl=True,
        network_error_message="Network down",
        _env_file=None,
    )
