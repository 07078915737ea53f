"""Pytest configuration for integration tests.

These tests call the live TheMealDB API. They are skipped unless
RUN_INTEGRATION=true is set (in the environment or .env).
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load .env from the project root before collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)
    # Reproducible placeholder estimates
    os.environ.setdefault("ESTIMATE_SEED", "1")


@pytest.fixture(scope="session", autouse=True)
def require_integration_flag():
    """Skip the whole integration session unless explicitly enabled."""
    if os.getenv("RUN_INTEGRATION", "false").lower() not in ("true", "1", "yes"):
        pytest.skip(
            "Integration tests skipped. Set RUN_INTEGRATION=true to call the live TheMealDB API.",
            allow_module_level=True,
        )
