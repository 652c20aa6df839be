"""Pytest configuration and fixtures for integration tests.

Ensures environment variables are loaded and skips the suite when no
OpenRouter key is configured.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load .env before collection and print which endpoint will be hit."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)

    print("\n" + "=" * 70)
    print("Note: These tests require a valid OPENROUTER_API_KEY")
    print(f"Environment loaded from: {env_path}")
    print(f"Model: {os.getenv('OPENROUTER_MODEL', 'google/gemma-3n-e4b-it:free')}")
    print("=" * 70 + "\n")


@pytest.fixture(scope="session", autouse=True)
def check_api_keys():
    """Skip integration tests when OPENROUTER_API_KEY is not set."""
    if not os.getenv("OPENROUTER_API_KEY"):
        pytest.skip(
            "Integration tests skipped. Missing API key: OPENROUTER_API_KEY. Please set it in your .env file.",
            allow_module_level=True,
        )
