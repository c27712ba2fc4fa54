# FILE: tests/conftest.py
"""
Pytest configuration for the bot test suite.

Configures:
- pytest-asyncio for async test support
- API key isolation so tests never read real credentials
"""
import pytest

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture(autouse=True)
def isolated_keys(monkeypatch, tmp_path):
    """Run each test from an empty directory with no API keys in the environment."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("STABILITY_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
