"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest

from budget_ledger.budget import Budget
from budget_ledger.core import config as config_module
from budget_ledger.core.json_utils import write_json
from tests.fixtures.budget_samples import sample_budget_dict


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests never touch a real data directory
    monkeypatch.setenv("LEDGER_ENV", "test")
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "ledger_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("LEDGER_STRICT_BALANCE", raising=False)
    monkeypatch.delenv("LEDGER_CURRENCY_SYMBOL", raising=False)

    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def budget_dict() -> dict:
    """A reconciled three-account budget snapshot as a dict."""
    return sample_budget_dict()


@pytest.fixture
def budget(budget_dict) -> Budget:
    """The sample snapshot as a Budget domain model."""
    return Budget.from_dict(budget_dict)


@pytest.fixture
def budget_file(tmp_path, budget_dict) -> Path:
    """The sample snapshot written to a JSON file."""
    path = tmp_path / "budget.json"
    write_json(path, budget_dict)
    return path


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "transfers: Tests for net positions and transfer matching")
    config.addinivalue_line("markers", "todo: Tests for todo list generation")
