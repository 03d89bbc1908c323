"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    └── unit/
        ├── domain/            # Classifier, value objects, import session
        ├── application/       # Orchestrator, commands, queries
        ├── infrastructure/    # Simulated bank, in-memory and SQLite stores
        └── presentation/      # FastAPI endpoints and Typer CLI

Environment Variables:
    RUN_SLOW=1           Run @pytest.mark.slow tests (real simulated latency)
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-slow           Run slow tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from fintrack_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that touch a real database file",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    if config.getoption("--run-all") or _env_flag("RUN_ALL_TESTS"):
        return

    run_slow = config.getoption("--run-slow") or _env_flag("RUN_SLOW")
    skip_slow = pytest.mark.skip(
        reason="Slow test - run with --run-slow or RUN_SLOW=1",
    )

    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if not run_slow and "slow" in item_markers:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def clear_settings():
    """Every test starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
