"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (no bank access)
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   ├── presentation/
    │   └── tanflow_config/
    └── shared/                # Shared fakes and fixtures
"""

import pytest

from tanflow_config import clear_settings_cache


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep tests away from real .env files and session state."""
    monkeypatch.setenv("TANFLOW_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setenv("SESSION_FILE", str(tmp_path / "session"))
    clear_settings_cache()
    yield
    clear_settings_cache()
