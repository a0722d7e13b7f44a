"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import date_tasks...' works, and
pins the local timezone to UTC so results do not depend on the host machine.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from date_tasks.config.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def utc_local_timezone(monkeypatch):
    """Run every test with DATE_TASKS_LOCAL_TIMEZONE=UTC and fresh settings."""
    monkeypatch.setenv("DATE_TASKS_LOCAL_TIMEZONE", "UTC")
    monkeypatch.delenv("DATE_TASKS_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
