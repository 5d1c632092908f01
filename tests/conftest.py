"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvtable...' works, and
keeps the settings singleton from leaking between tests.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop cached settings and CSVTABLE_* variables around every test."""
    for name in [
        "CSVTABLE_STORE",
        "CSVTABLE_ROOT_DIR",
        "CSVTABLE_ENCODING",
        "CSVTABLE_HTTP_BASE_URL",
        "CSVTABLE_HTTP_TOKEN",
        "CSVTABLE_HTTP_TIMEOUT_SECONDS",
        "CSVTABLE_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
