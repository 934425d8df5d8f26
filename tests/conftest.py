import pytest

from steamsearch.config import ENV_VARS


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Run every test against the built-in endpoint defaults."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
