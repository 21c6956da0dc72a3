"""
Shared fixtures for pwd_strength tests.
"""

from pathlib import Path

import pytest

from pwd_strength.blacklist import initialize_blacklist, reset_blacklist_for_testing
from pwd_strength.config import reload_config
from pwd_strength.models import CancellationToken

COMMON_PASSWORDS = ["password", "123456", "qwerty", "admin", "Correct-Horse-Battery-9Staple!"]


def write_blacklist(path: Path, passwords) -> Path:
    path.write_text("\n".join(passwords) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Start every test with default config and an empty blacklist."""
    monkeypatch.delenv("PWD_BLACKLIST_PATH", raising=False)
    monkeypatch.delenv("PWD_LAZY_INITIALIZE", raising=False)
    reload_config()
    reset_blacklist_for_testing()
    yield
    reset_blacklist_for_testing()
    reload_config()


@pytest.fixture
def blacklist_file(tmp_path):
    return write_blacklist(tmp_path / "blacklist.txt", COMMON_PASSWORDS)


@pytest.fixture
def loaded_blacklist(blacklist_file):
    initialize_blacklist(blacklist_file)
    return blacklist_file


@pytest.fixture
def make_blacklist(tmp_path):
    """Factory writing a blacklist file under tmp_path."""

    def _make(name, passwords):
        return write_blacklist(tmp_path / name, passwords)

    return _make


class CountdownToken(CancellationToken):
    """Token that turns cancelled after a fixed number of checks."""

    def __init__(self, checks):
        super().__init__()
        self.remaining = checks

    def is_cancelled(self):
        if self.remaining > 0:
            self.remaining -= 1
            return False
        return True


@pytest.fixture
def countdown_token():
    """Factory for tokens that pass ``checks`` checks and then report cancelled."""
    return CountdownToken
