"""Shared pytest configuration and fixtures for all tests."""

import importlib
import shutil

import pytest

from opencmd.constants import BACKEND_ENV, BROWSER_ENV, EDITOR_ENV, LOG_LEVEL_ENV


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external programs")
    config.addinivalue_line("markers", "open: open command resolution")
    config.addinivalue_line("markers", "types: target value types")
    config.addinivalue_line("markers", "config: configuration")
    config.addinivalue_line("markers", "cli: command-line interface")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeWhich:
    """Stand-in for shutil.which that knows a fixed set of executables.

    Records every lookup so tests can assert the existence check happened.
    """

    def __init__(self, *available: str):
        self.available = set(available)
        self.calls: list[str] = []

    def __call__(self, cmd: str) -> str | None:
        self.calls.append(cmd)
        if cmd in self.available:
            return f"/usr/bin/{cmd}"
        return None


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove variables that change resolution so tests see a known environment."""
    for name in (BROWSER_ENV, EDITOR_ENV, BACKEND_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_opener():
    """Drop the cached process-wide Opener before and after each test."""
    module = importlib.import_module("opencmd.api.open._default_opener")
    module._default_opener.cache_clear()
    yield
    module._default_opener.cache_clear()


@pytest.fixture
def fake_which(monkeypatch):
    """Patch shutil.which with a FakeWhich knowing the usual openers."""
    which = FakeWhich("xdg-open", "open", "cmd", "firefox", "vim")
    monkeypatch.setattr(shutil, "which", which)
    return which


@pytest.fixture
def home_cwd(monkeypatch):
    """Pretend the current working directory is /home/u."""
    monkeypatch.setattr("os.getcwd", lambda: "/home/u")
    return "/home/u"
