"""Unit tests for the module-level open, open_browser and open_editor."""

import importlib

import pytest

import opencmd
from opencmd.api.errors import NotFoundError
from opencmd.constants import BACKEND_ENV, BROWSER_ENV, EDITOR_ENV

pytestmark = pytest.mark.open


@pytest.fixture
def linux_backend(monkeypatch, fake_which):
    monkeypatch.setenv(BACKEND_ENV, "linux")
    return fake_which


def test_open(linux_backend):
    spec = opencmd.open("https://example.com/x")
    assert spec.program == "xdg-open"
    assert spec.args == ("https://example.com/x",)


def test_open_browser(monkeypatch, linux_backend):
    monkeypatch.setenv(BROWSER_ENV, "firefox")
    assert opencmd.open_browser("/tmp/report.pdf").argv == ["firefox", "/tmp/report.pdf"]


def test_open_browser_unset(linux_backend):
    assert opencmd.open_browser("https://example.com/x").program == "xdg-open"


def test_open_editor(monkeypatch, linux_backend):
    monkeypatch.setenv(EDITOR_ENV, "vim")
    assert opencmd.open_editor("notes.txt").argv == ["vim", "notes.txt"]


def test_open_editor_missing_program(monkeypatch, linux_backend):
    monkeypatch.setenv(EDITOR_ENV, "nosuch-editor")
    with pytest.raises(NotFoundError):
        opencmd.open_editor("notes.txt")


def test_default_opener_is_built_once(linux_backend):
    module = importlib.import_module("opencmd.api.open._default_opener")
    first = module._default_opener()
    assert module._default_opener() is first
    assert first.backend == "linux"
