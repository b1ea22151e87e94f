"""Unit tests for opencmd.api.config.detect_os."""

import pytest

from opencmd.api.config.detect_os import detect_os

pytestmark = pytest.mark.config


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        ("Darwin", "darwin"),
        ("Windows", "windows"),
        ("Linux", "linux"),
        ("FreeBSD", "linux"),
        ("OpenBSD", "linux"),
    ],
)
def test_detect_os(monkeypatch, system, expected):
    monkeypatch.setattr("platform.system", lambda: system)
    assert detect_os() == expected
