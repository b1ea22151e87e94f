"""Unit tests for opencmd.api.types.is_uri."""

from pathlib import Path

import pytest

from opencmd.api.types.is_uri import is_uri

pytestmark = pytest.mark.types


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com/x",
        "http://localhost:8000/index.html",
        "mailto:someone@example.com",
        "file:///tmp/report.pdf",
        "ssh://host:22/path",
        "myapp://do/thing",
        "foo:bar",
    ],
)
def test_is_uri_accepts(value):
    """Test that absolute URIs of any scheme are accepted."""
    assert is_uri(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "/tmp/report.pdf",
        "relative/path.txt",
        "./a/../b.txt",
        "README.md",
        "C:\\Users\\me\\file.txt",
        "C:/Users/me/file.txt",
        "https://example.com/a b",
        "https://example.com/<tag>",
        "http://",
        "https:no-host",
        "http:foo",
        "http://host:notaport/",
    ],
)
def test_is_uri_rejects(value):
    """Test that paths and malformed URIs are rejected."""
    assert is_uri(value) is False


def test_is_uri_path_object_is_never_uri():
    """Test that Path objects are not URIs even if they look like one."""
    assert is_uri(Path("https://example.com")) is False
