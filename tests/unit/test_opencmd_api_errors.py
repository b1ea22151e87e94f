"""Unit tests for opencmd.api.errors."""

from pathlib import Path

import pytest

from opencmd.api.errors import FileToURIError, NotFoundError, OpenError, OpenIOError


def test_file_to_uri_error():
    error = FileToURIError(Path("b.txt"))
    assert isinstance(error, OpenError)
    assert error.path == Path("b.txt")
    assert str(error) == "could not convert file path to URI: 'b.txt'"


def test_open_io_error_wraps_os_error():
    cause = PermissionError(13, "Permission denied")
    error = OpenIOError(cause)
    assert isinstance(error, OpenError)
    assert error.error is cause
    assert str(error) == f"I/O error occurred: {cause}"


def test_not_found_error():
    error = NotFoundError("xdg-open", "cannot find binary path")
    assert isinstance(error, OpenError)
    assert error.exe == "xdg-open"
    assert error.error == "cannot find binary path"
    assert str(error) == "executable xdg-open not found: cannot find binary path"


def test_errors_are_catchable_as_open_error():
    with pytest.raises(OpenError):
        raise NotFoundError("open", "cannot find binary path")
