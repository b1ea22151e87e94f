"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

from tests.conftest import FakeWhich, run_cmd

__all__ = [
    "FakeWhich",
    "run_cmd",
]
