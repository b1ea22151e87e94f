"""Unit tests for opencmd.api.validate_output."""

import pytest

from opencmd.api.config.cmd_version import cmd_version
from opencmd.api.validate_output import validate_output


def test_validate_output_fills_defaults():
    output = validate_output(cmd_version, {"version": "0.1.0"})
    assert output == {"errors": [], "warnings": [], "version": "0.1.0"}


def test_validate_output_rejects_missing_fields():
    with pytest.raises(ValueError, match="Output validation failed for config.version"):
        validate_output(cmd_version, {"errors": []})


def test_validate_output_skips_non_api_functions():
    def cmd_other():
        pass

    assert validate_output(cmd_other, {"anything": 1}) == {"anything": 1}
