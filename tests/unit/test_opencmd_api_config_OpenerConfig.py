"""Unit tests for opencmd.api.config.OpenerConfig."""

import pytest
from pydantic import ValidationError

from opencmd.api.config.OpenerConfig import OpenerConfig
from opencmd.constants import BACKEND_ENV, LOG_LEVEL_ENV

pytestmark = pytest.mark.config


def test_defaults(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Darwin")
    config = OpenerConfig()
    assert config.type == "darwin"
    assert config.browser_env == "BROWSER"
    assert config.editor_env == "EDITOR"
    assert config.log_level == "WARN"


def test_unknown_backend_raises():
    with pytest.raises(ValidationError, match="Unknown backend type"):
        OpenerConfig(type="plan9")


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        OpenerConfig(type="linux", shell="bash")  # type: ignore[call-arg]


def test_empty_variable_name_rejected():
    with pytest.raises(ValidationError):
        OpenerConfig(type="linux", browser_env="")


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        OpenerConfig(type="linux", log_level="TRACE")  # type: ignore[arg-type]


def test_config_is_frozen():
    config = OpenerConfig(type="linux")
    with pytest.raises(ValidationError):
        config.type = "darwin"


class TestFromEnv:
    def test_from_env_backend_and_level(self):
        config = OpenerConfig.from_env({BACKEND_ENV: "Windows", LOG_LEVEL_ENV: "debug"})
        assert config.type == "windows"
        assert config.log_level == "DEBUG"

    def test_from_env_empty_uses_detection(self, monkeypatch):
        monkeypatch.setattr("platform.system", lambda: "Linux")
        config = OpenerConfig.from_env({BACKEND_ENV: ""})
        assert config.type == "linux"
        assert config.log_level == "WARN"

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(BACKEND_ENV, "darwin")
        assert OpenerConfig.from_env().type == "darwin"

    def test_from_env_invalid_backend(self):
        with pytest.raises(ValidationError):
            OpenerConfig.from_env({BACKEND_ENV: "amiga"})
