"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from findr.config.constants import DEFAULT_MAX_WORKERS, ENV_VAR_DEFINITIONS
from findr.config.settings import (
    FinderSettings,
    get_env_var,
    load_settings,
    validate_all_env_vars,
    validate_env_var,
)
from findr.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VAR_DEFINITIONS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.root == Path(".")
        assert settings.debounce_seconds == 0.0
        assert settings.max_workers == DEFAULT_MAX_WORKERS
        assert settings.log_level == "INFO"

    def test_reads_environment(self, clean_env, tmp_path):
        clean_env.setenv("FINDR_DEBOUNCE_MS", "150")
        clean_env.setenv("FINDR_MAX_WORKERS", "2")
        clean_env.setenv("FINDR_LOG_LEVEL", "debug")
        clean_env.setenv("FINDR_LOG_DIR", str(tmp_path))

        settings = load_settings()

        assert settings.debounce_seconds == 0.15
        assert settings.max_workers == 2
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == tmp_path

    @pytest.mark.parametrize("value", ["0", "abc", "-3"])
    def test_invalid_worker_count(self, clean_env, value):
        clean_env.setenv("FINDR_MAX_WORKERS", value)
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        assert exc_info.value.context["setting"] == "FINDR_MAX_WORKERS"

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("FINDR_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError):
            load_settings()


class TestOverrides:
    def test_cli_values_win(self):
        settings = FinderSettings(debounce_seconds=0.5).with_overrides(
            root=Path("/srv"), debounce_ms=20, verbose=True
        )
        assert settings.root == Path("/srv")
        assert settings.debounce_seconds == 0.02
        assert settings.log_level == "DEBUG"

    def test_no_overrides_keeps_values(self):
        base = FinderSettings(debounce_seconds=0.5)
        assert base.with_overrides() == base

    def test_negative_debounce_rejected(self):
        with pytest.raises(ConfigurationError):
            FinderSettings().with_overrides(debounce_ms=-1)


class TestValidation:
    def test_unknown_or_unset_is_valid(self):
        assert validate_env_var("SOMETHING_ELSE", "x") == (True, None)
        assert validate_env_var("FINDR_MAX_WORKERS", None) == (True, None)

    def test_valid_values_are_case_insensitive(self):
        assert validate_env_var("FINDR_LOG_LEVEL", "warning")[0]

    def test_validate_all_collects_errors(self, clean_env):
        clean_env.setenv("FINDR_DEBOUNCE_MS", "soon")
        clean_env.setenv("FINDR_LOG_LEVEL", "LOUD")
        errors = validate_all_env_vars()
        assert len(errors) == 2
        assert any("FINDR_DEBOUNCE_MS" in e for e in errors)

    def test_get_env_var_returns_default_when_unset(self, clean_env):
        assert get_env_var("FINDR_MAX_WORKERS") == str(DEFAULT_MAX_WORKERS)

    def test_get_env_var_without_validation(self, clean_env):
        clean_env.setenv("FINDR_LOG_LEVEL", "LOUD")
        assert get_env_var("FINDR_LOG_LEVEL", validate=False) == "LOUD"
