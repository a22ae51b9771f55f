"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_normalization_mode,
    get_strict_links,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("LAYLDER_NORMALIZATION_MODE", raising=False)
        assert get_environment(EnvVar.NORMALIZATION_MODE) == "independent"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("LAYLDER_NORMALIZATION_MODE", "independent")
        result = get_environment(EnvVar.NORMALIZATION_MODE, override="inherit")
        assert result == "inherit"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("LAYLDER_NORMALIZATION_MODE", "inherit")
        assert get_environment(EnvVar.NORMALIZATION_MODE) == "inherit"

    @pytest.mark.unit
    def test_choices_are_case_insensitive(self, monkeypatch):
        """Choice values are matched case-insensitively and canonicalized."""
        monkeypatch.setenv("LAYLDER_LOG_LEVEL", "debug")
        assert get_environment(EnvVar.LOG_LEVEL) == "DEBUG"

    @pytest.mark.unit
    def test_unknown_choice_returns_default(self, monkeypatch):
        """Values outside the declared choices fall back to the default."""
        monkeypatch.setenv("LAYLDER_NORMALIZATION_MODE", "cascade")
        assert get_environment(EnvVar.NORMALIZATION_MODE) == "independent"

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("LAYLDER_STRICT_LINKS", value)
            assert get_environment(EnvVar.STRICT_LINKS) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("LAYLDER_STRICT_LINKS", value)
            assert get_environment(EnvVar.STRICT_LINKS) is False

    @pytest.mark.unit
    def test_invalid_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean strings return the default."""
        monkeypatch.setenv("LAYLDER_STRICT_LINKS", "maybe")
        assert get_environment(EnvVar.STRICT_LINKS) is False


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.NORMALIZATION_MODE)
        assert isinstance(info, EnvConfig)
        assert info.name == "LAYLDER_NORMALIZATION_MODE"
        assert info.default == "independent"
        assert info.var_type is str
        assert info.category == "engine"
        assert info.choices == ("independent", "inherit")

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated for every variable."""
        for var in EnvVar:
            assert get_environment_info(var).description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_lists_all(self):
        """No category returns every variable."""
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter returns only matching variables."""
        logging_vars = list_environment_variables("logging")
        assert logging_vars == [EnvVar.LOG_LEVEL]

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown categories return an empty list."""
        assert list_environment_variables("nope") == []


class TestConvenienceFunctions:
    """Tests for convenience getters."""

    @pytest.mark.unit
    def test_normalization_mode(self, monkeypatch):
        """Normalization mode honours override and environment."""
        monkeypatch.delenv("LAYLDER_NORMALIZATION_MODE", raising=False)
        assert get_normalization_mode() == "independent"
        assert get_normalization_mode("inherit") == "inherit"

    @pytest.mark.unit
    def test_log_level(self, monkeypatch):
        """Log level defaults to INFO."""
        monkeypatch.delenv("LAYLDER_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.unit
    def test_strict_links(self, monkeypatch):
        """Strict link lookups default to False."""
        monkeypatch.delenv("LAYLDER_STRICT_LINKS", raising=False)
        assert get_strict_links() is False
        assert get_strict_links(True) is True
