"""Tests for fadedmemory.core.config: configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the FADEDMEMORY_ prefix.
- The GEMINI_API_KEY / GOOGLE_API_KEY credential aliases.
- Pydantic validation constraints (port range, filter style literals, etc.).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from fadedmemory.core.config import FadedMemoryConfig

CREDENTIAL_VARS = ("FADEDMEMORY_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove credential variables so defaults are observable."""
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FADEDMEMORY_DEFAULT_SERVICE", raising=False)
    monkeypatch.delenv("FADEDMEMORY_RETRO_FILTER_STYLE", raising=False)
    monkeypatch.delenv("FADEDMEMORY_MAX_INSTRUCTION_LENGTH", raising=False)
    return monkeypatch


class TestConfigDefaults:
    """Verify that FadedMemoryConfig provides sensible defaults."""

    def test_defaults(self, clean_env):
        cfg = FadedMemoryConfig(_env_file=None)

        assert cfg.api_key is None
        assert cfg.has_api_key() is False
        assert cfg.default_service == "Gemini"
        assert cfg.gemini_model_id == "gemini-2.5-flash-image-preview"
        assert cfg.retro_filter_style == "detailed"
        assert cfg.date_stamp_year == "86"
        assert cfg.max_instruction_length == 2000
        assert cfg.fallback_mime_type == "image/png"
        assert cfg.gradio_server_port == 7860
        assert cfg.gradio_share is False


class TestEnvironmentOverrides:
    """Values are read from FADEDMEMORY_* variables."""

    def test_prefixed_variables(self, clean_env):
        clean_env.setenv("FADEDMEMORY_DEFAULT_SERVICE", "Dry-Run")
        clean_env.setenv("FADEDMEMORY_RETRO_FILTER_STYLE", "short")

        cfg = FadedMemoryConfig(_env_file=None)

        assert cfg.default_service == "Dry-Run"
        assert cfg.retro_filter_style == "short"

    @pytest.mark.parametrize("name", CREDENTIAL_VARS)
    def test_api_key_aliases(self, clean_env, name):
        clean_env.setenv(name, "secret-value")

        cfg = FadedMemoryConfig(_env_file=None)

        assert cfg.has_api_key()
        assert cfg.api_key.get_secret_value() == "secret-value"

    def test_api_key_is_masked(self, clean_env):
        cfg = FadedMemoryConfig(_env_file=None, api_key="secret-value")

        assert "secret-value" not in repr(cfg)
        assert "secret-value" not in str(cfg.model_dump())

    def test_blank_api_key_counts_as_missing(self, clean_env):
        cfg = FadedMemoryConfig(_env_file=None, api_key="   ")

        assert cfg.has_api_key() is False

    def test_env_file(self, clean_env, temp_dir):
        env_file = temp_dir / ".env"
        env_file.write_text("FADEDMEMORY_DATE_STAMP_YEAR=89\nUNRELATED_SETTING=1\n")

        cfg = FadedMemoryConfig(_env_file=env_file)

        assert cfg.date_stamp_year == "89"


class TestValidationConstraints:
    """Pydantic constraints reject bad values."""

    def test_invalid_filter_style(self, clean_env):
        with pytest.raises(PydanticValidationError):
            FadedMemoryConfig(_env_file=None, retro_filter_style="sepia")

    def test_port_out_of_range(self, clean_env):
        with pytest.raises(PydanticValidationError):
            FadedMemoryConfig(_env_file=None, gradio_server_port=80)

    def test_year_must_be_two_digits(self, clean_env):
        with pytest.raises(PydanticValidationError):
            FadedMemoryConfig(_env_file=None, date_stamp_year="1986")

    def test_fallback_mime_must_be_allowed(self, clean_env):
        with pytest.raises(PydanticValidationError):
            FadedMemoryConfig(_env_file=None, fallback_mime_type="image/gif")

    def test_instruction_limit_must_be_positive(self, clean_env):
        with pytest.raises(PydanticValidationError):
            FadedMemoryConfig(_env_file=None, max_instruction_length=0)
