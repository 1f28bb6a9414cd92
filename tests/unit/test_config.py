"""
Unit tests for application settings
"""
import pytest
from pydantic import ValidationError

from artviz.core.config import Settings


class TestSettings:
    """Tests for environment-driven configuration"""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "ORCHESTRATION_STRATEGY", "STRICT_DATA_URLS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.orchestration_strategy == "single_call"
        assert settings.strict_data_urls is True
        assert settings.gemini_timeout_seconds is None
        assert settings.gemini_configured is False

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("ORCHESTRATION_STRATEGY", "Pipeline")
        monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "45")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == "env-key"
        assert settings.orchestration_strategy == "pipeline"
        assert settings.gemini_timeout_seconds == 45.0

    @pytest.mark.unit
    def test_google_api_key_alias(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_API_KEY", "google-key")

        assert Settings(_env_file=None).gemini_api_key == "google-key"

    @pytest.mark.unit
    def test_blank_key_is_not_configured(self):
        assert Settings(_env_file=None, gemini_api_key="   ").gemini_configured is False

    @pytest.mark.unit
    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError, match="orchestration_strategy"):
            Settings(_env_file=None, orchestration_strategy="three_step")

    @pytest.mark.unit
    def test_negative_max_dimension_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_image_dimension=-1)
