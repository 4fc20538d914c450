import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_upload_bytes(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 8 * 1024 * 1024

    def test_default_upload_field_priority(self) -> None:
        s = Settings()
        assert s.upload_field_priority == ["file", "resume", "upload"]

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_llm_timeout(self) -> None:
        s = Settings()
        assert s.llm_timeout_seconds == 60

    def test_default_temperatures(self) -> None:
        s = Settings()
        assert s.analyze_temperature == 0.2
        assert s.rewrite_temperature == 0.5


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_max_upload_bytes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "1024")
        s = Settings()
        assert s.max_upload_bytes == 1024

    def test_loads_field_priority_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOAD_FIELD_PRIORITY", '["cv", "file"]')
        s = Settings()
        assert s.upload_field_priority == ["cv", "file"]

    def test_loads_llm_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_PROVIDER", "groq")
        s = Settings()
        assert s.llm_provider == "groq"


class TestAllowedOrigins:
    def test_empty_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert Settings().allowed_origins == []

    def test_splits_and_trims(self) -> None:
        s = Settings(cors_allow_origins=" http://a.test , ,http://b.test")
        assert s.allowed_origins == ["http://a.test", "http://b.test"]


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_max_upload_bytes_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()
