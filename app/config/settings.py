from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: str = ""

    max_upload_bytes: int = 8 * 1024 * 1024
    upload_field_priority: list[str] = ["file", "resume", "upload"]

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "openai"
    llm_timeout_seconds: int = 60

    llm_openai_api_key: str = ""
    llm_openai_model_name: str = "gpt-4o-mini"

    llm_openai_compatible_api_key: str = ""
    llm_openai_compatible_model_name: str = ""
    llm_openai_compatible_base_url: str = ""

    llm_openrouter_api_key: str = ""
    llm_openrouter_model_name: str = "openai/gpt-4o-mini"

    llm_groq_api_key: str = ""
    llm_groq_model_name: str = "llama-3.1-8b-instant"

    llm_together_api_key: str = ""
    llm_together_model_name: str = "meta-llama/Llama-3.3-70B-Instruct-Turbo"

    llm_deepseek_api_key: str = ""
    llm_deepseek_model_name: str = "deepseek-chat"

    llm_ollama_api_key: str = "ollama"
    llm_ollama_model_name: str = "llama3.1"

    analyze_temperature: float = 0.2
    rewrite_temperature: float = 0.5

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins parsed from the comma-separated setting."""
        return [item.strip() for item in self.cors_allow_origins.split(",") if item.strip()]
