from typing import ClassVar

from app.config.settings import Settings
from app.llm.client_base import BaseChatClient
from app.llm.example_client_adapter import ExampleClientAdapter
from app.llm.openai_client_adapter import OpenAIClientAdapter


class ChatClientFactory:
    """Creates the configured chat client and resolves its model name."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseChatClient:
        """Create a chat client from application settings.

        Raises:
            ValueError: for an unknown provider.
            LLMConfigurationError: when the provider has no API key.
        """
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def model_name(cls, settings: Settings) -> str:
        provider = settings.llm_provider.lower()
        if provider == "example":
            return "example"
        return str(getattr(settings, f"llm_{provider}_model_name", "") or "")

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.llm_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "llm_openai_compatible_base_url is required for "
                    "llm_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        return str(getattr(settings, f"llm_{provider}_api_key", "") or "")
