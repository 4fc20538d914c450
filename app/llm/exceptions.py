class LLMError(Exception):
    """Raised when a chat completion cannot be obtained or used."""


class LLMConfigurationError(LLMError):
    """Raised when the configured provider is missing required settings."""


class LLMNetworkError(LLMError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
