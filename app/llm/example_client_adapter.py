"""Offline chat client.

Use this module as a reference when implementing new provider adapters.
Implement BaseChatClient and register the provider in ChatClientFactory.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseChatClient


class ExampleClientAdapter(BaseChatClient):
    """Returns a fixed JSON document that satisfies both tailoring prompts.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "analysis": "The resume covers the core requirements of the role.",
        "topTerms": ["Python", "APIs", "Testing"],
        "missingTerms": ["Kubernetes"],
        "suggestions": ["Quantify the impact of recent projects."],
        "bullets": [
            "Built and maintained Python APIs serving production traffic.",
            "Raised automated test coverage across core services.",
        ],
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self._response)
