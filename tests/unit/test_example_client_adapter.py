"""Tests for ExampleClientAdapter (offline reference adapter)."""

import json

from app.llm.example_client_adapter import ExampleClientAdapter


class TestExampleClientAdapter:
    def test_returns_fields_for_both_prompts(self) -> None:
        adapter = ExampleClientAdapter()
        data = json.loads(
            adapter.create_chat_completion(
                model="any",
                temperature=0.0,
                system_prompt="sys",
                user_prompt="user",
            )
        )
        assert {"analysis", "topTerms", "missingTerms", "suggestions", "bullets"} <= set(data)
        assert data["bullets"]

    def test_custom_response(self) -> None:
        adapter = ExampleClientAdapter(response={"bullets": ["one"]})
        result = adapter.create_chat_completion(
            model="x", temperature=0.1, system_prompt="", user_prompt=""
        )
        assert json.loads(result) == {"bullets": ["one"]}

    def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.create_chat_completion(
            model="a", temperature=0.0, system_prompt="s1", user_prompt="u1"
        )
        r2 = adapter.create_chat_completion(
            model="b", temperature=1.0, system_prompt="s2", user_prompt="u2"
        )
        assert r1 == r2
