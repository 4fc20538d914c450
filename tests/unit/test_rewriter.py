"""Tests for the BulletRewriter."""

import json
from unittest.mock import MagicMock

import pytest

from app.tailoring.exceptions import TailoringError
from app.tailoring.rewriter import BulletRewriter


def _make_rewriter(content: str) -> tuple[BulletRewriter, MagicMock]:
    client = MagicMock()
    client.create_chat_completion.return_value = content
    return BulletRewriter(client=client, model="test-model"), client


class TestRewrite:
    def test_returns_cleaned_bullets(self) -> None:
        rewriter, _client = _make_rewriter(
            json.dumps({"bullets": ["- Cut latency 40%", "• Led 5 engineers"]})
        )
        result = rewriter.rewrite("resume", "jd")
        assert result.bullets == ["Cut latency 40%", "Led 5 engineers"]

    def test_uses_rewrite_temperature(self) -> None:
        rewriter, client = _make_rewriter(json.dumps({"bullets": ["a"]}))
        rewriter.rewrite("resume", "jd")
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 0.5

    def test_falls_back_to_raw_lines(self) -> None:
        rewriter, _client = _make_rewriter("- first\n- second")
        assert rewriter.rewrite("resume", "jd").bullets == ["first", "second"]

    def test_raises_when_no_bullets(self) -> None:
        rewriter, _client = _make_rewriter(json.dumps({"bullets": ["-", "  "]}))
        with pytest.raises(TailoringError, match="no bullets"):
            rewriter.rewrite("resume", "jd")
