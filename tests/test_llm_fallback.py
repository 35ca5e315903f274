import json

import httpx
import pytest

from foxyapply.reasoning.llm_fallback import LLMConfig, LLMFallback, resolve_llm_config


def test_local_url_wins():
    cfg = resolve_llm_config({"LLM_URL": "http://127.0.0.1:8080/v1/", "OPENAI_API_KEY": "o-key"})
    assert cfg.base_url == "http://127.0.0.1:8080/v1"
    assert cfg.model == "local-model"
    assert cfg.api_key == ""


def test_openai_key_with_model_override():
    cfg = resolve_llm_config({"OPENAI_API_KEY": "o-key", "LLM_MODEL": "gpt-4o"})
    assert cfg == LLMConfig(base_url="https://api.openai.com/v1", model="gpt-4o", api_key="o-key")


def test_missing_everything_raises_clear_error():
    with pytest.raises(RuntimeError, match="No LLM endpoint configured"):
        resolve_llm_config({})


def _client(reply, captured):
    def handler(request):
        captured.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": reply}}]})

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fallback_returns_first_line(profile):
    captured = []
    fallback = LLMFallback(LLMConfig("http://llm.local/v1", "m", "k"), profile, client=_client('"Django"\nBecause...', captured))

    assert fallback("Favorite framework", "text") == "Django"

    request = captured[0]
    assert str(request.url) == "http://llm.local/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer k"
    body = json.loads(request.content)
    assert body["model"] == "m"
    assert "Favorite framework" in body["messages"][1]["content"]


def test_fallback_http_error_raises(profile):
    def handler(request):
        return httpx.Response(500, json={"error": "boom"})

    fallback = LLMFallback(LLMConfig("http://llm.local/v1", "m", ""), profile, client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(httpx.HTTPStatusError):
        fallback("Favorite framework", "text")
