from unittest.mock import MagicMock, patch

import pytest
import requests

from haulage_planner.core.config import Settings
from haulage_planner.core.errors import CompletionError
from haulage_planner.llm.backends.gemini_backend import GeminiCompletionBackend
from haulage_planner.llm.backends.ollama_backend import OllamaCompletionBackend
from haulage_planner.llm.client import CompletionRequest, build_backend


def _response(body: dict) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = body
    resp.raise_for_status.return_value = None
    return resp


def test_gemini_requests_json_with_schema():
    backend = GeminiCompletionBackend(api_key="secret", model="gemini-2.5-flash", timeout=12)
    body = {"candidates": [{"content": {"parts": [{"text": '{"journeys": '}, {"text": "[]}"}]}}]}

    with patch("haulage_planner.llm.backends.gemini_backend.requests.post", return_value=_response(body)) as post:
        text = backend.complete(CompletionRequest(prompt="plan Lagos to Kano"))

    assert text == '{"journeys": []}'
    post.assert_called_once()
    url = post.call_args.args[0]
    kwargs = post.call_args.kwargs
    assert url.endswith("/models/gemini-2.5-flash:generateContent")
    assert kwargs["headers"] == {"x-goog-api-key": "secret"}
    assert kwargs["timeout"] == 12
    config = kwargs["json"]["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["candidateCount"] == 1
    assert config["responseSchema"]["type"] == "OBJECT"
    assert kwargs["json"]["contents"][0]["parts"][0]["text"] == "plan Lagos to Kano"


def test_gemini_without_api_key_fails_before_calling():
    backend = GeminiCompletionBackend(api_key="")

    with patch("haulage_planner.llm.backends.gemini_backend.requests.post") as post:
        with pytest.raises(CompletionError):
            backend.complete(CompletionRequest(prompt="x"))

    post.assert_not_called()


def test_gemini_http_error_becomes_completion_error():
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
    backend = GeminiCompletionBackend(api_key="bad")

    with patch("haulage_planner.llm.backends.gemini_backend.requests.post", return_value=resp):
        with pytest.raises(CompletionError):
            backend.complete(CompletionRequest(prompt="x"))


@pytest.mark.parametrize(
    "body",
    [
        {"promptFeedback": {"blockReason": "SAFETY"}},
        {"candidates": [{"content": {"parts": []}, "finishReason": "MAX_TOKENS"}]},
    ],
)
def test_gemini_without_text_is_an_error(body):
    backend = GeminiCompletionBackend(api_key="secret")

    with patch("haulage_planner.llm.backends.gemini_backend.requests.post", return_value=_response(body)):
        with pytest.raises(CompletionError):
            backend.complete(CompletionRequest(prompt="x"))


def test_ollama_passes_schema_as_format():
    backend = OllamaCompletionBackend(host="http://ollama:11434/", model="llama3", timeout=30)
    body = {"message": {"role": "assistant", "content": '{"journeys": []}'}}

    with patch("haulage_planner.llm.backends.ollama_backend.requests.post", return_value=_response(body)) as post:
        text = backend.complete(CompletionRequest(prompt="plan"))

    assert text == '{"journeys": []}'
    assert post.call_args.args[0] == "http://ollama:11434/api/chat"
    payload = post.call_args.kwargs["json"]
    assert payload["stream"] is False
    assert payload["format"]["required"] == ["journeys"]
    assert payload["messages"] == [{"role": "user", "content": "plan"}]


def test_ollama_connection_error_becomes_completion_error():
    backend = OllamaCompletionBackend()

    with patch(
        "haulage_planner.llm.backends.ollama_backend.requests.post",
        side_effect=requests.ConnectionError("refused"),
    ):
        with pytest.raises(CompletionError):
            backend.complete(CompletionRequest(prompt="plan"))


def test_build_backend_selects_provider():
    assert isinstance(build_backend(Settings(llm_provider="gemini")), GeminiCompletionBackend)
    assert isinstance(build_backend(Settings(llm_provider="OLLAMA")), OllamaCompletionBackend)
    with pytest.raises(CompletionError):
        build_backend(Settings(llm_provider="mystery"))
