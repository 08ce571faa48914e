from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from haulage_planner.core.errors import CompletionError
from haulage_planner.llm.client import CompletionBackend, CompletionRequest

logger = logging.getLogger(__name__)


@dataclass
class OllamaCompletionBackend(CompletionBackend):
    """
    Completion backend using Ollama's chat API.
    Structured output is requested by passing the JSON schema as ``format``.
    """

    host: str = "http://localhost:11434"
    model: str = "llama3"
    timeout: float = 90.0

    def _build_messages(self, request: CompletionRequest) -> list[dict]:
        return [{"role": "user", "content": request.prompt}]

    def complete(self, request: CompletionRequest) -> str:
        payload = {
            "model": self.model,
            "messages": self._build_messages(request),
            "format": request.response_schema,
            "stream": False,
        }
        try:
            resp = requests.post(
                f"{self.host.rstrip('/')}/api/chat", json=payload, timeout=self.timeout
            )
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            logger.error("Ollama request failed: %s", exc)
            raise CompletionError("Ollama request failed") from exc

        content = body.get("message", {}).get("content", "")
        if not content.strip():
            raise CompletionError("Ollama returned an empty completion")
        return content
