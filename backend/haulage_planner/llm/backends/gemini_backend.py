from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from haulage_planner.core.errors import CompletionError
from haulage_planner.llm.client import CompletionBackend, CompletionRequest
from haulage_planner.llm.schema import to_gemini_schema

logger = logging.getLogger(__name__)


@dataclass
class GeminiCompletionBackend(CompletionBackend):
    """
    Completion backend using the Gemini ``generateContent`` REST endpoint.
    The response schema is passed as ``responseSchema`` so the model answers
    with JSON only.
    """

    api_key: str
    model: str = "gemini-2.5-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = 90.0

    def _build_payload(self, request: CompletionRequest) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": request.prompt}]}],
            "generationConfig": {
                "candidateCount": 1,
                "responseMimeType": "application/json",
                "responseSchema": to_gemini_schema(request.response_schema),
            },
        }

    def complete(self, request: CompletionRequest) -> str:
        if not self.api_key:
            raise CompletionError("GEMINI_API_KEY is not configured")

        url = f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"
        try:
            resp = requests.post(
                url,
                json=self._build_payload(request),
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            logger.error("Gemini request failed: %s", exc)
            raise CompletionError("Gemini request failed") from exc

        return self._extract_text(body)

    @staticmethod
    def _extract_text(body: dict) -> str:
        candidates = body.get("candidates") or []
        if not candidates:
            feedback = body.get("promptFeedback", {})
            raise CompletionError(f"Gemini returned no candidates: {feedback}")
        parts = candidates[0].get("content", {}).get("parts", [])
        text = "".join(part.get("text", "") for part in parts)
        if not text.strip():
            reason = candidates[0].get("finishReason")
            raise CompletionError(f"Gemini returned an empty completion (finishReason={reason})")
        return text
