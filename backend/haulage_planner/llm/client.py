from dataclasses import dataclass, field
from typing import Any, Dict, Protocol

from haulage_planner.core.config import Settings
from haulage_planner.core.errors import CompletionError
from haulage_planner.llm.schema import JOURNEY_RESPONSE_SCHEMA


@dataclass
class CompletionRequest:
    prompt: str
    response_schema: Dict[str, Any] = field(default_factory=lambda: JOURNEY_RESPONSE_SCHEMA)


class CompletionBackend(Protocol):
    def complete(self, request: CompletionRequest) -> str:
        ...


def build_backend(config: Settings) -> CompletionBackend:
    # Imported here so each backend can import this module for the protocol.
    from haulage_planner.llm.backends.gemini_backend import GeminiCompletionBackend
    from haulage_planner.llm.backends.ollama_backend import OllamaCompletionBackend

    provider = config.llm_provider.lower()
    if provider == "gemini":
        return GeminiCompletionBackend(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            base_url=config.gemini_base_url,
            timeout=config.llm_timeout_seconds,
        )
    if provider == "ollama":
        return OllamaCompletionBackend(
            host=config.ollama_host,
            model=config.ollama_model,
            timeout=config.llm_timeout_seconds,
        )
    raise CompletionError(f"Unknown LLM provider: {config.llm_provider}")
