"""LLM access and response recovery."""

from .cleaner import clean_response, repair_incomplete_json
from .providers import AnthropicProvider, LLMConfig, LLMProvider, OllamaProvider, OpenAIProvider, get_llm_provider
from .response_logger import log_response

__all__ = [
    "clean_response",
    "repair_incomplete_json",
    "LLMProvider",
    "AnthropicProvider",
    "OpenAIProvider",
    "OllamaProvider",
    "LLMConfig",
    "get_llm_provider",
    "log_response",
]
