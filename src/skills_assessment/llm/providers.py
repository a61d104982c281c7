"""LLM providers for CV assessment - provider agnostic with PDF document support."""

import base64
import logging
from abc import ABC, abstractmethod

from ..config import settings
from ..errors import ConfigError, FileError, LLMError
from ..extractors import extract_cv_text

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Name of the model requests are sent to."""

    @abstractmethod
    def analyze_pdf(self, prompt: str, pdf_content: bytes, max_tokens: int) -> str:
        """Send the prompt together with a PDF CV and return the raw response text.

        Raises:
            LLMError: If the API call fails.
        """

    def supports_documents(self) -> bool:
        """Check if the provider reads the PDF itself.

        Providers that don't get the extracted PDF text appended to the prompt,
        so the prompt should carry the CV text instead of an attachment note.
        """
        return False


class AnthropicProvider(LLMProvider):
    """Anthropic Claude API provider, sends the CV as a native PDF document."""

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        model: str | None = None,
    ):
        from anthropic import Anthropic

        actual_key = api_key or settings.LLM_API_KEY
        actual_endpoint = endpoint or settings.LLM_ENDPOINT

        self.client = Anthropic(
            api_key=actual_key,
            base_url=actual_endpoint if actual_endpoint else None,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
        self._model = model or settings.LLM_MODEL

    @property
    def model(self) -> str:
        return self._model

    def supports_documents(self) -> bool:
        return True

    def analyze_pdf(self, prompt: str, pdf_content: bytes, max_tokens: int) -> str:
        import anthropic

        content = [
            {"type": "text", "text": prompt},
            {
                "type": "document",
                "source": {
                    "type": "base64",
                    "media_type": "application/pdf",
                    "data": base64.b64encode(pdf_content).decode("utf-8"),
                },
            },
        ]

        try:
            response = self.client.messages.create(
                model=self._model,
                max_tokens=max_tokens,
                temperature=settings.LLM_TEMPERATURE,
                messages=[{"role": "user", "content": content}],
            )
        except anthropic.APIStatusError as e:
            raise LLMError(e.status_code, str(e)) from e
        except anthropic.APIError as e:
            raise LLMError(response_body=str(e)) from e

        if not response.content:
            return ""
        return response.content[0].text


class OpenAIProvider(LLMProvider):
    """OpenAI API provider (also compatible with OpenAI-like APIs).

    Chat completions don't take PDF documents, so the CV text is extracted
    locally and appended to the prompt.
    """

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        model: str | None = None,
    ):
        from openai import OpenAI

        actual_key = api_key or settings.LLM_API_KEY
        actual_endpoint = endpoint or settings.LLM_ENDPOINT

        self.client = OpenAI(
            api_key=actual_key,
            base_url=actual_endpoint if actual_endpoint else None,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
        self._model = model or settings.LLM_MODEL

    @property
    def model(self) -> str:
        return self._model

    def build_user_prompt(self, prompt: str, pdf_content: bytes) -> str:
        try:
            cv_text = extract_cv_text(pdf_content, max_length=settings.MAX_CV_TEXT_LENGTH)
        except FileError as e:
            raise LLMError(response_body=f"Could not read CV for text-only provider: {e}") from e
        return f"{prompt}\n\n---\n{cv_text}\n---"

    def analyze_pdf(self, prompt: str, pdf_content: bytes, max_tokens: int) -> str:
        import openai

        user_prompt = self.build_user_prompt(prompt, pdf_content)
        try:
            response = self.client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": user_prompt}],
                temperature=settings.LLM_TEMPERATURE,
                max_tokens=max_tokens,
            )
        except openai.APIStatusError as e:
            raise LLMError(e.status_code, str(e)) from e
        except openai.APIError as e:
            raise LLMError(response_body=str(e)) from e

        return response.choices[0].message.content or ""


class OllamaProvider(OpenAIProvider):
    """Ollama local LLM provider (uses OpenAI-compatible API)."""

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        model: str | None = None,
    ):
        actual_endpoint = endpoint or settings.LLM_ENDPOINT or "http://localhost:11434/v1"
        # Ollama doesn't need a real key
        super().__init__(api_key="ollama", endpoint=actual_endpoint, model=model)

    def build_user_prompt(self, prompt: str, pdf_content: bytes) -> str:
        # Ollama may not support response_format, so we add JSON instruction
        user_prompt = super().build_user_prompt(prompt, pdf_content)
        return f"{user_prompt}\n\nIMPORTANT: Return ONLY valid JSON, no other text."


class LLMConfig:
    """Configuration for LLM provider, can override environment settings."""

    def __init__(
        self,
        llm_type: str | None = None,
        endpoint: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
    ):
        self.llm_type = llm_type
        self.endpoint = endpoint
        self.model = model
        self.api_key = api_key


def get_llm_provider(config: LLMConfig | None = None) -> LLMProvider:
    """Factory function to create the appropriate LLM provider.

    Args:
        config: Optional LLM configuration that overrides environment settings.
                If None, uses settings from environment variables.

    Raises:
        ConfigError: If the provider type is unknown or its API key is missing.
    """
    config = config or LLMConfig()
    llm_type = (config.llm_type or settings.LLM_TYPE).lower()

    if llm_type == "anthropic":
        if not (config.api_key or settings.LLM_API_KEY):
            raise ConfigError("LLM_API_KEY", "LLM_API_KEY is required for Anthropic")
        provider = AnthropicProvider(api_key=config.api_key, endpoint=config.endpoint, model=config.model)

    elif llm_type == "openai":
        if not (config.api_key or settings.LLM_API_KEY):
            raise ConfigError("LLM_API_KEY", "LLM_API_KEY is required for OpenAI")
        provider = OpenAIProvider(api_key=config.api_key, endpoint=config.endpoint, model=config.model)

    elif llm_type == "ollama":
        provider = OllamaProvider(endpoint=config.endpoint, model=config.model)

    else:
        raise ConfigError("LLM_TYPE", f"Unknown LLM_TYPE: {llm_type}")

    logger.info(f"Using LLM type: {llm_type}, model: {provider.model}")
    return provider
