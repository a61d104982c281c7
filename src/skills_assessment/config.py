"""Configuration settings for the skills assessment service."""

from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    SERVICE_NAME: str = "skills-assessment"
    DEBUG: bool = False

    # LLM Provider
    LLM_TYPE: str = "anthropic"  # anthropic, openai, ollama
    LLM_ENDPOINT: str = ""  # Custom endpoint URL (for local/proxy)
    LLM_API_KEY: str = ""
    LLM_MODEL: str = "claude-sonnet-4-5-20250929"
    LLM_TEMPERATURE: float = 0.1
    LLM_MAX_TOKENS: int = 2000  # Default when a role does not set its own budget
    LLM_TIMEOUT_SECONDS: int = 120

    # LLM response logging
    LLM_LOGGING: bool = False
    LLM_LOGS_DIR: str = "logs/llm"

    # Skills reference data
    ESCO_DIR: str = str(PACKAGE_DIR / "data" / "esco")

    # Processing limits
    MAX_CV_TEXT_LENGTH: int = 8000
    MAX_FILE_SIZE_MB: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
