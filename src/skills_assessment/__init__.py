"""CV skills assessment with LLM output recovery."""

from .errors import (
    ConfigError,
    FileError,
    LLMError,
    MissingPlaceholder,
    ResponseParseError,
    SkillsAssessmentError,
    TemplateNotFound,
    ValidationError,
)
from .llm.cleaner import clean_response
from .prompts.template import PromptTemplate, extract_template

__all__ = [
    "clean_response",
    "extract_template",
    "PromptTemplate",
    "SkillsAssessmentError",
    "TemplateNotFound",
    "MissingPlaceholder",
    "ResponseParseError",
    "ConfigError",
    "FileError",
    "LLMError",
    "ValidationError",
]
