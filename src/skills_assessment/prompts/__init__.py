"""Prompt loader for skills assessment."""

import logging
from pathlib import Path

from ..errors import FileError
from .template import PromptTemplate, extract_template

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent

ROLE_IDENTIFICATION_PROMPT = "role-identification.md"


def load_prompt_document(file_name: str) -> PromptTemplate:
    """Load a markdown prompt document and extract its template.

    Args:
        file_name: Name of the markdown file in the prompts directory.

    Returns:
        The extracted PromptTemplate.

    Raises:
        FileError: If the prompt file doesn't exist.
        TemplateNotFound: If the file has no ``## Prompt Template`` section.
    """
    prompt_path = PROMPTS_DIR / file_name
    if not prompt_path.is_file():
        raise FileError(f"Prompt file not found: {prompt_path}")

    template = extract_template(prompt_path.read_text(encoding="utf-8"), source=file_name)
    logger.debug(f"Loaded prompt {file_name} with placeholders {template.placeholders}")
    return template


def prompt_file_name(prompt_key: str) -> str:
    """Map a prompt key to its file name: ``it_manager_skills`` -> ``it-manager-skills-assessment.md``."""
    return prompt_key.replace("_", "-") + "-assessment.md"


def load_prompt(prompt_key: str) -> PromptTemplate:
    """Get the assessment template for a role's prompt key."""
    return load_prompt_document(prompt_file_name(prompt_key))


def load_role_identification_prompt() -> PromptTemplate:
    """Get the template used to identify relevant roles from a CV."""
    return load_prompt_document(ROLE_IDENTIFICATION_PROMPT)


__all__ = [
    "PromptTemplate",
    "extract_template",
    "load_prompt",
    "load_prompt_document",
    "load_role_identification_prompt",
    "prompt_file_name",
]
