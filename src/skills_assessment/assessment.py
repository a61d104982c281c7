"""CV skills assessment: prompt building, LLM call and response decoding."""

import json
import logging
import math
import re
from typing import Any

from .esco import load_esco_skills
from .errors import ResponseParseError, ValidationError
from .llm import LLMProvider, clean_response, get_llm_provider, log_response
from .prompts import load_prompt, load_role_identification_prompt
from .roles import RoleConfig, get_role_config, valid_roles
from .schemas import AssessmentSummary

logger = logging.getLogger(__name__)

PDF_ATTACHMENT_NOTE = "[CV content will be provided as PDF attachment]"
TEXT_ATTACHMENT_NOTE = "[CV content is provided after this prompt]"

ROLE_IDENTIFICATION_MAX_TOKENS = 2000

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _finite_float(literal: str) -> float | None:
    # 1e999 overflows to inf, which JSON cannot carry
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_response(raw_response: str | None) -> dict[str, Any]:
    """
    Recover and decode the JSON object in an LLM response.

    Raises:
        ResponseParseError: If the recovered text is not a JSON object.
    """
    cleaned = clean_response(raw_response)
    try:
        data = json.loads(cleaned, parse_float=_finite_float, parse_constant=lambda name: None)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON. First 500 chars: {cleaned[:500]}")
        raise ResponseParseError(raw_response, e) from e

    if not isinstance(data, dict):
        raise ResponseParseError(raw_response, message=f"Expected a JSON object, got {type(data).__name__}")
    return data


def _cv_text_note(provider: LLMProvider) -> str:
    return PDF_ATTACHMENT_NOTE if provider.supports_documents() else TEXT_ATTACHMENT_NOTE


def build_assessment_prompt(role_config: RoleConfig, cv_text: str) -> str:
    """Fill the role's assessment template. ``esco_skills`` is always supplied, even when empty."""
    template = load_prompt(role_config.prompt_key)
    return template.substitute(cv_text=cv_text, esco_skills=load_esco_skills(role_config.role))


def build_role_identification_prompt(cv_text: str) -> str:
    roles_list = "\n".join(f"- {role}" for role in valid_roles())
    return load_role_identification_prompt().substitute(roles_list=roles_list, cv_text=cv_text)


def _call_llm(provider: LLMProvider, prompt: str, pdf_content: bytes, max_tokens: int, filename: str | None) -> str:
    if not pdf_content:
        raise ValidationError("cv_file", message="CV file is empty")

    logger.info(f"Sending {len(pdf_content)} byte CV to {provider.model} (max_tokens={max_tokens})")
    try:
        raw_response = provider.analyze_pdf(prompt, pdf_content, max_tokens)
    except Exception:
        log_response(None, prompt, provider.model, max_tokens, filename)
        raise

    log_response(raw_response, prompt, provider.model, max_tokens, filename)
    logger.debug(f"LLM response: {raw_response[:500]}...")
    return raw_response


def assess_cv(
    role: str,
    pdf_content: bytes,
    filename: str | None = None,
    provider: LLMProvider | None = None,
) -> dict[str, Any]:
    """
    Assess a PDF CV against a role.

    Args:
        role: Role identifier, e.g. ``data-scientist``.
        pdf_content: Raw bytes of the CV PDF.
        filename: Original file name, only used for logging.
        provider: LLM provider; built from settings when omitted.

    Returns:
        The decoded assessment object.

    Raises:
        ConfigError: If the role is unknown or no provider can be built.
        LLMError: If the API call fails.
        ResponseParseError: If the response holds no decodable JSON object.
    """
    role_config = get_role_config(role)
    provider = provider or get_llm_provider()

    prompt = build_assessment_prompt(role_config, _cv_text_note(provider))
    logger.info(f"Analyzing CV for role: {role}")

    raw_response = _call_llm(provider, prompt, pdf_content, role_config.max_tokens, filename)
    return parse_response(raw_response)


def identify_roles(
    pdf_content: bytes,
    filename: str | None = None,
    provider: LLMProvider | None = None,
) -> dict[str, Any]:
    """
    Identify which assessable roles fit a PDF CV.

    Raises:
        ConfigError: If no provider can be built.
        LLMError: If the API call fails.
        ResponseParseError: If the response holds no decodable JSON object.
    """
    provider = provider or get_llm_provider()
    prompt = build_role_identification_prompt(_cv_text_note(provider))
    logger.info("Analyzing CV to identify relevant roles")

    raw_response = _call_llm(provider, prompt, pdf_content, ROLE_IDENTIFICATION_MAX_TOKENS, filename)
    return parse_response(raw_response)


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _as_score(value) -> int:
    """Integer score; strings keep their leading number, so ``"8/10"`` is 8."""
    if isinstance(value, str):
        match = LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def summarize_assessment(assessment: dict[str, Any]) -> AssessmentSummary:
    """Project the headline figures out of a decoded assessment."""
    readiness = assessment.get("overall_readiness")
    if not isinstance(readiness, dict):
        readiness = {}

    return AssessmentSummary(
        score=_as_score(readiness.get("score")),
        summary=str(readiness.get("summary") or "No summary available"),
        strengths=[str(s) for s in _as_list(readiness.get("strengths"))],
        development_areas=[str(d) for d in _as_list(readiness.get("development_areas"))],
        identified_skills_count=len(_as_list(assessment.get("identified_skills"))),
        essential_skills_count=len(_as_list(assessment.get("essential_skills_found"))),
        missing_essential_skills=[str(m) for m in _as_list(assessment.get("missing_essential_skills"))],
        optional_skills_count=len(_as_list(assessment.get("optional_skills_found"))),
    )
