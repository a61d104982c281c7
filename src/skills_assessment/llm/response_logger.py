"""Optional logging of LLM exchanges to JSON files."""

import json
import logging
from datetime import datetime
from pathlib import Path

from ..config import settings

logger = logging.getLogger(__name__)

PROMPT_PREVIEW_LENGTH = 200


def logging_enabled() -> bool:
    return settings.LLM_LOGGING


def truncate_prompt(prompt: str, length: int = PROMPT_PREVIEW_LENGTH) -> str:
    if len(prompt) > length:
        return prompt[:length] + "..."
    return prompt


def build_log_entry(
    raw_response: str | None,
    prompt: str,
    model: str,
    max_tokens: int,
    pdf_name: str | None = None,
) -> dict:
    return {
        "timestamp": datetime.now().astimezone().isoformat(),
        "model": model,
        "max_tokens": max_tokens,
        "temperature": settings.LLM_TEMPERATURE,
        "prompt_preview": truncate_prompt(prompt),
        "pdf_file": Path(pdf_name).name if pdf_name else None,
        "raw_response": raw_response,
        "success": raw_response is not None,
    }


def log_response(
    raw_response: str | None,
    prompt: str,
    model: str,
    max_tokens: int,
    pdf_name: str | None = None,
) -> Path | None:
    """
    Write an LLM exchange to ``LLM_LOGS_DIR`` when LLM logging is enabled.

    A failure to write the log is reported as a warning and never propagates.

    Returns:
        Path of the written log file, or None if nothing was written.
    """
    if not logging_enabled():
        return None

    try:
        logs_dir = Path(settings.LLM_LOGS_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        log_path = logs_dir / f"llm_response_{timestamp}.json"

        entry = build_log_entry(raw_response, prompt, model, max_tokens, pdf_name)
        log_path.write_text(json.dumps(entry, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to log LLM response: {e}")
        return None

    logger.info(f"LLM response logged to: {log_path}")
    return log_path
