"""Recovery of JSON payloads from free-form LLM responses.

Models wrap JSON in markdown fences, add commentary around it, or get cut off
before closing it. ``clean_response`` turns such text into the best JSON
string it can find and never raises; decoding is left to the caller.

The repair step counts characters and does not tokenize, so braces and
brackets inside string literals (``"a{b}"``) are counted as structure.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Greedy body: runs to the last closing brace/bracket that is followed by a fence
FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{.*\}|\[.*\])\s*```", re.DOTALL)

OPENING_FENCE_RE = re.compile(r"```json\s*")
CLOSING_FENCE_RE = re.compile(r"```\s*$", re.MULTILINE)

NOISE_LINE_PATTERNS = (
    re.compile(r"^#+\s"),  # headings
    re.compile(r"^\*\s"),  # * list items
    re.compile(r"^-+\s"),  # - list items
    re.compile(r"^\d+\.\s"),  # numbered list items
    re.compile(r"^>"),  # blockquotes
    re.compile(r"note:", re.IGNORECASE),  # Note: / **Note:** annotations
)

BOLD_RE = re.compile(r"\*\*[^\n]*?\*\*")
ITALIC_RE = re.compile(r"\*[^\n]*?\*")

CLOSERS = {"{": "}", "[": "]"}


def extract_fenced_json(text: str) -> str | None:
    """Return the JSON body of a fenced code block, if there is one."""
    match = FENCED_JSON_RE.search(text)
    if match:
        return match.group(1)
    return None


def strip_code_fences(text: str) -> str:
    text = OPENING_FENCE_RE.sub("", text)
    return CLOSING_FENCE_RE.sub("", text)


def is_noise_line(line: str) -> bool:
    return any(pattern.search(line) for pattern in NOISE_LINE_PATTERNS)


def strip_markdown_lines(text: str) -> str:
    """Drop headings, list items, blockquotes and note lines."""
    return "\n".join(line for line in text.split("\n") if not is_noise_line(line))


def strip_inline_emphasis(text: str) -> str:
    """Remove ``**bold**`` and ``*italic*`` spans together with their content."""
    text = BOLD_RE.sub("", text)
    return ITALIC_RE.sub("", text)


def _first_index(text: str, chars: str) -> int | None:
    positions = [pos for pos in (text.find(char) for char in chars) if pos != -1]
    return min(positions) if positions else None


def _last_index(text: str, chars: str) -> int | None:
    positions = [pos for pos in (text.rfind(char) for char in chars) if pos != -1]
    return max(positions) if positions else None


def extract_json_span(text: str) -> str:
    """Cut the text down to the span from the first opener to the last closer."""
    start = _first_index(text, "{[")
    end = _last_index(text, "}]")
    if start is not None and end is not None and start < end:
        return text[start : end + 1]
    return text


def repair_incomplete_json(text: str) -> str:
    """
    Close structures left open by a truncated response.

    Appends ``count('{') - count('}')`` braces and ``count('[') - count(']')``
    brackets, innermost first.
    """
    missing = {
        "{": text.count("{") - text.count("}"),
        "[": text.count("[") - text.count("]"),
    }
    if missing["{"] <= 0 and missing["["] <= 0:
        return text

    # Unmatched openers in order of appearance
    stack = []
    for char in text:
        if char in CLOSERS:
            stack.append(char)
        elif char in ("}", "]"):
            opener = "{" if char == "}" else "["
            for pos in range(len(stack) - 1, -1, -1):
                if stack[pos] == opener:
                    del stack[pos]
                    break

    closing = []
    for opener in reversed(stack):
        if missing[opener] > 0:
            closing.append(CLOSERS[opener])
            missing[opener] -= 1

    logger.debug("Repaired truncated JSON by appending %r", "".join(closing))
    return text + "".join(closing)


def clean_response(response) -> str:
    """
    Extract a structurally balanced JSON string from an LLM response.

    Args:
        response: Raw text returned by the model. ``None`` is accepted.

    Returns:
        Best-effort JSON string; empty string for empty input. The result is
        not guaranteed to decode.
    """
    if response is None:
        return ""
    if not isinstance(response, str):
        response = str(response)
    if not response:
        return ""

    fenced = extract_fenced_json(response)
    if fenced is not None:
        return repair_incomplete_json(fenced).strip()

    cleaned = strip_code_fences(response)
    cleaned = strip_markdown_lines(cleaned)
    cleaned = strip_inline_emphasis(cleaned)
    cleaned = cleaned.strip()

    cleaned = extract_json_span(cleaned)
    cleaned = repair_incomplete_json(cleaned)

    return cleaned.strip()
