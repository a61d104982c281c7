"""Extraction of prompt templates from markdown prompt documents.

A prompt document is written for humans: optional frontmatter, prose,
parameter docs and usage examples. Only the ``## Prompt Template`` section is
sent to the model. Each step below is a plain ``str -> str`` function.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import MissingPlaceholder, TemplateNotFound

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n.*?^---[ \t]*(?:\n|\Z)", re.DOTALL | re.MULTILINE)

# Body runs until the next second-level heading (## Parameters, ## Expected..., ## Usage, ...)
TEMPLATE_SECTION_RE = re.compile(
    r"^## Prompt Template[ \t]*(?:\n|\Z)(.*?)(?=^##(?!#)|\Z)",
    re.DOTALL | re.MULTILINE,
)

CODE_FENCE_RE = re.compile(r"^[ \t]*```[\w+-]*[ \t]*$", re.MULTILINE)

# {name} not already preceded by %
BARE_PLACEHOLDER_RE = re.compile(r"(?<!%)\{(\w+)\}")

PLACEHOLDER_RE = re.compile(r"%\{(\w+)\}")


def strip_frontmatter(text: str) -> str:
    return FRONTMATTER_RE.sub("", text, count=1)


def find_template_section(text: str, source: str | None = None) -> str:
    """Return the body of the ``## Prompt Template`` section.

    Raises:
        TemplateNotFound: If the document has no such heading.
    """
    match = TEMPLATE_SECTION_RE.search(text)
    if not match:
        raise TemplateNotFound(source)
    return match.group(1)


def strip_code_fences(text: str) -> str:
    return CODE_FENCE_RE.sub("", text)


def canonicalize_placeholders(text: str) -> str:
    """Rewrite ``{name}`` to ``%{name}``, leaving ``%{name}`` as is."""
    return BARE_PLACEHOLDER_RE.sub(r"%{\1}", text)


def collapse_whitespace(text: str) -> str:
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line).strip()


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt string with ``%{name}`` placeholders."""

    text: str

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in order of first appearance."""
        names = []
        for name in PLACEHOLDER_RE.findall(self.text):
            if name not in names:
                names.append(name)
        return names

    def substitute(self, mapping: Mapping[str, object] | None = None, **kwargs) -> str:
        """Fill every placeholder from ``mapping`` and keyword arguments.

        Extra keys are ignored.

        Raises:
            MissingPlaceholder: If a placeholder has no value.
        """
        values = dict(mapping or {})
        values.update(kwargs)

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name not in values:
                raise MissingPlaceholder(name)
            return str(values[name])

        return PLACEHOLDER_RE.sub(replace, self.text)

    def __str__(self) -> str:
        return self.text


def extract_template(document_text: str, source: str | None = None) -> PromptTemplate:
    """
    Turn a markdown prompt document into a reusable template.

    Args:
        document_text: Raw markdown content of the prompt document.
        source: Optional name of the document, used in error messages.

    Returns:
        PromptTemplate with canonical ``%{name}`` placeholders.

    Raises:
        TemplateNotFound: If the ``## Prompt Template`` section is missing.
    """
    text = strip_frontmatter(document_text)
    text = find_template_section(text, source)
    text = strip_code_fences(text)
    text = canonicalize_placeholders(text)
    text = collapse_whitespace(text)
    return PromptTemplate(text)
