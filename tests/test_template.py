import pytest

from skills_assessment.errors import MissingPlaceholder, TemplateNotFound
from skills_assessment.prompts.template import (
    PromptTemplate,
    canonicalize_placeholders,
    collapse_whitespace,
    extract_template,
    strip_code_fences,
    strip_frontmatter,
)

DOCUMENT = """---
name: greeting
version: 1
---

# Greeting prompt

Some explanation for humans.

## Prompt Template

```
Hello {name}
```

## Parameters

- `name`: who to greet
"""


def test_extract_template_from_document():
    template = extract_template(DOCUMENT)

    assert template.text == "Hello %{name}"
    assert template.placeholders == ["name"]


def test_missing_template_section_raises():
    with pytest.raises(TemplateNotFound):
        extract_template("# Prompt\n\nNo template here.\n\n## Parameters\n- none\n")


def test_template_not_found_mentions_source():
    with pytest.raises(TemplateNotFound, match="broken.md"):
        extract_template("nothing", source="broken.md")


@pytest.mark.parametrize("heading", ["## Parameters", "## Expected Output", "## Usage", "## Notes"])
def test_template_ends_at_next_second_level_heading(heading):
    document = f"## Prompt Template\nAsk about {{topic}}\n{heading}\nIgnored {{other}}\n"

    assert extract_template(document).text == "Ask about %{topic}"


def test_third_level_heading_stays_in_template():
    document = "## Prompt Template\nIntro\n### Details\nMore\n## Usage\nx\n"

    assert extract_template(document).text == "Intro\n### Details\nMore"


def test_template_runs_to_end_of_document():
    assert extract_template("## Prompt Template\nLast {one}").text == "Last %{one}"


def test_heading_at_end_of_document_gives_empty_template():
    assert extract_template("## Prompt Template").text == ""
    assert extract_template("# Doc\n\n## Prompt Template   ").text == ""


def test_empty_template_section_does_not_swallow_next_section():
    assert extract_template("## Prompt Template\n## Parameters\n- x {y}\n").text == ""


def test_frontmatter_only_stripped_at_start():
    text = "Intro\n---\nnot: frontmatter\n---\n"

    assert strip_frontmatter(text) == text
    assert strip_frontmatter("---\na: 1\n---\nbody") == "body"


def test_code_fences_removed_content_kept():
    assert strip_code_fences("```text\nline\n```") == "\nline\n"


def test_canonical_placeholders_not_rewritten_twice():
    assert canonicalize_placeholders("%{x}") == "%{x}"
    assert canonicalize_placeholders("{x} and %{y}") == "%{x} and %{y}"


def test_json_braces_are_not_placeholders():
    text = '{\n  "score": 7\n}'

    assert canonicalize_placeholders(text) == text


def test_collapse_whitespace():
    assert collapse_whitespace("  a  \n\n   \n b\n") == "a\nb"


def test_substitute_fills_placeholders():
    template = PromptTemplate("CV: %{cv_text}\nSkills: %{esco_skills}")

    assert template.substitute(cv_text="pdf", esco_skills="") == "CV: pdf\nSkills: "


def test_substitute_ignores_extra_keys():
    template = PromptTemplate("Hello %{name}")

    assert template.substitute({"name": "Ada", "unused": "x"}) == "Hello Ada"


def test_substitute_missing_key_raises():
    template = PromptTemplate("Hello %{name}")

    with pytest.raises(MissingPlaceholder) as exc_info:
        template.substitute(other="x")

    assert exc_info.value.name == "name"


def test_substitute_keeps_json_examples():
    template = extract_template('## Prompt Template\nReturn {"score": 1} for {cv_text}')

    assert template.substitute(cv_text="me") == 'Return {"score": 1} for me'
