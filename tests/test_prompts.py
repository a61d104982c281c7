import pytest

from skills_assessment import prompts
from skills_assessment.errors import FileError, TemplateNotFound
from skills_assessment.roles import ROLE_CONFIGS


def test_prompt_file_name():
    assert prompts.prompt_file_name("data_scientist_skills") == "data-scientist-skills-assessment.md"


@pytest.mark.parametrize("role", sorted(ROLE_CONFIGS))
def test_shipped_role_prompts_load(role):
    template = prompts.load_prompt(ROLE_CONFIGS[role].prompt_key)

    assert template.placeholders == ["cv_text", "esco_skills"]
    # Documentation sections are not part of the template
    assert "## Parameters" not in template.text
    assert "```" not in template.text


def test_role_identification_prompt_loads():
    template = prompts.load_role_identification_prompt()

    assert template.placeholders == ["roles_list", "cv_text"]
    assert '"identified_roles"' in template.text


def test_missing_prompt_file_raises():
    with pytest.raises(FileError, match="Prompt file not found"):
        prompts.load_prompt("unknown_role_skills")


def test_prompt_without_template_section_raises(monkeypatch, tmp_path):
    (tmp_path / "broken-assessment.md").write_text("# Broken\n\nNo template.\n", encoding="utf-8")
    monkeypatch.setattr(prompts, "PROMPTS_DIR", tmp_path)

    with pytest.raises(TemplateNotFound):
        prompts.load_prompt("broken")
