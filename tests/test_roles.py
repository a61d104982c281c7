import pytest

from skills_assessment import esco, roles
from skills_assessment.config import settings
from skills_assessment.errors import ConfigError


def test_get_role_config():
    config = roles.get_role_config("data-scientist")

    assert config.prompt_key == "data_scientist_skills"
    assert config.max_tokens == 3000
    assert config.title == "DATA SCIENTIST SKILLS ASSESSMENT"


def test_unknown_role_raises_config_error():
    with pytest.raises(ConfigError, match="Configuration not found for: astronaut"):
        roles.get_role_config("astronaut")


def test_valid_roles():
    assert roles.valid_roles() == ["data-scientist", "it-manager", "software-architect"]
    assert roles.is_valid_role("it-manager")
    assert not roles.is_valid_role("it_manager")


@pytest.mark.parametrize("role", ["data-scientist", "it-manager", "software-architect"])
def test_shipped_esco_files_exist(role):
    assert roles.esco_file_path(role).is_file()
    assert esco.load_esco_skills(role).startswith("ESSENTIAL SKILLS:\n- ")


def test_esco_skills_split_essential_and_optional(monkeypatch, tmp_path):
    rows = ["uri,label"] + [f'uri{i},"skill {i}"' for i in range(1, 53)]
    (tmp_path / "it-manager-skills.csv").write_text("\n".join(rows) + "\n", encoding="utf-8")
    monkeypatch.setattr(settings, "ESCO_DIR", str(tmp_path))

    essential, optional = esco.read_esco_skills("it-manager")

    assert len(essential) == 50
    assert essential[0] == "skill 1"
    assert optional == ["skill 51", "skill 52"]

    text = esco.load_esco_skills("it-manager")
    assert text.startswith("ESSENTIAL SKILLS:\n- skill 1\n")
    assert text.endswith("\nOPTIONAL SKILLS:\n- skill 51\n- skill 52\n")


def test_esco_skills_missing_file(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "ESCO_DIR", str(tmp_path))

    assert esco.load_esco_skills("data-scientist") == ""


def test_esco_skills_unknown_role():
    assert esco.load_esco_skills("astronaut") == ""
