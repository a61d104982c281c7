"""Role configuration for skills assessments."""

from dataclasses import dataclass
from pathlib import Path

from .config import settings
from .errors import ConfigError


@dataclass(frozen=True)
class RoleConfig:
    """Prompt key, token budget and report title for an assessable role."""

    role: str
    prompt_key: str
    max_tokens: int
    title: str


ROLE_CONFIGS: dict[str, RoleConfig] = {
    "data-scientist": RoleConfig(
        role="data-scientist",
        prompt_key="data_scientist_skills",
        max_tokens=3000,
        title="DATA SCIENTIST SKILLS ASSESSMENT",
    ),
    "it-manager": RoleConfig(
        role="it-manager",
        prompt_key="it_manager_skills",
        max_tokens=4000,
        title="IT MANAGER SKILLS ASSESSMENT",
    ),
    "software-architect": RoleConfig(
        role="software-architect",
        prompt_key="software_architect_skills",
        max_tokens=4000,
        title="SOFTWARE ARCHITECT SKILLS ASSESSMENT",
    ),
}


def get_role_config(role: str) -> RoleConfig:
    """
    Get configuration for a specific role.

    Raises:
        ConfigError: If the role is not known.
    """
    try:
        return ROLE_CONFIGS[role]
    except KeyError:
        raise ConfigError(role) from None


def valid_roles() -> list[str]:
    return list(ROLE_CONFIGS)


def is_valid_role(role: str) -> bool:
    return role in ROLE_CONFIGS


def esco_file_path(role: str) -> Path:
    """Path to the ESCO skills CSV for a role."""
    return Path(settings.ESCO_DIR) / f"{role}-skills.csv"
