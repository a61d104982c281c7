"""ESCO skills reference data for assessment prompts."""

import csv
import logging

from .roles import esco_file_path, is_valid_role

logger = logging.getLogger(__name__)

# Rows after this many data rows are treated as optional skills
ESSENTIAL_SKILLS_LIMIT = 50


def read_esco_skills(role: str) -> tuple[list[str], list[str]]:
    """
    Read essential and optional skill labels for a role.

    The CSV has a header row and the skill label in its second column.

    Returns:
        Tuple of (essential, optional) skill labels. Both are empty when the
        role is unknown or has no ESCO file.
    """
    if not is_valid_role(role):
        return [], []

    path = esco_file_path(role)
    if not path.is_file():
        logger.warning(f"No ESCO skills file for role {role}: {path}")
        return [], []

    essential = []
    optional = []
    with path.open(encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for index, row in enumerate(reader, start=1):
            if len(row) < 2:
                continue
            skill = row[1].strip().replace('"', "")
            if not skill:
                continue
            if index <= ESSENTIAL_SKILLS_LIMIT:
                essential.append(skill)
            else:
                optional.append(skill)

    logger.debug(f"Loaded {len(essential)} essential and {len(optional)} optional skills for {role}")
    return essential, optional


def load_esco_skills(role: str) -> str:
    """Render the ESCO skills of a role as the ``esco_skills`` prompt variable."""
    essential, optional = read_esco_skills(role)
    if not essential and not optional:
        return ""

    lines = ["ESSENTIAL SKILLS:"]
    lines.extend(f"- {skill}" for skill in essential)
    lines.append("")
    lines.append("OPTIONAL SKILLS:")
    lines.extend(f"- {skill}" for skill in optional)
    return "\n".join(lines) + "\n"
