import textwrap
from pathlib import Path

import pytest


def make_skill_md(name: str = "my-skill", description: str = "A test skill", extra: str = "") -> str:
    """Build SKILL.md content with the given frontmatter fields."""
    frontmatter = f"name: {name}\ndescription: {description}\n"
    if extra:
        frontmatter += textwrap.dedent(extra).strip() + "\n"
    return f"---\n{frontmatter}---\n# {name}\n\nInstructions go here.\n"


@pytest.fixture
def create_skill(tmp_path: Path):
    """Factory fixture that writes a skill directory under tmp_path and returns its path."""

    def _create(dir_name: str, content: str, filename: str = "SKILL.md") -> Path:
        skill_dir = tmp_path / dir_name
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / filename).write_text(content, encoding="utf-8")
        return skill_dir

    return _create
