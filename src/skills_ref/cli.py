import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from ._config import get_skills_folder
from ._logging import configure_logging
from .discovery import discover_skill_dirs
from .errors import SkillError
from .parser import SKILL_FILE_NAMES, read_properties
from .prompts import to_prompt
from .validator import validate

logger = logging.getLogger(__name__)

app = typer.Typer(help="Reference tooling for Agent Skills.")


def _resolve_skill_path(path: Path) -> Path:
    """Map a path to a SKILL.md file onto its skill directory."""
    if path.is_file() and path.name.lower() in {name.lower() for name in SKILL_FILE_NAMES}:
        return path.parent
    return path


@app.command("validate")
def validate_command(
    skill_path: Annotated[Path, typer.Argument(help="Path to the skill directory or SKILL.md file")],
):
    """Validate a skill directory.

    Checks that the skill has a valid SKILL.md with proper frontmatter,
    correct naming conventions, and required fields.
    """
    skill_path = _resolve_skill_path(skill_path)
    errors = validate(skill_path)

    if errors:
        typer.echo(f"Validation failed for {skill_path}:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Valid skill: {skill_path}")


@app.command("read-properties")
def read_properties_command(
    skill_path: Annotated[Path, typer.Argument(help="Path to the skill directory or SKILL.md file")],
):
    """Read and print skill properties as JSON."""
    skill_path = _resolve_skill_path(skill_path)
    try:
        props = read_properties(skill_path)
    except SkillError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(props.to_dict(), indent=2, ensure_ascii=False))


@app.command("to-prompt")
def to_prompt_command(
    skill_paths: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Paths to skill directories or SKILL.md files"),
    ] = None,
    skills_folder: Annotated[
        Optional[Path],
        typer.Option(
            "--skills-folder",
            help="Also include every skill found in this folder (default: $SKILLS_REF_SKILLS_FOLDER)",
        ),
    ] = None,
):
    """Generate <available_skills> XML for agent prompts."""
    skill_dirs = [_resolve_skill_path(path) for path in skill_paths or []]

    if skills_folder is None:
        configured_folder = get_skills_folder()
        if configured_folder:
            skills_folder = Path(configured_folder)
    if skills_folder is not None:
        logger.info(f"Adding skills from directory: {skills_folder}")
        skill_dirs.extend(discover_skill_dirs(skills_folder))

    if not skill_dirs:
        typer.echo("Error: no skill directories given", err=True)
        raise typer.Exit(code=2)

    try:
        output = to_prompt(skill_dirs)
    except SkillError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(output)


def run():
    configure_logging()
    app()


if __name__ == "__main__":
    run()
