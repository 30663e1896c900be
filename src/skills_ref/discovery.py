from __future__ import annotations

import logging
from pathlib import Path

from .filesystem import FileSystem, LocalFileSystem
from .parser import find_skill_md

logger = logging.getLogger(__name__)


def discover_skill_dirs(skills_directory: Path, fs: FileSystem | None = None) -> list[Path]:
    """Return the sub-directories of ``skills_directory`` that contain a SKILL.md, sorted by name."""
    fs = fs or LocalFileSystem()
    if not fs.is_directory(skills_directory):
        logger.warning(f"Skills directory not found: {skills_directory}")
        return []

    skill_dirs = []
    for skill_dir in sorted(fs.iter_directory(skills_directory), key=fs.file_name):
        if not fs.is_directory(skill_dir):
            continue
        if find_skill_md(skill_dir, fs) is None:
            logger.debug(f"Skipping {skill_dir}: no SKILL.md")
            continue
        skill_dirs.append(skill_dir)

    return skill_dirs
