from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .filesystem import FileSystem, LocalFileSystem
from .parser import find_skill_md, read_properties

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    # "&" goes first so the entities added below are not escaped again.
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def to_prompt(skill_dirs: Sequence[Path], fs: FileSystem | None = None) -> str:
    """Formats skill directories into an <available_skills> XML block for agent prompts.

    Every tag and value sits on its own line:

        <available_skills>
        <skill>
        <name>
        pdf-reader
        </name>
        <description>
        Read and extract text from PDF files
        </description>
        <location>
        /path/to/pdf-reader/SKILL.md
        </location>
        </skill>
        </available_skills>

    The first skill that cannot be read aborts the whole render with its error.
    """
    fs = fs or LocalFileSystem()
    lines = ["<available_skills>"]

    for skill_dir in skill_dirs:
        try:
            skill_dir = fs.canonicalize(skill_dir)
        except OSError as e:
            logger.debug(f"Could not resolve {skill_dir}, using it as given: {e}")
        props = read_properties(skill_dir, fs)

        lines.extend(["<skill>", "<name>", _escape(props.name), "</name>"])
        lines.extend(["<description>", _escape(props.description), "</description>"])

        skill_md = find_skill_md(skill_dir, fs)
        if skill_md is not None:
            lines.extend(["<location>", str(skill_md), "</location>"])

        lines.append("</skill>")

    lines.append("</available_skills>")
    return "\n".join(lines)
