"""Skill validation logic.

``validate()`` checks a skill directory on disk and stops at the first
structural problem (missing path, missing SKILL.md, unreadable or malformed
frontmatter). Once frontmatter is decoded, ``validate_metadata()`` runs every
field rule and reports all violations together.
"""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Any

import regex

from .errors import SkillError
from .filesystem import FileSystem, LocalFileSystem
from .parser import find_skill_md, parse_frontmatter, read_skill_md

MAX_SKILL_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
MAX_COMPATIBILITY_LENGTH = 500

ALLOWED_FIELDS = frozenset(
    {
        "name",
        "description",
        "license",
        "allowed-tools",
        "metadata",
        "compatibility",
    }
)

# Alphabetic covers the combining vowel signs of Indic scripts, not just letters.
_NAME_CHARACTERS_RE = regex.compile(r"[\p{Alphabetic}\p{N}-]+")


def _validate_name(name: str, skill_dir: Path | None, fs: FileSystem) -> list[str]:
    """Validate skill name format and directory match.

    Names may use any Unicode letters and digits plus hyphens, must be
    lowercase and cannot start or end with a hyphen.
    """
    if not name.strip():
        return ["Field 'name' must be a non-empty string"]

    errors: list[str] = []
    name = unicodedata.normalize("NFKC", name.strip())

    if len(name) > MAX_SKILL_NAME_LENGTH:
        errors.append(
            f"Skill name '{name}' exceeds {MAX_SKILL_NAME_LENGTH} character limit ({len(name)} chars)"
        )

    if name != name.lower():
        errors.append(f"Skill name '{name}' must be lowercase")

    if name.startswith("-") or name.endswith("-"):
        errors.append("Skill name cannot start or end with a hyphen")

    if "--" in name:
        errors.append("Skill name cannot contain consecutive hyphens")

    if not _NAME_CHARACTERS_RE.fullmatch(name):
        errors.append(
            f"Skill name '{name}' contains invalid characters. Only letters, digits, and hyphens are allowed."
        )

    if skill_dir is not None:
        dir_name = fs.file_name(skill_dir)
        if dir_name not in ("", ".."):
            if unicodedata.normalize("NFKC", dir_name) != name:
                errors.append(f"Directory name '{dir_name}' must match skill name '{name}'")

    return errors


def _validate_description(description: str) -> list[str]:
    if not description.strip():
        return ["Field 'description' must be a non-empty string"]

    # Limits are measured in UTF-8 bytes.
    size = len(description.encode("utf-8"))
    if size > MAX_DESCRIPTION_LENGTH:
        return [f"Description exceeds {MAX_DESCRIPTION_LENGTH} character limit ({size} chars)"]
    return []


def _validate_compatibility(compatibility: str) -> list[str]:
    size = len(compatibility.encode("utf-8"))
    if size > MAX_COMPATIBILITY_LENGTH:
        return [f"Compatibility exceeds {MAX_COMPATIBILITY_LENGTH} character limit ({size} chars)"]
    return []


def _validate_metadata_fields(metadata: dict[str, Any]) -> list[str]:
    extra_fields = sorted(str(key) for key in metadata if key not in ALLOWED_FIELDS)
    if not extra_fields:
        return []
    return [
        f"Unexpected fields in frontmatter: {', '.join(extra_fields)}. "
        f"Only {sorted(ALLOWED_FIELDS)} are allowed."
    ]


def validate_metadata(
    metadata: dict[str, Any],
    skill_dir: Path | None = None,
    fs: FileSystem | None = None,
) -> list[str]:
    """Validate already-parsed skill frontmatter.

    Args:
        metadata: Decoded YAML frontmatter.
        skill_dir: Optional skill directory, used to check that its name matches the skill name.
        fs: Filesystem used to read the directory name.

    Returns:
        List of validation error messages. An empty list means the frontmatter is valid.
    """
    fs = fs or LocalFileSystem()
    errors = _validate_metadata_fields(metadata)

    if "name" not in metadata:
        errors.append("Missing required field in frontmatter: name")
    elif isinstance(metadata["name"], str):
        errors.extend(_validate_name(metadata["name"], skill_dir, fs))
    else:
        errors.append("Field 'name' must be a non-empty string")

    if "description" not in metadata:
        errors.append("Missing required field in frontmatter: description")
    elif isinstance(metadata["description"], str):
        errors.extend(_validate_description(metadata["description"]))
    else:
        errors.append("Field 'description' must be a non-empty string")

    compatibility = metadata.get("compatibility")
    if isinstance(compatibility, str):
        errors.extend(_validate_compatibility(compatibility))

    return errors


def validate(skill_dir: Path, fs: FileSystem | None = None) -> list[str]:
    """Validate a skill directory.

    Never raises for invalid content: every problem is returned as a message.

    Returns:
        List of validation error messages. An empty list means the skill is valid.
    """
    fs = fs or LocalFileSystem()

    if not fs.exists(skill_dir):
        return [f"Path does not exist: {skill_dir}"]

    if not fs.is_directory(skill_dir):
        return [f"Not a directory: {skill_dir}"]

    skill_md = find_skill_md(skill_dir, fs)
    if skill_md is None:
        return ["Missing required file: SKILL.md"]

    try:
        content = read_skill_md(skill_md, fs)
        metadata, _ = parse_frontmatter(content)
    except SkillError as e:
        return [str(e)]

    return validate_metadata(metadata, skill_dir, fs)
