"""YAML frontmatter parsing for SKILL.md files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from .errors import FieldViolationError, MalformedDocumentError, SkillNotFoundError
from .filesystem import FileSystem, LocalFileSystem
from .models import SkillProperties

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
SKILL_FILE_NAMES = ("SKILL.md", "skill.md")
REQUIRED_FIELDS = ("name", "description")

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalar typing.

    Dates stay strings, and only true/false are booleans (not yes/no/on/off).
    """


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontmatterLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def find_skill_md(skill_dir: Path, fs: FileSystem | None = None) -> Path | None:
    """Find the SKILL.md file in a skill directory.

    Prefers SKILL.md (uppercase) but accepts skill.md (lowercase).
    """
    fs = fs or LocalFileSystem()
    for name in SKILL_FILE_NAMES:
        path = fs.join(skill_dir, name)
        if fs.exists(path):
            return path
    return None


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split SKILL.md content into its decoded YAML frontmatter and markdown body.

    Args:
        content: Raw content of a SKILL.md file.

    Returns:
        A ``(metadata, body)`` tuple. The body is stripped of surrounding whitespace.

    Raises:
        MalformedDocumentError: If the frontmatter is missing, unclosed or invalid YAML.
    """
    if not content.startswith(FRONTMATTER_DELIMITER):
        raise MalformedDocumentError("SKILL.md must start with YAML frontmatter (---)")

    parts = content.split(FRONTMATTER_DELIMITER, 2)
    if len(parts) < 3:
        raise MalformedDocumentError("SKILL.md frontmatter not properly closed with ---")

    try:
        metadata = yaml.load(parts[1], Loader=_FrontmatterLoader)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"Invalid YAML in frontmatter: {e}") from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MalformedDocumentError("Invalid YAML in frontmatter: frontmatter must be a mapping")

    return {str(key): value for key, value in metadata.items()}, parts[2].strip()


def read_skill_md(skill_md: Path, fs: FileSystem | None = None) -> str:
    """Read SKILL.md content, mapping read failures onto the skill error types."""
    fs = fs or LocalFileSystem()
    try:
        return fs.read_text(skill_md)
    except FileNotFoundError as e:
        raise SkillNotFoundError(f"Failed to read {skill_md}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"Failed to read {skill_md}: {e}") from e


def _extract_string(metadata: dict[str, Any], key: str) -> str | None:
    value = metadata.get(key)
    if isinstance(value, str):
        return value
    # Non-string values count as absent; optional fields are not rejected for their type.
    return None


def _extract_metadata(metadata: dict[str, Any]) -> dict[str, str] | None:
    value = metadata.get("metadata")
    if not isinstance(value, dict):
        return None

    result: dict[str, str] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            continue
        # Non-string values are kept in their repr() form instead of being rejected.
        result[key] = item if isinstance(item, str) else repr(item)
    return result or None


def _require_string(metadata: dict[str, Any], key: str) -> str:
    value = _extract_string(metadata, key)
    if value is None or not value.strip():
        raise FieldViolationError(f"Field '{key}' must be a non-empty string")
    return value.strip()


def read_properties(skill_dir: Path, fs: FileSystem | None = None) -> SkillProperties:
    """Read skill properties from SKILL.md frontmatter.

    Only the presence and shape of the required fields are checked here; use
    ``validate()`` for the full rule set.

    Raises:
        SkillNotFoundError: If SKILL.md is missing.
        MalformedDocumentError: If SKILL.md cannot be read or has invalid frontmatter.
        FieldViolationError: If ``name`` or ``description`` is missing or not a non-empty string.
    """
    fs = fs or LocalFileSystem()
    skill_md = find_skill_md(skill_dir, fs)
    if skill_md is None:
        raise SkillNotFoundError(f"SKILL.md not found in {skill_dir}")

    logger.debug(f"Reading skill properties from {skill_md}")
    metadata, _ = parse_frontmatter(read_skill_md(skill_md, fs))

    for key in REQUIRED_FIELDS:
        if key not in metadata:
            raise FieldViolationError(f"Missing required field in frontmatter: {key}")

    name = _require_string(metadata, "name")
    description = _require_string(metadata, "description")

    return SkillProperties(
        name=name,
        description=description,
        license=_extract_string(metadata, "license"),
        compatibility=_extract_string(metadata, "compatibility"),
        allowed_tools=_extract_string(metadata, "allowed-tools"),
        metadata=_extract_metadata(metadata),
    )
