from .discovery import discover_skill_dirs
from .errors import FieldViolationError, MalformedDocumentError, SkillError, SkillNotFoundError
from .filesystem import FileSystem, InMemoryFileSystem, LocalFileSystem
from .models import SkillProperties
from .parser import find_skill_md, parse_frontmatter, read_properties
from .prompts import to_prompt
from .validator import validate, validate_metadata

__all__ = [
    "SkillProperties",
    "SkillError",
    "SkillNotFoundError",
    "MalformedDocumentError",
    "FieldViolationError",
    "FileSystem",
    "LocalFileSystem",
    "InMemoryFileSystem",
    "discover_skill_dirs",
    "find_skill_md",
    "parse_frontmatter",
    "read_properties",
    "to_prompt",
    "validate",
    "validate_metadata",
]
