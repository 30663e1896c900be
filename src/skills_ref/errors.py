from __future__ import annotations


class SkillError(Exception):
    """Base error for skill parsing, reading and validation."""


class SkillNotFoundError(SkillError):
    """Raised when a skill directory or its SKILL.md cannot be found."""


class MalformedDocumentError(SkillError):
    """Raised when SKILL.md frontmatter is missing, unclosed or not valid YAML."""


class FieldViolationError(SkillError):
    """Raised when skill properties break one or more field rules.

    ``errors`` holds every violation in the order it was found; ``str()`` of the
    exception is the summary message.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors) if errors else [message]
