"""Tests that run the public operations against the in-memory filesystem."""

import pytest
from conftest import make_skill_md

from skills_ref import (
    InMemoryFileSystem,
    MalformedDocumentError,
    SkillNotFoundError,
    discover_skill_dirs,
    read_properties,
    to_prompt,
    validate,
)


@pytest.fixture
def fs() -> InMemoryFileSystem:
    return InMemoryFileSystem(
        {
            "/skills/pdf/SKILL.md": make_skill_md(name="pdf", description="Read PDF files", extra="license: MIT"),
            "/skills/csv-to-json/skill.md": make_skill_md(name="csv-to-json", description="Convert CSV"),
            "/skills/notes.txt": "not a skill",
        },
        directories=["/skills/empty"],
    )


class _UnreadableFileSystem(InMemoryFileSystem):
    def __init__(self, files, error: OSError):
        super().__init__(files)
        self.error = error

    def read_text(self, path) -> str:
        raise self.error


def test_validate(fs):
    assert validate("/skills/pdf", fs=fs) == []
    assert validate("/skills/csv-to-json", fs=fs) == []


def test_validate_structural_failures(fs):
    assert validate("/skills/missing", fs=fs) == ["Path does not exist: /skills/missing"]
    assert validate("/skills/notes.txt", fs=fs) == ["Not a directory: /skills/notes.txt"]
    assert validate("/skills/empty", fs=fs) == ["Missing required file: SKILL.md"]


def test_validate_reports_read_failure():
    fs = _UnreadableFileSystem({"/skills/pdf/SKILL.md": ""}, PermissionError("Permission denied"))
    assert validate("/skills/pdf", fs=fs) == ["Failed to read /skills/pdf/SKILL.md: Permission denied"]


def test_validate_directory_name_from_fs():
    fs = InMemoryFileSystem({"/skills/other/SKILL.md": make_skill_md(name="pdf")})
    assert validate("/skills/other", fs=fs) == ["Directory name 'other' must match skill name 'pdf'"]


def test_read_properties(fs):
    props = read_properties("/skills/pdf", fs=fs)
    assert props.name == "pdf"
    assert props.license == "MIT"


def test_read_properties_missing_file(fs):
    with pytest.raises(SkillNotFoundError):
        read_properties("/skills/empty", fs=fs)


def test_read_properties_file_vanished():
    fs = _UnreadableFileSystem({"/skills/pdf/SKILL.md": ""}, FileNotFoundError("gone"))
    with pytest.raises(SkillNotFoundError, match="Failed to read /skills/pdf/SKILL.md: gone"):
        read_properties("/skills/pdf", fs=fs)


def test_read_properties_permission_error():
    fs = _UnreadableFileSystem({"/skills/pdf/SKILL.md": ""}, PermissionError("denied"))
    with pytest.raises(MalformedDocumentError, match="Failed to read"):
        read_properties("/skills/pdf", fs=fs)


def test_to_prompt(fs):
    lines = to_prompt(["/skills/pdf", "/skills/csv-to-json"], fs=fs).split("\n")
    assert lines[:11] == [
        "<available_skills>",
        "<skill>",
        "<name>",
        "pdf",
        "</name>",
        "<description>",
        "Read PDF files",
        "</description>",
        "<location>",
        "/skills/pdf/SKILL.md",
        "</location>",
    ]
    assert "/skills/csv-to-json/skill.md" in lines
    assert lines[-1] == "</available_skills>"


def test_discover_skill_dirs(fs):
    assert [str(path) for path in discover_skill_dirs("/skills", fs=fs)] == ["/skills/csv-to-json", "/skills/pdf"]


def test_file_and_directory_bookkeeping():
    fs = InMemoryFileSystem()
    fs.add_file("skills/pdf/SKILL.md", "content")
    assert fs.is_directory("/skills")
    assert fs.is_directory("/skills/pdf")
    assert fs.read_text("/skills/pdf/SKILL.md") == "content"

    fs.remove("/skills/pdf/SKILL.md")
    assert not fs.exists("/skills/pdf/SKILL.md")
    with pytest.raises(FileNotFoundError):
        fs.read_text("/skills/pdf/SKILL.md")
    with pytest.raises(FileNotFoundError):
        fs.canonicalize("/skills/pdf/SKILL.md")
