"""Minimal filesystem interface used by the parser, validator and prompt renderer."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str:
        """Read a whole file as UTF-8 text, raising OSError or UnicodeDecodeError on failure."""
        ...

    def canonicalize(self, path: Path) -> Path:
        """Resolve ``path`` to an absolute form, raising OSError if it cannot be resolved."""
        ...

    def join(self, directory: Path, name: str) -> Path: ...

    def file_name(self, path: Path) -> str: ...

    def iter_directory(self, path: Path) -> list[Path]: ...


class LocalFileSystem:
    """FileSystem backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def canonicalize(self, path: Path) -> Path:
        return Path(path).resolve(strict=True)

    def join(self, directory: Path, name: str) -> Path:
        return Path(directory) / name

    def file_name(self, path: Path) -> str:
        return Path(path).name

    def iter_directory(self, path: Path) -> list[Path]:
        return list(Path(path).iterdir())


class InMemoryFileSystem:
    """Dict-backed FileSystem.

    Paths are stored as absolute POSIX paths. Parent directories of every file
    are created implicitly.

    Example::

        fs = InMemoryFileSystem({"/skills/pdf/SKILL.md": "---\\nname: pdf\\n---\\n"})
        validate("/skills/pdf", fs=fs)
    """

    def __init__(self, files: dict[str, str] | None = None, directories: list[str] | None = None):
        self._files: dict[PurePosixPath, str] = {}
        self._directories: set[PurePosixPath] = {PurePosixPath("/")}
        for path in directories or []:
            self.add_directory(path)
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_directory(self, path: str | PurePosixPath) -> None:
        path = self._normalize(path)
        self._directories.add(path)
        self._directories.update(path.parents)

    def add_file(self, path: str | PurePosixPath, content: str) -> None:
        path = self._normalize(path)
        self._files[path] = content
        self.add_directory(path.parent)

    def remove(self, path: str | PurePosixPath) -> None:
        path = self._normalize(path)
        self._files.pop(path, None)
        self._directories.discard(path)

    @staticmethod
    def _normalize(path) -> PurePosixPath:
        path = PurePosixPath(path)
        if not path.is_absolute():
            path = PurePosixPath("/") / path
        return path

    def exists(self, path) -> bool:
        path = self._normalize(path)
        return path in self._files or path in self._directories

    def is_directory(self, path) -> bool:
        return self._normalize(path) in self._directories

    def read_text(self, path) -> str:
        path = self._normalize(path)
        if path in self._directories:
            raise IsADirectoryError(f"Is a directory: '{path}'")
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file or directory: '{path}'") from None

    def canonicalize(self, path) -> PurePosixPath:
        path = self._normalize(path)
        if not self.exists(path):
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return path

    def join(self, directory, name: str) -> PurePosixPath:
        return PurePosixPath(directory) / name

    def file_name(self, path) -> str:
        return PurePosixPath(path).name

    def iter_directory(self, path) -> list[PurePosixPath]:
        path = self._normalize(path)
        if path not in self._directories:
            raise NotADirectoryError(f"Not a directory: '{path}'")
        children = {p for p in self._files if p.parent == path}
        children.update(p for p in self._directories if p.parent == path and p != path)
        return list(children)
