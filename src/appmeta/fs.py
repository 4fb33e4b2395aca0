"""Filesystem abstraction the metadata manager is written against.

Two implementations:
  - OsFileSystem: real disk via pathlib.
  - MemoryFileSystem: dict-backed tree of POSIX paths, for tests and tools.

Both report failures with the builtin OSError subclasses
(FileNotFoundError, FileExistsError, NotADirectoryError, IsADirectoryError)
so callers handle them identically.

Key classes: FileSystem, DirEntry, OsFileSystem, MemoryFileSystem.
"""

from __future__ import annotations

import abc
import errno
import logging
import os
import posixpath
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing.

    Flags describe the entry itself, never a symlink target: a link is
    neither a directory nor a regular file.
    """

    name: str
    is_dir: bool
    is_file: bool


class FileSystem(abc.ABC):
    """Minimal filesystem contract used by the manager."""

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """True if anything (file or directory) exists at ``path``."""

    @abc.abstractmethod
    def dir_exists(self, path: str) -> bool:
        """True if ``path`` exists and is a directory."""

    @abc.abstractmethod
    def mkdir_all(self, path: str) -> None:
        """Create ``path`` and any missing parents. Existing dirs are fine."""

    @abc.abstractmethod
    def write_file(self, path: str, data: bytes) -> None:
        """Create or truncate the file at ``path``. The parent must exist."""

    @abc.abstractmethod
    def read_file(self, path: str) -> bytes:
        """Return the whole contents of the file at ``path``."""

    @abc.abstractmethod
    def list_dir(self, path: str) -> list[DirEntry]:
        """List the direct children of the directory at ``path``."""

    def walk(
        self, top: str, prune: Callable[[str], bool] | None = None
    ) -> Iterator[str]:
        """Yield every regular file path under ``top``, depth-first.

        Symlinks are not followed and are not yielded.

        Directories whose name satisfies ``prune`` are skipped without being
        listed, so nothing beneath them is visited.
        """
        stack = [top]
        while stack:
            current = stack.pop()
            subdirs = []
            for entry in sorted(self.list_dir(current), key=lambda e: e.name):
                child = posixpath.join(current, entry.name)
                if entry.is_file:
                    yield child
                elif not entry.is_dir:
                    logger.debug("Skipped non-regular entry: %s", child)
                elif prune is not None and prune(entry.name):
                    logger.debug("Pruned directory: %s", child)
                else:
                    subdirs.append(child)
            stack.extend(reversed(subdirs))


class OsFileSystem(FileSystem):
    """FileSystem backed by the real disk."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def dir_exists(self, path: str) -> bool:
        return Path(path).is_dir()

    def mkdir_all(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_file(self, path: str, data: bytes) -> None:
        Path(path).write_bytes(data)

    def read_file(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def list_dir(self, path: str) -> list[DirEntry]:
        with os.scandir(path) as it:
            return [
                DirEntry(
                    e.name,
                    e.is_dir(follow_symlinks=False),
                    e.is_file(follow_symlinks=False),
                )
                for e in it
            ]


def _oserror(exc_type: type[OSError], code: int, path: str) -> OSError:
    return exc_type(code, os.strerror(code), path)


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem. Paths are absolute POSIX strings; ``/`` always exists.

    Not thread-safe. Share one instance between Managers the same way a
    real disk is shared.
    """

    def __init__(self) -> None:
        self._dirs: set[str] = {"/"}
        self._files: dict[str, bytes] = {}

    @staticmethod
    def _norm(path: str) -> str:
        if not path.startswith("/"):
            raise _oserror(FileNotFoundError, errno.ENOENT, path)
        return posixpath.normpath(path).replace("//", "/")

    def exists(self, path: str) -> bool:
        if not path.startswith("/"):
            return False
        p = self._norm(path)
        return p in self._dirs or p in self._files

    def dir_exists(self, path: str) -> bool:
        if not path.startswith("/"):
            return False
        return self._norm(path) in self._dirs

    def mkdir_all(self, path: str) -> None:
        p = self._norm(path)
        missing = []
        while p not in self._dirs:
            if p in self._files:
                raise _oserror(FileExistsError, errno.EEXIST, p)
            missing.append(p)
            p = posixpath.dirname(p)
        self._dirs.update(missing)

    def write_file(self, path: str, data: bytes) -> None:
        p = self._norm(path)
        if p in self._dirs:
            raise _oserror(IsADirectoryError, errno.EISDIR, p)
        parent = posixpath.dirname(p)
        if parent not in self._dirs:
            if parent in self._files:
                raise _oserror(NotADirectoryError, errno.ENOTDIR, parent)
            raise _oserror(FileNotFoundError, errno.ENOENT, parent)
        self._files[p] = bytes(data)

    def read_file(self, path: str) -> bytes:
        p = self._norm(path)
        if p in self._dirs:
            raise _oserror(IsADirectoryError, errno.EISDIR, p)
        try:
            return self._files[p]
        except KeyError:
            raise _oserror(FileNotFoundError, errno.ENOENT, p) from None

    def list_dir(self, path: str) -> list[DirEntry]:
        p = self._norm(path)
        if p not in self._dirs:
            if p in self._files:
                raise _oserror(NotADirectoryError, errno.ENOTDIR, p)
            raise _oserror(FileNotFoundError, errno.ENOENT, p)
        entries = [
            DirEntry(posixpath.basename(d), True, False)
            for d in self._dirs
            if d != "/" and posixpath.dirname(d) == p
        ]
        entries.extend(
            DirEntry(posixpath.basename(f), False, True)
            for f in self._files
            if posixpath.dirname(f) == p
        )
        return entries
