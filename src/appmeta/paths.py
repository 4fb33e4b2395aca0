"""Absolute path value type used for every stored workspace path.

Paths are POSIX-style strings regardless of host platform, so the same
workspace metadata works on real disk and in MemoryFileSystem.

Key names: AbsPath, append_to_abs_path, parent_of.
"""

from __future__ import annotations

import posixpath

SEP = "/"


class AbsPath(str):
    """A normalized absolute path.

    Redundant separators, ``.`` segments and trailing separators are removed
    on construction, so two AbsPaths naming the same location compare equal.

    Raises:
        ValueError: If the path is empty or not absolute.
    """

    def __new__(cls, path: str) -> AbsPath:
        if isinstance(path, AbsPath):
            return path
        if not path:
            raise ValueError("Path is empty")
        if not path.startswith(SEP):
            raise ValueError(f"Path is not absolute: '{path}'")
        normalized = posixpath.normpath(path)
        # normpath keeps a leading "//" (POSIX allows it to be special)
        if normalized.startswith("//"):
            normalized = SEP + normalized.lstrip(SEP)
        return super().__new__(cls, normalized)

    def __repr__(self) -> str:
        return f"AbsPath({str(self)!r})"

    @property
    def name(self) -> str:
        """Final path segment; empty for the root."""
        return posixpath.basename(self)

    @property
    def is_root(self) -> bool:
        return self == SEP


def append_to_abs_path(base: str, *elems: str) -> AbsPath:
    """Join path elements beneath ``base``.

    Elements are always treated as relative to ``base``: a leading separator
    is ignored rather than restarting from the filesystem root.

    Raises:
        ValueError: If ``base`` is not absolute or the result escapes ``base``.
    """
    root = AbsPath(base)
    parts = [e.lstrip(SEP) for e in elems if e]
    joined = AbsPath(posixpath.join(root, *parts))
    if not is_within(joined, root):
        raise ValueError(f"Path '{joined}' escapes base directory '{root}'")
    return joined


def parent_of(path: AbsPath) -> AbsPath:
    """Containing directory of ``path``. The root is its own parent."""
    return AbsPath(posixpath.dirname(path))


def is_within(path: AbsPath, base: AbsPath) -> bool:
    """True if ``path`` equals ``base`` or lies beneath it."""
    if base.is_root:
        return True
    return path == base or path.startswith(base + SEP)
