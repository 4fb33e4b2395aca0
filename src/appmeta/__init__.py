"""appmeta - on-disk metadata manager for declarative application workspaces.

Creates the canonical workspace layout (``.ksonnet/``, ``lib/``,
``components/``, ``environments/default/``, ``vendor/``), locates a
workspace root from any nested directory, and lists component files.
All filesystem access goes through an injectable FileSystem so the same
code runs on real disk and in memory.
"""

from .manager import Manager, find_manager, init_manager

__version__ = "0.1.0"

__all__ = ["Manager", "find_manager", "init_manager", "__version__"]
