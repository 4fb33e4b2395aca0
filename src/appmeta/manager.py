"""Workspace metadata manager: creating an app and locating its files.

Workspace layout (relative to the root):
  .ksonnet/                 marker; its presence identifies the root
  lib/
  components/               component files, any depth
  environments/default/     schema.json, k8s.libsonnet, k.libsonnet
  vendor/

A Manager is bound to one root and an injected FileSystem. It owns no
state beyond that and reads the filesystem on every call.

Key names: Manager, init_manager, find_manager.
"""

from __future__ import annotations

import logging

from .clusterspec import ClusterSpec
from .errors import (
    AlreadyExistsError,
    InitFailedError,
    InvalidInputError,
    IOFailureError,
    NotFoundError,
)
from .extensions import generate_extensions_lib
from .fs import FileSystem
from .layout import (
    COMPONENTS_DIR,
    DEFAULT_ENV_NAME,
    ENVIRONMENTS_DIR,
    EXTENSIONS_LIB_FILENAME,
    K8S_LIB_FILENAME,
    KSONNET_DIR,
    LIB_DIR,
    SCHEMA_FILENAME,
    UNLISTED_DIR_NAME,
    VENDOR_DIR,
    WORKSPACE_DIRS,
)
from .paths import AbsPath, append_to_abs_path, parent_of

logger = logging.getLogger(__name__)


class Manager:
    """Metadata manager bound to a single workspace root."""

    def __init__(self, root_path: str, fs: FileSystem) -> None:
        self._root_path = AbsPath(root_path)
        self._fs = fs

    def __repr__(self) -> str:
        return f"Manager(root_path={str(self._root_path)!r})"

    # --- Constructors ---

    @classmethod
    def init(cls, root_path: str, spec: ClusterSpec, fs: FileSystem) -> Manager:
        """Create a new workspace at ``root_path``.

        Creates the reserved directories first, then writes the schema, the
        core library and the extensions library into the default
        environment. A partially created tree is left in place on failure.

        Raises:
            InvalidInputError: ``root_path`` is empty or relative.
            AlreadyExistsError: A directory already exists at ``root_path``.
            InitFailedError: A filesystem operation failed.
        """
        root = _to_abs_path(root_path)
        if fs.dir_exists(root):
            raise AlreadyExistsError(root)

        for rel in ("", *WORKSPACE_DIRS):
            path = append_to_abs_path(root, rel)
            try:
                fs.mkdir_all(path)
            except OSError as e:
                raise InitFailedError(root, "create directory", path, e) from e
            logger.debug("Created directory: %s", path)

        env_path = append_to_abs_path(root, ENVIRONMENTS_DIR, DEFAULT_ENV_NAME)
        files = (
            (SCHEMA_FILENAME, spec.raw_schema),
            (K8S_LIB_FILENAME, spec.generated_library),
            (EXTENSIONS_LIB_FILENAME, generate_extensions_lib(spec.version)),
        )
        for filename, data in files:
            path = append_to_abs_path(env_path, filename)
            try:
                fs.write_file(path, data)
            except OSError as e:
                raise InitFailedError(root, "write file", path, e) from e
            logger.debug("Wrote %s (%d bytes)", path, len(data))

        logger.info("Initialized app at %s", root)
        return cls(root, fs)

    @classmethod
    def find(cls, current_path: str, fs: FileSystem) -> Manager:
        """Find the workspace enclosing ``current_path``.

        ``current_path`` may be the root itself, any directory below it, or a
        file. Walks upward until a directory containing the marker directory
        is found.

        Raises:
            InvalidInputError: Path is empty, relative, or does not exist.
            NotFoundError: The filesystem root was reached without a match.
        """
        start = _to_abs_path(current_path)
        if not fs.exists(start):
            raise InvalidInputError(f"Path does not exist: '{start}'")

        candidate = start if fs.dir_exists(start) else parent_of(start)
        while True:
            if fs.dir_exists(append_to_abs_path(candidate, KSONNET_DIR)):
                logger.debug("Found app root %s from %s", candidate, start)
                return cls(candidate, fs)
            parent = parent_of(candidate)
            if parent == candidate:
                raise NotFoundError(start)
            candidate = parent

    # --- Paths ---

    @property
    def root_path(self) -> AbsPath:
        return self._root_path

    @property
    def ksonnet_path(self) -> AbsPath:
        return append_to_abs_path(self._root_path, KSONNET_DIR)

    @property
    def lib_path(self) -> AbsPath:
        return append_to_abs_path(self._root_path, LIB_DIR)

    @property
    def components_path(self) -> AbsPath:
        return append_to_abs_path(self._root_path, COMPONENTS_DIR)

    @property
    def environments_path(self) -> AbsPath:
        return append_to_abs_path(self._root_path, ENVIRONMENTS_DIR)

    @property
    def vendor_path(self) -> AbsPath:
        return append_to_abs_path(self._root_path, VENDOR_DIR)

    @property
    def default_env_path(self) -> AbsPath:
        return append_to_abs_path(self.environments_path, DEFAULT_ENV_NAME)

    def lib_paths(self, env_name: str = DEFAULT_ENV_NAME) -> tuple[AbsPath, AbsPath]:
        """Return (lib dir, environment dir holding the generated libraries).

        Raises:
            InvalidInputError: ``env_name`` is empty or not a single segment.
        """
        if not env_name or "/" in env_name or env_name in (".", ".."):
            raise InvalidInputError(f"Invalid environment name: '{env_name}'")
        return self.lib_path, append_to_abs_path(self.environments_path, env_name)

    # --- Components ---

    def component_paths(self) -> list[str]:
        """List every component file under components/, at any depth.

        Directories named ``doNotListMe`` are skipped with everything below
        them. Order is unspecified; sort if you need stable output.

        Raises:
            IOFailureError: The components directory could not be read.
        """
        top = self.components_path
        try:
            paths = list(
                self._fs.walk(top, prune=lambda name: name == UNLISTED_DIR_NAME)
            )
        except OSError as e:
            raise IOFailureError("list components in", top, e) from e
        logger.debug("Found %d component(s) under %s", len(paths), top)
        return paths


def _to_abs_path(path: str) -> AbsPath:
    try:
        return AbsPath(path)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def init_manager(root_path: str, spec: ClusterSpec, fs: FileSystem) -> Manager:
    """Create a new workspace. See Manager.init."""
    return Manager.init(root_path, spec, fs)


def find_manager(current_path: str, fs: FileSystem) -> Manager:
    """Find the enclosing workspace. See Manager.find."""
    return Manager.find(current_path, fs)
