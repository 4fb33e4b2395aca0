"""Shared helpers: config directory resolution."""

import os
from pathlib import Path

_DEFAULT_DIR_NAME = ".appmeta"


def appmeta_dir() -> Path:
    """Return the appmeta config directory.

    ``$APPMETA_DIR`` wins; otherwise ``~/.appmeta``.
    """
    raw = os.environ.get("APPMETA_DIR", "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / _DEFAULT_DIR_NAME
