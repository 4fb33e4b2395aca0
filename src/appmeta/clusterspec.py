"""Cluster spec sources: read an OpenAPI schema and derive its code library.

A source descriptor names where the schema lives. Only local files are
supported:

  - file:/path/to/swagger.json

``version:`` and URL sources would require a network fetch and are
rejected.

Key names: ClusterSpec, parse_cluster_spec.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from .errors import ClusterSpecError
from .fs import FileSystem

logger = logging.getLogger(__name__)

_FILE_PREFIX = "file:"
_REMOTE_PREFIXES = ("version:", "http:", "https:")

_K8S_LIB_TEMPLATE = """\
// AUTOGENERATED from the Kubernetes OpenAPI specification. DO NOT MODIFY.
// Kubernetes version: {version}

{{
  local hidden = {{
  }},
}}
"""


@dataclass(frozen=True)
class ClusterSpec:
    """Parsed cluster spec: the raw schema and the library derived from it."""

    raw_schema: bytes
    generated_library: bytes
    version: str = "unknown"


def parse_cluster_spec(source: str, fs: FileSystem) -> ClusterSpec:
    """Parse a spec source descriptor into a ClusterSpec.

    Args:
        source: Descriptor such as ``file:/blankSwagger.json``.
        fs: Filesystem the schema file is read from.

    Raises:
        ClusterSpecError: Unsupported or malformed descriptor, unreadable
            file, or a schema that is not a JSON object.
    """
    source = source.strip()
    if source.startswith(_FILE_PREFIX):
        path = source[len(_FILE_PREFIX) :]
        if not path:
            raise ClusterSpecError(f"Missing path in cluster spec source: '{source}'")
        return _parse_file(path, fs)
    if source.startswith(_REMOTE_PREFIXES):
        raise ClusterSpecError(
            f"Unsupported cluster spec source '{source}': only file: sources "
            "can be read"
        )
    raise ClusterSpecError(f"Unrecognized cluster spec source: '{source}'")


def _parse_file(path: str, fs: FileSystem) -> ClusterSpec:
    try:
        raw = fs.read_file(path)
    except OSError as e:
        raise ClusterSpecError(f"Failed to read cluster spec '{path}': {e}") from e

    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ClusterSpecError(f"Cluster spec '{path}' is not valid JSON: {e}") from e
    if not isinstance(doc, dict):
        raise ClusterSpecError(f"Cluster spec '{path}' must be a JSON object")

    info = doc.get("info")
    version = ""
    if isinstance(info, dict):
        version = str(info.get("version") or "")
    version = version or "unknown"

    logger.debug("Parsed cluster spec %s (version %s)", path, version)
    return ClusterSpec(
        raw_schema=raw,
        generated_library=_K8S_LIB_TEMPLATE.format(version=version).encode("utf-8"),
        version=version,
    )
