"""Shared fixtures: an in-memory filesystem holding a blank swagger schema."""

from collections.abc import Callable

import pytest

from appmeta.clusterspec import ClusterSpec, parse_cluster_spec
from appmeta.fs import MemoryFileSystem

_BLANK_SWAGGER = "/blankSwagger.json"
_BLANK_SWAGGER_DATA = """{
  "swagger": "2.0",
  "info": {
   "title": "Kubernetes",
   "version": "v1.7.0"
  },
  "paths": {
  },
  "definitions": {
  }
}"""
_BLANK_K8S_LIB = """// AUTOGENERATED from the Kubernetes OpenAPI specification. DO NOT MODIFY.
// Kubernetes version: v1.7.0

{
  local hidden = {
  },
}
"""


@pytest.fixture
def blank_swagger_data() -> bytes:
    return _BLANK_SWAGGER_DATA.encode()


@pytest.fixture
def blank_k8s_lib() -> bytes:
    return _BLANK_K8S_LIB.encode()


@pytest.fixture
def mem_fs(blank_swagger_data: bytes) -> MemoryFileSystem:
    fs = MemoryFileSystem()
    fs.write_file(_BLANK_SWAGGER, blank_swagger_data)
    return fs


@pytest.fixture
def spec(mem_fs: MemoryFileSystem) -> ClusterSpec:
    return parse_cluster_spec(f"file:{_BLANK_SWAGGER}", mem_fs)


@pytest.fixture
def touch(mem_fs: MemoryFileSystem) -> Callable[[str], str]:
    """Return a helper that creates an empty file (and its parents) in mem_fs."""

    def _touch(path: str) -> str:
        mem_fs.mkdir_all(path.rsplit("/", 1)[0] or "/")
        mem_fs.write_file(path, b"")
        return path

    return _touch
