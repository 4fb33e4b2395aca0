"""Generator for the extensions library (k.libsonnet).

The extensions library layers convenience mixins over the generated core
library. It is produced independently of the cluster spec parser; only the
Kubernetes version stamped into its header comes from the spec.
"""

from .layout import K8S_LIB_FILENAME

_EXTENSIONS_TEMPLATE = """\
// AUTOGENERATED from the Kubernetes OpenAPI specification. DO NOT MODIFY.
// Kubernetes version: {version}

local k8s = import "{core_lib}";

k8s + {{
  local hidden = k8s.hidden,
}}
"""


def generate_extensions_lib(version: str) -> bytes:
    """Render the extensions library for ``version``. Never empty."""
    text = _EXTENSIONS_TEMPLATE.format(
        version=version or "unknown",
        core_lib=K8S_LIB_FILENAME,
    )
    return text.encode("utf-8")
