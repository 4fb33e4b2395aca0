"""Root conftest: isolates the appmeta config directory.

Force-set (not setdefault) so a developer's real ~/.appmeta or APPMETA_*
variables never leak into tests.
"""

import os
import tempfile

os.environ["APPMETA_DIR"] = tempfile.mkdtemp(prefix="appmeta-test-")
os.environ.pop("APPMETA_API_SPEC", None)
os.environ.pop("APPMETA_LOG_LEVEL", None)
