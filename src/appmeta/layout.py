"""Fixed names of the reserved workspace directories and generated files.

Every Manager agrees on these; changing one makes existing workspaces
undiscoverable.
"""

# Marker directory: its presence identifies a workspace root
KSONNET_DIR = ".ksonnet"

LIB_DIR = "lib"
COMPONENTS_DIR = "components"
ENVIRONMENTS_DIR = "environments"
VENDOR_DIR = "vendor"

DEFAULT_ENV_NAME = "default"
DEFAULT_ENV_DIR = f"{ENVIRONMENTS_DIR}/{DEFAULT_ENV_NAME}"

# Generated files, written only into the default environment at init time
SCHEMA_FILENAME = "schema.json"
K8S_LIB_FILENAME = "k8s.libsonnet"
EXTENSIONS_LIB_FILENAME = "k.libsonnet"

# Directories with this name under components/ are skipped with their contents
UNLISTED_DIR_NAME = "doNotListMe"

# Directories that exist beneath the root after a successful init
WORKSPACE_DIRS = (
    KSONNET_DIR,
    LIB_DIR,
    COMPONENTS_DIR,
    ENVIRONMENTS_DIR,
    VENDOR_DIR,
    DEFAULT_ENV_DIR,
)
