# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "img": "buildmatrix.matrix.images",
    "images": "buildmatrix.matrix.images",
    "man": "buildmatrix.matrix.manifest",
    "manifest": "buildmatrix.matrix.manifest",
    "res": "buildmatrix.matrix.resolve",
    "rsv": "buildmatrix.matrix.resolve",
    "resolve": "buildmatrix.matrix.resolve",
    "agg": "buildmatrix.matrix.aggregate",
    "emit": "buildmatrix.matrix.emit",
    "out": "buildmatrix.matrix.emit",
    "fs": "buildmatrix.io.fs",
    "io": "buildmatrix.io",
    "conf": "buildmatrix.config",
    "rules": "buildmatrix.rules",
}

# Top-level modules within buildmatrix for auto-prefixing
KNOWN_TOP_MODULES = {
    "matrix",
    "io",
    "rules",
    "datacls",
    "utils",
    "exceptions",
    "config",
    "cli",
}

LOG_LEVELS_ENV = "BUILDMATRIX_LOG_LEVELS"

# --- Filenames and Paths ---
DEFAULT_ROOT = "containers/openami"
DOCKERFILE_NAME = "Dockerfile"
MANIFEST_FILENAME = "tags.txt"

# --- Environment ---
# setting name -> environment variable
ENV_VARS = {
    "root": "OPENAMI_DIR",
    "strict": "STRICT_MISSING",
    "output": "GITHUB_OUTPUT",
    "report_missing_dockerfile": "REPORT_MISSING_DOCKERFILE",
}

# --- Manifest ---
COMMENT_PREFIX = "#"

# --- Inference ---
LATEST_VERSION = "latest"
DEFAULT_DISTRO = "debian-12"

# --- Output keys, in emission order ---
OUTPUT_KEYS = (
    "matrix",
    "missing_dockerfile",
    "missing_tags",
    "missing_context",
)

# --- Exit codes ---
EXIT_OK = 0
EXIT_STRICT = 1
EXIT_CONFIG = 2
EXIT_OUTPUT = 3
EXIT_UNKNOWN = 4
