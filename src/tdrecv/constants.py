from __future__ import annotations

DEFAULT_DIR = "."
DEFAULT_BINARY = "tailscale"
DIR_MODE = 0o755

CONFLICT_POLICIES = ("skip", "overwrite", "rename")
DEFAULT_CONFLICT = "rename"

# `file get --wait` exits 1 when nothing was waiting; not a documented contract.
NO_FILES_EXIT_CODE = 1

FATAL_EXIT_CODE = 1

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
