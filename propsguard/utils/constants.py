"""Centralized constants for propsguard.

Single source of truth for paths, file types and limits used across the
host (discovery, parsing, fix loop).
"""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

STATE_DIR = Path("./.propsguard")
ERROR_LOG_FILE = STATE_DIR / "error.log"

# ============================================================================
# SOURCE DISCOVERY
# ============================================================================

# Extension -> tree-sitter grammar name. The javascript grammar parses JSX.
LANGUAGE_BY_EXTENSION = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

DEFAULT_EXCLUDES = (
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
    ".next",
)

# ============================================================================
# FIX LOOP
# ============================================================================

# Same ceiling ESLint uses for repeated fix passes over one file
MAX_FIX_PASSES = 10
