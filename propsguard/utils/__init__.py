"""propsguard utilities package."""

from .constants import (
    DEFAULT_EXCLUDES,
    ERROR_LOG_FILE,
    LANGUAGE_BY_EXTENSION,
    MAX_FIX_PASSES,
    STATE_DIR,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger
from .text_edits import TextEdit, apply_edits, apply_text_edits, edits_span

__all__ = [
    "DEFAULT_EXCLUDES",
    "ERROR_LOG_FILE",
    "LANGUAGE_BY_EXTENSION",
    "MAX_FIX_PASSES",
    "STATE_DIR",
    "handle_exceptions",
    "ExitCodes",
    "logger",
    "TextEdit",
    "apply_edits",
    "apply_text_edits",
    "edits_span",
]
