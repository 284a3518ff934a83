"""React component rules."""

from .destructure_props_analyze import METADATA as DESTRUCTURE_PROPS_METADATA
from .destructure_props_analyze import analyze as find_destructured_props

__all__ = ["DESTRUCTURE_PROPS_METADATA", "find_destructured_props"]
