"""Rule registry."""

from propsguard.rules.base import RuleFunction, RuleMetadata

from .react import DESTRUCTURE_PROPS_METADATA, find_destructured_props

# name -> (metadata, entry point)
RULES: dict[str, tuple[RuleMetadata, RuleFunction]] = {
    DESTRUCTURE_PROPS_METADATA.name: (DESTRUCTURE_PROPS_METADATA, find_destructured_props),
}

__all__ = ["RULES", "find_destructured_props"]
