"""Tree-sitter node model used by the rule engine."""

from .base import (
    ELEMENT_KINDS,
    FUNCTION_KINDS,
    MARKUP_KINDS,
    NodeKind,
    field,
    find_child_by_type,
    iter_ancestors,
    line_indent,
    line_start,
    node_text,
    same_node,
    unwrap_parentheses,
)

__all__ = [
    "ELEMENT_KINDS",
    "FUNCTION_KINDS",
    "MARKUP_KINDS",
    "NodeKind",
    "field",
    "find_child_by_type",
    "iter_ancestors",
    "line_indent",
    "line_start",
    "node_text",
    "same_node",
    "unwrap_parentheses",
]
