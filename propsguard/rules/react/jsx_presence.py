"""JSX presence detection over arbitrary subtrees."""

from typing import Any

from propsguard.ast_extractors.base import MARKUP_KINDS, NodeKind


def contains_markup(node: Any) -> bool:
    """True if node or any descendant is a JSX node.

    Depth-first over child edges only (parents are never followed), stopping
    at the first markup node found. Returns False for None.
    """
    if node is None:
        return False

    stack = [node]
    while stack:
        current = stack.pop()
        if NodeKind.of(current) in MARKUP_KINDS:
            return True
        # Reversed so siblings are visited in source order
        stack.extend(reversed(current.children))

    return False
