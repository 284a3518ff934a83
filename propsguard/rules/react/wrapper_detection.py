"""Detection of memo / forwardRef wrapping calls around a function."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from propsguard.ast_extractors.base import (
    NodeKind,
    field,
    iter_ancestors,
    node_text,
)


class WrapperKind(Enum):
    """Higher-order components recognized as component wrappers."""

    MEMO = "memo"
    FORWARD_REF = "forwardRef"


WRAPPER_NAMES = frozenset(kind.value for kind in WrapperKind)

# Namespace accepted for qualified calls such as React.memo
LIBRARY_ALIAS = "React"


@dataclass(frozen=True)
class WrapperInfo:
    """Which wrapper applies, and whether it was written as React.<name>."""

    kind: WrapperKind
    qualified: bool = False


def match_wrapper_callee(callee: Any) -> WrapperInfo | None:
    """Match `memo` / `forwardRef` / `React.memo` / `React.forwardRef`."""
    kind = NodeKind.of(callee)

    if kind is NodeKind.IDENTIFIER:
        name = node_text(callee)
        if name in WRAPPER_NAMES:
            return WrapperInfo(WrapperKind(name), qualified=False)
        return None

    if kind is NodeKind.MEMBER_EXPRESSION:
        obj = field(callee, "object")
        prop = field(callee, "property")
        if NodeKind.of(obj) is not NodeKind.IDENTIFIER or node_text(obj) != LIBRARY_ALIAS:
            return None
        name = node_text(prop)
        if name in WRAPPER_NAMES:
            return WrapperInfo(WrapperKind(name), qualified=True)
        return None

    return None


def enclosing_call(fn_node: Any) -> Any | None:
    """The call_expression fn_node is passed to as a direct argument, if any."""
    args = fn_node.parent
    if NodeKind.of(args) is not NodeKind.ARGUMENTS:
        return None
    call = args.parent
    if NodeKind.of(call) is not NodeKind.CALL_EXPRESSION:
        return None
    return call


def _direct_wrapper(fn_node: Any) -> WrapperInfo | None:
    call = enclosing_call(fn_node)
    if call is None:
        return None
    return match_wrapper_callee(field(call, "function"))


def _declarator_wrapper(fn_node: Any) -> WrapperInfo | None:
    """Walk up to the first variable declarator and match its initializer.

    The walk stops at the first declarator, matching or not, or at the root.
    """
    for ancestor in iter_ancestors(fn_node):
        kind = NodeKind.of(ancestor)

        if kind is NodeKind.VARIABLE_DECLARATOR:
            init = field(ancestor, "value")
            if NodeKind.of(init) is not NodeKind.CALL_EXPRESSION:
                return None
            return match_wrapper_callee(field(init, "function"))

    return None


def detect_wrapper(fn_node: Any) -> WrapperInfo | None:
    """WrapperInfo for a directly or indirectly wrapped function, else None."""
    if fn_node is None:
        return None
    return _direct_wrapper(fn_node) or _declarator_wrapper(fn_node)
