"""Tree-sitter node helpers shared by the React detectors.

Nodes are py-tree-sitter ``Node`` objects. Parent links are only ever read
for upward lookups; nothing here creates or mutates nodes.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Closed set of node kinds the detectors distinguish.

    Every tree-sitter type not listed maps to OTHER.
    """

    FUNCTION_DECLARATION = "function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    ARROW_FUNCTION = "arrow_function"
    CALL_EXPRESSION = "call_expression"
    ARGUMENTS = "arguments"
    MEMBER_EXPRESSION = "member_expression"
    IDENTIFIER = "identifier"
    VARIABLE_DECLARATOR = "variable_declarator"
    FORMAL_PARAMETERS = "formal_parameters"
    REQUIRED_PARAMETER = "required_parameter"
    OPTIONAL_PARAMETER = "optional_parameter"
    OBJECT_PATTERN = "object_pattern"
    STATEMENT_BLOCK = "statement_block"
    PARENTHESIZED_EXPRESSION = "parenthesized_expression"
    JSX_ELEMENT = "jsx_element"
    JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
    JSX_FRAGMENT = "jsx_fragment"
    JSX_OPENING_ELEMENT = "jsx_opening_element"
    JSX_CLOSING_ELEMENT = "jsx_closing_element"
    JSX_EXPRESSION = "jsx_expression"
    JSX_ATTRIBUTE = "jsx_attribute"
    JSX_TEXT = "jsx_text"
    JSX_NAMESPACE_NAME = "jsx_namespace_name"
    OTHER = "other"

    @classmethod
    def of(cls, node: Any) -> "NodeKind":
        """Kind tag of a node; None and anonymous tokens map to OTHER."""
        if node is None or not node.is_named:
            return cls.OTHER
        return _KIND_BY_TYPE.get(node.type, cls.OTHER)


_KIND_BY_TYPE = {kind.value: kind for kind in NodeKind if kind is not NodeKind.OTHER}
# Older tree-sitter-javascript releases call function expressions "function".
# The keyword token shares that type, hence the is_named check above.
_KIND_BY_TYPE["function"] = NodeKind.FUNCTION_EXPRESSION

FUNCTION_KINDS = frozenset(
    [
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION,
    ]
)

MARKUP_KINDS = frozenset(
    [
        NodeKind.JSX_ELEMENT,
        NodeKind.JSX_SELF_CLOSING_ELEMENT,
        NodeKind.JSX_FRAGMENT,
        NodeKind.JSX_OPENING_ELEMENT,
        NodeKind.JSX_CLOSING_ELEMENT,
        NodeKind.JSX_EXPRESSION,
        NodeKind.JSX_ATTRIBUTE,
        NodeKind.JSX_TEXT,
        NodeKind.JSX_NAMESPACE_NAME,
    ]
)

# Element-shaped markup: what a returned expression body can be
ELEMENT_KINDS = frozenset(
    [
        NodeKind.JSX_ELEMENT,
        NodeKind.JSX_SELF_CLOSING_ELEMENT,
        NodeKind.JSX_FRAGMENT,
    ]
)


def node_text(node: Any) -> str:
    """Extract text from a tree-sitter node."""
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def field(node: Any, name: str) -> Any | None:
    """Child by field name, tolerating a missing node."""
    if node is None:
        return None
    return node.child_by_field_name(name)


def find_child_by_type(node: Any, child_type: str) -> Any | None:
    """Find first child of given type (anonymous tokens included)."""
    if node is None:
        return None
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def same_node(a: Any, b: Any) -> bool:
    """Identity check that survives py-tree-sitter re-wrapping nodes."""
    if a is None or b is None:
        return False
    return (a.type, a.start_byte, a.end_byte) == (b.type, b.start_byte, b.end_byte)


def iter_ancestors(node: Any) -> Iterator[Any]:
    """Yield node.parent, its parent, ... up to the root."""
    current = node.parent if node is not None else None
    while current is not None:
        yield current
        current = current.parent


def unwrap_parentheses(node: Any) -> Any:
    """Strip any number of enclosing parenthesized_expression layers."""
    while NodeKind.of(node) is NodeKind.PARENTHESIZED_EXPRESSION:
        inner = [c for c in node.named_children if c.type != "comment"]
        if len(inner) != 1:
            break
        node = inner[0]
    return node


def line_start(source: bytes, offset: int) -> int:
    """Byte offset of the start of the line containing offset."""
    return source.rfind(b"\n", 0, offset) + 1


def line_indent(source: bytes, offset: int) -> str:
    """Leading whitespace of the line containing offset."""
    start = line_start(source, offset)
    end = start
    while end < len(source) and source[end : end + 1] in (b" ", b"\t"):
        end += 1
    return source[start:end].decode("utf-8")
