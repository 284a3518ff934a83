"""Decides which functions are React components, and which are exempt.

Classification is purely lexical: naming convention, memo/forwardRef
wrapping and JSX presence. Imports and types are never resolved.
"""

from dataclasses import dataclass
from typing import Any

from propsguard.ast_extractors.base import (
    NodeKind,
    field,
    node_text,
    same_node,
)
from propsguard.utils.logging import logger

from .jsx_presence import contains_markup
from .wrapper_detection import (
    WrapperInfo,
    detect_wrapper,
    enclosing_call,
    match_wrapper_callee,
)

# Elements whose sole expression child is a render callback
CHILDREN_RENDER_PROP_COMPONENTS = frozenset(
    ["Field", "FastField", "Connect", "Query", "Mutation", "Subscription"]
)

# Attribute names that carry render callbacks on the elements below
RENDER_PROP_NAMES = frozenset(
    ["render", "children", "renderItem", "renderContent", "renderOption"]
)
RENDER_PROP_COMPONENTS = frozenset(
    ["Controller", "Field", "FastField", "Connect", "Query", "Mutation"]
)


@dataclass
class ComponentCandidate:
    """Transient classification result for one function node."""

    node: Any
    declared_name: str | None = None
    wrapper: WrapperInfo | None = None


def _declarator_name(declarator: Any, value: Any) -> str | None:
    """Name bound by `const <name> = value`, when value is the initializer."""
    if NodeKind.of(declarator) is not NodeKind.VARIABLE_DECLARATOR:
        return None
    if not same_node(field(declarator, "value"), value):
        return None
    name = field(declarator, "name")
    if NodeKind.of(name) is not NodeKind.IDENTIFIER:
        return None
    return node_text(name)


def _argument_count(call: Any) -> int:
    args = field(call, "arguments")
    if args is None:
        return 0
    return len([c for c in args.named_children if c.type != "comment"])


def declared_name(fn_node: Any) -> str | None:
    """Name a function is known by, if any.

    - named function: its own name
    - anonymous function assigned to a variable: the variable
    - anonymous function passed as the sole argument of a call whose result
      is assigned to a variable: that variable
    """
    kind = NodeKind.of(fn_node)

    if kind in (NodeKind.FUNCTION_DECLARATION, NodeKind.FUNCTION_EXPRESSION):
        own = field(fn_node, "name")
        if own is not None:
            return node_text(own)
        if kind is NodeKind.FUNCTION_DECLARATION:
            return None

    name = _declarator_name(fn_node.parent, fn_node)
    if name is not None:
        return name

    call = enclosing_call(fn_node)
    if call is not None and _argument_count(call) == 1:
        return _declarator_name(call.parent, call)

    return None


def _starts_lowercase(name: str) -> bool:
    return "a" <= name[:1] <= "z"


def classify_component(fn_node: Any) -> ComponentCandidate | None:
    """ComponentCandidate when fn_node is a component, else None.

    First applicable rule wins:
      1. lowercase declared name -> not a component
      2. direct argument of a non-wrapper call (a callback) -> not a component
      3. wrapped by memo / forwardRef, directly or via a declarator -> component
      4. otherwise component iff the body contains JSX
    """
    name = declared_name(fn_node)
    if name is not None and _starts_lowercase(name):
        logger.debug(f"{name}: lowercase name, not a component")
        return None

    call = enclosing_call(fn_node)
    if call is not None and match_wrapper_callee(field(call, "function")) is None:
        return None

    wrapper = detect_wrapper(fn_node)
    if wrapper is not None:
        return ComponentCandidate(node=fn_node, declared_name=name, wrapper=wrapper)

    if contains_markup(field(fn_node, "body")):
        return ComponentCandidate(node=fn_node, declared_name=name)

    return None


def is_component(fn_node: Any) -> bool:
    return classify_component(fn_node) is not None


def _element_name(element: Any) -> str | None:
    """Plain identifier tag name of an opening or self-closing element."""
    name = field(element, "name")
    if NodeKind.of(name) is not NodeKind.IDENTIFIER:
        return None
    return node_text(name)


def _attribute_name(attribute: Any) -> str | None:
    for child in attribute.named_children:
        return node_text(child)
    return None


def is_exempt_render_prop(fn_node: Any) -> bool:
    """True when fn_node sits in a conventional render-prop slot.

    Covered positions:
      - <Controller render={fn} /> and the other RENDER_PROP_NAMES attributes
        on RENDER_PROP_COMPONENTS elements
      - <Field>{fn}</Field> for CHILDREN_RENDER_PROP_COMPONENTS
    """
    container = fn_node.parent
    if NodeKind.of(container) is not NodeKind.JSX_EXPRESSION:
        return False

    content = [c for c in container.named_children if c.type != "comment"]
    if len(content) != 1 or not same_node(content[0], fn_node):
        return False

    holder = container.parent
    holder_kind = NodeKind.of(holder)

    if holder_kind is NodeKind.JSX_ATTRIBUTE:
        element = holder.parent
        if NodeKind.of(element) not in (
            NodeKind.JSX_OPENING_ELEMENT,
            NodeKind.JSX_SELF_CLOSING_ELEMENT,
        ):
            return False
        return (
            _attribute_name(holder) in RENDER_PROP_NAMES
            and _element_name(element) in RENDER_PROP_COMPONENTS
        )

    if holder_kind is NodeKind.JSX_ELEMENT:
        return _element_name(field(holder, "open_tag")) in CHILDREN_RENDER_PROP_COMPONENTS

    return False
