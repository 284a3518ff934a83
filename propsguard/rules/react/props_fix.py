"""Builds the rewrite that moves parameter destructuring into the body.

Every offset is taken from the pristine source bytes, so the edits of one
fix apply together in any order.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any

from propsguard.ast_extractors.base import (
    ELEMENT_KINDS,
    FUNCTION_KINDS,
    NodeKind,
    field,
    find_child_by_type,
    line_indent,
    line_start,
    node_text,
    unwrap_parentheses,
)
from propsguard.utils.logging import logger
from propsguard.utils.text_edits import TextEdit

PROPS_NAME = "props"
INDENT_UNIT = "  "

_BINDING_TYPES = frozenset(
    [
        "identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
    ]
)

# Literals whose line breaks belong to the runtime value
_LITERAL_TYPES = frozenset(["string", "template_string"])


@dataclass
class FixResult:
    """Edits for one finding; fixable is False when no safe rewrite exists."""

    fixable: bool
    edits: list[TextEdit] = dataclass_field(default_factory=list)
    reason: str | None = None

    @classmethod
    def unfixable(cls, reason: str) -> "FixResult":
        return cls(fixable=False, edits=[], reason=reason)


def destructuring_pattern(param_node: Any) -> Any | None:
    """The object_pattern of a parameter, or None when it is not one.

    Handles bare JavaScript patterns and TypeScript required_parameter
    wrappers. Defaulted parameters do not count.
    """
    kind = NodeKind.of(param_node)

    if kind is NodeKind.OBJECT_PATTERN:
        return param_node

    if kind is NodeKind.REQUIRED_PARAMETER:
        if field(param_node, "value") is not None:
            return None
        pattern = field(param_node, "pattern")
        if NodeKind.of(pattern) is NodeKind.OBJECT_PATTERN:
            return pattern

    return None


def _type_annotation_text(param_node: Any) -> str:
    if NodeKind.of(param_node) is not NodeKind.REQUIRED_PARAMETER:
        return ""
    return node_text(field(param_node, "type"))


def _binds_props(pattern: Any) -> bool:
    stack = [pattern]
    while stack:
        current = stack.pop()
        if current is None:
            continue
        if current.type in _BINDING_TYPES and node_text(current) == PROPS_NAME:
            return True
        stack.extend(current.children)
    return False


def _rebinds_props(fn_node: Any) -> bool:
    """True if the function's own parameter list declares `props`."""
    single = field(fn_node, "parameter")
    if single is not None:
        return _binds_props(single)

    params = field(fn_node, "parameters")
    if params is None:
        return False
    for param in params.named_children:
        kind = NodeKind.of(param)
        if kind in (NodeKind.REQUIRED_PARAMETER, NodeKind.OPTIONAL_PARAMETER):
            param = field(param, "pattern")
        elif param.type == "assignment_pattern":
            param = field(param, "left")
        if _binds_props(param):
            return True
    return False


def _mentions_props(fn_node: Any) -> bool:
    """True if `props` is already bound or referenced inside the function.

    Nested functions that declare their own `props` parameter are skipped;
    the name inside them never reaches the rewritten function.
    """
    stack = list(fn_node.children)
    while stack:
        current = stack.pop()
        if NodeKind.of(current) in FUNCTION_KINDS and _rebinds_props(current):
            continue
        if current.type in _BINDING_TYPES and node_text(current) == PROPS_NAME:
            return True
        stack.extend(current.children)
    return False


def _returns_object_literal(body: Any, source: bytes) -> bool:
    """`=> ({ ... })`: parenthesized object literal, ambiguous with a block."""
    if NodeKind.of(body) is not NodeKind.PARENTHESIZED_EXPRESSION:
        return False
    inner = unwrap_parentheses(body)
    before = source[: inner.start_byte].rstrip()
    return before.endswith(b"(") and node_text(inner).startswith("{")


def _column(source: bytes, offset: int) -> int:
    """Character column of offset within its line."""
    return len(source[line_start(source, offset) : offset].decode("utf-8", errors="ignore"))


def _block_prelude(body: Any, source: bytes, statement: str) -> TextEdit:
    """Insert the prelude right after the opening brace of a block body."""
    brace = body.start_byte
    if body.start_point[0] == body.end_point[0]:
        return TextEdit.insert(brace + 1, f" {statement}")

    first = next(iter(body.named_children), None)
    if first is not None and first.start_point[0] > body.start_point[0]:
        indent = line_indent(source, first.start_byte)
    else:
        indent = line_indent(source, brace) + INDENT_UNIT

    return TextEdit.insert(brace + 1, f"\n{indent}{statement}")


def _multiline_literal_spans(markup: Any) -> list[tuple[int, int]]:
    """Byte ranges of string and template literals spanning several lines."""
    spans = []
    stack = [markup]
    while stack:
        current = stack.pop()
        if current.type in _LITERAL_TYPES and current.start_point[0] != current.end_point[0]:
            spans.append((current.start_byte, current.end_byte))
            continue
        stack.extend(current.children)
    return spans


def _reindent_markup(markup: Any, source: bytes, indent: str) -> str:
    """Shift markup lines under `indent`, keeping their relative indentation.

    The first line's own indentation is its source column; the baseline is
    the smallest indentation across all non-blank lines. Lines that begin
    inside a multi-line string or template literal are kept byte for byte.
    """
    spans = _multiline_literal_spans(markup)

    lines = []
    offset = markup.start_byte
    for raw in source[markup.start_byte : markup.end_byte].split(b"\n"):
        verbatim = any(start < offset <= end for start, end in spans)
        lines.append((raw.decode("utf-8"), verbatim))
        offset += len(raw) + 1

    levels = [_column(source, markup.start_byte)]
    for line, verbatim in lines[1:]:
        if line.strip() and not verbatim:
            levels.append(len(line) - len(line.lstrip()))
    baseline = min(levels)

    out = []
    for index, (line, verbatim) in enumerate(lines):
        if verbatim:
            out.append(line)
            continue
        if not line.strip():
            out.append("")
            continue
        level = levels[0] if index == 0 else len(line) - len(line.lstrip())
        out.append(f"{indent}{INDENT_UNIT * 2}{' ' * (level - baseline)}{line.lstrip()}")

    return "\n".join(out)


def _rebuild_parenthesized_markup(
    fn_node: Any, markup: Any, source: bytes, statement: str
) -> TextEdit | None:
    """Replace everything after `=>` with a block returning the markup."""
    arrow = find_child_by_type(fn_node, "=>")
    if arrow is None:
        return None

    indent = line_indent(source, fn_node.start_byte)
    inner = indent + INDENT_UNIT
    block = (
        " {\n"
        f"{inner}{statement}\n"
        f"{inner}return (\n"
        f"{_reindent_markup(markup, source, indent)}\n"
        f"{inner});\n"
        f"{indent}}}"
    )
    return TextEdit(arrow.end_byte, fn_node.end_byte, block)


def build_fix(fn_node: Any, param_node: Any, source: bytes) -> FixResult:
    """Edits that replace param_node with `props` and destructure in the body.

    Only param_node is ever touched; a forwardRef `ref` parameter that
    follows it stays as written.
    """
    pattern = destructuring_pattern(param_node)
    if pattern is None:
        return FixResult.unfixable("parameter is not an object pattern")

    body = field(fn_node, "body")
    if body is None:
        return FixResult.unfixable("function has no body")

    if _returns_object_literal(body, source):
        logger.debug("Skipping autofix: arrow returns a parenthesized object literal")
        return FixResult.unfixable("arrow function returns a parenthesized object literal")

    if _mentions_props(fn_node):
        logger.debug(f"Skipping autofix: `{PROPS_NAME}` already used in function")
        return FixResult.unfixable(f"`{PROPS_NAME}` is already used in this function")

    type_text = _type_annotation_text(param_node)
    statement = f"const {node_text(pattern).strip()} = {PROPS_NAME};"

    edits = [TextEdit(param_node.start_byte, param_node.end_byte, PROPS_NAME + type_text)]

    if NodeKind.of(body) is NodeKind.STATEMENT_BLOCK:
        edits.append(_block_prelude(body, source, statement))
        return FixResult(fixable=True, edits=edits)

    markup = unwrap_parentheses(body)
    parenthesized = NodeKind.of(body) is NodeKind.PARENTHESIZED_EXPRESSION
    if parenthesized and NodeKind.of(markup) in ELEMENT_KINDS:
        rebuilt = _rebuild_parenthesized_markup(fn_node, markup, source, statement)
        if rebuilt is None:
            return FixResult.unfixable("arrow token not found")
        edits.append(rebuilt)
        return FixResult(fixable=True, edits=edits)

    edits.append(
        TextEdit(body.start_byte, body.end_byte, f"{{ {statement} return {node_text(body)}; }}")
    )
    return FixResult(fixable=True, edits=edits)
