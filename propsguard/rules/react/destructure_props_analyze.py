"""React props destructuring rule - flags `function C({ a, b })` components.

Components must take a plain `props` parameter and destructure it in the
body. Each offending parameter produces one finding, with an autofix that
rewrites the parameter and adds `const { a, b } = props;` to the body.

Render-prop callbacks (Controller render, Field children, ...) are exempt.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any

from propsguard.ast_extractors.base import FUNCTION_KINDS, NodeKind, field
from propsguard.rules.base import (
    RuleMetadata,
    Severity,
    StandardFinding,
    StandardRuleContext,
)
from propsguard.utils.constants import LANGUAGE_BY_EXTENSION
from propsguard.utils.logging import logger
from propsguard.utils.text_edits import TextEdit

from .component_classifier import (
    ComponentCandidate,
    classify_component,
    is_exempt_render_prop,
)
from .props_fix import build_fix, destructuring_pattern

RULE_NAME = "force-destructure-props"
MESSAGE_ID = "noDestructuringInParams"
MESSAGE = "Destructure the input parameter inside the body, not in the parameter list."

METADATA = RuleMetadata(
    name=RULE_NAME,
    category="react",
    description=(
        "Force destructuring of props inside function component body "
        "instead of parameter list"
    ),
    rule_type="suggestion",
    fixable="code",
    messages={MESSAGE_ID: MESSAGE},
    schema=[],
    recommended=True,
    target_extensions=sorted(LANGUAGE_BY_EXTENSION),
)


@dataclass
class Finding:
    """One offending parameter and its rewrite, if a safe one exists."""

    target_node: Any
    fixable: bool
    edits: list[TextEdit] = dataclass_field(default_factory=list)
    candidate: ComponentCandidate | None = None
    reason: str | None = None


def relevant_parameter(fn_node: Any) -> Any | None:
    """First parameter of a one- or two-parameter function.

    The second parameter (forwardRef's `ref`) is never inspected.
    """
    params = field(fn_node, "parameters")
    if NodeKind.of(params) is not NodeKind.FORMAL_PARAMETERS:
        return None

    entries = [c for c in params.named_children if c.type != "comment"]
    if len(entries) not in (1, 2):
        return None
    return entries[0]


def check_function(fn_node: Any, source: bytes) -> Finding | None:
    """Finding for fn_node, or None when it is compliant or not a component."""
    candidate = classify_component(fn_node)
    if candidate is None:
        return None

    param = relevant_parameter(fn_node)
    pattern = destructuring_pattern(param)
    if pattern is None:
        return None

    if is_exempt_render_prop(fn_node):
        return None

    fix = build_fix(fn_node, param, source)
    return Finding(
        target_node=pattern,
        fixable=fix.fixable,
        edits=fix.edits,
        candidate=candidate,
        reason=fix.reason,
    )


def find_violations(root: Any, source: bytes) -> list[Finding]:
    """Visit every function once, in source order."""
    findings = []

    stack = [root]
    while stack:
        node = stack.pop()
        if NodeKind.of(node) in FUNCTION_KINDS:
            finding = check_function(node, source)
            if finding is not None:
                findings.append(finding)
        stack.extend(reversed(node.children))

    return findings


class DestructurePropsAnalyzer:
    """Runs the rule over one parsed file and converts results to StandardFindings."""

    def __init__(self, context: StandardRuleContext):
        self.context = context
        self.findings: list[StandardFinding] = []

    def analyze(self) -> list[StandardFinding]:
        """Main analysis entry point."""
        if self.context.severity is Severity.OFF:
            return []

        root = self.context.get_tree()
        if root is None:
            return []

        parsed = self.context.parsed
        allow_fix = not parsed.has_errors
        if not allow_fix:
            logger.debug(f"{self.context.file_path}: syntax errors in tree, fixes disabled")

        for violation in find_violations(root, parsed.source):
            self.findings.append(self._to_standard(violation, allow_fix))

        return self.findings

    def _to_standard(self, violation: Finding, allow_fix: bool) -> StandardFinding:
        node = violation.target_node
        line = node.start_point[0] + 1

        fix = violation.edits if violation.fixable and allow_fix else None
        if violation.reason:
            logger.debug(f"{self.context.file_path}:{line} reported without fix: {violation.reason}")

        return StandardFinding(
            rule_name=RULE_NAME,
            message=MESSAGE,
            message_id=MESSAGE_ID,
            file_path=str(self.context.file_path),
            line=line,
            column=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_column=node.end_point[1],
            severity=self.context.severity,
            category=METADATA.category,
            snippet=self.context.get_snippet(line),
            fix=fix,
        )


def analyze(context: StandardRuleContext) -> list[StandardFinding]:
    """Rule entry point (RuleFunction signature)."""
    return DestructurePropsAnalyzer(context).analyze()
