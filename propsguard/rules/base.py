"""Base contracts for rule standardization."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Literal

from propsguard.utils.logging import logger
from propsguard.utils.text_edits import TextEdit


class Severity(Enum):
    """Reporting levels a rule can be configured to."""

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Accept enum members and ESLint-style strings ("warn", 2, ...)."""
        if isinstance(value, Severity):
            return value
        aliases = {"warn": "warning", "2": "error", "1": "warning", "0": "off"}
        normalized = aliases.get(str(value).strip().lower(), str(value).strip().lower())
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(
                f"Unknown severity {value!r}; expected one of: error, warning, off"
            ) from None


@dataclass
class StandardRuleContext:
    """Universal immutable context for all standardized rules."""

    file_path: Path
    content: str
    language: str

    parsed: Any | None = None
    severity: Severity = Severity.ERROR

    extra: dict[str, Any] = field(default_factory=dict)

    def get_tree(self) -> Any | None:
        """Root node of the parsed tree, or None when parsing was skipped."""
        if self.parsed is None:
            logger.debug(f"No parse tree for {self.file_path}")
            return None
        return self.parsed.root

    def get_lines(self) -> list[str]:
        """Get file content as list of lines."""
        return self.content.splitlines() if self.content else []

    def get_snippet(self, line_num: int, context_lines: int = 0) -> str:
        """Extract code snippet around a line number."""
        lines = self.get_lines()
        if not lines or line_num < 1 or line_num > len(lines):
            return ""

        start = max(1, line_num - context_lines)
        end = min(len(lines), line_num + context_lines)

        if start == end:
            return lines[line_num - 1].strip()

        snippet_lines = []
        for i in range(start, end + 1):
            prefix = ">> " if i == line_num else "   "
            snippet_lines.append(f"{i:4d}{prefix}{lines[i - 1]}")

        return "\n".join(snippet_lines)


@dataclass
class StandardFinding:
    """Standardized output from all rules."""

    rule_name: str
    message: str
    file_path: str
    line: int

    column: int = 0
    end_line: int | None = None
    end_column: int | None = None
    severity: Severity = Severity.ERROR
    category: str = "react"
    snippet: str = ""
    message_id: str | None = None

    fix: list[TextEdit] | None = None

    @property
    def fixable(self) -> bool:
        return bool(self.fix)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "rule": self.rule_name,
            "message": self.message,
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
            "category": self.category,
            "code_snippet": self.snippet,
            "fixable": self.fixable,
        }

        if self.end_line is not None:
            result["end_line"] = self.end_line
            result["end_column"] = self.end_column
        if self.message_id:
            result["message_id"] = self.message_id
        if self.fix:
            result["fix"] = [edit.to_dict() for edit in self.fix]

        return result


RuleFunction = Callable[[StandardRuleContext], list[StandardFinding]]


@dataclass
class RuleMetadata:
    """Metadata describing a rule (mirrors an ESLint rule's ``meta`` block)."""

    name: str
    category: str
    description: str = ""

    rule_type: Literal["problem", "suggestion", "layout"] = "suggestion"
    fixable: Literal["code", "whitespace"] | None = None
    messages: dict[str, str] = field(default_factory=dict)
    schema: list[Any] = field(default_factory=list)
    recommended: bool = False

    target_extensions: list[str] | None = None

    def applies_to(self, file_path: Path | str) -> bool:
        """Whether the rule handles this file type; directory exclusion is done at discovery."""
        if not self.target_extensions:
            return True
        return Path(file_path).suffix.lower() in self.target_extensions
