"""Runs the configured rules over files and applies their fixes.

Fix application follows ESLint's loop: every pass takes the fix groups that
do not overlap an earlier group, applies them to one snapshot, re-parses,
and re-runs the rules. Deferred groups are picked up by the next pass.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from propsguard.ast_parser import ASTParser, ParsedSource
from propsguard.config import PropsGuardConfig
from propsguard.rules import RULES
from propsguard.rules.base import Severity, StandardFinding, StandardRuleContext
from propsguard.utils.constants import MAX_FIX_PASSES
from propsguard.utils.logging import logger
from propsguard.utils.text_edits import TextEdit, apply_edits, edits_span


@dataclass
class FileResult:
    """Outcome of checking (and optionally fixing) one file."""

    file_path: Path
    findings: list[StandardFinding] = field(default_factory=list)
    original: bytes | None = None
    fixed: bytes | None = None
    passes: int = 0
    error: str | None = None

    @property
    def changed(self) -> bool:
        return self.fixed is not None and self.fixed != self.original


def select_fix_groups(groups: list[list[TextEdit]]) -> list[list[TextEdit]]:
    """Non-overlapping fix groups, earliest first.

    A group is one finding's edits, treated as a single span.
    """
    accepted = []
    last_end = -1

    for group in sorted(groups, key=edits_span):
        start, end = edits_span(group)
        if start <= last_end:
            continue
        accepted.append(group)
        last_end = end

    return accepted


class RulesOrchestrator:
    """Discovers source files and runs every enabled rule on them."""

    def __init__(self, config: PropsGuardConfig | None = None):
        self.config = config or PropsGuardConfig()
        self.parser = ASTParser(self.config.language_map)

    def discover_files(self, paths: list[Path | str]) -> list[Path]:
        """Source files under paths, excluded directories pruned, sorted."""
        files: set[Path] = set()

        for raw in paths:
            path = Path(raw)
            if path.is_file():
                if self.parser.detect_language(path):
                    files.add(path)
                else:
                    logger.debug(f"Skipping unsupported file: {path}")
                continue

            if not path.is_dir():
                logger.warning(f"Path does not exist: {path}")
                continue

            for dirpath, dirnames, filenames in os.walk(path):
                relative = Path(dirpath).relative_to(path)
                dirnames[:] = sorted(d for d in dirnames if not self._is_excluded(relative / d))
                for filename in filenames:
                    candidate = Path(dirpath) / filename
                    if self.parser.detect_language(candidate) and not self._is_excluded(
                        relative / filename
                    ):
                        files.add(candidate)

        logger.info(f"Discovered {len(files)} source files")
        return sorted(files)

    def _is_excluded(self, path: Path) -> bool:
        normalized = str(path).replace("\\", "/")
        for pattern in self.config.exclude:
            if "/" in pattern.strip("/"):
                if pattern.strip("/") in normalized:
                    return True
            elif pattern.strip("/") in path.parts:
                return True
        return False

    def run_rules(self, parsed: ParsedSource, file_path: Path | str) -> list[StandardFinding]:
        """All findings of the enabled rules for one parsed snapshot."""
        findings = []
        content = parsed.text

        for name, (metadata, rule) in RULES.items():
            severity = self.config.severity_for(name)
            if severity is Severity.OFF:
                continue
            if not metadata.applies_to(file_path):
                continue

            context = StandardRuleContext(
                file_path=Path(file_path),
                content=content,
                language=parsed.language,
                parsed=parsed,
                severity=severity,
            )
            findings.extend(rule(context))

        findings.sort(key=lambda f: (f.line, f.column, f.rule_name))
        return findings

    def fix_parsed(
        self, parsed: ParsedSource, file_path: Path | str
    ) -> tuple[ParsedSource, list[StandardFinding], int]:
        """Apply fixes until none remain or MAX_FIX_PASSES is reached.

        Returns the final snapshot, the findings that remain in it, and the
        number of passes that changed the source.
        """
        findings = self.run_rules(parsed, file_path)
        passes = 0

        while passes < MAX_FIX_PASSES:
            groups = [f.fix for f in findings if f.fix]
            if not groups:
                break

            accepted = select_fix_groups(groups)
            source = apply_edits(parsed.source, [edit for group in accepted for edit in group])
            reparsed = self.parser.parse_source(source, parsed.language)

            if reparsed.has_errors and not parsed.has_errors:
                logger.warning(f"{file_path}: fixes produced a syntax error, keeping previous pass")
                break

            logger.debug(f"{file_path}: pass {passes + 1} applied {len(accepted)} of {len(groups)} fixes")
            parsed = reparsed
            findings = self.run_rules(parsed, file_path)
            passes += 1

        return parsed, findings, passes

    def check_file(self, file_path: Path, fix: bool = False) -> FileResult:
        """Check one file; with fix=True, FileResult.fixed holds the rewritten bytes."""
        result = FileResult(file_path=file_path)

        try:
            parsed = self.parser.parse_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {file_path}: {e}")
            result.error = str(e)
            return result

        if parsed is None:
            return result

        result.original = parsed.source

        if not fix:
            result.findings = self.run_rules(parsed, file_path)
            return result

        final, result.findings, result.passes = self.fix_parsed(parsed, file_path)
        result.fixed = final.source
        return result

    def check_paths(self, paths: list[Path | str], fix: bool = False) -> list[FileResult]:
        return [self.check_file(path, fix=fix) for path in self.discover_files(paths)]
