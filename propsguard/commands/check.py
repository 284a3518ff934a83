"""Check (and optionally fix) component props destructuring.

Usage: propsguard check [PATHS...] [--fix]
"""

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from propsguard.config import load_config
from propsguard.pipeline.ui import console, print_error, print_success, print_warning
from propsguard.rules.base import Severity, StandardFinding
from propsguard.rules.orchestrator import FileResult, RulesOrchestrator
from propsguard.utils.error_handler import handle_exceptions
from propsguard.utils.exit_codes import ExitCodes
from propsguard.utils.logging import logger


def summarize(findings: list[StandardFinding]) -> dict[str, int]:
    return {
        "total": len(findings),
        "errors": sum(1 for f in findings if f.severity is Severity.ERROR),
        "warnings": sum(1 for f in findings if f.severity is Severity.WARNING),
        "fixable": sum(1 for f in findings if f.fixable),
    }


def write_fixes(results: list[FileResult]) -> tuple[list[Path], list[FileResult]]:
    """Write changed files back to disk; returns (written, failed)."""
    written, failed = [], []

    for result in results:
        if not result.changed:
            continue
        try:
            result.file_path.write_bytes(result.fixed)
        except OSError as e:
            logger.warning(f"Could not write {result.file_path}: {e}")
            result.error = str(e)
            failed.append(result)
            continue
        logger.info(f"Fixed {result.file_path} in {result.passes} pass(es)")
        written.append(result.file_path)

    return written, failed


def render_text(findings: list[StandardFinding], fixed_files: list[Path], fix_mode: bool) -> None:
    """ESLint-style stylish output grouped by file."""
    by_file: dict[str, list[StandardFinding]] = {}
    for finding in findings:
        by_file.setdefault(finding.file_path, []).append(finding)

    for file_path, file_findings in by_file.items():
        console.print(f"\n[path]{escape(file_path)}[/path]")
        for f in file_findings:
            style = "error" if f.severity is Severity.ERROR else "warning"
            hint = "  [dim](fixable)[/dim]" if f.fixable and not fix_mode else ""
            console.print(
                f"  [dim]{f.line}:{f.column + 1}[/dim]  [{style}]{f.severity.value}[/{style}]  "
                f"{f.message}  [rule]{f.rule_name}[/rule]{hint}"
            )

    for path in fixed_files:
        console.print(f"[success]fixed[/success] [path]{escape(str(path))}[/path]")

    summary = summarize(findings)
    if summary["total"] == 0:
        print_success("No problems found")
        return

    console.print()
    console.print(
        f"[error]{summary['total']} problem(s)[/error] "
        f"({summary['errors']} error(s), {summary['warnings']} warning(s))"
    )
    if summary["fixable"] and not fix_mode:
        console.print(f"  {summary['fixable']} fixable with the [bold]--fix[/bold] option")
    if fix_mode:
        print_warning(f"{summary['total']} problem(s) could not be fixed automatically")


@click.command("check")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--fix", is_flag=True, help="Rewrite files in place with the available fixes")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--save", type=click.Path(), help="Also write the JSON report to this file")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="pyproject.toml to read [tool.propsguard] from (default: nearest one)",
)
@click.option("--quiet", is_flag=True, help="Report errors only, hide warnings")
@handle_exceptions
def check(paths, fix, output_format, save, config_path, quiet):
    """Flag components that destructure props in their parameter list.

    A component is a function named in PascalCase (or anonymous) that
    returns JSX, or any function wrapped in memo/forwardRef. Render-prop
    callbacks such as <Controller render={...}> are left alone.

    \b
    EXAMPLES:
      propsguard check src/
      propsguard check src/ --fix
      propsguard check src/ --format json --save report.json

    \b
    EXIT CODES:
      0  no error-level findings
      1  error-level findings remain
      2  a file could not be read or written
    """
    targets = list(paths) or ["."]
    config = load_config(config_path, start=targets[0])

    orchestrator = RulesOrchestrator(config)
    results = orchestrator.check_paths(targets, fix=fix)

    fixed_files: list[Path] = []
    if fix:
        fixed_files, _ = write_fixes(results)

    findings = [f for r in results for f in r.findings]
    if quiet:
        findings = [f for f in findings if f.severity is Severity.ERROR]
    failed = [r for r in results if r.error]

    report = {
        "findings": [f.to_dict() for f in findings],
        "summary": {**summarize(findings), "files": len(results), "files_fixed": len(fixed_files)},
        "errors": [{"file": str(r.file_path), "error": r.error} for r in failed],
    }

    if save:
        with open(save, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

    if output_format == "json":
        click.echo(json.dumps(report, indent=2))
    else:
        render_text(findings, fixed_files, fix)
        for r in failed:
            print_error(f"{escape(str(r.file_path))}: {r.error}")

    if failed:
        exit_code = ExitCodes.FILE_ERROR
    elif any(f.severity is Severity.ERROR for f in findings):
        exit_code = ExitCodes.FINDINGS
    else:
        exit_code = ExitCodes.SUCCESS

    logger.debug(f"Exit {exit_code}: {ExitCodes.get_description(exit_code)}")
    sys.exit(exit_code)
