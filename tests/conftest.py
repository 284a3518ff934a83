"""Pytest configuration and fixtures."""

import textwrap

import pytest

from propsguard.ast_extractors.base import FUNCTION_KINDS, NodeKind
from propsguard.ast_parser import ASTParser
from propsguard.config import PropsGuardConfig
from propsguard.rules.orchestrator import RulesOrchestrator


@pytest.fixture(scope="session")
def ast_parser():
    """One parser registry for the whole session (grammars load once)."""
    return ASTParser()


@pytest.fixture
def parse(ast_parser):
    """Parse dedented source; defaults to the TSX grammar."""

    def _parse(code: str, language: str = "tsx"):
        return ast_parser.parse_text(textwrap.dedent(code), language)

    return _parse


@pytest.fixture
def functions(parse):
    """All function nodes of a snippet, in source order."""

    def _functions(code: str, language: str = "tsx"):
        parsed = parse(code, language)
        found = []
        stack = [parsed.root]
        while stack:
            node = stack.pop()
            if NodeKind.of(node) in FUNCTION_KINDS:
                found.append(node)
            stack.extend(reversed(node.children))
        return found

    return _functions


@pytest.fixture
def first_function(functions):
    """First (outermost) function node of a snippet."""

    def _first(code: str, language: str = "tsx"):
        found = functions(code, language)
        assert found, "snippet contains no function"
        return found[0]

    return _first


@pytest.fixture
def orchestrator():
    return RulesOrchestrator(PropsGuardConfig())


@pytest.fixture
def autofix(orchestrator, ast_parser):
    """Run the full fix loop on a snippet; returns (fixed_text, remaining_findings)."""

    def _autofix(code: str, language: str = "tsx", file_name: str = "Component.tsx"):
        parsed = ast_parser.parse_text(textwrap.dedent(code), language)
        final, findings, _ = orchestrator.fix_parsed(parsed, file_name)
        return final.text, findings

    return _autofix


@pytest.fixture
def lint(orchestrator, ast_parser):
    """Findings for a snippet without fixing."""

    def _lint(code: str, language: str = "tsx", file_name: str = "Component.tsx"):
        parsed = ast_parser.parse_text(textwrap.dedent(code), language)
        return orchestrator.run_rules(parsed, file_name)

    return _lint
