"""Tests for the tree-sitter parser registry."""

import pytest

from propsguard.ast_extractors.base import NodeKind, field, line_indent, unwrap_parentheses
from propsguard.ast_parser import ASTParser


class TestLanguageDetection:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("App.jsx", "javascript"),
            ("index.js", "javascript"),
            ("api.ts", "typescript"),
            ("Page.TSX", "tsx"),
            ("README.md", None),
        ],
    )
    def test_detect(self, ast_parser, name, expected):
        assert ast_parser.detect_language(name) == expected

    def test_restricted_map(self):
        parser = ASTParser({".tsx": "tsx"})
        assert parser.detect_language("App.jsx") is None


class TestParseFile:
    def test_keeps_raw_bytes(self, ast_parser, tmp_path):
        path = tmp_path / "Widget.tsx"
        path.write_bytes(b"const A = () => <b />;\r\n")
        parsed = ast_parser.parse_file(path)
        assert parsed.source == b"const A = () => <b />;\r\n"
        assert parsed.language == "tsx"
        assert not parsed.has_errors

    def test_unsupported_extension(self, ast_parser, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        assert ast_parser.parse_file(path) is None

    def test_non_utf8(self, ast_parser, tmp_path):
        path = tmp_path / "Bad.js"
        path.write_bytes(b"var a = '\xff';")
        with pytest.raises(UnicodeDecodeError):
            ast_parser.parse_file(path)

    def test_syntax_errors_flagged(self, parse):
        assert parse("const = ;").has_errors

    def test_parser_cached(self, ast_parser):
        assert ast_parser.get_parser("tsx") is ast_parser.get_parser("tsx")


class TestNodeHelpers:
    def test_node_kind_of(self, parse):
        root = parse("const A = 1;").root
        assert NodeKind.of(root) is NodeKind.OTHER
        assert NodeKind.of(None) is NodeKind.OTHER

    def test_keyword_token_is_not_a_function(self, first_function, functions):
        fn = first_function("const f = function () { return 1; };")
        keyword = fn.children[0]
        assert keyword.type == "function"
        assert not keyword.is_named
        assert NodeKind.of(keyword) is NodeKind.OTHER
        assert NodeKind.of(fn) is NodeKind.FUNCTION_EXPRESSION
        assert len(functions("const f = function () { return 1; };")) == 1

    def test_unwrap_parentheses(self, first_function):
        fn = first_function("const A = () => ((<b />));")
        assert unwrap_parentheses(field(fn, "body")).type == "jsx_self_closing_element"

    def test_line_indent(self):
        source = b"a\n    b = 1\n"
        assert line_indent(source, source.index(b"=")) == "    "
