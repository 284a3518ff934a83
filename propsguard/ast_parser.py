"""Tree-sitter parser registry for JavaScript / TypeScript / TSX sources."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from propsguard.utils.constants import LANGUAGE_BY_EXTENSION
from propsguard.utils.logging import logger


@dataclass
class ParsedSource:
    """One parsed snapshot. All offsets are UTF-8 byte offsets into ``source``."""

    tree: Any
    source: bytes
    language: str

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error


class ASTParser:
    """Lazily loads and caches one tree-sitter parser per grammar."""

    def __init__(self, language_map: dict[str, str] | None = None):
        self.language_map = dict(language_map or LANGUAGE_BY_EXTENSION)
        self.parsers: dict[str, Any] = {}

    def detect_language(self, file_path: Path | str) -> str | None:
        """Grammar name for a file, or None when the extension is not handled."""
        return self.language_map.get(Path(file_path).suffix.lower())

    def get_parser(self, language: str) -> Any:
        if language in self.parsers:
            return self.parsers[language]

        try:
            from tree_sitter_language_pack import get_parser
        except ImportError as e:
            raise RuntimeError(
                "tree-sitter-language-pack is not installed.\n"
                "Please install with: pip install tree-sitter-language-pack"
            ) from e

        try:
            parser = get_parser(language)
        except Exception as e:
            raise RuntimeError(
                f"Failed to load tree-sitter grammar for {language}: {e}\n"
                "This is often due to a corrupted installation.\n"
                "Please try: pip install --force-reinstall tree-sitter-language-pack"
            ) from e

        logger.debug("Loaded tree-sitter grammar {lang}", lang=language)
        self.parsers[language] = parser
        return parser

    def parse_source(self, source: bytes, language: str) -> ParsedSource:
        tree = self.get_parser(language).parse(source)
        return ParsedSource(tree=tree, source=source, language=language)

    def parse_text(self, text: str, language: str) -> ParsedSource:
        return self.parse_source(text.encode("utf-8"), language)

    def parse_file(self, file_path: Path, language: str | None = None) -> ParsedSource | None:
        """Read and parse a file; returns None for unsupported extensions.

        Raises:
            OSError: file cannot be read
            UnicodeDecodeError: file is not UTF-8
        """
        if language is None:
            language = self.detect_language(file_path)
        if language is None:
            return None

        # Bytes, not read_text(): newline translation would shift offsets
        source = Path(file_path).read_bytes()
        source.decode("utf-8")  # raises UnicodeDecodeError for non-UTF-8 files
        return self.parse_source(source, language)
