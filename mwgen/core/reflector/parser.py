"""tree-sitter based Go source parsing.

Reads Go files and turns them into syntax trees. Any syntax error makes
the whole module unusable, so errors are raised rather than collected.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import tree_sitter
import tree_sitter_go

from ..errors import ParseError

logger = logging.getLogger(__name__)

_GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())


@dataclass
class ParsedFile:
    """A successfully parsed Go file."""

    file_path: str
    source: bytes
    tree: tree_sitter.Tree

    @property
    def root(self) -> tree_sitter.Node:
        return self.tree.root_node


class GoSourceParser:
    """Parses Go source text into tree-sitter syntax trees."""

    def get_language(self) -> str:
        return "go"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _GO_LANGUAGE

    def parse_file(self, file_path: str) -> ParsedFile:
        """Read and parse a Go file.

        Args:
            file_path: Path to the source file

        Returns:
            ParsedFile holding the syntax tree

        Raises:
            ParseError: If the file cannot be read or contains syntax errors
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                source_text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(file_path, f"cannot read file: {e}") from e

        return self.parse_source(source_text, file_path)

    def parse_source(self, source_text: str, file_path: str) -> ParsedFile:
        """Parse Go source text.

        Args:
            source_text: Source code as string
            file_path: File path used in error messages

        Returns:
            ParsedFile holding the syntax tree

        Raises:
            ParseError: If tree-sitter reports an error or missing node
        """
        source_bytes = source_text.encode("utf-8")
        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source_bytes)

        if tree.root_node.has_error:
            bad = _first_error_node(tree.root_node)
            line = bad.start_point.row + 1 if bad else None
            what = f"missing {bad.type}" if bad is not None and bad.is_missing else "syntax error"
            raise ParseError(file_path, what, line=line)

        logger.debug(f"Parsed {file_path} ({len(source_bytes)} bytes)")
        return ParsedFile(file_path=file_path, source=source_bytes, tree=tree)


def _first_error_node(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None
