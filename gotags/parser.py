"""Tree-sitter powered Go parser producing top-level declaration trees."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from .errors import ParseError
from .logging import get_logger
from .models import Position
from .positions import PositionRegistry, SourceFile

_GRAMMAR = "go"
_SNIPPET_LIMIT = 24

_TOP_LEVEL_DECLARATIONS = {
    "function_declaration",
    "method_declaration",
    "type_declaration",
    "const_declaration",
    "var_declaration",
}


@dataclass
class DeclarationTree:
    """Parsed Go file, restricted to what sits directly under the file node."""

    filename: str
    source: SourceFile
    root: Node
    registry: PositionRegistry

    @property
    def declarations(self) -> List[Node]:
        return [child for child in self.root.named_children if child.type != "comment"]

    def pos(self, node: Node) -> int:
        """Registry position of ``node``'s first byte."""
        return self.source.pos(node.start_byte)

    def resolve(self, node: Node) -> Position:
        return self.registry.resolve(self.pos(node))


class GoParser:
    """Parses Go files into declaration trees bound to a shared registry."""

    def __init__(self, registry: PositionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else PositionRegistry()
        self._parser: Optional[Parser] = None
        self.logger = get_logger("parser")

    def parse(self, filename: str) -> DeclarationTree:
        """Parse ``filename``; raise :class:`ParseError` unless it is valid Go."""
        try:
            text = Path(filename).read_bytes()
        except OSError as exc:
            raise ParseError(filename, f"cannot read file: {exc.strerror or exc}") from exc
        return self.parse_bytes(filename, text)

    def parse_bytes(self, filename: str, text: bytes) -> DeclarationTree:
        # Registration comes first, so a failed parse still consumes a range.
        source = self.registry.register(filename, text)
        tree = self._get_parser().parse(text)
        root = tree.root_node

        offending = _first_syntax_error(root)
        if offending is not None:
            raise self._error(source, offending.start_byte, _describe(offending))

        leading = next((child for child in root.named_children if child.type != "comment"), None)
        if leading is None:
            raise self._error(source, source.size, "expected 'package', found 'EOF'")
        if leading.type != "package_clause":
            raise self._error(
                source,
                leading.start_byte,
                f"expected 'package', found {_snippet(leading)!r}",
            )
        self._check_file_layout(source, root, leading)

        self.logger.debug("Parsed %s (%d bytes)", filename, source.size)
        return DeclarationTree(
            filename=filename, source=source, root=root, registry=self.registry
        )

    def _check_file_layout(self, source: SourceFile, root: Node, package: Node) -> None:
        # The grammar accepts statements and stray clauses at file scope; Go does not.
        seen_declaration = False
        for child in root.named_children:
            if child.type == "comment" or child.start_byte == package.start_byte:
                continue
            if child.type == "package_clause":
                raise self._error(
                    source, child.start_byte, "syntax error: unexpected package clause"
                )
            if child.type == "import_declaration":
                if seen_declaration:
                    raise self._error(
                        source,
                        child.start_byte,
                        "syntax error: imports must appear before other declarations",
                    )
                continue
            if child.type not in _TOP_LEVEL_DECLARATIONS:
                raise self._error(
                    source,
                    child.start_byte,
                    "syntax error: non-declaration statement outside function body: "
                    f"{_snippet(child)!r}",
                )
            seen_declaration = True

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = get_parser(_GRAMMAR)
        return self._parser

    @staticmethod
    def _error(source: SourceFile, offset: int, message: str) -> ParseError:
        position = source.position(offset)
        return ParseError(source.name, message, line=position.line, column=position.column)


def _first_syntax_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_syntax_error(child)
        if found is not None:
            return found
    return None


def _describe(node: Node) -> str:
    if node.is_missing:
        return f"syntax error: missing {node.type!r}"
    snippet = _snippet(node)
    if not snippet:
        return "syntax error"
    return f"syntax error: unexpected {snippet!r}"


def _snippet(node: Node) -> str:
    text = (node.text or b"").decode("utf-8", errors="replace")
    first_line = text.strip().splitlines()[0] if text.strip() else ""
    if len(first_line) > _SNIPPET_LIMIT:
        return first_line[:_SNIPPET_LIMIT] + "..."
    return first_line


__all__ = ["DeclarationTree", "GoParser"]
