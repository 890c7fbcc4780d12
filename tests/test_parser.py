"""Tests for gotags.parser."""

from __future__ import annotations

import pytest

from gotags.errors import ParseError
from gotags.parser import GoParser
from gotags.positions import PositionRegistry


def test_parse_returns_top_level_declarations(go_sources) -> None:
    path = go_sources.write(
        "main.go",
        """
        // Package main is an example.
        package main

        import "fmt"

        func main() {
        	fmt.Println("hi")
        }
        """,
    )

    tree = GoParser().parse(path)

    kinds = [node.type for node in tree.declarations]
    assert kinds == ["package_clause", "import_declaration", "function_declaration"]
    assert tree.filename == path


def test_parse_shares_registry_between_files(go_sources) -> None:
    first = go_sources.write("a.go", "package a\n")
    second = go_sources.write("b.go", "package b\n")
    registry = PositionRegistry()
    parser = GoParser(registry)

    tree_a = parser.parse(first)
    tree_b = parser.parse(second)

    assert len(registry) == 2
    assert tree_b.source.base > tree_a.source.base + tree_a.source.size
    assert tree_a.registry is tree_b.registry is registry


def test_parse_reports_syntax_errors_with_location(go_sources) -> None:
    path = go_sources.write(
        "broken.go",
        """
        package main

        func Broken( {
        """,
    )

    with pytest.raises(ParseError) as excinfo:
        GoParser().parse(path)

    error = excinfo.value
    assert error.filename == path
    assert error.line is not None and error.line >= 3
    assert "syntax error" in error.message
    assert str(error).startswith(f"{path}:")


def test_parse_requires_package_clause(go_sources) -> None:
    path = go_sources.write("nopkg.go", "func Foo() {}\n")

    with pytest.raises(ParseError) as excinfo:
        GoParser().parse(path)

    assert "expected 'package'" in excinfo.value.message
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)


def test_parse_rejects_empty_file(go_sources) -> None:
    path = go_sources.write_bytes("empty.go", b"")

    with pytest.raises(ParseError) as excinfo:
        GoParser().parse(path)

    assert "found 'EOF'" in excinfo.value.message


def test_parse_registers_file_before_failing(go_sources) -> None:
    path = go_sources.write("nopkg.go", "func Foo() {}\n")
    registry = PositionRegistry()

    with pytest.raises(ParseError):
        GoParser(registry).parse(path)

    assert len(registry) == 1


def test_parse_reports_unreadable_files(tmp_path) -> None:
    missing = tmp_path / "missing.go"

    with pytest.raises(ParseError) as excinfo:
        GoParser().parse(str(missing))

    assert "cannot read file" in excinfo.value.message


@pytest.mark.parametrize(
    ("source", "line", "fragment"),
    [
        ("package main\n\nx := 1\n\nfunc F() {}\n", 3, "non-declaration statement"),
        ("package main\n\nprintln(1)\n\nfunc F() {}\n", 3, "non-declaration statement"),
        ("package main\n\nfunc F() {}\n\nimport \"fmt\"\n", 5, "imports must appear before"),
        ("package main\n\npackage other\n\nfunc F() {}\n", 3, "unexpected package clause"),
    ],
    ids=["short-var-decl", "call", "late-import", "second-package"],
)
def test_parse_rejects_file_scope_layout_go_forbids(
    go_sources, source: str, line: int, fragment: str
) -> None:
    path = go_sources.write_bytes("layout.go", source.encode("utf-8"))

    with pytest.raises(ParseError) as excinfo:
        GoParser().parse(path)

    assert fragment in excinfo.value.message
    assert (excinfo.value.line, excinfo.value.column) == (line, 1)


def test_parse_accepts_imports_after_comments_and_other_imports(go_sources) -> None:
    path = go_sources.write_bytes(
        "imports.go",
        b"package main\n\n// first\nimport \"fmt\"\nimport \"os\"\n\nvar X = fmt.Sprint(os.Args)\n",
    )

    tree = GoParser().parse(path)

    assert [node.type for node in tree.declarations][-1] == "var_declaration"
