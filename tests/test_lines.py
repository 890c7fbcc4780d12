"""Tests for gotags.lines."""

from __future__ import annotations

import pytest

from gotags.errors import LineNotFoundError
from gotags.lines import LineResolver, read_line


def test_read_line_strips_newline(go_sources) -> None:
    path = go_sources.write_bytes("a.go", b"package a\n\nfunc Foo() {}\n")

    assert read_line(path, 1) == b"package a"
    assert read_line(path, 2) == b""
    assert read_line(path, 3) == b"func Foo() {}"


def test_read_line_keeps_carriage_return(go_sources) -> None:
    path = go_sources.write_bytes("crlf.go", b"package a\r\nvar X int\r\n")

    assert read_line(path, 2) == b"var X int\r"


def test_read_line_past_end_raises(go_sources) -> None:
    path = go_sources.write_bytes("a.go", b"package a\n")

    with pytest.raises(LineNotFoundError) as excinfo:
        read_line(path, 5)

    assert excinfo.value.line == 5
    assert excinfo.value.filename == path


def test_read_line_rejects_unterminated_last_line(go_sources) -> None:
    path = go_sources.write_bytes("a.go", b"package a\nvar X int")

    with pytest.raises(LineNotFoundError):
        read_line(path, 2)


def test_read_line_missing_file_raises(tmp_path) -> None:
    with pytest.raises(LineNotFoundError) as excinfo:
        read_line(str(tmp_path / "nope.go"), 1)

    assert "cannot read file" in excinfo.value.reason


def test_read_line_rejects_line_zero(go_sources) -> None:
    path = go_sources.write_bytes("a.go", b"package a\n")

    with pytest.raises(LineNotFoundError):
        read_line(path, 0)


@pytest.mark.parametrize("cache", [False, True])
def test_resolver_results_match_with_and_without_cache(go_sources, cache: bool) -> None:
    path = go_sources.write_bytes("a.go", b"package a\n\nvar X int\ntrailing")
    resolver = LineResolver(cache=cache)

    assert resolver.line_text(path, 1) == b"package a"
    assert resolver.line_text(path, 3) == b"var X int"
    with pytest.raises(LineNotFoundError):
        resolver.line_text(path, 4)
    with pytest.raises(LineNotFoundError):
        resolver.line_text(path, 9)


def test_cached_resolver_does_not_reread_until_cleared(go_sources) -> None:
    path = go_sources.write_bytes("a.go", b"package a\nvar X int\n")
    resolver = LineResolver(cache=True)

    assert resolver.line_text(path, 2) == b"var X int"
    with open(path, "wb") as handle:
        handle.write(b"package a\nvar Y int\n")
    assert resolver.line_text(path, 2) == b"var X int"

    resolver.clear()
    assert resolver.line_text(path, 2) == b"var Y int"
