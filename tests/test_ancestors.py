"""Tests for the directory ascent walk."""

from meta_info.ancestors import ancestors, next_level_up


def test_ancestors_of_absolute_file() -> None:
    """Verify the walk starts at the file's directory and ends at the root."""
    assert list(ancestors("/projects/app/src/a.js")) == [
        "/projects/app/src",
        "/projects/app",
        "/projects",
        "/",
    ]


def test_ancestors_of_directory_starts_at_itself() -> None:
    """Verify directories are their own first step."""
    assert list(ancestors("/projects/app", is_dir=True)) == [
        "/projects/app",
        "/projects",
        "/",
    ]


def test_trailing_separator_marks_directory() -> None:
    """Verify a trailing slash is read as a directory."""
    assert list(ancestors("test/mocks/")) == ["test/mocks", "test", ".", "/"]


def test_relative_walk_continues_at_root() -> None:
    """Verify a relative walk passes through '.' and then '/'."""
    assert list(ancestors("app/src/a.js")) == ["app/src", "app", ".", "/"]


def test_bare_filename_starts_at_current_dir() -> None:
    """Verify a bare filename ascends from '.'."""
    assert list(ancestors("README.md")) == [".", "/"]


def test_root_yielded_once() -> None:
    """Verify the root terminates the walk."""
    assert list(ancestors("/")) == ["/"]
    assert list(ancestors("/", is_dir=True)) == ["/"]


def test_ancestors_is_restartable() -> None:
    """Verify each call produces a fresh sequence."""
    first = list(ancestors("/a/b/c.txt"))
    second = list(ancestors("/a/b/c.txt"))
    assert first == second == ["/a/b", "/a", "/"]


def test_next_level_up() -> None:
    """Verify the single-step parent computation."""
    assert next_level_up(".") == "/"
    assert next_level_up("/") is None
    assert next_level_up("/projects") == "/"
    assert next_level_up("app") == "."
    assert next_level_up("app/src") == "app"
