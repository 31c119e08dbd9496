"""Logic for walking from a path up to the filesystem root."""

import os
from collections.abc import Iterator

ROOT = "/"


def next_level_up(directory: str) -> str | None:
    """Return the parent of ``directory``, or None once the root is reached.

    A relative walk that has reached ``.`` continues at ``/``.
    """
    if directory == ".":
        return ROOT
    parent = os.path.dirname(directory)
    if parent == directory:
        return None
    return parent or "."


def ancestors(path: str, *, is_dir: bool = False) -> Iterator[str]:
    """Yield the directory of ``path`` and every parent up to the root.

    When ``is_dir`` is set (or ``path`` ends with a separator) the walk starts
    at ``path`` itself. The root is yielded exactly once.
    """
    if path.endswith(os.sep) and path != ROOT:
        is_dir = True

    normalized = os.path.normpath(path) if path else "."
    directory: str | None = normalized if is_dir else os.path.dirname(normalized)
    if not directory:
        directory = "."

    while directory is not None:
        yield directory
        directory = next_level_up(directory)
