"""Segment-wise path helpers."""

import os


def path_segments(path: str) -> tuple[str, ...]:
    """Split a path into its segments, resolved against the current directory.

    Relative and absolute spellings of the same location give the same
    segments, so ``.`` and the absolute working directory compare equal.
    """
    absolute = os.path.abspath(path or ".")
    return tuple(p for p in absolute.split(os.sep) if p)


def is_ancestor_dir(directory: str, path: str) -> bool:
    """Check whether ``directory`` contains ``path``, comparing whole segments.

    ``/projects/app`` contains ``/projects/app/a.js`` but not
    ``/projects/app2/a.js``.
    """
    dir_parts = path_segments(directory)
    path_parts = path_segments(path)
    if len(dir_parts) >= len(path_parts):
        return False
    return path_parts[: len(dir_parts)] == dir_parts


def strip_path_prefix(path: str, prefix: str) -> str:
    """Drop ``prefix`` from ``path`` when it is a segment-wise ancestor."""
    if not prefix:
        return path
    if not is_ancestor_dir(prefix, path):
        return path
    return "/".join(path_segments(path)[len(path_segments(prefix)) :])
