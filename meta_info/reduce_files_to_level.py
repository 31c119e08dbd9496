"""Logic for collapsing changed files to coarser reviewer levels."""

from collections.abc import Iterable
from enum import Enum

from meta_info.invalid_argument_error import InvalidArgumentError

PROJECTS_DIR = "projects"


class ReviewersLevel(str, Enum):
    """Escalation tiers for reviewer resolution."""

    OWNER = "owner"
    PROJECT = "project"
    REPO = "repo"


def parse_level(value: str | ReviewersLevel | None) -> ReviewersLevel:
    """Convert a config or CLI value into a level; None means OWNER."""
    if value is None:
        return ReviewersLevel.OWNER
    try:
        return ReviewersLevel(str(value).lower())
    except ValueError:
        msg = f"Unknown reviewers level: {value!r}"
        raise InvalidArgumentError(msg) from None


def project_root_of(path: str) -> str:
    """Cut ``path`` after its ``projects/<name>`` segment pair, if any."""
    segments = path.split("/")
    try:
        index = segments.index(PROJECTS_DIR)
    except ValueError:
        return path
    if index + 1 >= len(segments) or not segments[index + 1]:
        return path
    return "/".join(segments[: index + 2])


def level_start_of(
    path: str, level: str | ReviewersLevel | None = None, repo_root: str = "/"
) -> str:
    """Return the path resolution starts from for one changed file."""
    level = parse_level(level)
    if level is ReviewersLevel.REPO:
        return repo_root
    if level is ReviewersLevel.PROJECT:
        return project_root_of(path)
    return path


def reduce_files_to_level(
    changed_files: Iterable[str],
    level: str | ReviewersLevel | None = None,
    repo_root: str = "/",
) -> list[str]:
    """Collapse ``changed_files`` to the grouping keys of ``level``.

    REPO resolves everything from ``repo_root``; PROJECT resolves from each
    enclosing ``projects/<name>`` directory; OWNER leaves the files as they are.
    """
    level = parse_level(level)
    files = list(changed_files)
    if level is ReviewersLevel.OWNER:
        return files
    return list(dict.fromkeys(level_start_of(f, level, repo_root) for f in files))
