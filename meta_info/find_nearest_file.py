"""Logic for locating the nearest marker file above a path."""

import logging
import os

import aiofiles.os

from meta_info.ancestors import ancestors
from meta_info.invalid_argument_error import InvalidArgumentError

logger = logging.getLogger(__name__)


def validate_filename(filename: str) -> None:
    """Reject anything that is not a bare filename."""
    if not filename:
        msg = "filename is required"
        raise InvalidArgumentError(msg)
    if os.sep in filename or "/" in filename or filename == "..":
        msg = f"filename must be just a filename and not a path: {filename!r}"
        raise InvalidArgumentError(msg)


async def path_exists(path: str) -> bool:
    """Check existence, treating any OS error as absence."""
    try:
        return await aiofiles.os.path.exists(path)
    except OSError as exc:
        logger.debug("Existence check failed for %s: %s", path, exc)
        return False


async def is_directory(path: str) -> bool:
    """Check for a directory, treating any OS error as a plain file."""
    try:
        return await aiofiles.os.path.isdir(path)
    except OSError:
        return False


async def find_nearest_file(
    filename: str, start: str, max_ascents: int | None = None
) -> str | None:
    """Return the closest ``filename`` in ``start`` or one of its ancestors.

    With ``max_ascents`` set, that many matches are skipped before a match is
    returned, so ``max_ascents=1`` yields the second-nearest marker file.
    Returns None when the root is passed without a (remaining) match.
    """
    validate_filename(filename)
    if max_ascents is not None and max_ascents < 0:
        msg = f"max_ascents must be >= 0, got {max_ascents}"
        raise InvalidArgumentError(msg)

    remaining = max_ascents
    start_is_dir = bool(start) and await is_directory(start)

    for directory in ancestors(start, is_dir=start_is_dir):
        candidate = os.path.join(directory, filename)
        found = await path_exists(candidate)
        logger.debug("%s: %s", candidate, found)
        if not found:
            continue
        if remaining is None or remaining == 0:
            return candidate
        remaining -= 1

    return None
