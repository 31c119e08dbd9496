"""Logic for resolving the nearest marker file of many changed paths."""

import asyncio
import logging
from collections.abc import Iterable

from meta_info.find_nearest_file import find_nearest_file, validate_filename

logger = logging.getLogger(__name__)


async def resolve_meta_files(
    changed_files: Iterable[str],
    filename: str,
    max_ascents: int | None = None,
    max_concurrency: int | None = None,
) -> dict[str, str | None]:
    """Resolve every changed path concurrently into ``path -> marker file``.

    Paths without a marker file map to None. Keys keep input order.
    """
    validate_filename(filename)
    paths = list(dict.fromkeys(changed_files))
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def resolve(path: str) -> str | None:
        if semaphore is None:
            return await find_nearest_file(filename, path, max_ascents)
        async with semaphore:
            return await find_nearest_file(filename, path, max_ascents)

    results = await asyncio.gather(*(resolve(p) for p in paths))
    return dict(zip(paths, results, strict=True))


async def get_meta_files(
    changed_files: Iterable[str],
    filename: str,
    max_ascents: int | None = None,
    max_concurrency: int | None = None,
) -> list[str]:
    """Resolve every changed path concurrently and return the unique hits.

    Paths without a marker file are dropped. The result keeps the order of the
    first changed path that resolved to each marker file, whatever order the
    lookups finish in.
    """
    resolved = await resolve_meta_files(
        changed_files, filename, max_ascents, max_concurrency
    )

    meta_files = list(dict.fromkeys(m for m in resolved.values() if m is not None))
    logger.info(
        "Resolved %s changed file(s) to %s %s file(s)",
        len(resolved),
        len(meta_files),
        filename,
    )
    return meta_files
