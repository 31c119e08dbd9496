"""Logic for reading marker files into token lists."""

import asyncio
import logging
from collections.abc import Iterable

import aiofiles

logger = logging.getLogger(__name__)


def parse_meta_text(text: str) -> list[str]:
    """Split marker file content into unique, non-empty tokens in file order."""
    tokens = (line.strip() for line in text.splitlines())
    return list(dict.fromkeys(t for t in tokens if t))


async def read_meta_file(path: str) -> list[str]:
    """Read one marker file; unreadable files yield an empty list."""
    try:
        async with aiofiles.open(path, encoding="utf-8") as f:
            text = await f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("file: %s errored while reading data: %s", path, exc)
        return []
    return parse_meta_text(text)


async def get_meta_info_map(meta_files: Iterable[str]) -> dict[str, list[str]]:
    """Read many marker files concurrently into ``path -> tokens``."""
    paths = list(dict.fromkeys(meta_files))
    contents = await asyncio.gather(*(read_meta_file(p) for p in paths))
    return dict(zip(paths, contents, strict=True))


async def get_meta_info_from_files(meta_files: Iterable[str]) -> list[str]:
    """Return the unique tokens declared across all ``meta_files``."""
    info_map = await get_meta_info_map(meta_files)
    return list(dict.fromkeys(t for tokens in info_map.values() for t in tokens))
