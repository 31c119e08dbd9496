"""Logic for dropping ignored files from a change set."""

import os
from collections.abc import Iterable


def filter_changed_files(
    changed_files: Iterable[str], ignore_files: Iterable[str]
) -> list[str]:
    """Drop every path whose basename is in ``ignore_files``."""
    ignored = set(ignore_files)
    return [f for f in changed_files if os.path.basename(f) not in ignored]
