"""Logic for mapping owners to the changed files they are responsible for."""

import logging
import os
from collections.abc import Iterable, Mapping

from meta_info.invalid_argument_error import InvalidArgumentError
from meta_info.owner_record import OwnerRecord
from meta_info.path_segments import is_ancestor_dir, path_segments

logger = logging.getLogger(__name__)

NEAREST = "nearest"
UNION = "union"
PRECEDENCE_POLICIES = (NEAREST, UNION)


def owners_for_file(
    path: str, dir_to_owners: Mapping[str, list[str]], precedence: str = NEAREST
) -> list[str]:
    """Return the owners that apply to ``path``.

    ``nearest`` keeps only the deepest directory that declares owners for the
    path; ``union`` merges the owners of every declaring ancestor.
    """
    matching = [d for d in dir_to_owners if is_ancestor_dir(d, path)]
    if not matching:
        return []

    if precedence == NEAREST:
        nearest = max(matching, key=lambda d: len(path_segments(d)))
        return list(dir_to_owners[nearest])

    owners: dict[str, None] = {}
    for directory in sorted(matching, key=lambda d: len(path_segments(d))):
        owners.update(dict.fromkeys(dir_to_owners[directory]))
    return list(owners)


def build_owners_map(
    info_map: Mapping[str, list[str]],
    changed_files: Iterable[str],
    exclude_author: str | None = None,
    precedence: str = NEAREST,
    file_markers: Mapping[str, str] | None = None,
) -> dict[str, OwnerRecord]:
    """Build ``owner -> OwnerRecord`` from marker file contents.

    ``info_map`` maps each owners file to the names it declares. Every name
    is recorded with its source files; each changed file is then credited to
    the owners that apply to it. Owners left without any owned file are
    dropped, and so is the PR author (case-insensitively), even when a marker
    file lists them.

    When ``file_markers`` maps each changed file to the marker file resolved
    for it, that marker alone decides the file's owners and ``precedence``
    is not consulted. Files missing from the mapping own nothing.
    """
    if precedence not in PRECEDENCE_POLICIES:
        msg = f"Unknown precedence policy: {precedence!r}"
        raise InvalidArgumentError(msg)

    owners_map: dict[str, OwnerRecord] = {}
    dir_to_owners: dict[str, list[str]] = {}

    for meta_path, owners in info_map.items():
        if not owners:
            # Empty or unreadable files do not shadow owners further up
            continue
        directory = os.path.dirname(meta_path) or "."
        declared = dir_to_owners.setdefault(directory, [])
        for owner in owners:
            owners_map.setdefault(owner, OwnerRecord()).sources.add(meta_path)
            if owner not in declared:
                declared.append(owner)

    for path in changed_files:
        if file_markers is None:
            owners = owners_for_file(path, dir_to_owners, precedence)
        else:
            owners = info_map.get(file_markers.get(path, ""), [])
        for owner in owners:
            owners_map[owner].owned_files.add(path)

    for owner in [o for o, r in owners_map.items() if not r.owned_files]:
        logger.debug("Owner %s is shadowed for every changed file", owner)
        del owners_map[owner]

    if exclude_author:
        author = exclude_author.casefold()
        for owner in [o for o in owners_map if o.casefold() == author]:
            logger.info("Excluding PR author %s from owners", owner)
            del owners_map[owner]

    return owners_map
