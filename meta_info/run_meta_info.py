"""Orchestration of marker file resolution for a pull request's changed files."""

import logging
from collections.abc import Iterable
from typing import Any

from meta_info.build_owners_map import build_owners_map
from meta_info.filter_changed_files import filter_changed_files
from meta_info.get_meta_files import get_meta_files, resolve_meta_files
from meta_info.marker_file import MarkerFile, MarkerKind
from meta_info.meta_snapshot import MetaSnapshot
from meta_info.owner_record import OwnerRecord
from meta_info.plan_changes import LabelPlan, plan_label_changes
from meta_info.read_meta_file import get_meta_info_from_files, get_meta_info_map
from meta_info.reduce_files_to_level import level_start_of

logger = logging.getLogger(__name__)

APPLIED_LABELS_KEY = "applied_labels"


async def resolve_markers(
    changed_files: Iterable[str], kind: MarkerKind, config: dict[str, Any]
) -> list[MarkerFile]:
    """Find the marker files of ``kind`` that apply to ``changed_files``."""
    files = filter_changed_files(changed_files, config["ignore_files"])
    resolution = config["resolution"]
    paths = await get_meta_files(
        files,
        config[kind.value]["filename"],
        max_ascents=resolution["max_ascents"],
        max_concurrency=resolution["max_concurrency"],
    )
    return [MarkerFile(path, kind) for path in paths]


async def collect_labels(
    changed_files: Iterable[str], config: dict[str, Any]
) -> list[str]:
    """Return the unique labels declared for ``changed_files``."""
    markers = await resolve_markers(changed_files, MarkerKind.LABELS, config)
    labels = await get_meta_info_from_files(m.path for m in markers)
    logger.info("Labels from %s file(s): %s", len(markers), labels)
    return labels


async def collect_owners(
    changed_files: Iterable[str],
    config: dict[str, Any],
    author: str | None = None,
) -> dict[str, OwnerRecord]:
    """Resolve the owners of ``changed_files``, excluding ``author``.

    The configured reviewers level decides the directories resolution starts
    from; the owned files are always the changed files themselves. With
    ``max_ascents`` escalation each file is credited to the owners of the
    marker file resolved for it.
    """
    owners_config = config["owners"]
    resolution = config["resolution"]
    files = filter_changed_files(changed_files, config["ignore_files"])
    starts = {
        f: level_start_of(f, owners_config["level"], config["repo_root"])
        for f in files
    }

    start_markers = await resolve_meta_files(
        starts.values(),
        owners_config["filename"],
        max_ascents=resolution["max_ascents"],
        max_concurrency=resolution["max_concurrency"],
    )
    file_markers: dict[str, str] = {}
    for path, start in starts.items():
        marker = start_markers[start]
        if marker is not None:
            file_markers[path] = marker
    info_map = await get_meta_info_map(file_markers.values())

    # Escalated markers are not the nearest ones, so files keep their own marker
    escalated = bool(resolution["max_ascents"])
    owners_map = build_owners_map(
        info_map,
        files,
        exclude_author=author,
        precedence=owners_config["precedence"],
        file_markers=file_markers if escalated else None,
    )
    logger.info("Owners for %s file(s): %s", len(files), sorted(owners_map))
    return owners_map


def apply_label_snapshot(
    labels: list[str], labels_on_pr: Iterable[str], snapshot: MetaSnapshot
) -> LabelPlan:
    """Plan label changes from the previous run's snapshot and record this run."""
    on_pr = list(labels_on_pr)
    plan = plan_label_changes(labels, on_pr, snapshot.get(APPLIED_LABELS_KEY, []))

    kept = [label for label in snapshot.get(APPLIED_LABELS_KEY, []) if label in on_pr]
    applied = [label for label in kept if label not in plan.to_remove]
    applied.extend(label for label in plan.to_add if label not in applied)
    snapshot.update(APPLIED_LABELS_KEY, applied)
    return plan
