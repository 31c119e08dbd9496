"""Rendering of ownership maps into PR comment Markdown."""

from collections.abc import Iterable, Mapping

from meta_info.md_table import md_table
from meta_info.owner_record import OwnerRecord
from meta_info.path_segments import strip_path_prefix

OWNERS_TITLE = "## Reviewers"
APPROVALS_TITLE = "## Required approvals"


def _code(path: str, strip_prefix: str) -> str:
    return f"`{strip_path_prefix(path, strip_prefix)}`"


def render_owners_summary(
    owners_map: Mapping[str, OwnerRecord], strip_prefix: str = ""
) -> str:
    """Render each owner with their source marker files and owned files."""
    if not owners_map:
        return f"{OWNERS_TITLE}\n\nNo owners found for the changed files.\n"

    rows = [
        [
            owner,
            str(len(record.owned_files)),
            ", ".join(_code(s, strip_prefix) for s in sorted(record.sources)),
        ]
        for owner, record in sorted(owners_map.items())
    ]
    out = [OWNERS_TITLE, "", md_table(["Owner", "Files", "Sources"], rows), ""]

    for owner, record in sorted(owners_map.items()):
        out.append(f"<details><summary>{owner} ({len(record.owned_files)})</summary>")
        out.append("")
        out.extend(f"- {_code(f, strip_prefix)}" for f in sorted(record.owned_files))
        out.append("")
        out.append("</details>")
        out.append("")

    return "\n".join(out)


def owners_of_file(owners_map: Mapping[str, OwnerRecord], path: str) -> list[str]:
    """Return the sorted owners responsible for ``path``."""
    return sorted(o for o, r in owners_map.items() if path in r.owned_files)


def render_approvals_summary(
    owners_map: Mapping[str, OwnerRecord],
    pending_files: Iterable[str],
    strip_prefix: str = "",
) -> str:
    """Render the files still missing an owner's approval and who can give it."""
    pending = list(dict.fromkeys(pending_files))
    if not pending:
        return f"{APPROVALS_TITLE}\n\nAll changed files are approved.\n"

    rows = []
    for path in pending:
        owners = owners_of_file(owners_map, path)
        rows.append([_code(path, strip_prefix), ", ".join(owners) or "_no owner_"])

    return "\n".join(
        [
            APPROVALS_TITLE,
            "",
            f"{len(pending)} file(s) still need an owner's approval:",
            "",
            md_table(["File", "Owners"], rows),
            "",
        ]
    )
