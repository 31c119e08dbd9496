"""Logic for diffing resolved metadata against a pull request's current state."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from meta_info.owner_record import OwnerRecord


@dataclass
class LabelPlan:
    """Labels to add to and remove from a pull request."""

    to_add: list[str] = field(default_factory=list)
    to_remove: list[str] = field(default_factory=list)


def plan_label_changes(
    labels_from_files: Iterable[str],
    labels_on_pr: Iterable[str],
    previously_applied: Iterable[str],
) -> LabelPlan:
    """Work out label changes without touching labels people added by hand.

    Only labels automation applied before and that are still on the PR are
    candidates for removal.
    """
    wanted = list(dict.fromkeys(labels_from_files))
    on_pr = set(labels_on_pr)
    by_automation = [
        label for label in dict.fromkeys(previously_applied) if label in on_pr
    ]

    return LabelPlan(
        to_add=[label for label in wanted if label not in by_automation],
        to_remove=[label for label in by_automation if label not in wanted],
    )


def plan_reviewer_requests(
    owners_map: Mapping[str, OwnerRecord], already_requested: Iterable[str]
) -> list[str]:
    """Return the owners that still have to be asked for a review."""
    requested = {r.casefold() for r in already_requested}
    return sorted(o for o in owners_map if o.casefold() not in requested)
