"""Data model for a directory-scoped marker file."""

from dataclasses import dataclass
from enum import Enum


class MarkerKind(str, Enum):
    """The kinds of declaration a marker file can carry."""

    LABELS = "labels"
    OWNERS = "owners"


@dataclass(frozen=True)
class MarkerFile:
    """A marker file found on disk, e.g. ``projects/app/.owners``."""

    path: str
    kind: MarkerKind
