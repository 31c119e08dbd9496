"""Data models for resolved ownership."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class OwnerRecord:
    """What one owner declared and what they own for the current change set."""

    sources: set[str] = field(default_factory=set)  # marker files listing the owner
    owned_files: set[str] = field(default_factory=set)


def owners_map_to_json(owners_map: dict[str, OwnerRecord]) -> dict[str, Any]:
    """Serialize an owners map with sorted keys and lists."""
    return {
        owner: {
            "sources": sorted(record.sources),
            "ownedFiles": sorted(record.owned_files),
        }
        for owner, record in sorted(owners_map.items())
    }


def owners_map_from_json(data: dict[str, Any]) -> dict[str, OwnerRecord]:
    """Rebuild an owners map from its serialized form."""
    return {
        owner: OwnerRecord(
            sources=set(entry.get("sources", [])),
            owned_files=set(entry.get("ownedFiles", [])),
        )
        for owner, entry in data.items()
    }
