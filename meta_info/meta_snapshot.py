"""Logic for carrying automation state between runs as a JSON snapshot."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


class MetaSnapshot:
    """A key/value document handed in from the previous run and saved for the next.

    The values are opaque to the resolver; callers store things such as the
    labels automation applied on a pull request.
    """

    def __init__(self, path: str) -> None:
        """Initialize an empty snapshot bound to ``path``."""
        self.path = Path(path)
        self.values: dict[str, Any] = {}
        self.meta: dict[str, Any] = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "run_id": 0,
        }
        self.dirty = False

    def load(self, *, accept_legacy: bool = False) -> None:
        """Load the previous snapshot from disk, if any."""
        if not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.exception("Error loading snapshot %s", self.path)
            return

        if not isinstance(data, dict):
            logger.warning("Snapshot %s is not a JSON object. Ignoring it.", self.path)
            return

        if "meta" not in data and "values" not in data:
            if not accept_legacy:
                logger.warning("Snapshot %s has no schema. Ignoring it.", self.path)
                return
            # Legacy snapshots were the bare key/value mapping
            logger.info("Accepting legacy snapshot. Will be migrated.")
            self.values = data
            self.dirty = True
            return

        schema_ver = data.get("meta", {}).get("schema_version", 0)
        if schema_ver != CURRENT_SCHEMA_VERSION:
            if not accept_legacy:
                logger.warning(
                    "Schema version mismatch (%s != %s). Ignoring snapshot.",
                    schema_ver,
                    CURRENT_SCHEMA_VERSION,
                )
                return
            logger.info("Accepting legacy snapshot. Will be migrated.")

        self.meta = data.get("meta", {})
        self.meta.setdefault("run_id", 0)
        self.values = data.get("values", {})

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key``."""
        return self.values.get(key, default)

    def update(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        if self.values.get(key) != value:
            self.values[key] = value
            self.dirty = True

    def to_dict(self) -> dict[str, Any]:
        """Return the document as written by save()."""
        return {"meta": self.meta, "values": self.values}

    def save(self) -> None:
        """Write the snapshot to disk, bumping the run counter."""
        self.meta["run_id"] = self.meta.get("run_id", 0) + 1
        self.meta["schema_version"] = CURRENT_SCHEMA_VERSION

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self.to_dict(), indent=2, sort_keys=True),
            encoding="utf-8",
        )
        self.dirty = False
