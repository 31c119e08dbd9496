"""Logic for loading and validating the resolver configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from meta_info.build_owners_map import PRECEDENCE_POLICIES
from meta_info.deep_merge import deep_merge
from meta_info.find_nearest_file import validate_filename
from meta_info.invalid_argument_error import InvalidArgumentError
from meta_info.reduce_files_to_level import parse_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "labels": {
        "filename": ".labels",
    },
    "owners": {
        "filename": ".owners",
        "precedence": "nearest",
        "level": "owner",
    },
    "resolution": {
        "max_ascents": None,
        "max_concurrency": 32,
    },
    "ignore_files": [],
    "strip_prefix": "",
    "repo_root": ".",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration root must be a mapping: {path}"
                raise InvalidArgumentError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", path)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Reject values the resolver cannot work with."""
    validate_filename(config["labels"]["filename"])
    validate_filename(config["owners"]["filename"])

    precedence = config["owners"]["precedence"]
    if precedence not in PRECEDENCE_POLICIES:
        msg = f"owners.precedence must be one of {PRECEDENCE_POLICIES}, got {precedence!r}"
        raise InvalidArgumentError(msg)

    parse_level(config["owners"]["level"])

    max_ascents = config["resolution"]["max_ascents"]
    if max_ascents is not None and (not isinstance(max_ascents, int) or max_ascents < 0):
        msg = f"resolution.max_ascents must be a non-negative integer, got {max_ascents!r}"
        raise InvalidArgumentError(msg)

    max_concurrency = config["resolution"]["max_concurrency"]
    if max_concurrency is not None and (
        not isinstance(max_concurrency, int) or max_concurrency < 1
    ):
        msg = f"resolution.max_concurrency must be a positive integer, got {max_concurrency!r}"
        raise InvalidArgumentError(msg)
