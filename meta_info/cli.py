"""Command line entry point for resolving labels and owners of changed files."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from meta_info.invalid_argument_error import InvalidArgumentError
from meta_info.load_config import load_config, validate_config
from meta_info.meta_snapshot import MetaSnapshot
from meta_info.owner_record import owners_map_to_json
from meta_info.plan_changes import plan_reviewer_requests
from meta_info.render_comments import render_approvals_summary, render_owners_summary
from meta_info.run_meta_info import apply_label_snapshot, collect_labels, collect_owners


def read_changed_files(args: argparse.Namespace) -> list[str]:
    """Collect changed files from positional args and ``--changed-files-from``."""
    files = list(args.files)
    if args.changed_files_from:
        if args.changed_files_from == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.changed_files_from).read_text(encoding="utf-8")
        files.extend(line.strip() for line in text.splitlines() if line.strip())
    return files


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)
    if args.ignore:
        config["ignore_files"] = sorted({*config["ignore_files"], *args.ignore})
    if args.max_ascents is not None:
        config["resolution"]["max_ascents"] = args.max_ascents
    if args.strip_prefix is not None:
        config["strip_prefix"] = args.strip_prefix
    if getattr(args, "level", None):
        config["owners"]["level"] = args.level
    if getattr(args, "precedence", None):
        config["owners"]["precedence"] = args.precedence
    validate_config(config)
    return config


async def run_labels(args: argparse.Namespace, config: dict[str, Any]) -> int:
    labels = await collect_labels(read_changed_files(args), config)
    if not args.snapshot:
        print("\n".join(labels))
        return 0

    snapshot = MetaSnapshot(args.snapshot)
    snapshot.load(accept_legacy=args.accept_legacy_snapshot)
    plan = apply_label_snapshot(labels, args.labels_on_pr, snapshot)
    snapshot.save()
    print(json.dumps({"add": plan.to_add, "remove": plan.to_remove}, indent=2))
    return 0


async def run_owners(args: argparse.Namespace, config: dict[str, Any]) -> int:
    owners_map = await collect_owners(read_changed_files(args), config, args.author)
    if args.json:
        payload = {
            "owners": owners_map_to_json(owners_map),
            "request": plan_reviewer_requests(owners_map, args.requested),
        }
        print(json.dumps(payload, indent=2))
    else:
        print(render_owners_summary(owners_map, config["strip_prefix"]))
    return 0


async def run_approvals(args: argparse.Namespace, config: dict[str, Any]) -> int:
    owners_map = await collect_owners(read_changed_files(args), config, args.author)
    print(render_approvals_summary(owners_map, args.pending, config["strip_prefix"]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the ``meta-info`` argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("files", nargs="*", help="Changed file paths")
    common.add_argument(
        "--changed-files-from",
        help="Read newline separated changed files from this file ('-' for stdin)",
    )
    common.add_argument("--config", help="Path to a YAML configuration file")
    common.add_argument(
        "--ignore",
        action="append",
        default=[],
        help="Basename to ignore (repeatable)",
    )
    common.add_argument(
        "--max-ascents",
        type=int,
        help="Skip this many nearest marker files before accepting a match",
    )
    common.add_argument(
        "--strip-prefix",
        help="Path prefix removed from file names in rendered output",
    )
    common.add_argument("--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="meta-info",
        description="Resolve labels and owners of changed files from marker files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    labels = sub.add_parser("labels", parents=[common], help="Resolve labels")
    labels.add_argument(
        "--snapshot",
        help="Snapshot of the previous run; prints an add/remove plan and updates it",
    )
    labels.add_argument(
        "--labels-on-pr",
        action="append",
        default=[],
        help="Label currently on the pull request (repeatable)",
    )
    labels.add_argument(
        "--accept-legacy-snapshot",
        action="store_true",
        help="Accept and migrate legacy snapshot formats",
    )
    labels.set_defaults(handler=run_labels)

    owner_args = argparse.ArgumentParser(add_help=False)
    owner_args.add_argument("--author", help="Pull request author, never a reviewer")
    owner_args.add_argument(
        "--level", choices=["owner", "project", "repo"], help="Reviewers level"
    )
    owner_args.add_argument(
        "--precedence",
        choices=["nearest", "union"],
        help="How ancestor owners files combine",
    )

    owners = sub.add_parser(
        "owners", parents=[common, owner_args], help="Resolve owners"
    )
    owners.add_argument("--json", action="store_true", help="Print JSON output")
    owners.add_argument(
        "--requested",
        action="append",
        default=[],
        help="Reviewer already requested (repeatable)",
    )
    owners.set_defaults(handler=run_owners)

    approvals = sub.add_parser(
        "approvals",
        parents=[common, owner_args],
        help="Render the outstanding approvals report",
    )
    approvals.add_argument(
        "--pending",
        action="append",
        default=[],
        help="Changed file still lacking an owner's approval (repeatable)",
    )
    approvals.set_defaults(handler=run_approvals)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``meta-info`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        return asyncio.run(args.handler(args, config))
    except InvalidArgumentError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
