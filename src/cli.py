"""Command-line interface for docsnap."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from contract.validation import validate_snapshot
from docindex.service import DocsService
from remote.client import HttpDocsSource, RemoteError
from settings.config import ConfigError, DocsnapConfig, load_config
from snapshot.build import build_snapshot
from snapshot.codec import SnapshotError
from verify.verify import verify_snapshot


def _add_symbol_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("ns", help="Namespace (e.g. clojure.core)")
    parser.add_argument("name", help="Symbol name within the namespace (e.g. map)")


def _add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also show update times and the source URL",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docsnap")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory holding docsnap.toml (default: .)",
    )
    parser.add_argument(
        "--snapshot",
        default=None,
        help="Snapshot file (default: config snapshot path)",
    )
    parser.add_argument(
        "-v",
        "--log-verbose",
        action="store_true",
        help="Enable info logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("mode", help="Show which snapshot is loaded")

    search_parser = subparsers.add_parser("search", help="Search symbol names")
    search_parser.add_argument("query", help="Substring (or pattern with --regex)")
    search_parser.add_argument(
        "--ns", default=None, help="Restrict the search to one namespace"
    )
    search_parser.add_argument(
        "--regex",
        action="store_true",
        help="Treat the query as a regular expression",
    )

    for command, help_text in (
        ("examples", "Show usage examples for a symbol"),
        ("comments", "Show comments for a symbol"),
        ("cdoc", "Show examples, see-alsos and comments for a symbol"),
    ):
        symbol_parser = subparsers.add_parser(command, help=help_text)
        _add_symbol_args(symbol_parser)
        _add_verbose_flag(symbol_parser)

    see_also_parser = subparsers.add_parser(
        "see-also", help="Show related symbols for a symbol"
    )
    _add_symbol_args(see_also_parser)

    dir_parser = subparsers.add_parser(
        "dir", help="Count examples, see-alsos and comments per symbol of a namespace"
    )
    dir_parser.add_argument("ns", help="Namespace to list")

    subparsers.add_parser("stats", help="Show example coverage per namespace")

    validate_parser = subparsers.add_parser("validate", help="Validate a snapshot file")
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat non-canonical ordering as an error",
    )

    subparsers.add_parser(
        "verify", help="Verify that a snapshot file is in canonical form"
    )

    build_parser = subparsers.add_parser(
        "build", help="Build a new snapshot from the documentation API"
    )
    build_parser.add_argument(
        "--filter",
        default="",
        help="Only include symbols whose name contains this string",
    )
    build_parser.add_argument("--out", required=True, help="Output snapshot file")

    return parser


def _resolve_snapshot(root: Path, config: DocsnapConfig, snapshot: str | None) -> Path:
    if snapshot is None:
        return config.snapshot_path(root)
    return Path(snapshot).expanduser().resolve()


def _handle_validate(path: Path, strict: bool) -> int:
    result = validate_snapshot(path, strict_order=strict)
    for warning in result.warnings:
        sys.stderr.write(f"warning: {warning.location()}: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(path: Path) -> int:
    try:
        result = verify_snapshot(path)
    except (OSError, SnapshotError) as exc:
        sys.stderr.write(f"snapshot: {path}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for line in result.diff:
            sys.stderr.write(f"{line}\n")
        return 1
    return 0


def _handle_build(config: DocsnapConfig, search_filter: str, out: str) -> int:
    remote = config.remote
    with HttpDocsSource(
        base_url=remote.base_url,
        timeout_s=remote.timeout_s,
        max_retries=remote.max_retries,
        backoff_base_s=remote.backoff_base_s,
    ) as source:
        try:
            snapshot = build_snapshot(
                source, search_filter, Path(out).expanduser().resolve()
            )
        except (OSError, RemoteError, SnapshotError) as exc:
            sys.stderr.write(f"error: {exc}\n")
            return 2
    sys.stdout.write(f"Wrote {len(snapshot)} names to snapshot file: {out}\n")
    return 0


def _handle_query(args: argparse.Namespace, service: DocsService) -> str:
    if args.command == "mode":
        return service.mode_report()
    if args.command == "search":
        query = re.compile(args.query) if args.regex else args.query
        return service.search_report(query, args.ns)
    if args.command == "examples":
        return service.examples_report(args.ns, args.name, verbose=args.verbose)
    if args.command == "comments":
        return service.comments_report(args.ns, args.name, verbose=args.verbose)
    if args.command == "cdoc":
        return service.cdoc_report(args.ns, args.name, verbose=args.verbose)
    if args.command == "see-also":
        return service.see_also_report(args.ns, args.name)
    if args.command == "dir":
        return service.namespace_listing_report(args.ns)
    if args.command == "stats":
        return service.stats_report()
    raise AssertionError


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    root = Path(args.root).expanduser().resolve()
    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if args.command == "build":
        return _handle_build(config, args.filter, args.out)

    snapshot_path = _resolve_snapshot(root, config, args.snapshot)

    if args.command == "validate":
        return _handle_validate(snapshot_path, args.strict)

    if args.command == "verify":
        return _handle_verify(snapshot_path)

    if args.command == "search" and args.regex:
        try:
            re.compile(args.query)
        except re.error as exc:
            sys.stderr.write(f"error: invalid pattern {args.query!r}: {exc}\n")
            return 2

    try:
        service = DocsService.from_file(snapshot_path, screen_width=config.screen_width)
    except (OSError, SnapshotError) as exc:
        sys.stderr.write(f"snapshot: {snapshot_path}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2

    sys.stdout.write(_handle_query(args, service))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
