#!/usr/bin/env python3
"""Rewrite colon-led description paragraphs in HTML files as ``<dl>`` lists.

Usage:
    python3 scripts/rewrite_description_lists.py notes.html
    python3 scripts/rewrite_description_lists.py pages/*.html --output-dir out/
    python3 scripts/rewrite_description_lists.py page.html --in-place --verbose
    python3 scripts/rewrite_description_lists.py pages/*.html --summary \
      --config options.json --unwrap-idle-divisions

Rewritten HTML goes to stdout unless --output-dir or --in-place is given.
With --summary, a JSON report goes to stdout instead; human messages go to
stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import orjson

from description_lists.config import ProcessorOptions
from description_lists.dom import read_file
from description_lists.errors import DescriptionListError
from description_lists.processor import process_html_with_count

log = logging.getLogger("rewrite_description_lists")


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


def load_options(config_path: Path | None) -> ProcessorOptions:
    """Load options from a JSON object file, or the defaults without one."""
    if config_path is None:
        return ProcessorOptions()
    raw = orjson.loads(config_path.read_bytes())
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a JSON object")
    return ProcessorOptions.from_mapping(raw)


def build_options(args: argparse.Namespace) -> ProcessorOptions:
    """Config file first, command-line flags on top."""
    base = load_options(args.config)
    values = base.to_dict()
    if args.unwrap_idle_divisions:
        values["unwrap_idle_divisions"] = True
    if args.max_depth is not None:
        values["max_depth"] = args.max_depth
    return ProcessorOptions.from_mapping(values)


# ---------------------------------------------------------------------------
# Rewriting
# ---------------------------------------------------------------------------


def rewrite_file(path: Path, options: ProcessorOptions) -> tuple[str, int]:
    """Rewrite one file, returning the new HTML and the lists inserted."""
    return process_html_with_count(read_file(path), options=options)


def output_path_for(path: Path, *, output_dir: Path | None, in_place: bool) -> Path | None:
    if in_place:
        return path
    if output_dir is not None:
        return output_dir / path.name
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite colon-led description paragraphs as <dl> lists.",
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="HTML files to rewrite")
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output-dir", type=Path, default=None,
        help="Write rewritten files here, keeping their names",
    )
    target.add_argument(
        "--in-place", action="store_true",
        help="Overwrite the input files",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="JSON file with processor options",
    )
    parser.add_argument(
        "--unwrap-idle-divisions", action="store_true",
        help="Read blocks through bare wrapping <div> elements",
    )
    parser.add_argument(
        "--max-depth", type=int, default=None,
        help="Nesting levels to search below the top (default: 200)",
    )
    parser.add_argument(
        "--summary", action="store_true",
        help="Print a JSON summary instead of the rewritten HTML",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        options = build_options(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)

    files: list[dict[str, Any]] = []
    for path in args.inputs:
        try:
            html, inserted = rewrite_file(path, options)
        except (OSError, DescriptionListError) as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            return 1
        log.info("%s: %d description list(s)", path, inserted)
        files.append({"path": str(path), "lists_inserted": inserted})

        destination = output_path_for(
            path, output_dir=args.output_dir, in_place=args.in_place,
        )
        if destination is not None:
            destination.write_text(html, encoding="utf-8")
        elif not args.summary:
            sys.stdout.write(html)
            if not html.endswith("\n"):
                sys.stdout.write("\n")

    if args.summary:
        dump_json({
            "files": files,
            "total_lists": sum(row["lists_inserted"] for row in files),
        })
    return 0


if __name__ == "__main__":
    sys.exit(main())
