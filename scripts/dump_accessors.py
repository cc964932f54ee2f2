#!/usr/bin/env python3
"""Print the named slots of every node in s-expression dumps.

Feed it the output of `ruby-parse`, e.g. `ruby-parse -e 'foo(1)' > foo.sexp`.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from rubyast import Node, SexpSyntaxError, UnsupportedAccessor, read_sexp
from rubyast.ast import DERIVED_PROPERTIES
from rubyast.sexp import format_literal
from rubyast.syntax import slots_for

logger = logging.getLogger("dump_accessors")


def _collect_sexp_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.rglob("*.sexp")))
        elif path.is_file():
            files.append(path)
    return files


def _format_value(value: object) -> str:
    if isinstance(value, Node):
        return f"({value.type} ...)"
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    return format_literal(value)  # type: ignore[arg-type]


def format_node_slots(node: Node, depth: int = 0) -> list[str]:
    indent = "  " * depth
    lines = [f"{indent}{node.type}"]
    for slot in slots_for(node.type):
        try:
            value = getattr(node, slot)
        except UnsupportedAccessor:
            # Derived accessors that only cover part of a type family.
            continue
        marker = "*" if slot in DERIVED_PROPERTIES else " "
        lines.append(f"{indent} {marker}{slot} = {_format_value(value)}")
    for child in node.child_nodes():
        lines.extend(format_node_slots(child, depth + 1))
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump named node slots for s-expression files")
    parser.add_argument("paths", type=Path, nargs="+", help="Files or directories of *.sexp files")
    parser.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument("--verbose", action="store_true", help="Log reader diagnostics")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    files = _collect_sexp_files(args.paths)
    if not files:
        raise SystemExit("No s-expression files found")

    lines: list[str] = []
    failures = 0
    for path in tqdm(files, desc="reading", unit="file", disable=args.no_progress):
        try:
            root = read_sexp(path.read_text(encoding="utf-8"))
        except SexpSyntaxError as error:
            failures += 1
            logger.warning("%s: %s", path, error)
            continue
        lines.append(f"# {path}")
        lines.extend(format_node_slots(root))

    text = "\n".join(lines) + "\n"
    if args.output is None:
        print(text, end="")
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote slots for {len(files) - failures} files to {args.output}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
