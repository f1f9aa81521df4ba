"""Inspect a rich text JSON document and its rendered outline."""

from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any

from richdoc.exceptions import ParseError
from richdoc.output_formatter import format_instructions
from richdoc.parser import parse_document
from richdoc.renderer import RenderOptions, render
from richdoc.utils.logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect node types, marks and attributes of a JSON document.")
    parser.add_argument("--file", help="Local JSON file path (reads stdin if omitted)")
    parser.add_argument("--validate-colors", action="store_true", help="Drop unrecognized color tokens")
    parser.add_argument("--no-outline", action="store_true", help="Skip the rendered outline")
    args = parser.parse_args()

    raw = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()

    try:
        root = parse_document(raw)
    except ParseError as exc:
        logger.error("Document could not be parsed", extra={"error": str(exc)})
        raise SystemExit(1) from exc

    node_types, mark_types, attrs = collect_stats(json.loads(raw))

    print("Node types:")
    for name, count in node_types.most_common():
        print(f"{name}: {count}")

    print("\nMarks:")
    for name, count in mark_types.most_common():
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attrs.most_common():
        print(f"{name}: {count}")

    if not args.no_outline:
        instructions = render(root, options=RenderOptions(validate_colors=args.validate_colors))
        print("\nOutline:")
        print(format_instructions(instructions))


def collect_stats(data: Any) -> tuple[Counter[str], Counter[str], Counter[str]]:
    node_types: Counter[str] = Counter()
    mark_types: Counter[str] = Counter()
    attrs: Counter[str] = Counter()

    stack = [data]
    while stack:
        node = stack.pop()
        if not isinstance(node, dict):
            continue
        node_types[str(node.get("type", "<missing>"))] += 1
        node_attrs = node.get("attrs")
        if isinstance(node_attrs, dict):
            attrs.update(f"{node.get('type')}.{key}" for key in node_attrs)
        marks = node.get("marks")
        if isinstance(marks, list):
            mark_types.update(str(mark.get("type", "<missing>")) for mark in marks if isinstance(mark, dict))
        content = node.get("content")
        if isinstance(content, list):
            stack.extend(content)

    return node_types, mark_types, attrs


if __name__ == "__main__":
    main()
