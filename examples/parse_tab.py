#!/usr/bin/env python3
"""CLI tool to parse tab files and export to JSON.

Usage:
    python examples/parse_tab.py <input_file> [-o output_file] [--pretty]

Examples:
    python examples/parse_tab.py song.txt
    python examples/parse_tab.py song.txt -o output.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from guitar_tab import TabParseError, document_to_dict, parse


def parse_tab_file(input_path: Path) -> list[dict[str, Any]]:
    """Parse a tab file and return JSON-serializable data."""
    text = input_path.read_text()
    return document_to_dict(parse(text))


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Parse a tab file and export to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s song.txt
  %(prog)s song.txt -o output.json
  %(prog)s song.txt --pretty
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Input tab file to parse",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )

    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        data = parse_tab_file(args.input)
    except TabParseError as e:
        print(f"Error parsing file:\n{e.ascii_tree()}", file=sys.stderr)
        return 1

    indent = 2 if args.pretty else None
    json_output = json.dumps(data, indent=indent, ensure_ascii=False)

    if args.output:
        args.output.write_text(json_output)
        print(f"Wrote output to {args.output}")
    else:
        print(json_output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
