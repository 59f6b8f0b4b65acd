"""CLI interface for pii-logger — sanitize text or JSON before it is shared.

Usage:
    # Sanitize plain text (stdin → stdout)
    echo 'Call 07911123456 re AB123456C' | pii-sanitize text

    # Sanitize a JSON document with the context sanitizer
    echo '{"password": "x", "note": "jo@x.com"}' | pii-sanitize json

    # Report which categories fire (masked values only)
    echo 'DOB 1990-04-12, sort 12-34-56' | pii-sanitize scan
"""

from __future__ import annotations
import argparse
import json
import sys

from .patterns import sanitize, scan
from .sanitizer import sanitize_object


def cmd_text(args: argparse.Namespace) -> None:
    """Sanitize plain text on stdin, line by line."""
    for line in sys.stdin:
        sys.stdout.write(sanitize(line))


def cmd_json(args: argparse.Namespace) -> None:
    """Sanitize a JSON document on stdin."""
    data = json.loads(sys.stdin.read())
    json.dump(sanitize_object(data), sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_scan(args: argparse.Namespace) -> None:
    """List detected categories in text on stdin."""
    found = scan(sys.stdin.read())
    output = [{"category": category.value, "masked": masked} for category, masked in found]
    json.dump(output, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pii-sanitize",
        description="Mask UK personal data in text and JSON",
    )
    parser.add_argument("--indent", type=int, default=None, help="JSON output indent")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("text", help="Sanitize plain text (stdin)")
    sub.add_parser("json", help="Sanitize a JSON document (stdin)")
    sub.add_parser("scan", help="Report detected categories (stdin)")

    args = parser.parse_args(argv)

    cmds = {
        "text": cmd_text,
        "json": cmd_json,
        "scan": cmd_scan,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
