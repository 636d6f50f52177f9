import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from a11yscan.core.config import get_settings
from a11yscan.core.contrast import check_contrast
from a11yscan.core.engine import CHECKS, run_scan
from a11yscan.core.exceptions import ValidationError
from a11yscan.core.logging import setup_logging

EXIT_OK = 0
EXIT_SCAN_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="a11yscan", description="Static WCAG accessibility scanner.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan a page and print the result as JSON.")
    scan.add_argument("url", nargs="?", help="Page URL to fetch and scan.")
    scan.add_argument("--file", help="Scan markup from a local HTML file instead of a URL.")
    scan.add_argument("--timeout-ms", type=int, help="Fetch timeout in milliseconds.")
    scan.add_argument("--disable-rule", action="append", default=[], help="Skip a rule id (repeatable).")

    contrast = subparsers.add_parser("contrast", help="Check the contrast of two hex colors.")
    contrast.add_argument("foreground")
    contrast.add_argument("background")

    subparsers.add_parser("rules", help="List the registered rules.")
    return parser


def run_scan_command(args: argparse.Namespace) -> int:
    settings = get_settings()
    markup = None
    if args.file:
        try:
            markup = Path(args.file).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ValidationError(f"Cannot read {args.file}: {e}", field="file") from e
    result = asyncio.run(run_scan(
        url=args.url,
        markup=markup,
        timeout_ms=args.timeout_ms or settings.fetch_timeout_ms,
        disabled_rules=args.disable_rule or settings.disabled_rules,
        user_agent=settings.user_agent,
        max_redirects=settings.max_redirects,
    ))
    print(result.model_dump_json(indent=2, exclude_none=True))
    if not result.success:
        print(f"[scan] {result.error}", file=sys.stderr)
        return EXIT_SCAN_FAILED
    return EXIT_OK


def run_contrast_command(args: argparse.Namespace) -> int:
    result = check_contrast(args.foreground, args.background)
    print(result.model_dump_json(indent=2))
    return EXIT_OK


def run_rules_command(args: argparse.Namespace) -> int:
    rows = [
        {"id": c.key, "severity": c.severity, "wcag_reference": c.wcag_reference, "title": c.title}
        for c in CHECKS
    ]
    print(json.dumps(rows, indent=2))
    return EXIT_OK


COMMANDS = {
    "scan": run_scan_command,
    "contrast": run_contrast_command,
    "rules": run_rules_command,
}


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(get_settings(), stream=sys.stderr)
    try:
        exit_code = COMMANDS[args.command](args)
    except ValidationError as e:
        print(f"[error] {e.message}", file=sys.stderr)
        exit_code = EXIT_USAGE
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
