"""CLI entry point for emdocs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DOCS_DIR, OUT_DIR, SITE_TITLE
from .log import setup_logging


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="emdocs",
        description="Theme and build the Event Machine documentation pages.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"emdocs {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("style", help="Print the page style block")

    p_check = sub.add_parser("check", help="Validate a style sheet against the theme selectors")
    p_check.add_argument(
        "file", nargs="?", type=Path, help="CSS file or <style> element (default: built-in theme)"
    )

    p_page = sub.add_parser("page", help="Render one Markdown file as a themed page")
    p_page.add_argument("src", type=Path, help="Markdown source file")
    p_page.add_argument("--out", "-o", type=Path, default=None, help="Output file (default: stdout)")
    p_page.add_argument("--title", "-t", default=None, help="Page title (default: first heading)")

    p_site = sub.add_parser("site", help="Build a static site from a docs directory")
    p_site.add_argument("--docs", type=Path, default=DOCS_DIR, help="Directory containing Markdown docs")
    p_site.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Site output directory")
    p_site.add_argument("--title", "-t", default=SITE_TITLE, help="Site title")

    args = parser.parse_args(argv)
    setup_logging(bool(args.verbose))

    if args.cmd == "style":
        return _cmd_style(args)
    if args.cmd == "check":
        return _cmd_check(args)
    if args.cmd == "page":
        return _cmd_page(args)
    if args.cmd == "site":
        return _cmd_site(args)

    parser.print_help()
    return 2


def _cmd_style(args: Any) -> int:
    from .theme.styles import render_style_block

    sys.stdout.write(render_style_block())
    return 0


def _cmd_check(args: Any) -> int:
    from .theme.rules import StylesheetError, check_stylesheet
    from .theme.styles import CSS

    try:
        css = args.file.read_text(encoding="utf-8") if args.file else CSS
        rules = check_stylesheet(css)
    except (OSError, UnicodeDecodeError, StylesheetError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for rule in rules:
        print(f"  {rule.selector:16} {len(rule.declarations)} declarations")
    print(f"✓ {len(rules)} rules OK")
    return 0


def _cmd_page(args: Any) -> int:
    from .site.build import render_page
    from .site.markdown import first_heading

    try:
        md = args.src.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    title = args.title or first_heading(md) or args.src.stem
    html = render_page(title, md)

    if args.out is None:
        sys.stdout.write(html)
        return 0

    try:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(html, encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"✓ Page written: {args.out}")
    return 0


def _cmd_site(args: Any) -> int:
    from .site.build import build_site

    try:
        report = build_site(args.docs, args.out, title=args.title)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.out_dir}")
    print(f"  Pages: {report.pages}")
    if report.removed:
        print(f"  Removed: {len(report.removed)} stale pages")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings[:10]:
            print(f"  - {w}")
        if len(report.warnings) > 10:
            print(f"  ... and {len(report.warnings) - 10} more")
    return 0


if __name__ == "__main__":
    app()
